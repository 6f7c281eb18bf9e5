"""Helpers for unpacking archive entries into a directory tree."""

from typing import Dict, Iterable, List, Sequence, Tuple

Entry = Tuple[str, bytes]

_ZIP_SUFFIX = ".zip"
_FALLBACK_SUFFIX = ".out"


def legacy_output_name(archive_name: str) -> str:
    """Name of the file a single-file archive is unpacked to."""
    if archive_name.endswith(_ZIP_SUFFIX):
        return archive_name[: -len(_ZIP_SUFFIX)]
    return f"{archive_name}{_FALLBACK_SUFFIX}"


def select_entries(files: Iterable[Entry], patterns: Sequence[str]) -> List[Entry]:
    """Keep the entries whose path contains any of the patterns.

    With no patterns every entry is kept.
    """
    entries = list(files)
    if not patterns:
        return entries
    return [
        (path, data)
        for path, data in entries
        if any(pattern in path or path.endswith(pattern) for pattern in patterns)
    ]


def target_path(output_dir: str, path: str) -> str:
    """Where an archive path lands below the output directory."""
    if output_dir == ".":
        return path
    return f"{output_dir}/{path}"


def plan_directories(output_dir: str, paths: Iterable[str]) -> List[str]:
    """Directories to create before extracting, parents first.

    Paths ending in '/' are directory entries; for file paths every parent
    directory, including those of the output directory, is planned.
    """
    planned: Dict[str, None] = {}
    for path in paths:
        if path.endswith("/"):
            planned[target_path(output_dir, path.rstrip("/"))] = None
            continue
        parent, sep, _ = path.rpartition("/")
        if not sep:
            continue
        current = ""
        for component in target_path(output_dir, parent).split("/"):
            if not component:
                continue
            current = component if not current else f"{current}/{component}"
            planned[current] = None
    return sorted(planned, key=lambda directory: directory.count("/"))


def format_listing(archive_name: str, files: Sequence[Entry]) -> str:
    """Render the table shown when listing an archive's contents."""
    lines = [
        f"Archive: {archive_name}",
        "  Length      Date    Time    Name",
        "---------  ---------- -----   ----",
    ]
    total = 0
    for path, data in files:
        size = len(data)
        total += size
        shown = 0 if path.endswith("/") else size
        lines.append(f"{shown:>9}  ---------- -----   {path}")
    lines.append("---------                     -------")
    lines.append(f"{total:>9}                     {len(files)} files")
    return "\n".join(lines)