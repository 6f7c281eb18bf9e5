"""Searching text for a fixed substring, with grep-style options."""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

HELP_TEXT = """grep [OPTIONS] PATTERN [FILE...]
Search for PATTERN in each FILE or standard input.

OPTIONS:
  -i, --ignore-case     Ignore case distinctions
  -n, --line-number     Print line numbers with output lines
  -v, --invert-match    Invert the sense of matching, to select non-matching lines
  -c, --count           Print only a count of matching lines per file
  -l, --files-with-matches  Print only names of files with matching lines
  -H, --with-filename   Print the file name for each match
  -h, --no-filename     Suppress the file name prefix on output

EXAMPLES:
  grep hello file.txt         Search for 'hello' in file.txt
  grep -i Hello file.txt      Case-insensitive search
  grep -n pattern file.txt    Show line numbers
  grep -v pattern file.txt    Show lines that don't match
  grep -c pattern file.txt    Count matching lines"""

_LONG_FLAGS = {
    "--ignore-case": "ignore_case",
    "--line-number": "line_number",
    "--invert-match": "invert_match",
    "--count": "count_only",
    "--files-with-matches": "files_with_matches",
    "--with-filename": "with_filename",
    "--no-filename": "no_filename",
}

_SHORT_FLAGS = {
    "i": "ignore_case",
    "n": "line_number",
    "v": "invert_match",
    "c": "count_only",
    "l": "files_with_matches",
    "H": "with_filename",
    "h": "no_filename",
}


class GrepUsageError(ValueError):
    """Raised when grep's arguments cannot be used."""


@dataclass
class GrepOptions:
    """Parsed grep command line."""

    pattern: str = ""
    files: List[str] = field(default_factory=list)
    ignore_case: bool = False
    line_number: bool = False
    invert_match: bool = False
    count_only: bool = False
    files_with_matches: bool = False
    with_filename: bool = False
    no_filename: bool = False
    show_help: bool = False

    def show_filename(self) -> bool:
        """Whether output lines are prefixed with the file name."""
        return (self.with_filename or len(self.files) > 1) and not self.no_filename


def parse_grep_args(argv: Sequence[str]) -> GrepOptions:
    """Parse grep arguments; ``--help`` returns options with ``show_help`` set."""
    if not argv:
        raise GrepUsageError("missing pattern")

    options = GrepOptions()
    pattern: Optional[str] = None

    for arg in argv:
        if arg == "--help":
            options.show_help = True
            return options
        if arg.startswith("--") and arg in _LONG_FLAGS:
            setattr(options, _LONG_FLAGS[arg], True)
            continue
        if arg.startswith("-") and not arg.startswith("--") and len(arg) > 1:
            for ch in arg[1:]:
                if ch not in _SHORT_FLAGS:
                    raise GrepUsageError(f"invalid option -- '{ch}'")
                setattr(options, _SHORT_FLAGS[ch], True)
            continue
        if pattern is None:
            pattern = arg
        else:
            options.files.append(arg)

    if not pattern:
        raise GrepUsageError("missing pattern")
    if not options.files:
        raise GrepUsageError("no files specified")
    options.pattern = pattern
    return options


def _lines(text: str) -> List[str]:
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def grep_text(
    text: str,
    options: GrepOptions,
    filename: str,
    show_filename: bool,
) -> List[str]:
    """Search one file's text and return the lines grep prints for it."""
    pattern = options.pattern
    if options.ignore_case:
        pattern = pattern.lower()

    output: List[str] = []
    count = 0
    quiet = options.count_only or options.files_with_matches

    for number, line in enumerate(_lines(text), start=1):
        haystack = line.lower() if options.ignore_case else line
        if (pattern in haystack) == options.invert_match:
            continue
        count += 1
        if quiet:
            continue
        prefix = f"{filename}:" if show_filename else ""
        if options.line_number:
            prefix += f"{number}:"
        output.append(prefix + line)

    if options.count_only:
        return [f"{filename}:{count}" if show_filename else str(count)]
    if options.files_with_matches:
        return [filename] if count else []
    return output