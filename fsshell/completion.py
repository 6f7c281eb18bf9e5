"""Command-line splitting and tab completion for the shell prompt."""

from typing import Iterable, List, Tuple


def split_command(line: str) -> List[str]:
    """Split a command line into words on spaces, dropping empty pieces."""
    return [piece.strip() for piece in line.split(" ") if piece.strip()]


def complete(
    line: str,
    pos: int,
    commands: Iterable[str],
    filenames: Iterable[str],
) -> Tuple[int, List[str]]:
    """Candidates for the word before the cursor.

    The first word completes against command names, later words against
    file names ('.' and '..' are never offered). Returns the position
    where the replaced word starts and the matching candidates.
    """
    before = line[:pos]
    words = before.split()
    if not words or (len(words) == 1 and not before.endswith(" ")):
        prefix = words[0] if words else ""
        return pos - len(prefix), [c for c in commands if c.startswith(prefix)]

    current = "" if before.endswith(" ") else words[-1]
    matches = [
        name
        for name in filenames
        if name not in (".", "..") and name.startswith(current)
    ]
    return pos - len(current), matches