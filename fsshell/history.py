"""Command history kept by the shell and the ``history`` command's output."""

import re
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, List, Optional, Sequence

MAX_ENTRIES = 1000

_NUMBER = re.compile(r"\+?[0-9]+")

HELP_TEXT = """Show or manage the command history

Usage: history [options] [number]

Options:
  -c, --clear       clear the history
  -n, --no-numbers  do not show line numbers
  -NUMBER           show the most recent NUMBER entries

Arguments:
  NUMBER            show the most recent NUMBER entries

Examples:
  history           show the whole history
  history 10        show the last 10 entries
  history -10       show the last 10 entries
  history -n        show the history without line numbers
  history -c        clear the history"""


class HistoryUsageError(ValueError):
    """Raised when the history command's arguments cannot be used."""


@dataclass
class HistoryOptions:
    """Parsed ``history`` command line."""

    show_numbers: bool = True
    limit: Optional[int] = None
    clear: bool = False


class CommandHistory:
    """Bounded list of entered commands without consecutive repeats."""

    def __init__(self, max_entries: int = MAX_ENTRIES) -> None:
        self._entries: Deque[str] = deque(maxlen=max_entries)

    def add(self, command: str) -> None:
        """Record a command unless it repeats the last one."""
        if self._entries and self._entries[-1] == command:
            return
        self._entries.append(command)

    def clear(self) -> None:
        """Forget every recorded command."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def recent(self, limit: Optional[int]) -> List[str]:
        """The last ``limit`` commands, oldest first; all of them for None."""
        entries = list(self._entries)
        if limit is None:
            return entries
        if limit <= 0:
            return []
        return entries[-limit:]


def _parse_number(text: str) -> Optional[int]:
    if _NUMBER.fullmatch(text):
        return int(text)
    return None


def parse_history_args(argv: Sequence[str]) -> HistoryOptions:
    """Parse the arguments of the ``history`` command."""
    options = HistoryOptions()
    for arg in argv:
        if arg in ("-c", "--clear"):
            options.clear = True
        elif arg in ("-n", "--no-numbers"):
            options.show_numbers = False
        elif arg.startswith("-") and len(arg) > 1:
            number = _parse_number(arg[1:])
            if number is None:
                raise HistoryUsageError(f"unknown option '{arg}'")
            options.limit = number
        else:
            number = _parse_number(arg)
            if number is None:
                raise HistoryUsageError(f"invalid argument '{arg}'")
            options.limit = number
    return options


def format_history(history: CommandHistory, options: HistoryOptions) -> List[str]:
    """Apply the options to the history and return the lines to print.

    With ``clear`` set the history is emptied.
    """
    if options.clear:
        history.clear()
        return ["History cleared"]
    if not len(history):
        return ["No history"]
    if options.limit == 0:
        return []

    entries = history.recent(options.limit)
    if not options.show_numbers:
        return entries
    start = len(history) - len(entries) + 1
    return [
        f"{number:5}  {entry}"
        for number, entry in enumerate(entries, start=start)
    ]