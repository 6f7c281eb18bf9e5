"""Archive packing, grep, command history, completion and df reports for a filesystem shell."""

__version__ = "0.1.0"

__all__ = [
    "completion",
    "diskusage",
    "extracting",
    "grep",
    "history",
    "packing",
    "textutil",
    "unpacking",
]