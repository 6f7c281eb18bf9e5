"""Disk usage reports in the style of ``df``."""

from dataclasses import dataclass
from typing import List, Sequence

HELP_TEXT = """Show filesystem disk space usage

Usage: df [OPTION]...

Options:
  -h, --human-readable  print sizes in human readable format (e.g., 1K 234M 2G)
  -i, --inodes         list inode information instead of block usage
  -v, --verbose        show detailed filesystem information
      --help           display this help and exit

Fields explanation:
  Filesystem    - filesystem name
  Size/1K-blocks - total size (human readable format or 1K blocks)
  Used          - used space
  Avail         - available space
  Use%          - percentage of space used
  Mounted on    - mount point

Examples:
  df              show basic disk usage
  df -h           show in human readable format
  df -i           show inode usage
  df -v           show detailed information"""

FILESYSTEM_NAME = "ext2fs"
MOUNT_POINT = "/"
SECTOR_SIZE = 512

_UNITS = ("B", "K", "M", "G", "T")
_HEADER = "{:<15} {:>10} {:>10} {:>10} {:>6} {}"
_ROW = "{:<15} {:>10} {:>10} {:>10} {:>5}% {}"


class DfUsageError(ValueError):
    """Raised when df's arguments cannot be used."""


@dataclass
class DfOptions:
    """Parsed ``df`` command line."""

    human_readable: bool = False
    show_inodes: bool = False
    verbose: bool = False
    show_help: bool = False


@dataclass
class DiskUsage:
    """Counters describing a filesystem's space and inode usage."""

    total_blocks: int
    block_size: int
    total_inodes: int
    free_blocks: int
    free_inodes: int
    used_dirs: int = 0
    volume_name: str = ""
    users: int = 0
    max_users: int = 0

    @property
    def used_blocks(self) -> int:
        return self.total_blocks - self.free_blocks

    @property
    def used_inodes(self) -> int:
        return self.total_inodes - self.free_inodes

    @property
    def total_bytes(self) -> int:
        return self.total_blocks * self.block_size

    @property
    def used_bytes(self) -> int:
        return self.used_blocks * self.block_size

    @property
    def free_bytes(self) -> int:
        return self.free_blocks * self.block_size

    @property
    def block_usage_percent(self) -> int:
        return _percent(self.used_blocks, self.total_blocks)

    @property
    def inode_usage_percent(self) -> int:
        return _percent(self.used_inodes, self.total_inodes)


def _percent(used: int, total: int) -> int:
    if total <= 0:
        return 0
    return int(used / total * 100.0)


def format_bytes(size: int, human_readable: bool) -> str:
    """Render a byte count, scaled to B/K/M/G/T when asked."""
    if not human_readable:
        return str(size)
    value = float(size)
    unit = 0
    while value >= 1024.0 and unit < len(_UNITS) - 1:
        value /= 1024.0
        unit += 1
    if unit == 0:
        return f"{value:.0f}{_UNITS[unit]}"
    return f"{value:.1f}{_UNITS[unit]}"


def parse_df_args(argv: Sequence[str]) -> DfOptions:
    """Parse df arguments; ``--help`` returns options with ``show_help`` set."""
    options = DfOptions()
    for arg in argv:
        if arg in ("-h", "--human-readable"):
            options.human_readable = True
        elif arg in ("-i", "--inodes"):
            options.show_inodes = True
        elif arg in ("-v", "--verbose"):
            options.verbose = True
        elif arg == "--help":
            options.show_help = True
            return options
        elif arg.startswith("-"):
            raise DfUsageError(f"unknown option '{arg}'")
        else:
            raise DfUsageError("filesystem path not supported")
    return options


def filesystem_report(
    usage: DiskUsage, human_readable: bool, show_inodes: bool
) -> List[str]:
    """The header and row df prints for the filesystem."""
    if show_inodes:
        return [
            _HEADER.format(
                "Filesystem", "Inodes", "IUsed", "IFree", "IUse%", "Mounted on"
            ),
            _ROW.format(
                FILESYSTEM_NAME,
                usage.total_inodes,
                usage.used_inodes,
                usage.free_inodes,
                usage.inode_usage_percent,
                MOUNT_POINT,
            ),
        ]
    if human_readable:
        return [
            _HEADER.format(
                "Filesystem", "Size", "Used", "Avail", "Use%", "Mounted on"
            ),
            _ROW.format(
                FILESYSTEM_NAME,
                format_bytes(usage.total_bytes, True),
                format_bytes(usage.used_bytes, True),
                format_bytes(usage.free_bytes, True),
                usage.block_usage_percent,
                MOUNT_POINT,
            ),
        ]
    return [
        _HEADER.format(
            "Filesystem", "512B-blocks", "Used", "Available", "Use%", "Mounted on"
        ),
        _ROW.format(
            FILESYSTEM_NAME,
            usage.total_bytes // SECTOR_SIZE,
            usage.used_bytes // SECTOR_SIZE,
            usage.free_bytes // SECTOR_SIZE,
            usage.block_usage_percent,
            MOUNT_POINT,
        ),
    ]


def detailed_report(usage: DiskUsage) -> List[str]:
    """The verbose, sectioned description of the filesystem."""
    total, used, free = usage.total_bytes, usage.used_bytes, usage.free_bytes
    return [
        "Filesystem Information:",
        "======================",
        f"Volume Name: {usage.volume_name}",
        f"Block Size: {usage.block_size} bytes",
        f"Total Blocks: {usage.total_blocks}",
        f"Data Blocks: {usage.total_inodes}",
        f"Free Blocks: {usage.free_blocks}",
        f"Used Blocks: {usage.used_blocks}",
        "",
        "Space Information:",
        "-----------------",
        f"Total Size: {format_bytes(total, True)} ({total} bytes)",
        f"Used Space: {format_bytes(used, True)} ({used} bytes)",
        f"Free Space: {format_bytes(free, True)} ({free} bytes)",
        "",
        "Inode Information:",
        "-----------------",
        f"Total Inodes: {usage.total_inodes}",
        f"Free Inodes: {usage.free_inodes}",
        f"Used Inodes: {usage.used_inodes}",
        f"Directories: {usage.used_dirs}",
        "",
        "User Information:",
        "----------------",
        f"Registered Users: {usage.users}",
        f"Max Users: {usage.max_users}",
    ]