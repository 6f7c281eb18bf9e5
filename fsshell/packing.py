"""Building archives in the shell's own packed format.

Two layouts exist. The standard layout starts with 0xFF, a little-endian
u32 entry count, then for every entry a u16 path length, the path, the u16
original size, the u16 stored size and the stored bytes. The compact layout,
used for tiny archives, starts with 0xCC, a u8 entry count, an index of
(u8 path length, u16 data length) pairs, the NUL-terminated paths and then
the raw data of every entry.

Each stored blob begins with 0x00 (raw bytes follow) or 0x01 (RLE bytes
follow). Length fields are truncated to their width, as the format has no
room for larger values.
"""

from typing import Iterable, List, Tuple

STANDARD_MARK = 0xFF
COMPACT_MARK = 0xCC
RAW_MARK = 0x00
RLE_MARK = 0x01
RUN_MARK = 0xFF
ESCAPE = 0x00

_MIN_RUN = 4
_MAX_RUN = 255
_SMALL_DATA = 10
_PER_ENTRY_OVERHEAD = 17
_COMPACT_LIMIT = 100

Entry = Tuple[str, bytes]


def _rle(data: bytes) -> bytearray:
    out = bytearray()
    pos = 0
    while pos < len(data):
        current = data[pos]
        count = 1
        while (
            pos + count < len(data)
            and data[pos + count] == current
            and count < _MAX_RUN
        ):
            count += 1
        if count >= _MIN_RUN:
            out += bytes((RUN_MARK, count, current))
        else:
            for byte in data[pos:pos + count]:
                if byte == RUN_MARK:
                    out += bytes((RUN_MARK, ESCAPE))
                out.append(byte)
        pos += count
    return out


def compress_data(data: bytes) -> bytes:
    """Store data raw or RLE-encoded, whichever the size rule prefers."""
    data = bytes(data)
    if not data:
        return b""
    if len(data) < _SMALL_DATA:
        return bytes((RAW_MARK,)) + data
    encoded = _rle(data)
    if len(encoded) >= len(data) * 9 // 10:
        return bytes((RAW_MARK,)) + data
    return bytes((RLE_MARK,)) + bytes(encoded)


def _u16(value: int) -> bytes:
    return (value & 0xFFFF).to_bytes(2, "little")


def _u32(value: int) -> bytes:
    return (value & 0xFFFFFFFF).to_bytes(4, "little")


def create_compact_archive(files: Iterable[Entry]) -> bytes:
    """Build an archive in the compact layout; data is stored unencoded."""
    entries: List[Tuple[bytes, bytes]] = [
        (path.encode("utf-8"), bytes(data)) for path, data in files
    ]
    out = bytearray((COMPACT_MARK, len(entries) & 0xFF))
    for path, data in entries:
        out.append(len(path) & 0xFF)
        out += _u16(len(data))
    for path, _ in entries:
        out += path + b"\x00"
    for _, data in entries:
        out += data
    return bytes(out)


def create_archive(files: Iterable[Entry]) -> bytes:
    """Build an archive, picking the compact layout for tiny inputs."""
    entries = [(path, bytes(data)) for path, data in files]
    total_data = sum(len(data) for _, data in entries)
    total_paths = sum(len(path.encode("utf-8")) for path, _ in entries)
    overhead = len(entries) * _PER_ENTRY_OVERHEAD + total_paths
    if total_data < _COMPACT_LIMIT and overhead > total_data:
        return create_compact_archive(entries)

    out = bytearray((STANDARD_MARK,))
    out += _u32(len(entries))
    for path, data in entries:
        encoded_path = path.encode("utf-8")
        out += _u16(len(encoded_path))
        out += encoded_path
        stored = compress_data(data)
        out += _u16(len(data))
        out += _u16(len(stored))
        out += stored
    return bytes(out)