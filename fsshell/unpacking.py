"""Reading archives written in the shell's packed format."""

from typing import List, NamedTuple, Tuple

from fsshell.packing import (
    COMPACT_MARK,
    ESCAPE,
    RAW_MARK,
    RLE_MARK,
    RUN_MARK,
    STANDARD_MARK,
)

Entry = Tuple[str, bytes]


class ArchiveError(ValueError):
    """Raised when archive bytes cannot be parsed."""


class LegacyPayload(NamedTuple):
    """Contents of a single-file legacy archive."""

    data: bytes
    expected_size: int

    @property
    def complete(self) -> bool:
        """Whether the decoded length matches the recorded size."""
        return len(self.data) == self.expected_size


def _rle_decode(data: bytes, original_size: int) -> bytes:
    out = bytearray()
    pos = 0
    while pos < len(data) and len(out) < original_size:
        byte = data[pos]
        if byte != RUN_MARK:
            out.append(byte)
            pos += 1
            continue
        if pos + 1 >= len(data):
            break
        if data[pos + 1] == ESCAPE:
            out.append(RUN_MARK)
            pos += 2
            continue
        if pos + 2 >= len(data):
            break
        count, value = data[pos + 1], data[pos + 2]
        out += bytes((value,)) * min(count, original_size - len(out))
        pos += 3
    return bytes(out)


def decompress_data(data: bytes, original_size: int) -> bytes:
    """Decode a stored blob into at most ``original_size`` bytes.

    Raw blobs are returned as they are; blobs with an unknown marker are
    decoded as RLE from their first byte.
    """
    data = bytes(data)
    if not data:
        return b""
    flag, body = data[0], data[1:]
    if flag == RAW_MARK:
        return body
    if flag == RLE_MARK:
        return _rle_decode(body, original_size)
    return _rle_decode(data, original_size)


class _Reader:
    """Cursor over archive bytes with bounds-checked reads."""

    def __init__(self, data: bytes, offset: int = 0) -> None:
        self.data = data
        self.offset = offset

    def require(self, size: int, message: str) -> None:
        if self.offset + size > len(self.data):
            raise ArchiveError(message)

    def take(self, size: int, message: str) -> bytes:
        self.require(size, message)
        chunk = self.data[self.offset:self.offset + size]
        self.offset += size
        return chunk

    def uint(self, width: int, message: str) -> int:
        return int.from_bytes(self.take(width, message), "little")

    def path(self, size: int, message: str) -> str:
        raw = self.take(size, message)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            raise ArchiveError("Invalid path encoding") from None


def _standard_entry(reader: _Reader, width: int) -> Entry:
    path_len = reader.uint(
        width, "Invalid archive format: incomplete path length"
    )
    path = reader.path(path_len, "Invalid archive format: incomplete path")
    sizes_message = "Invalid archive format: incomplete size information"
    reader.require(2 * width, sizes_message)
    original_size = reader.uint(width, sizes_message)
    stored_size = reader.uint(width, sizes_message)
    stored = reader.take(
        stored_size, "Invalid archive format: incomplete compressed data"
    )
    return path, decompress_data(stored, original_size)


def _compact_entries(data: bytes) -> List[Entry]:
    if len(data) < 2:
        raise ArchiveError("Invalid compact archive format")
    reader = _Reader(data, 2)
    index = []
    for _ in range(data[1]):
        reader.require(3, "Invalid compact archive: incomplete index table")
        path_len = reader.uint(1, "")
        data_len = reader.uint(2, "")
        index.append((path_len, data_len))

    paths = []
    for path_len, _ in index:
        reader.require(
            path_len + 1, "Invalid compact archive: incomplete path data"
        )
        paths.append(reader.path(path_len, ""))
        reader.offset += 1

    return [
        (path, reader.take(
            data_len, "Invalid compact archive: incomplete file data"
        ))
        for path, (_, data_len) in zip(paths, index)
    ]


def parse_archive(data: bytes) -> List[Entry]:
    """Parse a compact, standard or older-style archive into entries."""
    data = bytes(data)
    if not data:
        raise ArchiveError("Empty archive file")
    flag = data[0]
    if flag == COMPACT_MARK:
        return _compact_entries(data)
    if flag == STANDARD_MARK:
        if len(data) < 5:
            raise ArchiveError("Invalid standard archive format")
        reader = _Reader(data, 1)
        count = reader.uint(4, "")
        return [_standard_entry(reader, 2) for _ in range(count)]
    if len(data) < 4:
        raise ArchiveError("Invalid archive format: missing file count")
    reader = _Reader(data)
    count = reader.uint(4, "")
    return [_standard_entry(reader, 4) for _ in range(count)]


def unpack_legacy(data: bytes) -> LegacyPayload:
    """Decode a single-file archive: a u32 size followed by a stored blob."""
    data = bytes(data)
    if len(data) < 4:
        raise ArchiveError("Invalid archive file format")
    expected = int.from_bytes(data[:4], "little")
    return LegacyPayload(decompress_data(data[4:], expected), expected)