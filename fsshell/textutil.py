"""Small text helpers for on-disk names and human-readable sizes."""

import struct

INVALID_UTF8 = "[err invaild utf-8]"


def _as_f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def decode_name(raw: bytes) -> str:
    """Decode a fixed-width, NUL-padded name field.

    Invalid UTF-8 yields a marker string instead of raising.
    """
    try:
        text = bytes(raw).decode("utf-8")
    except UnicodeDecodeError:
        return INVALID_UTF8
    return text.rstrip("\0")


def pretty_byte(size: int) -> str:
    """Format a byte count as B, KB or MB."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{_as_f32(_as_f32(size) / 1024.0):.2f} KB"
    kib = _as_f32(_as_f32(size) / 1024.0)
    return f"{_as_f32(kib / 1024.0):.2f} MB"