"""MIDI variable-length quantities.

Big-endian base-128: every byte but the last has bit 7 set.  Players
read at most four bytes, so the largest encodable value is 0x0FFFFFFF.
"""

from __future__ import annotations

from typing import Tuple

VLQ_MAX = 0x0FFFFFFF
VLQ_MAX_BYTES = 4


def encode_vlq(value: int) -> bytes:
    """Encode a non-negative integer as a minimal-length VLQ.

    >>> encode_vlq(0x80).hex()
    '8100'
    """
    if value < 0:
        raise ValueError(f"VLQ value must be non-negative, got {value}")
    if value > VLQ_MAX:
        raise ValueError(f"VLQ value 0x{value:X} exceeds 0x{VLQ_MAX:X}")

    out = bytearray([value & 0x7F])
    value >>= 7
    while value:
        out.insert(0, (value & 0x7F) | 0x80)
        value >>= 7
    return bytes(out)


def decode_vlq(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """Read one VLQ starting at ``offset``.

    Returns ``(value, next_offset)``.
    """
    value = 0
    pos = offset
    while True:
        if pos >= len(data):
            raise ValueError(f"truncated VLQ at offset {offset}")
        if pos - offset >= VLQ_MAX_BYTES:
            raise ValueError(f"VLQ at offset {offset} is longer than {VLQ_MAX_BYTES} bytes")
        byte = data[pos]
        pos += 1
        value = (value << 7) | (byte & 0x7F)
        if not byte & 0x80:
            return value, pos
