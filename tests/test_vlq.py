from pathlib import Path
import sys

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from morse_midi.vlq import VLQ_MAX, decode_vlq, encode_vlq  # noqa: E402


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, b"\x00"),
        (64, b"\x40"),
        (127, b"\x7F"),
        (128, b"\x81\x00"),
        (8192, b"\xC0\x00"),
        (16383, b"\xFF\x7F"),
        (16384, b"\x81\x80\x00"),
        (0x1FFFFF, b"\xFF\xFF\x7F"),
        (0x200000, b"\x81\x80\x80\x00"),
        (VLQ_MAX, b"\xFF\xFF\xFF\x7F"),
    ],
)
def test_encode_matches_canonical_bytes(value: int, expected: bytes) -> None:
    assert encode_vlq(value) == expected


def test_encode_is_minimal_and_decodes_back() -> None:
    values = list(range(0, 20000)) + [2**k + d for k in range(7, 28) for d in (-1, 0, 1)]
    for value in values:
        if value > VLQ_MAX:
            continue
        blob = encode_vlq(value)
        assert decode_vlq(blob) == (value, len(blob))
        # Leading byte 0x80 would be a redundant zero chunk.
        assert len(blob) == 1 or blob[0] != 0x80
        assert all(b & 0x80 for b in blob[:-1])
        assert not blob[-1] & 0x80


def test_encode_rejects_negative() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        encode_vlq(-1)


def test_encode_rejects_values_wider_than_four_bytes() -> None:
    with pytest.raises(ValueError, match="exceeds"):
        encode_vlq(VLQ_MAX + 1)


def test_decode_from_offset_returns_next_position() -> None:
    data = b"\x90\x81\x40\x7F"
    assert decode_vlq(data, 1) == (192, 3)
    assert decode_vlq(data, 3) == (127, 4)


def test_decode_truncated_raises() -> None:
    with pytest.raises(ValueError, match="truncated"):
        decode_vlq(b"\x81\x80")


def test_decode_overlong_raises() -> None:
    with pytest.raises(ValueError, match="longer than 4"):
        decode_vlq(b"\x81\x80\x80\x80\x00")
