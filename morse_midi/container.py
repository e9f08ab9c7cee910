from __future__ import annotations

import struct
from dataclasses import dataclass

from .track import DEFAULT_BPM, TICKS_PER_BEAT, TrackSettings, build_track


HEADER_MAGIC = b"MThd"
TRACK_MAGIC = b"MTrk"
HEADER_LENGTH = 6
HEADER_SIZE = 8 + HEADER_LENGTH  # magic + u32 length + payload
CHUNK_PREFIX_SIZE = 8
FORMAT_SINGLE_TRACK = 0


@dataclass(frozen=True)
class MidiHeader:
    format: int
    track_count: int
    ticks_per_beat: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "MidiHeader":
        if len(data) < HEADER_SIZE:
            raise ValueError(
                f"file too short for header ({len(data)} bytes, need {HEADER_SIZE})"
            )
        if data[:4] != HEADER_MAGIC:
            raise ValueError(f"bad header magic {data[:4]!r}, expected {HEADER_MAGIC!r}")
        length, fmt, tracks, division = struct.unpack(">IHHH", data[4:HEADER_SIZE])
        if length != HEADER_LENGTH:
            raise ValueError(f"header length {length}, expected {HEADER_LENGTH}")
        if division & 0x8000:
            raise ValueError(f"SMPTE division 0x{division:04X} is not supported")
        return cls(format=fmt, track_count=tracks, ticks_per_beat=division)

    def to_bytes(self) -> bytes:
        return HEADER_MAGIC + struct.pack(
            ">IHHH", HEADER_LENGTH, self.format, self.track_count, self.ticks_per_beat
        )


@dataclass(frozen=True)
class MidiFile:
    """A format-0 file: one header chunk followed by one track chunk.

    Round-trip guarantee: ``MidiFile.from_bytes(data).to_bytes() == data``
    for every file produced by :func:`build_midi_bytes`.
    """

    header: MidiHeader
    track: bytes  # MTrk payload, without magic and length

    @classmethod
    def from_bytes(cls, data: bytes) -> "MidiFile":
        header = MidiHeader.from_bytes(data)
        if header.format != FORMAT_SINGLE_TRACK or header.track_count != 1:
            raise ValueError(
                f"expected format 0 with one track, got format {header.format} "
                f"with {header.track_count} tracks"
            )
        chunk = data[HEADER_SIZE:]
        if len(chunk) < CHUNK_PREFIX_SIZE:
            raise ValueError(f"file too short for track chunk ({len(data)} bytes)")
        if chunk[:4] != TRACK_MAGIC:
            raise ValueError(f"bad track magic {chunk[:4]!r}, expected {TRACK_MAGIC!r}")
        (length,) = struct.unpack(">I", chunk[4:CHUNK_PREFIX_SIZE])
        payload = chunk[CHUNK_PREFIX_SIZE:]
        if length != len(payload):
            raise ValueError(
                f"track length field says {length} bytes but {len(payload)} follow"
            )
        return cls(header=header, track=bytes(payload))

    def to_bytes(self) -> bytes:
        return self.header.to_bytes() + track_chunk(self.track)


def header_chunk(
    ticks_per_beat: int = TICKS_PER_BEAT,
    *,
    fmt: int = FORMAT_SINGLE_TRACK,
    tracks: int = 1,
) -> bytes:
    return MidiHeader(format=fmt, track_count=tracks, ticks_per_beat=ticks_per_beat).to_bytes()


def track_chunk(track: bytes) -> bytes:
    """Wrap a track payload in ``MTrk`` + big-endian u32 length."""
    return TRACK_MAGIC + struct.pack(">I", len(track)) + track


def build_midi_bytes(
    morse: str,
    *,
    bpm: int = DEFAULT_BPM,
    settings: TrackSettings = TrackSettings(),
) -> bytes:
    """Complete file contents for a Morse symbol stream."""
    track = build_track(morse, bpm=bpm, settings=settings)
    return header_chunk(settings.ticks_per_beat) + track_chunk(track)
