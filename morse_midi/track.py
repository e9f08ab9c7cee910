"""Build the MTrk payload for a Morse symbol stream.

One symbol is consumed per step.  Dots and dashes emit a note-on /
note-off pair; spaces and word separators only change the delta-time
that precedes the next event:

  symbol  note duration  next delta
  ``.``   dot            dot
  ``-``   dash (3 dot)   dot
  `` ``   -              letter gap (4 dot)
  ``/``   -              pause (7 dot)

The payload opens with a set-tempo meta event at delta 0 and closes with
the last pending delta followed by end-of-track (``FF 2F 00``).
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import TempoRangeError
from .morse import DASH, DOT, LETTER_SEPARATOR, WORD_SEPARATOR
from .vlq import encode_vlq

TICKS_PER_BEAT = 96
DEFAULT_BPM = 120
NOTE_E5 = 76
NOTE_VELOCITY = 100
MICROSECONDS_PER_MINUTE = 60_000_000
TEMPO_MAX = 0xFFFFFF  # 24-bit field

NOTE_ON = 0x90
NOTE_OFF = 0x80
META = 0xFF
META_TEMPO = 0x51
META_END_OF_TRACK = 0x2F
END_OF_TRACK = bytes([META, META_END_OF_TRACK, 0x00])


@dataclass(frozen=True)
class TrackSettings:
    ticks_per_beat: int = TICKS_PER_BEAT
    note: int = NOTE_E5
    velocity: int = NOTE_VELOCITY

    def __post_init__(self) -> None:
        if not (2 <= self.ticks_per_beat <= 0x7FFF):
            raise ValueError(f"ticks_per_beat must be in [2, 32767], got {self.ticks_per_beat}")
        if not (0 <= self.note <= 127):
            raise ValueError(f"note must be in [0, 127], got {self.note}")
        if not (1 <= self.velocity <= 127):
            raise ValueError(f"velocity must be in [1, 127], got {self.velocity}")

    @property
    def timing(self) -> "Timing":
        return Timing.for_ticks_per_beat(self.ticks_per_beat)


@dataclass(frozen=True)
class Timing:
    """Tick lengths of the Morse elements, all multiples of ``dot``."""

    dot: int
    dash: int
    letter_gap: int
    pause: int

    @classmethod
    def for_ticks_per_beat(cls, ticks_per_beat: int) -> "Timing":
        dot = ticks_per_beat // 2
        return cls(dot=dot, dash=3 * dot, letter_gap=4 * dot, pause=7 * dot)


def tempo_for_bpm(bpm: int) -> int:
    """Microseconds per quarter note, truncated toward zero."""
    if not isinstance(bpm, int) or isinstance(bpm, bool):
        raise TempoRangeError(f"bpm must be an integer, got {bpm!r}")
    if bpm <= 0:
        raise TempoRangeError(f"bpm must be positive, got {bpm}")
    tempo = MICROSECONDS_PER_MINUTE // bpm
    if tempo > TEMPO_MAX:
        raise TempoRangeError(
            f"bpm {bpm} is too slow: tempo {tempo} does not fit in 24 bits"
        )
    if tempo == 0:
        raise TempoRangeError(f"bpm {bpm} is too fast: tempo rounds down to 0")
    return tempo


def tempo_event(bpm: int) -> bytes:
    tempo = tempo_for_bpm(bpm)
    return encode_vlq(0) + bytes([META, META_TEMPO, 0x03]) + tempo.to_bytes(3, "big")


def note_event(delta: int, duration: int, *, note: int = NOTE_E5, velocity: int = NOTE_VELOCITY) -> bytes:
    """One note-on at ``delta`` followed by its note-off ``duration`` ticks later."""
    return (
        encode_vlq(delta)
        + bytes([NOTE_ON, note, velocity])
        + encode_vlq(duration)
        + bytes([NOTE_OFF, note, 0x00])
    )


def build_track(
    morse: str,
    *,
    bpm: int = DEFAULT_BPM,
    settings: TrackSettings = TrackSettings(),
) -> bytes:
    """Encode a Morse symbol stream as a track payload (no chunk header)."""
    timing = settings.timing

    buf = bytearray(tempo_event(bpm))
    pending = 0
    for pos, symbol in enumerate(morse):
        if symbol == DOT:
            buf.extend(note_event(pending, timing.dot, note=settings.note, velocity=settings.velocity))
            pending = timing.dot
        elif symbol == DASH:
            buf.extend(note_event(pending, timing.dash, note=settings.note, velocity=settings.velocity))
            pending = timing.dot
        elif symbol == LETTER_SEPARATOR:
            pending = timing.letter_gap
        elif symbol == WORD_SEPARATOR:
            pending = timing.pause
        else:
            raise ValueError(f"invalid Morse symbol {symbol!r} at position {pos}")

    buf.extend(encode_vlq(pending))
    buf.extend(END_OF_TRACK)
    return bytes(buf)
