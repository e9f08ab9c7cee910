"""Decode the events of an MTrk payload.

Covers what the track builder writes: note-on / note-off channel
messages and meta events.  Running status and other channel messages
are rejected rather than guessed at.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .track import META, META_END_OF_TRACK, META_TEMPO, NOTE_OFF, NOTE_ON
from .vlq import decode_vlq


@dataclass(frozen=True)
class TrackEvent:
    delta: int
    status: int
    data: bytes  # note/velocity for channel messages; meta type + payload for meta
    meta_type: Optional[int] = None

    @property
    def is_note_on(self) -> bool:
        return self.status & 0xF0 == NOTE_ON and self.data[1] > 0

    @property
    def is_note_off(self) -> bool:
        kind = self.status & 0xF0
        return kind == NOTE_OFF or (kind == NOTE_ON and self.data[1] == 0)

    @property
    def is_end_of_track(self) -> bool:
        return self.meta_type == META_END_OF_TRACK


def read_track_events(payload: bytes) -> List[TrackEvent]:
    """Parse a track payload into events, in file order.

    Raises ``ValueError`` on truncated data, unsupported status bytes, or
    trailing bytes after end-of-track.
    """
    events: List[TrackEvent] = []
    pos = 0
    while pos < len(payload):
        delta, pos = decode_vlq(payload, pos)
        if pos >= len(payload):
            raise ValueError(f"missing status byte at offset {pos}")
        status = payload[pos]
        pos += 1

        if status == META:
            if pos >= len(payload):
                raise ValueError(f"missing meta type at offset {pos}")
            meta_type = payload[pos]
            length, pos = decode_vlq(payload, pos + 1)
            if pos + length > len(payload):
                raise ValueError(f"meta event 0x{meta_type:02X} overruns track at offset {pos}")
            events.append(
                TrackEvent(delta=delta, status=status, data=payload[pos : pos + length], meta_type=meta_type)
            )
            pos += length
            if meta_type == META_END_OF_TRACK:
                if pos != len(payload):
                    raise ValueError(f"{len(payload) - pos} trailing bytes after end-of-track")
                break
            continue

        if status & 0xF0 not in (NOTE_ON, NOTE_OFF):
            raise ValueError(f"unsupported status byte 0x{status:02X} at offset {pos - 1}")
        if pos + 2 > len(payload):
            raise ValueError(f"truncated note event at offset {pos - 1}")
        events.append(TrackEvent(delta=delta, status=status, data=payload[pos : pos + 2]))
        pos += 2

    if not events or not events[-1].is_end_of_track:
        raise ValueError("track does not end with an end-of-track event")
    return events


def count_note_pairs(events: List[TrackEvent]) -> int:
    """Number of note-ons matched by a later note-off for the same key."""
    held = {}
    pairs = 0
    for event in events:
        if event.meta_type is not None:
            continue
        key = (event.status & 0x0F, event.data[0])
        if event.is_note_on:
            held[key] = held.get(key, 0) + 1
        elif event.is_note_off and held.get(key):
            held[key] -= 1
            pairs += 1
    return pairs


def tempo_of(events: List[TrackEvent]) -> Optional[int]:
    """First set-tempo value in microseconds per quarter note, if any."""
    for event in events:
        if event.meta_type == META_TEMPO:
            return int.from_bytes(event.data, "big")
    return None
