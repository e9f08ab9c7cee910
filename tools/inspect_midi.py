#!/usr/bin/env python3
"""Human-readable report for a Morse code .mid file.

The structural section comes from the package's own chunk and event
decoders; the event listing is what mido reads from the same bytes, so a
disagreement between the two sections points at an encoding bug.
"""

from __future__ import annotations

import argparse
import io
from pathlib import Path
import sys
from typing import List, Sequence

import mido

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from morse_midi.container import MidiFile  # noqa: E402
from morse_midi.track_reader import count_note_pairs, read_track_events, tempo_of  # noqa: E402


def format_midi_note(note: int) -> str:
    names = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
    octave = note // 12 - 1
    name = names[note % 12]
    return f"{name}{octave}"


def describe_message(msg: mido.Message) -> str:
    if msg.type in ("note_on", "note_off"):
        return (
            f"{msg.type:<9} note={format_midi_note(msg.note)} ({msg.note})  "
            f"vel={msg.velocity}"
        )
    if msg.type == "set_tempo":
        return f"set_tempo {msg.tempo} us/qn (~{mido.tempo2bpm(msg.tempo):.2f} BPM)"
    return msg.type


def generate_report(path: Path, data: bytes) -> str:
    midi = MidiFile.from_bytes(data)
    events = read_track_events(midi.track)
    tempo = tempo_of(events)

    lines: List[str] = []
    lines.append("Morse MIDI Inspect")
    lines.append("=" * 18)
    lines.append(f"File: {path.name}   Size: {len(data):,} B")
    lines.append("")

    lines.append("[Header]")
    lines.append(f"  Format:           {midi.header.format}")
    lines.append(f"  Tracks:           {midi.header.track_count}")
    lines.append(f"  Ticks per beat:   {midi.header.ticks_per_beat}")
    lines.append("")

    lines.append("[Track]")
    lines.append(f"  Length:           {len(midi.track)} B")
    if tempo is None:
        lines.append("  Tempo:            (none)")
    else:
        lines.append(f"  Tempo:            {tempo} us/qn (0x{tempo:06X})")
    lines.append(f"  Note pairs:       {count_note_pairs(events)}")
    lines.append("")

    lines.append("[Events]")
    mid = mido.MidiFile(file=io.BytesIO(data))
    tick = 0
    for msg in mid.tracks[0]:
        tick += msg.time
        lines.append(f"  @{tick:>6}  +{msg.time:<5} {describe_message(msg)}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Inspect a Morse code MIDI file."
    )
    parser.add_argument("path", type=Path, help="Path to the .mid file to inspect.")
    args = parser.parse_args(argv)

    data = args.path.read_bytes()
    print(generate_report(args.path, data))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
