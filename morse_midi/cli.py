"""Convert text to a Morse code MIDI file."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .container import MidiFile, build_midi_bytes
from .errors import InputError
from .morse import text_to_morse
from .track import DEFAULT_BPM
from .writer import output_filename, write_midi_file


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="morse-midi",
        description="Convert text to Morse code MIDI",
        exit_on_error=False,
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to convert (words are joined with spaces)",
    )
    parser.add_argument(
        "--bpm",
        type=int,
        default=DEFAULT_BPM,
        help="tempo in beats per minute (default: %(default)s)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output .mid path (default: text with spaces replaced by hyphens)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Build and validate without writing output",
    )
    return parser


def convert(text: str, *, bpm: int, output: Optional[Path], dry_run: bool) -> Optional[Path]:
    print(f"Input text: {text}")
    if not text.strip():
        raise InputError("no text provided, please provide text to convert to Morse code")

    morse = text_to_morse(text)
    print(f"Morse code: {morse}")

    data = build_midi_bytes(morse, bpm=bpm)

    # Structural sanity check: output must parse and round-trip byte-exactly.
    if MidiFile.from_bytes(data).to_bytes() != data:
        raise ValueError("built MIDI data failed round-trip validation")

    out_path = output if output is not None else Path(output_filename(text))
    if dry_run:
        print(f"dry-run OK: size={len(data)}B bpm={bpm} output={out_path}")
        return None

    write_midi_file(out_path, data)
    print(f"MIDI file saved as {out_path}")
    return out_path


def _report_error(exc: Exception) -> int:
    print(f"Error: {exc}")
    print("Use --help for more information.")
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_arg_parser()
    try:
        args, extras = parser.parse_known_args(argv)
        if extras:
            raise argparse.ArgumentError(None, f"unrecognized arguments: {' '.join(extras)}")
    except argparse.ArgumentError as exc:
        return _report_error(exc)

    text = " ".join(args.text)
    try:
        convert(text, bpm=args.bpm, output=args.output, dry_run=args.dry_run)
    except (ValueError, OSError) as exc:
        return _report_error(exc)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
