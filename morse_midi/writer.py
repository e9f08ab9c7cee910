from __future__ import annotations

from pathlib import Path
from typing import Union

MIDI_SUFFIX = ".mid"


def output_filename(text: str) -> str:
    """``"sos help"`` -> ``"sos-help.mid"``."""
    return text.replace(" ", "-") + MIDI_SUFFIX


def write_midi_file(path: Union[str, Path], data: bytes) -> Path:
    """Write ``data`` in one call.

    ``OSError`` from the filesystem propagates unchanged; a partially
    written file is not removed.
    """
    out_path = Path(path)
    out_path.write_bytes(data)
    return out_path
