"""Text to Morse code to Standard MIDI File."""

from .container import (  # noqa: F401
    HEADER_MAGIC,
    HEADER_SIZE,
    TRACK_MAGIC,
    MidiFile,
    MidiHeader,
    build_midi_bytes,
    header_chunk,
    track_chunk,
)
from .errors import InputError, TempoRangeError  # noqa: F401
from .morse import MORSE_CODE, is_morse, text_to_morse  # noqa: F401
from .track import (  # noqa: F401
    DEFAULT_BPM,
    TICKS_PER_BEAT,
    Timing,
    TrackSettings,
    build_track,
    tempo_for_bpm,
)
from .track_reader import TrackEvent, count_note_pairs, read_track_events, tempo_of  # noqa: F401
from .vlq import decode_vlq, encode_vlq  # noqa: F401
from .writer import output_filename, write_midi_file  # noqa: F401
