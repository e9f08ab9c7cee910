"""Text to Morse symbol stream.

Only ``a``-``z`` are mapped (input is lowercased first); any other
character is dropped without a placeholder.  Words are split on the
literal space character, so runs of spaces leave empty positions in the
output (``"a  b"`` -> ``".-//-..."``).
"""

from __future__ import annotations

MORSE_CODE = {
    "a": ".-", "b": "-...", "c": "-.-.", "d": "-..", "e": ".",
    "f": "..-.", "g": "--.", "h": "....", "i": "..", "j": ".---",
    "k": "-.-", "l": ".-..", "m": "--", "n": "-.", "o": "---",
    "p": ".--.", "q": "--.-", "r": ".-.", "s": "...", "t": "-",
    "u": "..-", "v": "...-", "w": ".--", "x": "-..-", "y": "-.--",
    "z": "--..",
}

DOT = "."
DASH = "-"
LETTER_SEPARATOR = " "
WORD_SEPARATOR = "/"
MORSE_SYMBOLS = frozenset((DOT, DASH, LETTER_SEPARATOR, WORD_SEPARATOR))


def word_to_morse(word: str) -> str:
    codes = [MORSE_CODE[char] for char in word.lower() if char in MORSE_CODE]
    return LETTER_SEPARATOR.join(codes)


def text_to_morse(text: str) -> str:
    """Return the Morse symbol stream for ``text``."""
    words = text.lower().split(" ")
    return WORD_SEPARATOR.join(word_to_morse(word) for word in words)


def is_morse(stream: str) -> bool:
    return all(symbol in MORSE_SYMBOLS for symbol in stream)
