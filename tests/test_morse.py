from pathlib import Path
import sys

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from morse_midi.morse import MORSE_CODE, MORSE_SYMBOLS, is_morse, text_to_morse  # noqa: E402


def test_table_covers_lowercase_alphabet_only() -> None:
    assert sorted(MORSE_CODE) == [chr(c) for c in range(ord("a"), ord("z") + 1)]
    assert all(set(code) <= {".", "-"} for code in MORSE_CODE.values())


def test_sos() -> None:
    assert text_to_morse("sos") == "... --- ..."


def test_case_insensitive() -> None:
    assert text_to_morse("SOS") == text_to_morse("sos") == text_to_morse("SoS")


def test_words_joined_with_slash() -> None:
    assert text_to_morse("sos sos") == "... --- .../... --- ..."


def test_unknown_characters_dropped() -> None:
    assert text_to_morse("s0s!") == "... ..."
    assert text_to_morse("é") == ""


def test_consecutive_spaces_leave_empty_words() -> None:
    assert text_to_morse("a  b") == ".-//-..."
    assert text_to_morse(" e ") == "/./"


def test_word_of_only_unknown_characters_is_empty_position() -> None:
    assert text_to_morse("a 42 b") == ".-//-..."


def test_tabs_are_not_word_separators() -> None:
    assert text_to_morse("e\te") == ". ."


@pytest.mark.parametrize("text", ["hello world", "The Quick Brown Fox", "a  b", "x1y2 z!"])
def test_mapping_lowercase_input_is_stable(text: str) -> None:
    lowered = text.lower()
    assert text_to_morse(lowered) == text_to_morse(lowered.lower())
    assert text_to_morse(lowered) == text_to_morse(text)


@pytest.mark.parametrize("text", ["hello world", "Pack my box, with 5 dozen jugs!", "  "])
def test_output_alphabet(text: str) -> None:
    stream = text_to_morse(text)
    assert set(stream) <= MORSE_SYMBOLS
    assert is_morse(stream)


def test_is_morse_rejects_other_characters() -> None:
    assert not is_morse("..x")
    assert is_morse("")
