from __future__ import annotations

from charinfo_mode.char_lookup import char_name, lookup_cursor_char
from charinfo_mode.formatter import EMPTY_CHAR_INFO, NO_NAME_LABEL, format_char_info, format_codepoint


class _Host:
    def __init__(self, surface=None, char=None) -> None:
        self._surface = surface
        self._char = char

    def selected_surface(self):
        return self._surface

    def char_at_cursor(self, surface):
        assert surface is self._surface
        return self._char


def test_latin_small_letter_a() -> None:
    info = format_char_info("a", "LATIN SMALL LETTER A")

    assert info.text == " [U+0061]"
    assert info.help_echo == "LATIN SMALL LETTER A"
    assert info.codepoint == 0x61
    assert info.code_text == "U+0061"


def test_unknown_name_uses_fallback_label() -> None:
    info = format_char_info("\x07", None)

    assert info.text == " [U+0007]"
    assert info.help_echo == NO_NAME_LABEL


def test_empty_name_uses_fallback_label() -> None:
    assert format_char_info("x", "").help_echo == NO_NAME_LABEL


def test_no_character_yields_empty_string() -> None:
    info = format_char_info(None, None)

    assert info == EMPTY_CHAR_INFO
    assert info.text == ""
    assert info.empty
    assert info.code_text == ""


def test_codepoints_beyond_four_digits_are_not_truncated() -> None:
    assert format_char_info("\U0001F600", "GRINNING FACE").text == " [U+1F600]"
    assert format_codepoint(0x10FFFF) == "U+10FFFF"
    assert format_codepoint(0xABCD) == "U+ABCD"


def test_char_name_lookup() -> None:
    assert char_name("a") == "LATIN SMALL LETTER A"
    assert char_name("\n") is None
    assert char_name(None) is None


def test_lookup_cursor_char_without_surface() -> None:
    assert lookup_cursor_char(_Host()) == (None, None)


def test_lookup_cursor_char_at_end_of_buffer() -> None:
    assert lookup_cursor_char(_Host(surface="buf", char=None)) == (None, None)


def test_lookup_cursor_char_returns_name() -> None:
    assert lookup_cursor_char(_Host(surface="buf", char="é")) == ("é", "LATIN SMALL LETTER E WITH ACUTE")
