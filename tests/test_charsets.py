import pytest

from glyphmosaic.charsets import (
    CHARSET_NAMES,
    charset_characters,
    is_alphabetic,
    load_custom_charset,
    sanitize_text,
    split_charset,
)
from glyphmosaic.errors import EmptyCharset, MissingCustomCharsetFile, UnknownCharset


def test_latin_is_ascii_letters():
    chars = charset_characters("latin")
    assert "".join(chars) == "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def test_names_are_case_insensitive():
    assert charset_characters("GrEeK") == charset_characters("greek")


def test_small_charsets():
    assert charset_characters("binary") == ("0", "1")
    assert "".join(charset_characters("decimal")) == "0123456789"
    assert "".join(charset_characters("hexadecimal")) == "0123456789ABCDEF"


def test_unfiltered_ranges_are_complete():
    assert len(charset_characters("braille")) == 256
    assert len(charset_characters("emoticons")) == 0x1F64F - 0x1F600 + 1


def test_playing_cards_skip_gaps():
    chars = charset_characters("playingcards")
    assert len(chars) == 64 - 4
    for gap in (0x1F0AF, 0x1F0B0, 0x1F0C0, 0x1F0D0):
        assert chr(gap) not in chars
    assert chars[0] == "\U0001F0A0"
    assert chars[-1] == "\U0001F0DF"


@pytest.mark.parametrize(
    "name, first, last",
    [
        ("cyrillic", 0x0400, 0x04FF),
        ("runic", 0x16A0, 0x16FF),
        ("hebrew", 0x0590, 0x05FF),
        ("hiragana", 0x3040, 0x309F),
        ("katakana", 0x30A0, 0x30FF),
        ("hangul", 0x1100, 0x11FF),
        ("greek", 0x0370, 0x03E1),
    ],
)
def test_alphabetic_ranges(name, first, last):
    chars = charset_characters(name)
    assert chars
    assert all(is_alphabetic(c) for c in chars)
    assert all(first <= ord(c) <= last for c in chars)
    assert list(chars) == sorted(chars)


def test_cjk_unified_is_large_and_alphabetic():
    chars = charset_characters("cjkunified")
    assert len(chars) > 20000
    assert "一" in chars


def test_every_named_charset_is_distinct_and_non_empty():
    for name in CHARSET_NAMES:
        chars = charset_characters(name)
        assert chars
        assert len(set(chars)) == len(chars)


def test_unknown_charset():
    with pytest.raises(UnknownCharset, match="klingon"):
        charset_characters("klingon")


def test_split_charset_trims_and_dedups():
    assert split_charset("  abca\n") == ("a", "b", "c")


def test_split_charset_keeps_inner_whitespace():
    assert split_charset("a b") == ("a", " ", "b")


def test_load_custom_charset(tmp_path):
    path = tmp_path / "chars.txt"
    path.write_text("\n☺☻♥\n", encoding="utf-8")
    assert load_custom_charset(path) == ("☺", "☻", "♥")


def test_load_custom_charset_blank_file(tmp_path):
    path = tmp_path / "blank.txt"
    path.write_text("  \n\t\n", encoding="utf-8")
    with pytest.raises(EmptyCharset):
        load_custom_charset(path)


def test_load_custom_charset_missing_file(tmp_path):
    with pytest.raises(MissingCustomCharsetFile):
        load_custom_charset(tmp_path / "nope.txt")


def test_sanitize_keeps_letters_only():
    assert sanitize_text("Hello, World!") == "HelloWorld"
    assert sanitize_text("Ça va? 123 Привет") == "ÇavaПривет"
    assert sanitize_text("1 2 3 ...") == ""


def test_runic_includes_golden_numbers():
    chars = charset_characters("runic")
    for code in (0x16EE, 0x16EF, 0x16F0):
        assert chr(code) in chars


def test_sanitize_keeps_letter_numerals():
    assert sanitize_text("Ⅻ.") == "Ⅻ"
    assert sanitize_text("Chapter Ⅳ, 4") == "ChapterⅣ"


def test_combining_marks_are_not_alphabetic():
    assert not is_alphabetic("\u05b0")
    assert "\u05b0" not in charset_characters("hebrew")
