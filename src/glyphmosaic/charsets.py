import unicodedata
from pathlib import Path

from glyphmosaic.errors import EmptyCharset, MissingCustomCharsetFile, UnknownCharset


def is_alphabetic(char: str) -> bool:
    """Letters and letter numerals (runic golden numbers, Roman numerals).

    Combining marks are left out: they have no advance of their own.
    """
    return char.isalpha() or unicodedata.category(char) == "Nl"


def _span(first: int, last: int, alphabetic: bool = False, exclude: frozenset[int] = frozenset()) -> str:
    chars = (chr(i) for i in range(first, last + 1) if i not in exclude)
    if alphabetic:
        chars = (c for c in chars if is_alphabetic(c))
    return "".join(chars)


DECIMAL = "0123456789"

# U+1F0AF, U+1F0B0, U+1F0C0 and U+1F0D0 are unassigned gaps between the suits
PLAYING_CARD_GAPS = frozenset({0x1F0AF, 0x1F0B0, 0x1F0C0, 0x1F0D0})

NAMED_CHARSETS = {
    "latin": _span(0x0041, 0x007A, alphabetic=True),
    "cyrillic": _span(0x0400, 0x04FF, alphabetic=True),
    "runic": _span(0x16A0, 0x16FF, alphabetic=True),
    "hebrew": _span(0x0590, 0x05FF, alphabetic=True),
    "hiragana": _span(0x3040, 0x309F, alphabetic=True),
    "katakana": _span(0x30A0, 0x30FF, alphabetic=True),
    "hangul": _span(0x1100, 0x11FF, alphabetic=True),
    "cjkunified": _span(0x4E00, 0x9FFF, alphabetic=True),
    "greek": _span(0x0370, 0x03E1, alphabetic=True),
    "emoticons": _span(0x1F600, 0x1F64F),
    "decimal": DECIMAL,
    "hexadecimal": DECIMAL + "ABCDEF",
    "binary": "01",
    "braille": _span(0x2800, 0x28FF),
    "playingcards": _span(0x1F0A0, 0x1F0DF, exclude=PLAYING_CARD_GAPS),
}

CHARSET_NAMES = tuple(NAMED_CHARSETS)
DEFAULT_CHARSET = "latin"


def charset_characters(name: str) -> tuple[str, ...]:
    """Characters of a named charset, in code point order. Names are case-insensitive."""
    try:
        return tuple(NAMED_CHARSETS[name.lower()])
    except KeyError:
        raise UnknownCharset(f"Unknown charset {name!r}, expected one of: {', '.join(CHARSET_NAMES)}") from None


def split_charset(text: str) -> tuple[str, ...]:
    """Distinct characters of the trimmed ``text``, first occurrence wins."""
    characters = tuple(dict.fromkeys(text.strip()))
    if not characters:
        raise EmptyCharset("Custom charset contains no characters")
    return characters


def load_custom_charset(path: str | Path) -> tuple[str, ...]:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MissingCustomCharsetFile(f"Unable to read custom charset file {path}: {e}") from e
    try:
        return split_charset(text)
    except EmptyCharset:
        raise EmptyCharset(f"Custom charset file {path} contains no characters") from None


def sanitize_text(text: str) -> str:
    """Drop every character that is not alphabetic."""
    return "".join(c for c in text if is_alphabetic(c))
