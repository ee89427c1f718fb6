from __future__ import annotations

import itertools
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

import numpy as np

from glyphmosaic.charsets import DEFAULT_CHARSET, charset_characters, load_custom_charset, sanitize_text
from glyphmosaic.errors import EmptyCharset, EmptyTextStream, MissingTextFile

log = logging.getLogger(__name__)


class CharacterSource(Protocol):
    def next_char(self) -> str:
        """Return the character to draw in the next cell."""
        ...


class LiteralSource:
    """Draws the same character in every cell."""

    def __init__(self, char: str):
        if len(char) != 1:
            raise ValueError(f"Literal character must be a single character, got {char!r}")
        self.char = char

    def next_char(self) -> str:
        return self.char


def read_text_file(path: str | Path) -> str:
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MissingTextFile(f"Could not read text file {path}: {e}") from e


class TextStreamSource:
    """Draws the alphabetic characters of a text in order, starting over at the end."""

    def __init__(self, text: str):
        self.text = sanitize_text(text)
        if not self.text:
            raise EmptyTextStream("Text contains no alphabetic characters")
        self._chars = itertools.cycle(self.text)

    @classmethod
    def from_file(cls, path: str | Path) -> TextStreamSource:
        path = Path(path)
        try:
            return cls(read_text_file(path))
        except EmptyTextStream:
            raise EmptyTextStream(f"Text file {path} contains no alphabetic characters") from None

    def next_char(self) -> str:
        return next(self._chars)


class RandomSource:
    """Draws a uniformly random character from a charset for every cell."""

    def __init__(self, characters: Sequence[str], rng: np.random.Generator | None = None):
        self.characters = tuple(characters)
        if not self.characters:
            raise EmptyCharset("Charset contains no characters")
        self.rng = rng if rng is not None else np.random.default_rng()

    def next_char(self) -> str:
        return self.characters[self.rng.integers(len(self.characters))]


def build_character_source(
    character: str = "",
    text: str | None = None,
    textfile: str | Path | None = None,
    charset: str = DEFAULT_CHARSET,
    custom_charset: str | Path | None = None,
    rng: np.random.Generator | None = None,
) -> CharacterSource:
    """Pick the source for a run: a literal character beats a text stream beats random.

    A text without any alphabetic characters yields nothing to draw, so those
    runs fall back to random characters. In random mode a custom charset file
    replaces the named charset.
    """
    if character:
        return LiteralSource(character)
    if text is None and textfile:
        text = read_text_file(textfile)
    if text is not None:
        if sanitize_text(text):
            return TextStreamSource(text)
        log.warning("Text has no alphabetic characters, drawing random characters instead")
    if custom_charset:
        characters = load_custom_charset(custom_charset)
    else:
        characters = charset_characters(charset)
    return RandomSource(characters, rng)
