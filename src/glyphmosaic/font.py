from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from fontTools.ttLib import TTFont, TTLibError
from PIL import Image, ImageDraw, ImageFont

from glyphmosaic.colour import Colour
from glyphmosaic.errors import DegenerateMetrics, FontLoadFailure

log = logging.getLogger(__name__)

NOTDEF = ".notdef"


class GlyphFont(Protocol):
    """Glyph metrics and rendering at a fixed pixel size."""

    def advance(self, char: str) -> float: ...

    def side_bearing(self, char: str) -> float: ...

    def line_height(self) -> float: ...

    def line_gap(self) -> float: ...

    def draw_glyph(self, canvas: Image.Image, position: tuple[int, int], char: str, colour: Colour) -> None:
        """Draw one glyph with its ascender line at the top left ``position``."""
        ...


class TrueTypeFont:
    """A TrueType/OpenType font scaled so that ascent minus descent is ``size`` pixels.

    Metrics come from the font tables via fontTools; drawing goes through
    Pillow's FreeType renderer opened at the matching em size.
    """

    def __init__(self, ttf: TTFont, pil_font: ImageFont.FreeTypeFont, size: float):
        self.size = size
        hhea = ttf["hhea"]
        self._ascent = hhea.ascent
        self._descent = hhea.descent
        self._line_gap = hhea.lineGap
        self._hmtx = dict(ttf["hmtx"].metrics)
        self._cmap = dict(ttf.getBestCmap() or {})
        self._glyph_order = list(ttf.getGlyphOrder())
        units_height = self._ascent - self._descent
        if units_height <= 0:
            raise FontLoadFailure(f"Font has non-positive ascent - descent ({units_height})")
        self.scale = size / units_height
        self.pil_font = pil_font

    @classmethod
    def load(cls, path: str | Path, size: float) -> TrueTypeFont:
        path = Path(path)
        if size <= 0:
            raise DegenerateMetrics(f"Font size must be positive, got {size}")
        try:
            with TTFont(path, fontNumber=0) as ttf:
                hhea = ttf["hhea"]
                units_per_em = ttf["head"].unitsPerEm
                em_size = size * units_per_em / (hhea.ascent - hhea.descent)
                pil_font = ImageFont.truetype(str(path), em_size)
                font = cls(ttf, pil_font, size)
        except FontLoadFailure:
            raise
        except (OSError, TTLibError, KeyError, ValueError, ZeroDivisionError) as e:
            raise FontLoadFailure(f"Unable to read font file {path}: {e}") from e
        log.debug("Loaded font %s at %.2fpx (em %.2fpx)", path, size, em_size)
        return font

    def glyph_name(self, char: str) -> str:
        name = self._cmap.get(ord(char))
        if name is None:
            return self._glyph_order[0] if self._glyph_order else NOTDEF
        return name

    def _metrics(self, char: str) -> tuple[int, int]:
        try:
            return self._hmtx[self.glyph_name(char)]
        except KeyError:
            return (0, 0)

    def advance(self, char: str) -> float:
        return self._metrics(char)[0] * self.scale

    def side_bearing(self, char: str) -> float:
        return self._metrics(char)[1] * self.scale

    def line_height(self) -> float:
        # ascent - descent is scaled to exactly the requested size
        return self.size

    def line_gap(self) -> float:
        return self._line_gap * self.scale

    def draw_glyph(self, canvas: Image.Image, position: tuple[int, int], char: str, colour: Colour) -> None:
        draw = ImageDraw.Draw(canvas)
        draw.text(position, char, fill=colour, font=self.pil_font, anchor="la")
