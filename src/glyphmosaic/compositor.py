import math
from collections.abc import Callable

from PIL import Image

from glyphmosaic.colour import Colour
from glyphmosaic.errors import DegenerateMetrics
from glyphmosaic.font import GlyphFont
from glyphmosaic.sampling import Region, as_array, average_colour
from glyphmosaic.source import CharacterSource


def cell_height(font: GlyphFont) -> int:
    """Row height shared by every cell of a run."""
    height = math.ceil(font.line_height() - font.line_gap())
    if height <= 0:
        raise DegenerateMetrics(f"Cell height is {height}px; the font size is too small")
    return height


def cell_width(font: GlyphFont, char: str) -> int:
    """Horizontal step for ``char``; differs per glyph in proportional fonts."""
    width = math.ceil(font.advance(char) + font.side_bearing(char))
    if width <= 0:
        raise DegenerateMetrics(f"Cell width for {char!r} is {width}px; the glyph has no advance")
    return width


def row_count(image_height: int, height: int) -> int:
    return math.ceil(image_height / height)


def compose(
    image: Image.Image,
    font: GlyphFont,
    source: CharacterSource,
    background: Colour = (0, 0, 0),
    on_row: Callable[[int], None] | None = None,
) -> Image.Image:
    """Paint one glyph per cell, each in the mean colour of the image under it.

    Rows are ``cell_height(font)`` tall. Within a row each cell is as wide as the
    glyph drawn in it, so the cursor steps by a different amount per character.
    ``on_row`` is called with the row index after each completed row.
    """
    if image.mode != "RGB":
        image = image.convert("RGB")
    width, height = image.size
    pixels = as_array(image)
    canvas = Image.new("RGB", (width, height), background)

    step_y = cell_height(font)
    row = 0
    y = 0
    while y < height:
        x = 0
        while x < width:
            char = source.next_char()
            step_x = cell_width(font, char)
            colour = average_colour(pixels, Region(x, y, step_x, step_y))
            font.draw_glyph(canvas, (x, y), char, colour)
            x += step_x
        y += step_y
        if on_row is not None:
            on_row(row)
        row += 1

    return canvas
