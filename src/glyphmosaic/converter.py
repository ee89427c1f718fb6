import logging
import math
from collections.abc import Callable
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from glyphmosaic.colour import Colour, format_hex_colour, parse_hex_colour
from glyphmosaic.compositor import cell_height, compose, row_count
from glyphmosaic.errors import DegenerateMetrics, MissingInputFile, OutputWriteFailure, UnsupportedImageFormat
from glyphmosaic.font import GlyphFont, TrueTypeFont
from glyphmosaic.options import MosaicOptions
from glyphmosaic.source import CharacterSource, RandomSource, build_character_source

log = logging.getLogger(__name__)


def load_image(path: str | Path) -> Image.Image:
    path = Path(path)
    if not path.is_file():
        raise MissingInputFile(f"No such file: {path}")
    try:
        with Image.open(path) as image:
            return image.convert("RGB")
    except (UnidentifiedImageError, OSError) as e:
        raise UnsupportedImageFormat(f"Unsupported image format: {path}") from e


def scaled_size(width: int, height: int, scale: float) -> tuple[int, int]:
    """``dimension * scale`` rounded to the nearest pixel, halves rounding up."""
    size = (math.floor(width * scale + 0.5), math.floor(height * scale + 0.5))
    if size[0] <= 0 or size[1] <= 0:
        raise DegenerateMetrics(f"Scale {scale} shrinks a {width}x{height} image to nothing")
    return size


def scale_image(image: Image.Image, scale: float) -> Image.Image:
    """Nearest-neighbour resize by ``scale``."""
    if scale == 1.0:
        return image
    return image.resize(scaled_size(image.width, image.height, scale), Image.NEAREST)


def save_image(image: Image.Image, path: str | Path) -> None:
    path = Path(path)
    try:
        image.save(path)
    except (OSError, ValueError, KeyError) as e:
        raise OutputWriteFailure(f"Couldn't write to file {path}: {e}") from e


def image_to_mosaic(
    image: Image.Image | str | Path,
    font: GlyphFont,
    source: CharacterSource,
    scale: float = 1.0,
    background: Colour = (0, 0, 0),
    on_row: Callable[[int], None] | None = None,
) -> Image.Image:
    if not isinstance(image, Image.Image):
        image = load_image(image)
    image = image.convert("RGB")
    image = scale_image(image, scale)
    return compose(image, font, source, background=background, on_row=on_row)


def convert(
    options: MosaicOptions,
    progress: Callable[[int], Callable[[int], None]] | None = None,
) -> Image.Image:
    """Run a whole conversion described by ``options`` and write the result.

    ``progress`` receives the number of rows before composing and returns the
    per-row callback.
    """
    background = parse_hex_colour(options.background)
    rng = np.random.default_rng(options.seed)
    source = build_character_source(
        character=options.character,
        textfile=options.textfile,
        charset=options.charset,
        custom_charset=options.custom_charset,
        rng=rng,
    )
    if isinstance(source, RandomSource):
        log.debug("Random mode with %d characters", len(source.characters))

    image = load_image(options.input)
    log.info("Loaded %s (%dx%d)", options.input, image.width, image.height)
    width, image_height = image.size
    if options.scale != 1.0:
        width, image_height = scaled_size(width, image_height, options.scale)
        log.info("Scaling to %dx%d", width, image_height)

    font = TrueTypeFont.load(options.font, options.font_size)
    height = cell_height(font)
    rows = row_count(image_height, height)
    log.debug("Cell height %dpx, %d rows, background %s", height, rows, format_hex_colour(background))

    on_row = progress(rows) if progress is not None else None
    canvas = image_to_mosaic(image, font, source, scale=options.scale, background=background, on_row=on_row)
    save_image(canvas, options.output)
    log.info("Wrote %s", options.output)
    return canvas
