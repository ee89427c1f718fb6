import argparse
import logging
import sys

from tqdm import tqdm

from glyphmosaic.charsets import CHARSET_NAMES, DEFAULT_CHARSET
from glyphmosaic.converter import convert
from glyphmosaic.errors import MosaicError
from glyphmosaic.options import DEFAULT_BACKGROUND, DEFAULT_FONT_SIZE, DEFAULT_SCALE, MosaicOptions

log = logging.getLogger(__name__)


def _positive_float(value: str) -> float:
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def _single_char(value: str) -> str:
    if len(value) > 1:
        raise argparse.ArgumentTypeError(f"must be a single character, got {value!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glyphmosaic", description="Redraw an image as a mosaic of coloured font glyphs"
    )
    parser.add_argument("input", help="Path to input image")
    parser.add_argument("output", help="Path to output image; the extension picks the format")
    parser.add_argument("-f", "--font", required=True, help="Path to a TrueType/OpenType font file")
    parser.add_argument(
        "--font-size", type=_positive_float, default=DEFAULT_FONT_SIZE, help="Glyph height in pixels (default: 12.0)"
    )
    parser.add_argument(
        "-s",
        "--scale",
        type=_positive_float,
        default=DEFAULT_SCALE,
        help="Resize the input by this factor before drawing (default: 1.0)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-c", "--character", type=_single_char, default="", help="Draw this character in every cell")
    mode.add_argument("--textfile", default="", help="Draw the letters of this text file in order, repeating")
    parser.add_argument(
        "--charset",
        type=str.lower,
        default=DEFAULT_CHARSET,
        choices=CHARSET_NAMES,
        help="Named charset for random characters (default: latin)",
    )
    parser.add_argument(
        "--custom-charset", default="", help="File whose characters replace --charset for random characters"
    )
    parser.add_argument(
        "-b", "--background", default=DEFAULT_BACKGROUND, help="Background colour as hex (default: #000000)"
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for random character selection")
    parser.add_argument("--no-progress", action="store_true", default=False, help="Hide the progress bar")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    if args.quiet:
        level = logging.ERROR
    elif args.verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    options = MosaicOptions.from_args(args)
    bars: list[tqdm] = []

    def progress(rows: int):
        bar = tqdm(total=rows, desc="composing", unit="row", disable=args.no_progress, file=sys.stderr)
        bars.append(bar)
        return lambda _row: bar.update(1)

    try:
        convert(options, progress=progress)
    except MosaicError as e:
        log.error("%s", e)
        return 1
    finally:
        for bar in bars:
            bar.close()
    return 0
