from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

from glyphmosaic.charsets import DEFAULT_CHARSET

DEFAULT_FONT_SIZE = 12.0
DEFAULT_SCALE = 1.0
DEFAULT_BACKGROUND = "#000000"


@dataclass
class MosaicOptions:
    input: Path
    output: Path
    font: Path
    font_size: float = DEFAULT_FONT_SIZE
    scale: float = DEFAULT_SCALE
    character: str = ""
    textfile: Path | None = None
    charset: str = DEFAULT_CHARSET
    custom_charset: Path | None = None
    background: str = DEFAULT_BACKGROUND
    seed: int | None = None

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> MosaicOptions:
        return cls(
            input=Path(args.input),
            output=Path(args.output),
            font=Path(args.font),
            font_size=args.font_size,
            scale=args.scale,
            character=args.character or "",
            textfile=Path(args.textfile) if args.textfile else None,
            charset=args.charset,
            custom_charset=Path(args.custom_charset) if args.custom_charset else None,
            background=args.background,
            seed=args.seed,
        )
