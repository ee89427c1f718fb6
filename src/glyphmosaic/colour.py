from glyphmosaic.errors import InvalidColor

Colour = tuple[int, int, int]

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def parse_hex_colour(text: str) -> Colour:
    """Parse ``#RRGGBB`` (the ``#`` is optional, anything past six digits is ignored)."""
    digits = text[1:] if text.startswith("#") else text
    if len(digits) < 6:
        raise InvalidColor(f"Invalid background colour: {text!r}")
    digits = digits[:6]
    # int(..., 16) also accepts signs, whitespace and underscores
    if not HEX_DIGITS.issuperset(digits):
        raise InvalidColor(f"Invalid background colour: {text!r}")
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def format_hex_colour(colour: Colour) -> str:
    return "#{:02x}{:02x}{:02x}".format(*colour)
