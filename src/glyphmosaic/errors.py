class MosaicError(Exception):
    """Base class for failures that end a mosaic run with a message."""


class MissingInputFile(MosaicError):
    pass


class UnsupportedImageFormat(MosaicError):
    pass


class InvalidColor(MosaicError, ValueError):
    pass


class FontLoadFailure(MosaicError):
    pass


class MissingCustomCharsetFile(MosaicError):
    pass


class MissingTextFile(MosaicError):
    pass


class EmptyCharset(MosaicError):
    pass


class EmptyTextStream(MosaicError):
    pass


class UnknownCharset(MosaicError, ValueError):
    pass


class OutputWriteFailure(MosaicError):
    pass


class DegenerateMetrics(MosaicError):
    """A computed cell or image dimension is zero or negative."""


class EmptyRegion(MosaicError):
    """A sampling region has no pixels inside the image."""
