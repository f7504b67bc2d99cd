class QOIError(ValueError):
    """Base class for everything that can go wrong while decoding a QOI stream."""


class FormatError(QOIError):
    """The stream does not start with the "qoif" magic."""


class UnsupportedFormatError(QOIError):
    """The header is well formed but declares something we cannot decode."""


class TruncatedStreamError(QOIError):
    """The byte source ran out in the middle of the header or an opcode."""
