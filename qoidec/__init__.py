from .converter import convert_directory, decode_to_image, qoi_to_png
from .decoder import Pixel, PixelDecoder, QOIDecoder, iter_pixels, make_decoder
from .errors import (
    FormatError,
    QOIError,
    TruncatedStreamError,
    UnsupportedFormatError,
)
from .header import Channels, ColorSpace, Header, parse_header
from .utils import decode_to_array, load_image

__all__ = [
    "Channels",
    "ColorSpace",
    "FormatError",
    "Header",
    "Pixel",
    "PixelDecoder",
    "QOIDecoder",
    "QOIError",
    "TruncatedStreamError",
    "UnsupportedFormatError",
    "convert_directory",
    "decode_to_array",
    "decode_to_image",
    "iter_pixels",
    "load_image",
    "make_decoder",
    "parse_header",
    "qoi_to_png",
]
