import enum
import struct
from dataclasses import dataclass

from .errors import FormatError, UnsupportedFormatError
from .format import QOI_HEADER_SIZE, QOI_MAGIC
from .stream import ByteSource, as_stream, read_exact

# width(4), height(4), channels(1), colorspace(1), everything after the magic
_HEADER_FIELDS = struct.Struct(">IIBB")


class Channels(enum.IntEnum):
    RGB = 3
    RGBA = 4


class ColorSpace(enum.IntEnum):
    SRGB_LINEAR_ALPHA = 0  # sRGB with linear alpha
    ALL_LINEAR = 1  # all channels linear


@dataclass(frozen=True)
class Header:
    width: int
    height: int
    channels: Channels
    colorspace: ColorSpace

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def mode(self) -> str:
        """Pillow mode name matching the channel count."""
        return "RGBA" if self.channels == Channels.RGBA else "RGB"


def parse_header(source: ByteSource) -> Header:
    """
    Read and validate the 14 byte QOI header.

    Consumes exactly QOI_HEADER_SIZE bytes from the source, leaving it
    positioned at the first opcode. Width and height are not bounded here.

    :param source: Binary stream (or bytes) positioned at the start of a QOI file.
    :return: The parsed Header.
    :raises FormatError: The magic bytes are not "qoif".
    :raises UnsupportedFormatError: Unknown channels or colorspace value.
    :raises TruncatedStreamError: The stream ends inside the header.
    """
    stream = as_stream(source)

    magic = stream.read(len(QOI_MAGIC))
    if magic != QOI_MAGIC:
        raise FormatError(f"QOI: bad magic, expected {QOI_MAGIC!r}, got {magic!r}")

    width, height, channels, colorspace = _HEADER_FIELDS.unpack(
        read_exact(stream, QOI_HEADER_SIZE - len(QOI_MAGIC))
    )

    try:
        channels = Channels(channels)
    except ValueError:
        raise UnsupportedFormatError(
            f"QOI: unknown channels value {channels}"
        ) from None

    try:
        colorspace = ColorSpace(colorspace)
    except ValueError:
        raise UnsupportedFormatError(
            f"QOI: unknown colorspace value {colorspace}"
        ) from None

    return Header(width, height, channels, colorspace)
