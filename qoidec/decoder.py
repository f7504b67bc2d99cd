from typing import Iterator, List, NamedTuple, Optional, Tuple

from .errors import UnsupportedFormatError
from .format import (
    QOI_CACHE_SIZE,
    QOI_MASK_6,
    QOI_OP_DIFF,
    QOI_OP_LUMA,
    QOI_OP_RGB,
    QOI_OP_RUN,
    QOI_PIXELS_MAX,
    color_hash,
)
from .header import Header, parse_header
from .stream import ByteSource, as_stream, read_exact


class Pixel(NamedTuple):
    r: int
    g: int
    b: int
    a: int


class PixelDecoder:
    """
    Pull-based decoder for the opcode stream that follows a QOI header.

    Every call to next() yields exactly one pixel. The decoder does not know
    the image size, so it never stops on its own: the caller asks for
    width * height pixels and stops there.
    """

    def __init__(self, stream):
        self._stream = stream
        # Initial pixel state (R, G, B, A)
        self.previous = Pixel(0, 0, 0, 255)
        # Index array: 64 pixels, initialized to (0, 0, 0, 0)
        self.cache = [Pixel(0, 0, 0, 0)] * QOI_CACHE_SIZE
        self.pending_run = 0

    def __iter__(self):
        return self

    def __next__(self) -> Pixel:
        self._advance()

        # The cache is written after every pixel, run continuations included
        px = self.previous
        self.cache[color_hash(*px)] = px
        return px

    def take(self, count: int) -> List[Pixel]:
        return [next(self) for _ in range(count)]

    def _advance(self):
        if self.pending_run > 0:
            self.pending_run -= 1
            return

        op = read_exact(self._stream, 1)[0]
        r, g, b, a = self.previous

        # QOI_OP_INDEX (0x00..0x3F)
        if op < QOI_OP_DIFF:
            self.previous = self.cache[op & QOI_MASK_6]

        # QOI_OP_DIFF (0x40..0x7F)
        elif op < QOI_OP_LUMA:
            # 2-bit differences stored with a bias of 2
            dr = ((op >> 4) & 0x03) - 2
            dg = ((op >> 2) & 0x03) - 2
            db = (op & 0x03) - 2
            self.previous = Pixel(
                (r + dr) & 0xFF, (g + dg) & 0xFF, (b + db) & 0xFF, a
            )

        # QOI_OP_LUMA (0x80..0xBF)
        elif op < QOI_OP_RUN:
            byte2 = read_exact(self._stream, 1)[0]
            dg = (op & QOI_MASK_6) - 32
            dr = ((byte2 >> 4) & 0x0F) + dg - 8
            db = (byte2 & 0x0F) + dg - 8
            self.previous = Pixel(
                (r + dr) & 0xFF, (g + dg) & 0xFF, (b + db) & 0xFF, a
            )

        # QOI_OP_RUN (0xC0..0xFD), this pixel plus (op & 0x3F) more
        elif op < QOI_OP_RGB:
            self.pending_run = op & QOI_MASK_6

        # QOI_OP_RGB (0xFE)
        elif op == QOI_OP_RGB:
            r, g, b = read_exact(self._stream, 3)
            self.previous = Pixel(r, g, b, a)

        # QOI_OP_RGBA (0xFF)
        else:
            self.previous = Pixel(*read_exact(self._stream, 4))


def make_decoder(source: ByteSource) -> PixelDecoder:
    """Start a decode session on a source positioned just after the header."""
    return PixelDecoder(as_stream(source))


def iter_pixels(source: ByteSource) -> Tuple[Header, Iterator[Pixel]]:
    """
    Parse the header and return it with a generator over every pixel.

    The generator yields exactly width * height pixels in row-major order.
    """
    stream = as_stream(source)
    header = parse_header(stream)
    decoder = make_decoder(stream)

    def pixels():
        for _ in range(header.pixel_count):
            yield next(decoder)

    return header, pixels()


class QOIDecoder:
    """
    A class to decode QOI (Quite OK Image) files into raw pixel data.
    """

    @staticmethod
    def decode(
        file_data: bytes,
        byte_offset: int = 0,
        byte_length: int = None,
        output_channels: int = None,
        max_pixels: Optional[int] = QOI_PIXELS_MAX,
    ) -> dict:
        """
        Decode a QOI file given as a bytes/bytearray object.

        :param file_data: Bytes containing the QOI file.
        :param byte_offset: Offset to the start of the QOI file in file_data.
        :param byte_length: Length of the QOI file in bytes.
        :param output_channels: Number of channels to include in the decoded array (3 or 4).
                                If None, uses the channels defined in the file header.
        :param max_pixels: Refuse images with more pixels than this. None disables the check.
        :return: Dictionary containing width, height, colorspace, channels, and data (bytes).
        """

        # --- Handle Slicing ---
        if byte_length is None:
            byte_length = len(file_data) - byte_offset

        # memoryview keeps large inputs from being copied
        data = memoryview(file_data)[byte_offset : byte_offset + byte_length]
        stream = as_stream(data)

        # --- Header Parsing ---
        header = parse_header(stream)

        if output_channels is None:
            output_channels = int(header.channels)

        # --- Validation ---
        if output_channels not in (3, 4):
            raise ValueError(
                "QOI.decode: The number of channels for the output is invalid"
            )

        total_pixels = header.pixel_count
        if max_pixels is not None and total_pixels > max_pixels:
            raise UnsupportedFormatError(
                f"QOI.decode: {header.width}x{header.height} exceeds the limit of {max_pixels} pixels"
            )

        # --- Decoding Loop ---
        decoder = make_decoder(stream)
        result = bytearray(total_pixels * output_channels)
        write_pos = 0

        for _ in range(total_pixels):
            px = next(decoder)
            result[write_pos : write_pos + output_channels] = px[:output_channels]
            write_pos += output_channels

        return {
            "width": header.width,
            "height": header.height,
            "colorspace": int(header.colorspace),
            "channels": output_channels,
            "data": bytes(result),
        }
