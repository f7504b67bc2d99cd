import io
import struct

import pytest

from qoidec import (
    Channels,
    ColorSpace,
    FormatError,
    QOIError,
    TruncatedStreamError,
    UnsupportedFormatError,
    parse_header,
)


@pytest.mark.parametrize(
    "width, height, channels, colorspace",
    [
        (1, 1, 4, 0),
        (0, 0, 3, 1),
        (640, 480, 3, 0),
        (2**32 - 1, 1, 4, 1),
        (1, 2**32 - 1, 3, 0),
    ],
)
def test_header_fields(width, height, channels, colorspace):
    data = struct.pack(">4sIIBB", b"qoif", width, height, channels, colorspace)
    header = parse_header(data)

    assert header.width == width
    assert header.height == height
    assert header.channels == channels
    assert header.colorspace == colorspace
    assert isinstance(header.channels, Channels)
    assert isinstance(header.colorspace, ColorSpace)


def test_header_consumes_exactly_14_bytes(make_qoi):
    stream = io.BytesIO(make_qoi(1, 1, [0xFE, 1, 2, 3]))
    parse_header(stream)
    assert stream.tell() == 14
    assert stream.read(1) == b"\xfe"


def test_header_mode_and_pixel_count():
    rgb = parse_header(struct.pack(">4sIIBB", b"qoif", 3, 5, 3, 0))
    rgba = parse_header(struct.pack(">4sIIBB", b"qoif", 3, 5, 4, 0))

    assert rgb.mode == "RGB"
    assert rgba.mode == "RGBA"
    assert rgb.pixel_count == 15


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"qoi",
        b"QOIF\x00\x00\x00\x01\x00\x00\x00\x01\x04\x00",
        b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR",
        b"fioq\x00\x00\x00\x01\x00\x00\x00\x01\x04\x00",
    ],
)
def test_bad_magic(data):
    with pytest.raises(FormatError):
        parse_header(data)


@pytest.mark.parametrize("length", [4, 8, 12, 13])
def test_truncated_header(length):
    data = struct.pack(">4sIIBB", b"qoif", 1, 1, 4, 0)[:length]
    with pytest.raises(TruncatedStreamError):
        parse_header(data)


@pytest.mark.parametrize("channels", [0, 1, 2, 5, 255])
def test_unknown_channels(channels):
    data = struct.pack(">4sIIBB", b"qoif", 1, 1, channels, 0)
    with pytest.raises(UnsupportedFormatError):
        parse_header(data)


@pytest.mark.parametrize("colorspace", [2, 3, 255])
def test_unknown_colorspace(colorspace):
    data = struct.pack(">4sIIBB", b"qoif", 1, 1, 4, colorspace)
    with pytest.raises(UnsupportedFormatError):
        parse_header(data)


def test_errors_are_value_errors():
    for error in (FormatError, UnsupportedFormatError, TruncatedStreamError):
        assert issubclass(error, QOIError)
        assert issubclass(error, ValueError)
