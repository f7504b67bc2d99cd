import struct

# Header: magic(4), width(4), height(4), channels(1), colorspace(1)
# > : Big Endian
QOI_HEADER = struct.Struct(">4sIIBB")
QOI_HEADER_SIZE = QOI_HEADER.size
QOI_MAGIC = b"qoif"

# 7 bytes of 0x00 followed by 1 byte of 0x01
QOI_END_MARKER = b"\x00\x00\x00\x00\x00\x00\x00\x01"

# Op-code tags
QOI_OP_INDEX = 0x00  # 00xxxxxx
QOI_OP_DIFF = 0x40  # 01xxxxxx
QOI_OP_LUMA = 0x80  # 10xxxxxx
QOI_OP_RUN = 0xC0  # 11xxxxxx
QOI_OP_RGB = 0xFE  # 11111110
QOI_OP_RGBA = 0xFF  # 11111111

QOI_MASK_6 = 0x3F

QOI_CACHE_SIZE = 64
QOI_PIXELS_MAX = 400000000  # Safety limit (400MP)


def color_hash(r: int, g: int, b: int, a: int) -> int:
    """Index position of a pixel in the 64 entry color cache."""
    return (r * 3 + g * 5 + b * 7 + a * 11) % QOI_CACHE_SIZE
