import os
from pathlib import Path

from PIL import Image

from .decoder import QOIDecoder
from .errors import QOIError
from .header import Channels
from .utils import read_source

_MODES = {"RGB": Channels.RGB, "RGBA": Channels.RGBA}


def decode_to_image(source, mode: str = None) -> Image.Image:
    """
    Decode a QOI image into a Pillow image.

    :param source: Path, bytes or binary stream holding a QOI file.
    :param mode: "RGB" or "RGBA". Must agree with the channels in the header;
                 None takes whatever the header declares.
    """
    if mode is not None and mode not in _MODES:
        raise ValueError(f"QOI: unsupported image mode {mode!r}")

    decoded = QOIDecoder.decode(read_source(source))
    actual = "RGBA" if decoded["channels"] == Channels.RGBA else "RGB"
    if mode is not None and mode != actual:
        raise QOIError(f"QOI: image is {actual}, expected {mode}")

    return Image.frombytes(
        actual, (decoded["width"], decoded["height"]), decoded["data"]
    )


def qoi_to_png(qoi_path, png_path):
    img = decode_to_image(qoi_path)
    img.save(png_path, format="PNG")
    return png_path


def convert_directory(src_dir, dst_dir) -> list:
    """Convert every .qoi file in src_dir to a .png with the same stem in dst_dir."""
    os.makedirs(dst_dir, exist_ok=True)

    written = []
    for qoi_path in sorted(Path(src_dir).glob("*.qoi")):
        png_path = Path(dst_dir) / qoi_path.with_suffix(".png").name
        written.append(qoi_to_png(qoi_path, png_path))
    return written
