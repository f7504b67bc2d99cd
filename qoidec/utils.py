import os

import numpy as np
from PIL import Image

from .decoder import QOIDecoder


def read_source(source) -> bytes:
    """Return the raw bytes of a path, a binary stream or a bytes-like object."""
    if isinstance(source, (str, os.PathLike)):
        with open(source, "rb") as f:
            return f.read()
    if hasattr(source, "read"):
        return source.read()
    return source


def decode_to_array(source, output_channels: int = None) -> np.ndarray:
    """Decode a QOI image into a (height, width, channels) uint8 array."""
    decoded = QOIDecoder.decode(read_source(source), output_channels=output_channels)
    return np.frombuffer(decoded["data"], dtype=np.uint8).reshape(
        decoded["height"], decoded["width"], decoded["channels"]
    )


def load_image(filepath: str) -> tuple[np.ndarray, dict]:
    """Load a reference image and return pixel data as numpy array + description."""

    img = Image.open(filepath)

    # Convert to RGB or RGBA
    if img.mode == "RGBA":
        channels = 4
    else:
        img = img.convert("RGB")
        channels = 3

    return np.array(img), {
        "width": img.size[0],
        "height": img.size[1],
        "channels": channels,
        "colorspace": 0,
    }
