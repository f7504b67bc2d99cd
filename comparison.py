#! Our decoder is pure Python while the official qoi package and Pillow are C, so the timings are only a rough reference.

import time

import numpy as np
from PIL import Image

import qoi as OfficialQOI
from qoidec import decode_to_array

INPUT_QOI = "fruits.qoi"


def time_compare(qoi_path: str):
    with open(qoi_path, "rb") as f:
        content = f.read()
    print(f"Loaded {qoi_path}: {len(content)} bytes")

    # Decode in pure Python (our implementation)
    start_time = time.time()
    ours = decode_to_array(content)
    end_time = time.time()
    print(f"Decoded with qoidec in {end_time - start_time:.2f} seconds")

    # Decode with the official C extension
    start_time = time.time()
    official = OfficialQOI.decode(content)
    end_time = time.time()
    print(f"Decoded with qoi in {end_time - start_time:.2f} seconds")

    # Decode with Pillow's QOI reader
    start_time = time.time()
    with Image.open(qoi_path) as img:
        pillow = np.array(img)
    end_time = time.time()
    print(f"Decoded with Pillow in {end_time - start_time:.2f} seconds")

    assert np.array_equal(ours, official), "Decoded data mismatch with qoi!"
    assert np.array_equal(ours, pillow), "Decoded data mismatch with Pillow!"


if __name__ == "__main__":
    time_compare(INPUT_QOI)
