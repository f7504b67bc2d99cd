from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from qoidec import decode_to_image

# Drop pairs of <name>.qoi / <name>.png here, e.g. the qoiformat.org test suite
TEST_DATA_DIRECTORY = Path(__file__).parent / "qoi_test_images"

TEST_CASES = sorted(TEST_DATA_DIRECTORY.glob("*.qoi"))


@pytest.mark.parametrize("qoi_path", TEST_CASES, ids=lambda p: p.stem)
def test_decode_matches_png(qoi_path):
    png_path = qoi_path.with_suffix(".png")
    if not png_path.exists():
        pytest.skip(f"no reference image for {qoi_path.name}")

    with Image.open(png_path) as png:
        expected = np.array(png.convert("RGBA"))
    actual = np.array(decode_to_image(qoi_path).convert("RGBA"))

    assert np.array_equal(expected, actual)
