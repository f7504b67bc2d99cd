import pytest

from qoidec.format import QOI_END_MARKER, QOI_HEADER, QOI_MAGIC


@pytest.fixture
def make_qoi():
    """Build a QOI byte string from header fields and a list of opcode bytes."""

    def build(width, height, ops, channels=4, colorspace=0, end_marker=True):
        data = QOI_HEADER.pack(QOI_MAGIC, width, height, channels, colorspace)
        data += bytes(ops)
        if end_marker:
            data += QOI_END_MARKER
        return data

    return build
