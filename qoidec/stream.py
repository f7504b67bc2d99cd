import io
from typing import BinaryIO, Union

from .errors import TruncatedStreamError

ByteSource = Union[bytes, bytearray, memoryview, BinaryIO]


def as_stream(source: ByteSource) -> BinaryIO:
    """Return a readable binary stream for raw bytes, or the stream itself."""
    if hasattr(source, "read"):
        return source
    return io.BytesIO(source)


def read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise TruncatedStreamError(
            f"QOI: expected {size} bytes, stream ended after {len(data)}"
        )
    return data
