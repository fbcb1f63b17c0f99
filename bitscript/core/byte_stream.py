"""
Methods for deserializing byte streams

The ByteCursor is used by the script decoders. The stream helpers are used by the transaction decoder.
"""
from io import BytesIO
from typing import Union, Optional

from bitscript.core.exceptions import ReadError, UnexpectedEOF

__all__ = ["SERIALIZED", "ByteCursor", "get_stream", "read_stream", "read_little_int"]

SERIALIZED = Union[bytes, BytesIO]


class ByteCursor:
    """
    A position-tracked, read-only view over script bytes.

    Reads either return exactly the requested number of bytes and advance, or raise UnexpectedEOF and leave the
    position where it was.
    """
    __slots__ = ("_data", "_pos")

    def __init__(self, data: bytes):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"Expected bytes but received: {type(data)}")
        self._data = bytes(data)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._data)

    def _check(self, n: int):
        if n < 0:
            raise ValueError(f"Cannot read a negative number of bytes: {n}")
        if n > self.remaining:
            raise UnexpectedEOF(n, self._pos, self.remaining)

    def read_exact(self, n: int) -> bytes:
        self._check(n)
        data = self._data[self._pos:self._pos + n]
        self._pos += n
        return data

    def read_byte(self) -> int:
        return self.read_exact(1)[0]

    def peek(self, n: int = 1) -> bytes:
        """Return the next n bytes without consuming them"""
        self._check(n)
        return self._data[self._pos:self._pos + n]

    def rewind_to(self, offset: int):
        """Move back to an offset already passed"""
        if not 0 <= offset <= self._pos:
            raise ValueError(f"Cannot rewind to offset {offset} from position {self._pos}")
        self._pos = offset

    def __len__(self):
        return len(self._data)

    def __repr__(self):
        return f"ByteCursor(position={self._pos}, length={len(self._data)})"


def get_stream(byte_stream: SERIALIZED) -> BytesIO:
    """Convert bytes or BytesIO to BytesIO stream"""
    if isinstance(byte_stream, bytes):
        return BytesIO(byte_stream)
    elif isinstance(byte_stream, BytesIO):
        return byte_stream
    else:
        raise TypeError(f"Expected bytes or BytesIO but received: {type(byte_stream)}")


def read_stream(stream: BytesIO, length: int, data_type: Optional[str] = None) -> bytes:
    """Read exact number of bytes from stream with error checking"""
    data = stream.read(length)

    # Verify data integrity
    if len(data) != length:
        if data_type:
            raise ReadError(f"Error reading stream. Insufficient data. Data type: {data_type}")
        else:
            raise ReadError("Error reading stream. Insufficient data.")

    return data


def read_little_int(stream: BytesIO, length: int, data_type: Optional[str] = None) -> int:
    """Read little-endian integer from stream"""
    return int.from_bytes(read_stream(stream, length, data_type), "little")
