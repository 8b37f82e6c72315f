"""
Byte buffer made of separately allocated slices.
"""
from typing import Iterator, List, Optional, Union

BytesLike = Union[bytes, bytearray, memoryview, str]


def as_bytes(data: BytesLike) -> bytes:
    """Copy bytes-like data (or UTF-8 encode text) into ``bytes``.

    Raises:
        TypeError: If data does not support the buffer protocol
    """
    if isinstance(data, str):
        return data.encode('utf-8')
    return memoryview(data).tobytes()


class Buffer:
    """Ordered sequence of byte slices.

    Slices are kept as added and never merged, so consumers must treat the
    buffer as the concatenation of ``slices()`` in order.
    """

    def __init__(self, data: Optional[BytesLike] = None):
        self._slices: List[bytes] = []
        if data is not None:
            self.add(data)

    def add(self, data: BytesLike) -> None:
        """Append a slice to the end of the buffer. Empty data is ignored."""
        chunk = as_bytes(data)
        if chunk:
            self._slices.append(chunk)

    def prepend(self, data: BytesLike) -> None:
        """Insert a slice at the front of the buffer."""
        chunk = as_bytes(data)
        if chunk:
            self._slices.insert(0, chunk)

    def slices(self) -> Iterator[bytes]:
        return iter(self._slices)

    def slice_count(self) -> int:
        return len(self._slices)

    def to_bytes(self) -> bytes:
        return b"".join(self._slices)

    def __len__(self) -> int:
        return sum(len(s) for s in self._slices)

    def __repr__(self) -> str:
        return f"Buffer(length={len(self)}, slices={len(self._slices)})"
