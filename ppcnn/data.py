"""Containers of data items that can be written to and read from binary streams."""

from __future__ import annotations

import io
import struct
from abc import ABC, abstractmethod
from typing import BinaryIO, Generic, TypeVar

from .utility import FileError, file_exist

__all__ = ["EmptyDataError", "BasicData", "PlainData"]

T = TypeVar("T")

_COUNT = struct.Struct("=Q")


class EmptyDataError(RuntimeError):
    """Raised when data is requested from an empty container."""


class BasicData(ABC, Generic[T]):
    """A list of items with binary save and load."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def clear(self) -> None:
        self._items.clear()

    @abstractmethod
    def save(self, stream: BinaryIO) -> int:
        """Write the items to a binary stream and return the bytes written."""

    @abstractmethod
    def load(self, stream: BinaryIO) -> int:
        """Replace the items with those read from a binary stream; return bytes read."""

    def save_to_file(self, filepath: str) -> None:
        with open(filepath, "wb") as stream:
            self.save(stream)

    def load_from_file(self, filepath: str) -> None:
        if not file_exist(filepath):
            raise FileError(f"File not found. ({filepath})")
        with open(filepath, "rb") as stream:
            self.load(stream)

    def data(self) -> T:
        """Return the first item."""
        if not self._items:
            raise EmptyDataError("Data is empty.")
        return self._items[0]

    def vdata(self) -> list[T]:
        """Return the list of items itself."""
        if not self._items:
            raise EmptyDataError("Data is empty.")
        return self._items

    def stream_size(self) -> int:
        """Return how many bytes save would write."""
        buffer = io.BytesIO()
        self.save(buffer)
        return len(buffer.getvalue())


class PlainData(BasicData[T]):
    """Fixed-size plain values stored as a count followed by raw native values.

    fmt is a struct format code for one value, such as 'q', 'i' or 'd'.
    """

    def __init__(self, fmt: str = "q") -> None:
        super().__init__()
        try:
            self._item = struct.Struct("=" + fmt)
        except struct.error as exc:
            raise ValueError(f"invalid value format: {fmt!r}") from exc
        if len(self._item.unpack(bytes(self._item.size))) != 1:
            raise ValueError(f"format must describe a single value: {fmt!r}")

    def save(self, stream: BinaryIO) -> int:
        """Write count and values; an empty container writes nothing."""
        if not self._items:
            return 0
        payload = _COUNT.pack(len(self._items)) + b"".join(
            self._item.pack(item) for item in self._items
        )
        stream.write(payload)
        return len(payload)

    def load(self, stream: BinaryIO) -> int:
        header = _read_exact(stream, _COUNT.size)
        (count,) = _COUNT.unpack(header)
        body = _read_exact(stream, count * self._item.size)
        self.clear()
        self._items.extend(value for (value,) in self._item.iter_unpack(body))
        return len(header) + len(body)


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    chunk = stream.read(size)
    if len(chunk) != size:
        raise ValueError(f"stream ended after {len(chunk)} of {size} bytes")
    return chunk