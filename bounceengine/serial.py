"""Big-endian integer packing and a simple length-prefixed table format."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import accumulate
from typing import Iterable

from .errors import OutOfBoundsError

WORD_SIZE = 2
DWORD_SIZE = 4
QWORD_SIZE = 8

_FIXED_HEADER = QWORD_SIZE + DWORD_SIZE


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def word_to_int(data: bytes) -> int:
    """Read up to the first 2 bytes as a big-endian unsigned integer."""
    return int.from_bytes(bytes(data[:WORD_SIZE]), "big")


def dword_to_int(data: bytes) -> int:
    """Read up to the first 4 bytes as a big-endian unsigned integer."""
    return int.from_bytes(bytes(data[:DWORD_SIZE]), "big")


def qword_to_int(data: bytes) -> int:
    """Read up to the first 8 bytes as a big-endian unsigned integer."""
    return int.from_bytes(bytes(data[:QWORD_SIZE]), "big")


def int_to_xword(n: int, size: int) -> bytes:
    """Encode the low `size` bytes of n, big-endian."""
    if size < 0:
        raise ValueError("size must not be negative")
    return (n & ((1 << (8 * size)) - 1)).to_bytes(size, "big")


@dataclass(frozen=True)
class Table:
    """A parsed table: total size, header size, element offsets and data."""

    size: int
    header_size: int
    indexes: tuple[int, ...]
    data: bytes

    def count_elements(self) -> int:
        return self.header_size // DWORD_SIZE

    def element(self, index: int) -> bytes:
        """Return the element at index from the data buffer."""
        count = self.count_elements()
        if not 0 <= index < count:
            raise OutOfBoundsError(f"table index {index} out of bounds for {count} elements")
        start = self.indexes[index]
        end = self.indexes[index + 1] if index + 1 < count else len(self.data)
        return self.data[start:end]

    def describe(self) -> str:
        """Human-readable summary of the table."""
        indexes = "".join(f"{i} " for i in self.indexes)
        return (
            f"Table infos: \nSize:{self.size}\nHeader size: {self.header_size}"
            f"\nList of indexes: [ {indexes}]\nData buffer:\n"
            f"{self.data.decode('utf-8', errors='replace')}"
        )


def parse_table(data: bytes) -> Table:
    """Parse a serialized table."""
    raw = bytes(data)
    if len(raw) < _FIXED_HEADER:
        raise ValueError("buffer too short for a table header")
    size = qword_to_int(raw[:QWORD_SIZE])
    header_size = dword_to_int(raw[QWORD_SIZE:_FIXED_HEADER])
    data_begin = _FIXED_HEADER + header_size
    if len(raw) < data_begin or len(raw) < size:
        raise ValueError("buffer shorter than the table it declares")
    count = header_size // DWORD_SIZE
    indexes = tuple(
        dword_to_int(raw[offset:offset + DWORD_SIZE])
        for offset in range(_FIXED_HEADER, _FIXED_HEADER + count * DWORD_SIZE, DWORD_SIZE)
    )
    return Table(size, header_size, indexes, raw[data_begin:size])


def create_table(elements: Iterable[bytes | str]) -> bytes:
    """Serialize already-serialized elements into a table."""
    chunks = [_as_bytes(element) for element in elements]
    offsets = list(accumulate((len(chunk) for chunk in chunks), initial=0))[:-1]
    payload = b"".join(chunks)
    header_size = len(chunks) * DWORD_SIZE
    size = _FIXED_HEADER + header_size + len(payload)
    return (
        int_to_xword(size, QWORD_SIZE)
        + int_to_xword(header_size, DWORD_SIZE)
        + b"".join(int_to_xword(offset, DWORD_SIZE) for offset in offsets)
        + payload
    )


def create_string(original: bytes | str) -> bytes:
    """Serialize a string with an 8-byte length prefix."""
    raw = _as_bytes(original)
    return int_to_xword(len(raw), QWORD_SIZE) + raw


def parse_string(buffer: bytes) -> bytes:
    """Parse a length-prefixed string; empty or oversized lengths are invalid."""
    raw = bytes(buffer)
    length = qword_to_int(raw[:QWORD_SIZE])
    if not length or length > len(raw):
        raise ValueError("Invalid given string.")
    return raw[QWORD_SIZE:QWORD_SIZE + length]