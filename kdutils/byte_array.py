"""A mutable sequence of bytes with slicing helpers and base64 support."""

from __future__ import annotations

import base64
from typing import Iterable, Union

BytesLike = Union["ByteArray", bytes, bytearray, memoryview, str, Iterable[int]]

_B64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"


def _build_inverse_table() -> dict[int, int]:
    table = {ord(ch): index for index, ch in enumerate(_B64_ALPHABET)}
    table[ord("+")] = table[ord("-")] = 62
    table[ord("/")] = table[ord("_")] = 63
    return table


_INVERSE_B64 = _build_inverse_table()
_PAD = ord("=")


def _to_bytes(data: BytesLike | None) -> bytes:
    if data is None:
        return b""
    if isinstance(data, ByteArray):
        return bytes(data._data)
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class ByteArray:
    """A growable byte buffer."""

    __slots__ = ("_data",)

    def __init__(self, data: BytesLike | None = b"") -> None:
        self._data = bytearray(_to_bytes(data))

    @classmethod
    def filled(cls, size: int, value: int = 0) -> ByteArray:
        """Return a buffer of ``size`` bytes all set to ``value``."""
        return cls(bytes([value]) * size)

    def mid(self, pos: int, length: int = 0) -> ByteArray:
        """Return ``length`` bytes starting at ``pos``; 0 means up to the end."""
        if pos >= len(self._data):
            return ByteArray()
        if length == 0:
            length = len(self._data) - pos
        return ByteArray(self._data[pos : pos + length])

    def left(self, count: int) -> ByteArray:
        """Return the first ``count`` bytes."""
        return ByteArray(self._data[:count])

    def remove(self, pos: int, length: int) -> ByteArray:
        """Remove ``length`` bytes starting at ``pos`` in place and return self."""
        if pos < len(self._data):
            del self._data[pos : pos + length]
        return self

    def clear(self) -> None:
        self._data.clear()

    def resize(self, size: int) -> None:
        """Truncate, or extend with zero bytes, to ``size`` bytes."""
        if size < len(self._data):
            del self._data[size:]
        else:
            self._data.extend(bytes(size - len(self._data)))

    def is_empty(self) -> bool:
        return not self._data

    def index_of(self, value: int) -> int:
        """Return the index of the first byte equal to ``value``, or -1."""
        return self._data.find(bytes([value]))

    def starts_with(self, other: BytesLike) -> bool:
        return self._data.startswith(_to_bytes(other))

    def ends_with(self, other: BytesLike) -> bool:
        return self._data.endswith(_to_bytes(other))

    def to_bytes(self) -> bytes:
        return bytes(self._data)

    def to_str(self) -> str:
        """Return the content as text; undecodable bytes survive a round trip."""
        return self._data.decode("utf-8", errors="surrogateescape")

    def to_base64(self) -> ByteArray:
        """Return the standard, padded base64 encoding."""
        return ByteArray(base64.b64encode(bytes(self._data)))

    @classmethod
    def from_base64(cls, encoded: BytesLike) -> ByteArray:
        """Decode base64 (standard or URL-safe alphabet).

        Decoding stops at the first padding or foreign character.
        """
        sextets = []
        for char in _to_bytes(encoded):
            if char == _PAD:
                break
            value = _INVERSE_B64.get(char)
            if value is None:
                break
            sextets.append(value)

        out = bytearray()
        for start in range(0, len(sextets), 4):
            group = sextets[start : start + 4]
            count = len(group)
            if count < 2:
                continue
            s0, s1, s2, s3 = group + [0] * (4 - count)
            decoded = (
                ((s0 << 2) + ((s1 & 0x30) >> 4)) & 0xFF,
                (((s1 & 0x0F) << 4) + ((s2 & 0x3C) >> 2)) & 0xFF,
                (((s2 & 0x03) << 6) + s3) & 0xFF,
            )
            out.extend(decoded[: count - 1])
        return cls(out)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return ByteArray(self._data[index])
        return self._data[index]

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ByteArray):
            return self._data == other._data
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._data == bytes(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: BytesLike) -> ByteArray:
        return ByteArray(self._data + _to_bytes(other))

    def __iadd__(self, other: BytesLike) -> ByteArray:
        self._data.extend(_to_bytes(other))
        return self

    def __repr__(self) -> str:
        return f"ByteArray({bytes(self._data)!r})"