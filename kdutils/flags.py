"""A set of bit flags built from the members of an integer enumeration."""

from __future__ import annotations

from typing import Union

FlagLike = Union["Flags", int]


class Flags:
    """Holds a combination of flag values and supports bitwise operations on them."""

    __slots__ = ("_value",)

    def __init__(self, flag: int = 0) -> None:
        self._value = int(flag)

    @classmethod
    def from_int(cls, value: int) -> Flags:
        """Build a set of flags from its raw integer representation."""
        flags = cls()
        flags._value = int(value)
        return flags

    def to_int(self) -> int:
        """Return the raw integer representation."""
        return self._value

    def test_flag(self, flag: int) -> bool:
        """Return True if every bit of ``flag`` is set.

        A zero flag only matches an empty set.
        """
        bits = int(flag)
        return (self._value & bits) == bits and (bits != 0 or self._value == bits)

    def set_flag(self, flag: int, enabled: bool = True) -> Flags:
        """Set or clear ``flag`` in place and return self."""
        if enabled:
            self._value |= int(flag)
        else:
            self._value &= ~int(flag)
        return self

    @staticmethod
    def _bits(other: object) -> int | None:
        if isinstance(other, Flags):
            return other._value
        if isinstance(other, int):
            return int(other)
        return None

    def __bool__(self) -> bool:
        return self._value != 0

    def __and__(self, other: FlagLike) -> Flags:
        bits = self._bits(other)
        if bits is None:
            return NotImplemented
        return Flags.from_int(self._value & bits)

    __rand__ = __and__

    def __or__(self, other: FlagLike) -> Flags:
        bits = self._bits(other)
        if bits is None:
            return NotImplemented
        return Flags.from_int(self._value | bits)

    __ror__ = __or__

    def __xor__(self, other: FlagLike) -> Flags:
        bits = self._bits(other)
        if bits is None:
            return NotImplemented
        return Flags.from_int(self._value ^ bits)

    __rxor__ = __xor__

    def __iand__(self, other: FlagLike) -> Flags:
        bits = self._bits(other)
        if bits is None:
            return NotImplemented
        self._value &= bits
        return self

    def __ior__(self, other: FlagLike) -> Flags:
        bits = self._bits(other)
        if bits is None:
            return NotImplemented
        self._value |= bits
        return self

    def __ixor__(self, other: FlagLike) -> Flags:
        bits = self._bits(other)
        if bits is None:
            return NotImplemented
        self._value ^= bits
        return self

    def __invert__(self) -> Flags:
        return Flags.from_int(~self._value)

    def __eq__(self, other: object) -> bool:
        bits = self._bits(other)
        if bits is None:
            return NotImplemented
        return self._value == bits

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Flags({self._value:#x})"