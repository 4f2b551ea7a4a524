"""Fixed-width bit sets of 8, 16, 32 and 64 bits."""

from __future__ import annotations

from typing import ClassVar

_MAX_INDEX = 255


class BitSet:
    """A set of bit flags held in an unsigned integer of fixed width.

    Indices range over 0..255; setting, clearing or reading a bit at or
    beyond the width has no effect and reads as unset.
    """

    width: ClassVar[int] = 0

    def __init__(self, value: int = 0) -> None:
        if self.width <= 0:
            raise TypeError("BitSet must be used through a fixed-width subclass")
        if not 0 <= value < (1 << self.width):
            raise ValueError(f"value {value} does not fit in {self.width} bits")
        self._value = value

    def _bit(self, idx: int) -> int:
        if not 0 <= idx <= _MAX_INDEX:
            raise ValueError(f"bit index {idx} outside 0..{_MAX_INDEX}")
        return 1 << idx if idx < self.width else 0

    def set(self, idx: int) -> None:
        """Turn the bit at ``idx`` on."""
        self._value |= self._bit(idx)

    def unset(self, idx: int) -> None:
        """Turn the bit at ``idx`` off."""
        self._value &= ~self._bit(idx)

    def get(self, idx: int) -> bool:
        """Return whether the bit at ``idx`` is on."""
        return bool(self._value & self._bit(idx))

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BitSet):
            return type(self) is type(other) and self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(0b{self._value:0{self.width}b})"


class BitSet8(BitSet):
    """An 8-bit set."""

    width = 8


class BitSet16(BitSet):
    """A 16-bit set."""

    width = 16


class BitSet32(BitSet):
    """A 32-bit set."""

    width = 32


class BitSet64(BitSet):
    """A 64-bit set."""

    width = 64