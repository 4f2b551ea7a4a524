"""A last-in, first-out stack backed by a dynamic array."""

from __future__ import annotations

from typing import TypeVar

from dsakit.abstract import Stack

T = TypeVar("T")


class EmptyStackError(IndexError):
    """Raised when reading from or popping an empty stack."""


class ArrayList(Stack[T]):
    """Stack whose elements live in a Python list, top at the end."""

    def __init__(self) -> None:
        self.data: list[T] = []

    def push(self, data: T) -> None:
        """Put an element on top of the stack."""
        self.data.append(data)

    def pop(self) -> T:
        """Remove and return the top element."""
        if not self.data:
            raise EmptyStackError("Failed to pop from empty ArrayList.")
        return self.data.pop()

    def top(self) -> T:
        """Return the top element without removing it."""
        if not self.data:
            raise EmptyStackError("ArrayList is empty.")
        return self.data[-1]

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"ArrayList({self.data!r})"