"""A last-in, first-out stack backed by a singly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from dsakit.abstract import Stack

T = TypeVar("T")


class StackListEmptyError(IndexError):
    """Raised when reading from or popping an empty linked stack."""


@dataclass
class Node(Generic[T]):
    """A link in the stack: a value and the node below it."""

    data: T
    next: Optional[Node[T]] = None


class StackList(Stack[T]):
    """Stack whose elements are chained nodes, head on top."""

    def __init__(self) -> None:
        self.head: Optional[Node[T]] = None
        self._size = 0

    def push(self, data: T) -> None:
        """Put an element on top of the stack."""
        self.head = Node(data, self.head)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top element."""
        if self.head is None:
            raise StackListEmptyError("Failed to pop from empty StackList.")
        node = self.head
        self.head = node.next
        self._size -= 1
        return node.data

    def top(self) -> T:
        """Return the top element without removing it."""
        if self.head is None:
            raise StackListEmptyError("StackList is empty.")
        return self.head.data

    def __len__(self) -> int:
        return self._size