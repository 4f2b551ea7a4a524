"""Abstract interfaces for stacks, queues and double-ended queues."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Stack(ABC, Generic[T]):
    """A last-in, first-out collection."""

    @abstractmethod
    def push(self, element: T) -> None:
        """Put an element on top of the stack."""

    @abstractmethod
    def pop(self) -> T:
        """Remove and return the top element; raise if the stack is empty."""

    @abstractmethod
    def top(self) -> T:
        """Return the top element without removing it; raise if empty."""


class Queue(ABC, Generic[T]):
    """A first-in, first-out collection."""

    @abstractmethod
    def enqueue(self, element: T) -> None:
        """Add an element at the back of the queue."""

    @abstractmethod
    def dequeue(self) -> T:
        """Remove and return the front element; raise if the queue is empty."""

    @abstractmethod
    def peek(self) -> T:
        """Return the front element without removing it; raise if empty."""


class Deque(ABC, Generic[T]):
    """A double-ended queue."""

    @abstractmethod
    def push_back(self, element: T) -> None:
        """Add an element at the back."""

    @abstractmethod
    def push_front(self, element: T) -> None:
        """Add an element at the front."""

    @abstractmethod
    def pop_back(self) -> T:
        """Remove and return the back element."""

    @abstractmethod
    def pop_front(self) -> T:
        """Remove and return the front element."""

    @abstractmethod
    def back(self) -> T:
        """Return the back element without removing it."""

    @abstractmethod
    def front(self) -> T:
        """Return the front element without removing it."""