"""A fixed-capacity circular FIFO queue."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from dsakit.abstract import Queue

T = TypeVar("T")


class RingBufferFullError(Exception):
    """Raised when adding to a full ring buffer."""

    def __init__(self, message: str = "Ring buffer is full.") -> None:
        super().__init__(message)


class RingBufferEmptyError(IndexError):
    """Raised when reading from an empty ring buffer."""

    def __init__(self, message: str = "Ring buffer is empty.") -> None:
        super().__init__(message)


class RingBuffer(Queue[T], Generic[T]):
    """Circular buffer with a fixed number of slots."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity {capacity} must not be negative")
        self._data: list[Optional[T]] = [None] * capacity
        self._front = 0
        self._back = 0
        self._length = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return self._length == 0

    def is_full(self) -> bool:
        return self._length == len(self._data)

    def __len__(self) -> int:
        return self._length

    def _advance(self, cursor: int) -> int:
        return (cursor + 1) % len(self._data)

    def push_back(self, element: T) -> None:
        """Add an element at the back; raise if the buffer is full."""
        if self.is_full():
            raise RingBufferFullError()
        self._data[self._back] = element
        self._back = self._advance(self._back)
        self._length += 1

    def push_back_over(self, element: T) -> None:
        """Add an element at the back, discarding the front one if full."""
        if self.is_full():
            self._front = self._advance(self._front)
            self._length -= 1
        self._data[self._back] = element
        self._back = self._advance(self._back)
        self._length += 1

    def enqueue(self, element: T) -> None:
        self.push_back(element)

    def pop_front(self) -> T:
        """Remove and return the front element."""
        if self.is_empty():
            raise RingBufferEmptyError()
        result = self._data[self._front]
        self._front = self._advance(self._front)
        self._length -= 1
        return result  # type: ignore[return-value]

    def dequeue(self) -> T:
        return self.pop_front()

    def peek_front(self) -> T:
        """Return the front element without removing it."""
        if self.is_empty():
            raise RingBufferEmptyError()
        return self._data[self._front]  # type: ignore[return-value]

    def peek_back(self) -> Optional[T]:
        """Return the contents of the slot under the back cursor.

        The back cursor marks the next slot to be written, so this is the
        front element when the buffer is full and an older value otherwise.
        """
        if self.is_empty():
            raise RingBufferEmptyError()
        return self._data[self._back]

    def peek(self) -> T:
        return self.peek_front()

    def clear(self) -> None:
        """Forget all elements."""
        self._front = 0
        self._back = 0
        self._length = 0

    def render(self) -> str:
        """Return a one-line text picture of the buffer from its front."""
        parts = []
        if not self.is_empty():
            head = self._front
            while head != self._back:
                parts.append(f"{self._data[head]}->")
                head = self._advance(head)
            parts.append(str(self._data[self._back]))
        return "RingBuffer: " + "".join(parts) + "\n"