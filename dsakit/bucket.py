"""A leaky bucket: a FIFO queue with many producers and one consumer.

The consumer's drop rate adapts to backpressure.
"""

from __future__ import annotations

import math
import threading
import time
from collections import deque
from dataclasses import dataclass
from datetime import timedelta
from typing import Deque, Generic, List, TypeVar

T = TypeVar("T")

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000


def _to_ns(duration: timedelta) -> int:
    micros = (duration.days * 86_400 + duration.seconds) * 1_000_000
    return (micros + duration.microseconds) * _NS_PER_US


def _to_ms(nanoseconds: int) -> int:
    """Whole milliseconds, truncated toward zero."""
    if nanoseconds >= 0:
        return nanoseconds // _NS_PER_MS
    return -((-nanoseconds) // _NS_PER_MS)


def _sleep_until(deadline_ns: int) -> None:
    remaining = deadline_ns - time.monotonic_ns()
    if remaining > 0:
        time.sleep(remaining / _NS_PER_S)


class BucketError(Exception):
    """Base class for all bucket errors."""


class MaxWaitError(BucketError, TimeoutError):
    """Raised when no drop arrived within the maximum wait time."""

    def __init__(self, message: str = "Max wait time exceeded: no packet dropped.") -> None:
        super().__init__(message)


class BucketFullError(BucketError):
    """Raised when adding to a bucket that is at capacity."""

    def __init__(self, message: str = "Bucket is full. Try again later.") -> None:
        super().__init__(message)


class BucketClosedError(BucketError):
    """Raised when the bucket is closed and no drops remain."""

    def __init__(self, message: str = "Bucket is closed. No more drops remain.") -> None:
        super().__init__(message)


class BucketConstraintError(BucketError, ValueError):
    """Raised when bucket options violate one or more constraints."""

    def __init__(self, *constraints: str) -> None:
        self.constraints = tuple(constraints)
        super().__init__("\n".join(f"Constraint violated: {c}" for c in self.constraints))


@dataclass(frozen=True)
class BucketOptions:
    """Settings for a :class:`Bucket`."""

    capacity: int
    low_latency: bool
    drop_bias: float
    drop_interval: timedelta
    min_drop_interval: timedelta
    max_drop_interval: timedelta
    max_wait_time: timedelta
    update_interval: timedelta


def _violations(opts: BucketOptions) -> List[str]:
    drop = _to_ms(_to_ns(opts.drop_interval))
    low = _to_ms(_to_ns(opts.min_drop_interval))
    high = _to_ms(_to_ns(opts.max_drop_interval))
    found = []
    if opts.capacity <= 0:
        found.append(f"Capacity {opts.capacity} > 0")
    if opts.drop_bias <= 0 or opts.drop_bias > 1:
        found.append(f"0 < Drop Bias {opts.drop_bias:.2f} <= 1")
    if opts.drop_interval < opts.min_drop_interval:
        found.append(f"Drop Interval {drop} > Minimum {low}")
    if opts.drop_interval > opts.max_drop_interval:
        found.append(f"Drop Interval {drop} < Maximum {high}")
    if opts.update_interval <= opts.max_drop_interval:
        update = _to_ms(_to_ns(opts.update_interval))
        found.append(f"Update Interval {update} > Max Drop Interval {high}")
    if opts.max_wait_time <= opts.max_drop_interval:
        wait = _to_ms(_to_ns(opts.max_wait_time))
        found.append(f"Max Wait Time {wait} > Max Drop Interval {high}")
    return found


class Bucket(Generic[T]):
    """A leaky bucket with adaptive rate smoothing to handle backpressure.

    Any number of producers may call :meth:`add_drop` and :meth:`close`;
    a single consumer calls :meth:`await_drop`, :meth:`drain` and
    :meth:`status`.
    """

    def __init__(self, options: BucketOptions) -> None:
        problems = _violations(options)
        if problems:
            raise BucketConstraintError(*problems)

        self._capacity = options.capacity
        self._low_latency = options.low_latency
        self._drop_bias = options.drop_bias
        self._drop_interval_ns = _to_ns(options.drop_interval)
        self._min_drop_interval_ns = _to_ns(options.min_drop_interval)
        self._max_drop_interval_ns = _to_ns(options.max_drop_interval)
        self._max_wait_ns = _to_ns(options.max_wait_time)
        self._update_interval_ns = _to_ns(options.update_interval)
        self._update_deadline = time.monotonic_ns() + self._update_interval_ns

        self._packets: Deque[T] = deque()
        self._closed = False
        self._cond = threading.Condition()
        self._packet_count = 0
        self._packet_max = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def drop_interval(self) -> timedelta:
        """Current time between drops."""
        return timedelta(microseconds=self._drop_interval_ns / _NS_PER_US)

    def __len__(self) -> int:
        with self._cond:
            return len(self._packets)

    def add_drop(self, packet: T) -> None:
        """Put a packet in the bucket; raise if it is full or closed."""
        with self._cond:
            if self._closed:
                raise BucketClosedError("Bucket is closed. No more drops can be added.")
            if len(self._packets) >= self._capacity:
                raise BucketFullError()
            self._packets.append(packet)
            self._packet_count += 1
            self._packet_max = max(self._packet_max, len(self._packets))
            self._cond.notify_all()

    def await_drop(self) -> T:
        """Block until the next drop is due and return it.

        Raises MaxWaitError if nothing arrives within the maximum wait
        time, and BucketClosedError once the bucket is closed and empty.
        """
        start = time.monotonic_ns()
        deadline = start + self._max_wait_ns
        drop_at = start + self._drop_interval_ns

        if drop_at > deadline:
            _sleep_until(deadline)
            raise MaxWaitError()
        _sleep_until(drop_at)

        with self._cond:
            while not self._packets and not self._closed:
                remaining = deadline - time.monotonic_ns()
                if remaining <= 0:
                    raise MaxWaitError()
                self._cond.wait(remaining / _NS_PER_S)
            if not self._packets:
                raise BucketClosedError()
            packet = self._packets.popleft()

            if time.monotonic_ns() >= self._update_deadline:
                self._adapt()

        return packet

    def _adapt(self) -> None:
        # Ratio of the largest burst to the capacity; zero means equilibrium.
        epsilon = 0.0
        if self._low_latency:
            epsilon = self._packet_max / self._capacity
            self._packet_max = 0

        packets_since_last = max(1, self._packet_count)
        self._packet_count = 0

        tau = self._update_interval_ns / packets_since_last
        interval = math.ceil(tau * (1 - epsilon) * self._drop_bias)
        self._drop_interval_ns = max(
            self._min_drop_interval_ns, min(self._max_drop_interval_ns, interval)
        )
        self._update_deadline = time.monotonic_ns() + self._update_interval_ns

    def close(self) -> None:
        """Stop accepting drops; the remaining ones can still be taken."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def drain(self) -> List[T]:
        """Wait for the bucket to close and return every remaining drop."""
        with self._cond:
            while not self._closed:
                self._cond.wait()
            remaining = list(self._packets)
            self._packets.clear()
            return remaining

    def status(self) -> str:
        """Return a short text report of the bucket's state."""
        with self._cond:
            size = len(self._packets)
            count = self._packet_count
            rate = _to_ms(self._drop_interval_ns)
        return (
            "Bucket Status:\n"
            f"\tCapacity:             ({size} / {self._capacity})\n"
            f"\tDrops Since Update:    {count}\n"
            f"\tCurrent Drop Rate(ms): {rate}\n"
        )