# dsakit

Small data structures for Python 3.10 and later. The package has no dependencies.

## What is included

| Module               | Contents                                                                 |
|----------------------|--------------------------------------------------------------------------|
| `dsakit.abstract`    | `Stack`, `Queue` and `Deque`, which are abstract base classes             |
| `dsakit.array_list`  | `ArrayList`, a LIFO stack kept in a Python list                           |
| `dsakit.stack_list`  | `StackList`, a LIFO stack made of linked `Node`s                          |
| `dsakit.bitset`      | `BitSet8`, `BitSet16`, `BitSet32` and `BitSet64`, fixed-width bit sets    |
| `dsakit.ring_buffer` | `RingBuffer`, a FIFO queue with a fixed capacity                          |
| `dsakit.bucket`      | `Bucket`, a thread-safe leaky-bucket queue whose drop rate adapts to load |

## Installation

```
pip install .
```

To install the test dependencies as well and run the tests:

```
pip install .[test]
pytest
```

## Usage

### Stacks

`ArrayList` and `StackList` both implement `dsakit.abstract.Stack`.

```python
from dsakit.array_list import ArrayList, EmptyStackError
from dsakit.stack_list import StackList, StackListEmptyError

stack = ArrayList()
for ch in "ABCD":
    stack.push(ch)

stack.top()   # 'D'
stack.pop()   # 'D'
len(stack)    # 3
stack.data    # ['A', 'B', 'C']

try:
    ArrayList().pop()
except EmptyStackError:
    ...
```

`StackList` has the same operations. Its top node is `stack.head`, which is a
`Node` with `data` and `next` fields. When you pop or call `top` on an empty
`StackList`, it raises `StackListEmptyError`. Both error classes derive from
`IndexError`.

### Ring buffer

`RingBuffer` implements `dsakit.abstract.Queue`.

```python
from dsakit.ring_buffer import RingBuffer, RingBufferFullError, RingBufferEmptyError

queue = RingBuffer(4)
for ch in "abcd":
    queue.enqueue(ch)         # the same as push_back

queue.is_full()               # True
queue.enqueue("e")            # raises RingBufferFullError
queue.push_back_over("e")     # drops the oldest element instead
queue.peek()                  # 'b' (the same as peek_front)
queue.dequeue()               # 'b' (the same as pop_front)
queue.render()                # one-line text view, starting at the front
queue.clear()
queue.is_empty()              # True
```

`RingBufferEmptyError` is raised when you read from an empty buffer. The
`capacity` property gives the number of slots. A negative capacity raises
`ValueError`.

`peek_back()` returns the slot under the back cursor, which is the next slot
to be written. When the buffer is full, that slot holds the front element.
Otherwise it holds an older value or `None`.

### Bit sets

```python
from dsakit.bitset import BitSet8

bits = BitSet8(0b00000000)
bits.set(7)
bits.get(7)         # True
int(bits)           # 128
bits.unset(7)
bits == BitSet8(0)  # True
bits == 0           # True
```

Bit indices run from 0 to 255, and an index outside that range raises
`ValueError`. An index in range but at or past the width of the set has no
effect: `set` and `unset` leave the value unchanged, and `get` returns
`False`. An initial value that does not fit the width also raises
`ValueError`. You cannot create the base class `BitSet` directly; use one of
the fixed-width subclasses.

### Adaptive leaky bucket

`Bucket` accepts drops from any number of producer threads. It hands them to a
single consumer, one at a time, at a controlled interval. Each time the update
interval passes, the bucket recomputes the drop interval from how many drops
came in. The result is scaled by `drop_bias`. When `low_latency` is set, it is
also shortened in proportion to the largest backlog seen. The new interval is
always kept between the minimum and the maximum.

```python
from datetime import timedelta
from dsakit.bucket import Bucket, BucketOptions, BucketClosedError, MaxWaitError

bucket = Bucket(BucketOptions(
    capacity=32,
    low_latency=False,
    drop_bias=1.0,
    drop_interval=timedelta(milliseconds=200),
    min_drop_interval=timedelta(milliseconds=100),
    max_drop_interval=timedelta(seconds=1),
    max_wait_time=timedelta(seconds=2),
    update_interval=timedelta(seconds=5),
))

# Producers, from any number of threads:
bucket.add_drop("hello")
bucket.close()                 # no more drops are accepted

# The single consumer:
try:
    packet = bucket.await_drop()
except MaxWaitError:
    ...                        # nothing arrived within max_wait_time
except BucketClosedError:
    leftovers = bucket.drain()

print(bucket.status())
```

The options must satisfy all of the following constraints:

- `capacity > 0`
- `0 < drop_bias <= 1`
- `min_drop_interval <= drop_interval <= max_drop_interval`
- `update_interval > max_drop_interval`
- `max_wait_time > max_drop_interval`

The constructor checks every constraint and raises a single
`BucketConstraintError` that lists all the ones that were broken. The list is
also available as its `constraints` attribute.

`add_drop` raises `BucketFullError` when the bucket is at capacity, and
`BucketClosedError` after `close()`. `await_drop` waits for the current drop
interval and then returns the next packet. It raises `MaxWaitError` if no
packet is ready before `max_wait_time` runs out. Once the bucket is closed and
empty, it raises `BucketClosedError`. `drain()` blocks until the bucket is
closed, then returns every packet that remains. The `drop_interval` property
and `status()` show the current rate.

All bucket errors derive from `BucketError`. In addition, `MaxWaitError` is a
`TimeoutError` and `BucketConstraintError` is a `ValueError`.

## What is not included

`dsakit.abstract.Deque` only defines an interface, and no class in the package
implements it. The package is a library only: it provides no command-line
tool.