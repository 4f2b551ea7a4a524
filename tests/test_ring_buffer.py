import pytest

from dsakit.ring_buffer import RingBuffer, RingBufferEmptyError, RingBufferFullError


def test_new_buffer_is_empty():
    queue = RingBuffer(32)
    assert queue.is_empty() is True
    assert queue.is_full() is False
    assert len(queue) == 0


def test_enqueue_dequeue():
    queue = RingBuffer(4)
    items = ["a", "b", "c", "d"]

    for r in items:
        queue.enqueue(r)
    assert queue.is_full() is True

    with pytest.raises(RingBufferFullError):
        queue.enqueue("e")

    for r in items:
        assert queue.dequeue() == r

    with pytest.raises(RingBufferEmptyError):
        queue.dequeue()


def test_wraparound_keeps_fifo_order():
    queue = RingBuffer(3)
    queue.push_back(1)
    queue.push_back(2)
    assert queue.pop_front() == 1
    queue.push_back(3)
    queue.push_back(4)
    assert [queue.pop_front() for _ in range(3)] == [2, 3, 4]


def test_push_back_over_discards_oldest():
    queue = RingBuffer(3)
    for value in range(1, 6):
        queue.push_back_over(value)
    assert len(queue) == 3
    assert [queue.pop_front() for _ in range(3)] == [3, 4, 5]


def test_peek_does_not_remove():
    queue = RingBuffer(2)
    queue.push_back("x")
    queue.push_back("y")
    assert queue.peek() == "x"
    assert queue.peek_front() == "x"
    assert len(queue) == 2


def test_peek_back_on_full_buffer_reads_front_slot():
    queue = RingBuffer(2)
    queue.push_back(1)
    queue.push_back(2)
    assert queue.peek_back() == 1


def test_peeks_on_empty_raise():
    queue = RingBuffer(2)
    with pytest.raises(RingBufferEmptyError):
        queue.peek()
    with pytest.raises(RingBufferEmptyError):
        queue.peek_back()


def test_clear_empties_buffer():
    queue = RingBuffer(2)
    queue.push_back(1)
    queue.push_back(2)
    queue.clear()
    assert queue.is_empty() is True
    queue.push_back(7)
    assert queue.pop_front() == 7


def test_render_empty():
    assert RingBuffer(4).render() == "RingBuffer: \n"


def test_render_lists_from_front():
    queue = RingBuffer(4)
    queue.push_back(1)
    queue.push_back(2)
    text = queue.render()
    assert text.startswith("RingBuffer: 1->2->")
    assert text.endswith("\n")


def test_error_messages():
    assert str(RingBufferFullError()) == "Ring buffer is full."
    assert str(RingBufferEmptyError()) == "Ring buffer is empty."


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        RingBuffer(-1)