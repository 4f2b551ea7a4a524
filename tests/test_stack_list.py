import pytest

from dsakit.stack_list import StackList, StackListEmptyError


def test_new_stack_list_is_empty():
    stack = StackList()
    assert stack.head is None
    assert len(stack) == 0


def test_push_links_nodes():
    stack = StackList()
    stack.push("A")
    assert stack.head is not None
    assert stack.head.data == "A"

    stack.push("B")
    assert stack.head.data == "B"
    assert stack.head.next.data == "A"
    assert stack.head.next.next is None


def test_pop():
    stack = StackList()
    for r in "ABCD":
        stack.push(r)

    for expected in "DCBA":
        assert stack.pop() == expected

    with pytest.raises(StackListEmptyError):
        stack.pop()


def test_top():
    stack = StackList()
    with pytest.raises(StackListEmptyError):
        stack.top()

    for r in "ABCD":
        stack.push(r)

    assert stack.top() == "D"
    assert len(stack) == 4


def test_len():
    stack = StackList()
    assert len(stack) == 0

    for r in "ABCD":
        stack.push(r)
    stack.pop()

    assert len(stack) == 3


def test_empty_messages():
    stack = StackList()
    with pytest.raises(IndexError, match="Failed to pop from empty StackList."):
        stack.pop()
    with pytest.raises(IndexError, match="StackList is empty."):
        stack.top()