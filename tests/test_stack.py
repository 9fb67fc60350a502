import pytest
from hypothesis import given, strategies as st

from dsakit.stack import Stack, StackOverflowError, StackUnderflowError


def test_push_and_peek():
    stack = Stack(5)
    stack.push(10)
    stack.push(12)
    assert stack.peek() == 12
    assert len(stack) == 2
    assert not stack.is_empty()


def test_overflow_after_capacity():
    stack = Stack(5)
    for value in (10, 12, 19, 25, 10):
        stack.push(value)
    with pytest.raises(StackOverflowError):
        stack.push(20)
    assert stack.peek() == 10
    assert len(stack) == 5


def test_pop_returns_last_pushed():
    stack = Stack(3)
    stack.push(1)
    stack.push(2)
    assert stack.pop() == 2
    assert stack.pop() == 1
    assert stack.is_empty()


def test_pop_empty_raises():
    with pytest.raises(StackUnderflowError):
        Stack(2).pop()


def test_peek_empty_raises():
    with pytest.raises(StackUnderflowError):
        Stack(2).peek()


def test_zero_size_stack_overflows():
    with pytest.raises(StackOverflowError):
        Stack(0).push(1)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Stack(-1)


@given(st.lists(st.integers(), max_size=30))
def test_pop_reverses_push_order(values):
    stack = Stack(len(values))
    for value in values:
        stack.push(value)
    assert [stack.pop() for _ in values] == values[::-1]
    assert stack.is_empty()