import pytest
from hypothesis import given, strategies as st

from dsakit.circular_queue import CircularQueue, QueueEmptyError, QueueFullError


def test_new_queue_is_empty():
    queue = CircularQueue(3)
    assert queue.is_empty()
    assert not queue.is_full()
    assert len(queue) == 0


def test_fifo_order():
    queue = CircularQueue(5)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert [queue.dequeue() for _ in range(3)] == [1, 2, 3]
    assert queue.is_empty()


def test_full_queue_rejects_element():
    queue = CircularQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(3)
    assert list(queue) == [1, 2]


def test_empty_queue_dequeue_raises():
    queue = CircularQueue(2)
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_demo_sequence_wraps_around():
    queue = CircularQueue(5)
    for value in (1, 2, 3, 4, 5):
        queue.enqueue(value)
    assert queue.display() == "1 2 3 4 5"
    queue.dequeue()
    queue.enqueue(4)
    assert queue.display() == "2 3 4 5 4"
    for _ in range(4):
        queue.dequeue()
    assert queue.display() == "4"


def test_display_empty():
    assert CircularQueue(1).display() == "queue is empty"


@pytest.mark.parametrize("capacity", [0, -1])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        CircularQueue(capacity)


@given(st.lists(st.integers(), min_size=1, max_size=20))
def test_roundtrip_preserves_order(values):
    queue = CircularQueue(len(values))
    for value in values:
        queue.enqueue(value)
    assert queue.is_full()
    assert len(queue) == len(values)
    assert [queue.dequeue() for _ in values] == values