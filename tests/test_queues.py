import pytest

from dsakit.queues import CircularQueue


def test_fifo_order():
    queue = CircularQueue(1000)
    items = [10, 20, 30, 40]
    for item in items:
        queue.enqueue(item)
    assert [queue.dequeue() for _ in items] == items


def test_front_and_rear_after_dequeue():
    queue = CircularQueue(1000)
    for item in (10, 20, 30, 40):
        queue.enqueue(item)
    queue.dequeue()
    assert queue.front() == 20
    assert queue.rear() == 40
    assert len(queue) == 3


def test_full_queue_raises():
    queue = CircularQueue(2)
    queue.enqueue("a")
    queue.enqueue("b")
    assert queue.is_full()
    with pytest.raises(OverflowError):
        queue.enqueue("c")
    assert len(queue) == 2


def test_empty_queue_raises():
    queue = CircularQueue(3)
    assert queue.is_empty()
    with pytest.raises(IndexError):
        queue.dequeue()
    with pytest.raises(IndexError):
        queue.front()
    with pytest.raises(IndexError):
        queue.rear()


def test_wraparound_preserves_order():
    queue = CircularQueue(3)
    for item in (1, 2, 3):
        queue.enqueue(item)
    assert queue.dequeue() == 1
    assert queue.dequeue() == 2
    queue.enqueue(4)
    queue.enqueue(5)
    assert queue.is_full()
    assert queue.rear() == 5
    assert [queue.dequeue() for _ in range(3)] == [3, 4, 5]
    assert queue.is_empty()


def test_capacity_property():
    assert CircularQueue(7).capacity == 7


def test_invalid_capacity():
    with pytest.raises(ValueError):
        CircularQueue(0)