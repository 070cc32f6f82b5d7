import pytest

from dsakit.stacks import LinkedStack, QueueStack


@pytest.mark.parametrize("stack_type", [QueueStack, LinkedStack])
def test_lifo_order(stack_type):
    stack = stack_type()
    items = [10, 20, 30]
    for item in items:
        stack.push(item)
    assert [stack.pop() for _ in items] == items[::-1]
    assert len(stack) == 0


@pytest.mark.parametrize("stack_type", [QueueStack, LinkedStack])
def test_pop_empty_raises(stack_type):
    with pytest.raises(IndexError):
        stack_type().pop()


def test_queue_stack_top():
    stack = QueueStack()
    for item in (10, 20, 30):
        stack.push(item)
    assert stack.top() == 30
    stack.pop()
    assert stack.top() == 20
    assert len(stack) == 2


def test_queue_stack_top_empty_raises():
    with pytest.raises(IndexError):
        QueueStack().top()


def test_linked_stack_peek_and_iter():
    stack = LinkedStack()
    items = [7, 78, 15]
    for item in items:
        stack.push(item)
    assert stack.peek() == items[-1]
    assert list(stack) == items[::-1]
    assert len(stack) == len(items)


def test_linked_stack_after_pop():
    stack = LinkedStack()
    items = [7, 78, 15]
    for item in items:
        stack.push(item)
    assert stack.pop() == 15
    assert list(stack) == items[-2::-1]
    assert len(stack) == 2


def test_linked_stack_peek_empty_raises():
    with pytest.raises(IndexError):
        LinkedStack().peek()


@pytest.mark.parametrize("stack_type", [QueueStack, LinkedStack])
def test_interleaved_push_pop(stack_type):
    stack = stack_type()
    stack.push("a")
    stack.push("b")
    assert stack.pop() == "b"
    stack.push("c")
    assert stack.pop() == "c"
    assert stack.pop() == "a"
    assert len(stack) == 0