import pytest

from arboles.containers import BoundedList, BoundedQueue, ContainerFullError
from arboles.nodes import Element


def keys_of(container):
    return [item.key for item in container]


def make_list(keys, capacity=100):
    result = BoundedList(capacity)
    for key in keys:
        result.append(Element(key))
    return result


def test_new_list_is_empty():
    lst = BoundedList()
    assert lst.is_empty()
    assert len(lst) == 0
    assert not lst.is_full()


def test_append_keeps_order():
    lst = make_list([5, 3, 9])
    assert keys_of(lst) == [5, 3, 9]
    assert len(lst) == 3


def test_default_capacity_is_100():
    lst = make_list(range(100))
    assert lst.is_full()
    with pytest.raises(ContainerFullError):
        lst.append(Element(100))


def test_append_when_full_raises():
    lst = make_list([1, 2], capacity=2)
    with pytest.raises(ContainerFullError):
        lst.append(Element(3))
    assert keys_of(lst) == [1, 2]


def test_remove_key_removes_all_occurrences():
    lst = make_list([4, 1, 4, 2, 4])
    assert lst.remove_key(4) is True
    assert keys_of(lst) == [1, 2]


def test_remove_key_missing_returns_false():
    lst = make_list([1, 2])
    assert lst.remove_key(7) is False
    assert keys_of(lst) == [1, 2]


def test_remove_key_on_empty_list():
    assert BoundedList().remove_key(1) is False


def test_find_returns_first_match():
    first = Element(3, "a")
    second = Element(3, "b")
    lst = BoundedList()
    lst.append(first)
    lst.append(second)
    assert lst.find(3) is first
    assert lst.find(8) is None


def test_insert_at_front_and_middle():
    lst = make_list([1, 2, 3])
    assert lst.insert(Element(10), 1) is True
    assert lst.insert(Element(20), 3) is True
    assert keys_of(lst) == [10, 1, 20, 2, 3]


def test_insert_past_end_appends_and_returns_false():
    lst = make_list([1, 2])
    assert lst.insert(Element(9), 5) is False
    assert keys_of(lst) == [1, 2, 9]


def test_insert_when_full_raises():
    lst = make_list([1], capacity=1)
    with pytest.raises(ContainerFullError):
        lst.insert(Element(2), 1)


def test_insert_invalid_position_raises():
    lst = make_list([1])
    with pytest.raises(IndexError):
        lst.insert(Element(2), 0)


def test_delete_at_returns_removed_element():
    lst = make_list([7, 8, 9])
    removed = lst.delete_at(2)
    assert removed.key == 8
    assert keys_of(lst) == [7, 9]


@pytest.mark.parametrize("position", [0, 4, -1])
def test_delete_at_out_of_range_raises(position):
    lst = make_list([7, 8, 9])
    with pytest.raises(IndexError):
        lst.delete_at(position)
    assert len(lst) == 3


def test_get_by_position():
    lst = make_list([7, 8, 9])
    assert [lst.get(p).key for p in (1, 2, 3)] == [7, 8, 9]
    with pytest.raises(IndexError):
        lst.get(4)


def test_render_matches_shown_format():
    assert make_list([1, 22, 3]).render() == "Contenido de la lista: 1 22 3 "
    assert BoundedList().render() == "Contenido de la lista: "


def test_iteration_is_a_snapshot():
    lst = make_list([1, 2, 3])
    seen = []
    for item in lst:
        seen.append(item.key)
        lst.remove_key(item.key)
    assert seen == [1, 2, 3]
    assert lst.is_empty()


def test_queue_is_fifo():
    queue = BoundedQueue()
    for key in (4, 5, 6):
        queue.enqueue(Element(key))
    assert [queue.dequeue().key for _ in range(3)] == [4, 5, 6]
    assert queue.is_empty()


def test_queue_peek_does_not_remove():
    queue = BoundedQueue()
    queue.enqueue(Element(1))
    queue.enqueue(Element(2))
    assert queue.peek().key == 1
    assert len(queue) == 2


def test_queue_empty_errors():
    queue = BoundedQueue()
    with pytest.raises(IndexError):
        queue.dequeue()
    with pytest.raises(IndexError):
        queue.peek()


def test_queue_capacity():
    queue = BoundedQueue(capacity=2)
    queue.enqueue(Element(1))
    queue.enqueue(Element(2))
    assert queue.is_full()
    with pytest.raises(ContainerFullError):
        queue.enqueue(Element(3))
    queue.dequeue()
    assert not queue.is_full()


def test_queue_default_capacity_is_100():
    queue = BoundedQueue()
    for key in range(100):
        queue.enqueue(Element(key))
    assert queue.is_full()


def test_queue_iteration_leaves_queue_intact():
    queue = BoundedQueue()
    for key in (3, 1, 2):
        queue.enqueue(Element(key))
    assert keys_of(queue) == [3, 1, 2]
    assert len(queue) == 3
    assert queue.dequeue().key == 3