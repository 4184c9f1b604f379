import pytest

from dsalgo.linked_list import LinkedList


def test_round_trip_and_length():
    items = [4, 8, 15, 16, 23, 42]
    linked = LinkedList(items)
    assert list(linked) == items
    assert len(linked) == len(items)


def test_empty_list():
    linked = LinkedList()
    assert list(linked) == []
    assert len(linked) == 0


def test_push_front_builds_in_reverse():
    linked = LinkedList()
    for value in range(1, 11):
        linked.push_front(value)
    assert list(linked) == list(range(10, 0, -1))


def test_append_adds_at_end():
    linked = LinkedList([1, 2])
    linked.append(3)
    assert list(linked) == [1, 2, 3]
    assert len(linked) == 3


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_insert_places_value_at_position(position):
    linked = LinkedList([10, 20, 30])
    linked.insert(99, position)
    values = list(linked)
    assert values[position - 1] == 99
    assert len(linked) == 4
    assert [v for v in values if v != 99] == [10, 20, 30]


@pytest.mark.parametrize("position", [0, -1, 5])
def test_insert_rejects_bad_position(position):
    linked = LinkedList([10, 20, 30])
    with pytest.raises(IndexError):
        linked.insert(99, position)


@pytest.mark.parametrize("position", [1, 2, 3])
def test_delete_returns_removed_value(position):
    items = [10, 20, 30]
    linked = LinkedList(items)
    assert linked.delete(position) == items[position - 1]
    assert list(linked) == items[: position - 1] + items[position:]
    assert len(linked) == 2


@pytest.mark.parametrize("position", [0, 4])
def test_delete_rejects_bad_position(position):
    linked = LinkedList([10, 20, 30])
    with pytest.raises(IndexError):
        linked.delete(position)


def test_insert_then_delete_restores_list():
    items = [3, 1, 4, 1, 5]
    linked = LinkedList(items)
    linked.insert(9, 3)
    linked.delete(3)
    assert list(linked) == items


def test_reverse():
    linked = LinkedList(range(1, 11))
    linked.reverse()
    assert list(linked) == list(range(10, 0, -1))
    linked.reverse()
    assert list(linked) == list(range(1, 11))


def test_middle_of_odd_length():
    assert LinkedList([1, 2, 3, 4, 5]).middle() == 3


def test_middle_of_even_length_is_second_middle():
    assert LinkedList([1, 2, 3, 4]).middle() == 3


def test_middle_of_empty_list_raises():
    with pytest.raises(IndexError):
        LinkedList().middle()


@pytest.mark.parametrize(
    "items, expected",
    [
        ([1, 2, 2, 1], True),
        ([1, 2, 3, 2, 1], True),
        ([7], True),
        ([], True),
        ([1, 2, 3], False),
        ([1, 2], False),
    ],
)
def test_is_palindrome(items, expected):
    assert LinkedList(items).is_palindrome() is expected