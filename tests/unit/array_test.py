from pytest import fixture, mark, raises
from arraymap import DynamicArray, DEFAULT_CAPACITY


@fixture
def arr():
    a = DynamicArray()
    for v in (1, 2, 3):
        a.add(v)
    return a


def test_empty_array():
    a = DynamicArray()
    assert a.is_empty()
    assert a.size() == 0
    assert not a
    assert a.capacity == DEFAULT_CAPACITY
    with raises(IndexError):
        a.get(3)


@mark.parametrize("capacity", [0, -1, -10])
def test_non_positive_capacity_rejected(capacity):
    with raises(ValueError, match="Illegal capacity"):
        DynamicArray(capacity)


def test_non_int_capacity_rejected():
    with raises(TypeError):
        DynamicArray(2.5)


def test_add_and_insert(arr):
    assert arr.size() == 3
    assert not arr.is_empty()
    arr.insert(0, 4)
    assert arr.get(0) == 4
    assert arr.to_array() == [4, 1, 2, 3]


def test_insert_middle_and_end(arr):
    arr.insert(1, 9)
    arr.insert(4, 7)
    assert arr.to_array() == [1, 9, 2, 3, 7]


@mark.parametrize("index", [-1, 4, 100])
def test_insert_out_of_range(arr, index):
    with raises(IndexError):
        arr.insert(index, 0)
    assert arr.to_array() == [1, 2, 3]


def test_insert_into_full_buffer_doubles():
    a = DynamicArray(2)
    a.add("a")
    a.add("c")
    assert a.capacity == 2
    a.insert(1, "b")
    assert a.capacity == 4
    assert a.to_array() == ["a", "b", "c"]


def test_append_growth_doubles():
    a = DynamicArray(1)
    seen = []
    for i in range(9):
        a.add(i)
        seen.append(a.capacity)
    assert seen == [1, 2, 4, 4, 8, 8, 8, 8, 16]


def test_add_all(arr):
    other = DynamicArray(items=[4, 5, 6])
    assert arr.add_all(other)
    assert arr.size() == 6
    assert arr.get(0) == 1
    assert arr.get(5) == 6


def test_add_all_self():
    a = DynamicArray(items=[1, 2])
    a.add_all(a)
    assert a.to_array() == [1, 2, 1, 2]


def test_contains(arr):
    assert arr.contains(3)
    assert 2 in arr
    assert not arr.contains(4)


def test_set_returns_new_value(arr):
    assert arr.set(1, 7) == 7
    assert arr.get(1) == 7
    assert arr.get(1) != 2


def test_set_out_of_range(arr):
    with raises(IndexError):
        arr.set(3, 0)


def test_remove(arr):
    assert arr.remove(2)
    assert arr.size() == 2
    assert arr.remove_at(1) == 3
    assert arr.size() == 1
    assert arr.get(0) == 1
    assert not arr.remove(42)


def test_remove_first_match_only():
    a = DynamicArray(items=[5, 1, 5])
    a.remove(5)
    assert a.to_array() == [1, 5]


@mark.parametrize("index", [-1, 3])
def test_remove_at_out_of_range(arr, index):
    with raises(IndexError):
        arr.remove_at(index)
    assert arr.size() == 3


def test_remove_all(arr):
    assert arr.remove_all(DynamicArray(items=[2, 3]))
    assert arr.size() == 1
    assert arr.get(0) == 1
    with raises(IndexError):
        arr.get(2)


def test_remove_all_one_occurrence_per_element():
    a = DynamicArray(items=[2, 1, 2, 2])
    a.remove_all([2])
    assert a.to_array() == [1, 2, 2]
    a.remove_all([2, 2])
    assert a.to_array() == [1]


def test_retain_all(arr):
    assert arr.retain_all(DynamicArray(items=[2, 3]))
    assert arr.size() == 2
    assert arr.get(0) == 2
    assert arr.get(1) == 3
    with raises(IndexError):
        arr.get(2)


def test_retain_all_adjacent_removals():
    a = DynamicArray(items=[1, 5, 6, 2, 6])
    a.retain_all([2])
    assert a.to_array() == [2]


def test_clear_resets_capacity(arr):
    arr.clear()
    assert arr.size() == 0
    assert arr.is_empty()
    assert arr.capacity == 1
    arr.add(8)
    arr.add(9)
    assert arr.to_array() == [8, 9]


def test_size_tracks_adds_and_removes():
    a = DynamicArray(3)
    expected = 0
    for i in range(50):
        a.add(i)
        expected += 1
        if i % 3 == 0:
            a.remove_at(0)
            expected -= 1
        assert a.size() == expected
        assert a.capacity >= a.size()


def test_to_array_is_a_copy(arr):
    out = arr.to_array()
    out.append(4)
    assert arr.to_array() == [1, 2, 3]


def test_python_protocol(arr):
    assert len(arr) == 3
    assert arr[2] == 3
    assert list(arr) == [1, 2, 3]
    assert arr == DynamicArray(items=[1, 2, 3])
    assert repr(arr) == "DynamicArray([1, 2, 3])"
