import pytest

from ftlab.treeset import TreeSet


def test_insert_and_duplicates():
    s = TreeSet()
    assert s.insert(3) == (3, True)
    assert s.insert(3) == (3, False)
    assert len(s) == 1


def test_sorted_unique_iteration():
    values = [5, 1, 4, 1, 5, 9, 2, 6]
    s = TreeSet(values)
    assert list(s) == sorted(set(values))
    assert list(reversed(s)) == sorted(set(values), reverse=True)


def test_erase_counts():
    s = TreeSet(range(5))
    assert s.erase(2) == 1
    assert s.erase(2) == 0
    assert 2 not in s
    assert len(s) == 4


def test_count_and_find():
    s = TreeSet(["b", "a"])
    assert s.count("a") == 1
    assert s.count("z") == 0
    assert s.find("b") == "b"
    assert s.find("z") is None


def test_bounds():
    s = TreeSet([10, 20, 30])
    assert s.lower_bound(20) == 20
    assert s.upper_bound(20) == 30
    assert s.lower_bound(25) == 30
    assert s.upper_bound(30) is None
    assert s.equal_range(15) == (20, 20)


def test_clear_empty():
    s = TreeSet([1, 2])
    s.clear()
    assert s.empty()
    assert list(s) == []


def test_copy_independent_and_equal():
    s = TreeSet([1, 2, 3])
    c = s.copy()
    assert c == s
    c.insert(4)
    assert c != s
    assert list(s) == [1, 2, 3]


def test_swap():
    a = TreeSet([1])
    b = TreeSet([2, 3])
    a.swap(b)
    assert list(a) == [2, 3]
    assert list(b) == [1]


def test_custom_less():
    s = TreeSet([1, 3, 2], less=lambda x, y: x > y)
    assert list(s) == [3, 2, 1]
    assert s.key_comp()(2, 1)


@pytest.mark.parametrize(
    "left, right",
    [([1, 2], [1, 3]), ([1], [1, 2]), ([], [0])],
)
def test_ordering(left, right):
    a, b = TreeSet(left), TreeSet(right)
    assert a < b
    assert b > a
    assert a <= b and b >= a
    assert not (b < a)


def test_bulk_delete_keeps_sorted():
    s = TreeSet((k * 13) % 101 for k in range(101))
    for k in range(0, 101, 2):
        s.erase(k)
    values = list(s)
    assert values == sorted(values)
    assert all(v % 2 == 1 for v in values)
    assert len(values) == len(s)