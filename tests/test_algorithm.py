import pytest

from ftlab.algorithm import equal, lexicographical_compare


def test_equal_same_sequences():
    assert equal([1, 2, 3], [1, 2, 3]) is True


def test_equal_ignores_extra_tail_of_second():
    assert equal([1, 2], [1, 2, 99]) is True


def test_equal_second_too_short():
    assert equal([1, 2, 3], [1, 2]) is False


def test_equal_detects_difference():
    assert equal("abc", "abd") is False


def test_equal_with_predicate():
    assert equal(["A", "b"], ["a", "B"], lambda x, y: x.lower() == y.lower()) is True
    assert equal(["A", "c"], ["a", "B"], lambda x, y: x.lower() == y.lower()) is False


def test_equal_empty_first():
    assert equal([], [5, 6]) is True


@pytest.mark.parametrize(
    "left, right",
    [
        ([1, 2], [1, 3]),
        ([1, 3], [1, 2]),
        ([1, 2], [1, 2]),
        ([1], [1, 2]),
        ([1, 2], [1]),
        ([], []),
        ([], [0]),
        ([0], []),
        ([5, 0, 0], [4, 9, 9]),
    ],
)
def test_lexicographical_matches_list_ordering(left, right):
    assert lexicographical_compare(left, right) == (left < right)


def test_lexicographical_with_custom_less():
    greater = lambda a, b: a > b  # noqa: E731
    assert lexicographical_compare([3, 1], [2, 9], greater) is True
    assert lexicographical_compare([2, 9], [3, 1], greater) is False


def test_lexicographical_accepts_iterators():
    assert lexicographical_compare(iter("abc"), iter("abd")) is True