"""A growable sequence that keeps track of its reserved capacity."""

from __future__ import annotations

import sys
from typing import Any, Generic, Iterable, Iterator, List, TypeVar

from ftlab.algorithm import equal, lexicographical_compare

T = TypeVar("T")

_OUT_OF_RANGE = "input val out of range"
_TOO_LARGE = "can't allocate more than max size"


class Vector(Generic[T]):
    """Sequence with explicit capacity management and ordered comparison."""

    __slots__ = ("_items", "_capacity")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self._items: List[T] = list(iterable)
        self._capacity = len(self._items)

    @classmethod
    def filled(cls, n: int, value: Any = None) -> "Vector":
        """Build a vector of ``n`` copies of ``value``."""
        vec = cls()
        vec.reserve(n)
        vec._items = [value] * n
        return vec

    def __copy__(self) -> "Vector":
        dup = type(self)(self._items)
        dup._capacity = self._capacity
        return dup

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    # capacity

    def capacity(self) -> int:
        return self._capacity

    def max_size(self) -> int:
        return sys.maxsize

    def empty(self) -> bool:
        return not self._items

    def reserve(self, n: int) -> None:
        """Grow the capacity to at least ``n``; never shrinks it."""
        if n < 0 or n > self.max_size():
            raise ValueError(_TOO_LARGE)
        if n > self._capacity:
            self._capacity = n

    def resize(self, n: int, value: Any = None) -> None:
        """Truncate or extend with ``value`` to exactly ``n`` elements."""
        if n < 0:
            raise ValueError(_TOO_LARGE)
        size = len(self._items)
        if n == size:
            return
        if n > self._capacity:
            self.reserve(n)
        if n > size:
            self._items.extend([value] * (n - size))
        else:
            del self._items[n:]

    # element access

    def at(self, index: int) -> T:
        if not 0 <= index < len(self._items):
            raise IndexError(_OUT_OF_RANGE)
        return self._items[index]

    def front(self) -> T:
        if not self._items:
            raise IndexError("front of empty vector")
        return self._items[0]

    def back(self) -> T:
        if not self._items:
            raise IndexError("back of empty vector")
        return self._items[-1]

    # modifiers

    def push_back(self, value: T) -> None:
        if len(self._items) + 1 > self._capacity:
            self.reserve((self._capacity + 1) * 2)
        self._items.append(value)

    def pop_back(self) -> None:
        """Drop the last element; does nothing on an empty vector."""
        if self._items:
            self._items.pop()

    def assign(self, iterable: Iterable[T]) -> None:
        items = list(iterable)
        if len(items) > self._capacity:
            self.reserve(len(items))
        self._items = items

    def assign_fill(self, n: int, value: T) -> None:
        if n < 0:
            raise ValueError(_TOO_LARGE)
        if n > self._capacity:
            self.reserve(n)
        self._items = [value] * n

    def _check_position(self, position: int) -> None:
        if not 0 <= position <= len(self._items):
            raise IndexError(_OUT_OF_RANGE)

    def _make_room(self, extra: int) -> None:
        if len(self._items) + extra > self._capacity:
            self.reserve(len(self._items) + extra)

    def insert(self, position: int, value: T) -> int:
        """Insert ``value`` before ``position``; return the position."""
        self._check_position(position)
        self._make_room(1)
        self._items.insert(position, value)
        return position

    def insert_fill(self, position: int, n: int, value: T) -> None:
        self._check_position(position)
        if n < 0:
            raise ValueError(_TOO_LARGE)
        self._make_room(n)
        self._items[position:position] = [value] * n

    def insert_range(self, position: int, iterable: Iterable[T]) -> None:
        self._check_position(position)
        items = list(iterable)
        self._make_room(len(items))
        self._items[position:position] = items

    def erase(self, position: int) -> int:
        """Remove the element at ``position``; return the position."""
        if not 0 <= position < len(self._items):
            raise IndexError(_OUT_OF_RANGE)
        del self._items[position]
        return position

    def erase_range(self, first: int, last: int) -> int:
        """Remove elements in ``[first, last)``; return ``first``."""
        if not 0 <= first <= last <= len(self._items):
            raise IndexError(_OUT_OF_RANGE)
        del self._items[first:last]
        return first

    def clear(self) -> None:
        """Remove every element, keeping the capacity."""
        self._items.clear()

    def swap(self, other: "Vector") -> None:
        self._items, other._items = other._items, self._items
        self._capacity, other._capacity = other._capacity, self._capacity

    # sequence protocol

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[index] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    # comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return len(self) == len(other) and equal(self, other)

    def __lt__(self, other: "Vector") -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return lexicographical_compare(self, other)

    def __le__(self, other: "Vector") -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return not lexicographical_compare(other, self)

    def __gt__(self, other: "Vector") -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return lexicographical_compare(other, self)

    def __ge__(self, other: "Vector") -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return not lexicographical_compare(self, other)


def swap(first: Vector, second: Vector) -> None:
    """Exchange the contents of two vectors."""
    first.swap(second)