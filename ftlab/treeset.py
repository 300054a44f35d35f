"""An ordered set of unique values backed by a red-black tree."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional, Tuple

from ftlab.algorithm import equal, lexicographical_compare
from ftlab.rbtree import Node, RedBlackTree


def _key(node: Optional[Node]) -> Any:
    return None if node is None else node.key


class TreeSet:
    """Set that keeps its elements sorted by a strict ordering predicate."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        items: Iterable[Any] = (),
        less: Optional[Callable[[Any, Any], bool]] = None,
    ) -> None:
        self._tree = RedBlackTree(less)
        self.update(items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    # modifiers

    def insert(self, value: Any) -> Tuple[Any, bool]:
        """Add ``value`` unless present; return the stored element and whether it was added."""
        node = self._tree.search(value)
        if node is not None:
            return node.key, False
        return self._tree.insert(value).key, True

    def update(self, items: Iterable[Any]) -> None:
        for value in items:
            if self._tree.search(value) is None:
                self._tree.insert(value)

    def erase(self, value: Any) -> int:
        """Remove ``value``; return the number of elements removed (0 or 1)."""
        return 1 if self._tree.delete(value) else 0

    def clear(self) -> None:
        self._tree.clear()

    def swap(self, other: "TreeSet") -> None:
        self._tree.swap(other._tree)

    # lookup

    def count(self, value: Any) -> int:
        return 0 if self._tree.search(value) is None else 1

    def find(self, value: Any) -> Any:
        """The stored element equivalent to ``value``, or ``None``."""
        return _key(self._tree.search(value))

    def lower_bound(self, value: Any) -> Any:
        """The first element not less than ``value``, or ``None``."""
        return _key(self._tree.lower_bound(value))

    def upper_bound(self, value: Any) -> Any:
        """The first element greater than ``value``, or ``None``."""
        return _key(self._tree.upper_bound(value))

    def equal_range(self, value: Any) -> Tuple[Any, Any]:
        return self.lower_bound(value), self.upper_bound(value)

    def empty(self) -> bool:
        return len(self._tree) == 0

    def key_comp(self) -> Callable[[Any, Any], bool]:
        return self._tree.less

    def copy(self) -> "TreeSet":
        dup = type(self)(less=self._tree.less)
        dup._tree = self._tree.copy()
        return dup

    # container protocol

    def __len__(self) -> int:
        return len(self._tree)

    def __contains__(self, value: Any) -> bool:
        return self._tree.search(value) is not None

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in self._tree)

    def __reversed__(self) -> Iterator[Any]:
        return (node.key for node in reversed(self._tree))

    # comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeSet):
            return NotImplemented
        return len(self) == len(other) and equal(self, other)

    def __lt__(self, other: "TreeSet") -> bool:
        if not isinstance(other, TreeSet):
            return NotImplemented
        return lexicographical_compare(self, other)

    def __le__(self, other: "TreeSet") -> bool:
        if not isinstance(other, TreeSet):
            return NotImplemented
        return not lexicographical_compare(other, self)

    def __gt__(self, other: "TreeSet") -> bool:
        if not isinstance(other, TreeSet):
            return NotImplemented
        return lexicographical_compare(other, self)

    def __ge__(self, other: "TreeSet") -> bool:
        if not isinstance(other, TreeSet):
            return NotImplemented
        return not lexicographical_compare(self, other)