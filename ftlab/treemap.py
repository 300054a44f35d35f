"""An ordered key-to-value mapping backed by a red-black tree."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional, Tuple

from ftlab.algorithm import equal, lexicographical_compare
from ftlab.rbtree import Node, RedBlackTree

Item = Tuple[Any, Any]


def _item(node: Optional[Node]) -> Optional[Item]:
    return None if node is None else (node.key, node.value)


def _pairs(items: Any) -> Iterable[Any]:
    items_method = getattr(items, "items", None)
    if callable(items_method):
        return items_method()
    return items


class TreeMap:
    """Mapping that keeps its keys sorted by a strict ordering predicate.

    Reading a missing key with ``map[key]`` inserts ``default_factory()``
    when a factory was given, and raises :class:`KeyError` otherwise.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        items: Any = (),
        less: Optional[Callable[[Any, Any], bool]] = None,
        default_factory: Optional[Callable[[], Any]] = None,
    ) -> None:
        self._tree = RedBlackTree(less)
        self.default_factory = default_factory
        self.update(items)

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"{type(self).__name__}({{{body}}})"

    # modifiers

    def insert(self, key: Any, value: Any = None) -> Tuple[Item, bool]:
        """Add ``key`` unless present; return the stored item and whether it was added."""
        node = self._tree.search(key)
        if node is not None:
            return (node.key, node.value), False
        node = self._tree.insert(key, value)
        return (node.key, node.value), True

    def update(self, items: Any) -> None:
        """Insert every pair whose key is not yet present; existing keys are kept."""
        for key, value in _pairs(items):
            if self._tree.search(key) is None:
                self._tree.insert(key, value)

    def erase(self, key: Any) -> int:
        """Remove ``key``; return the number of elements removed (0 or 1)."""
        return 1 if self._tree.delete(key) else 0

    def clear(self) -> None:
        self._tree.clear()

    def swap(self, other: "TreeMap") -> None:
        """Exchange contents with ``other``."""
        self._tree.swap(other._tree)

    # lookup

    def count(self, key: Any) -> int:
        return 0 if self._tree.search(key) is None else 1

    def find(self, key: Any) -> Optional[Item]:
        """The ``(key, value)`` item for ``key``, or ``None``."""
        return _item(self._tree.search(key))

    def lower_bound(self, key: Any) -> Optional[Item]:
        """The first item whose key is not less than ``key``."""
        return _item(self._tree.lower_bound(key))

    def upper_bound(self, key: Any) -> Optional[Item]:
        """The first item whose key is greater than ``key``."""
        return _item(self._tree.upper_bound(key))

    def equal_range(self, key: Any) -> Tuple[Optional[Item], Optional[Item]]:
        return self.lower_bound(key), self.upper_bound(key)

    def empty(self) -> bool:
        return len(self._tree) == 0

    def key_comp(self) -> Callable[[Any, Any], bool]:
        return self._tree.less

    def copy(self) -> "TreeMap":
        dup = type(self)(less=self._tree.less, default_factory=self.default_factory)
        dup._tree = self._tree.copy()
        return dup

    # views

    def keys(self) -> Iterator[Any]:
        return (node.key for node in self._tree)

    def values(self) -> Iterator[Any]:
        return (node.value for node in self._tree)

    def items(self) -> Iterator[Item]:
        return ((node.key, node.value) for node in self._tree)

    # mapping protocol

    def __len__(self) -> int:
        return len(self._tree)

    def __contains__(self, key: Any) -> bool:
        return self._tree.search(key) is not None

    def __getitem__(self, key: Any) -> Any:
        node = self._tree.search(key)
        if node is None:
            if self.default_factory is None:
                raise KeyError(key)
            node = self._tree.insert(key, self.default_factory())
        return node.value

    def __setitem__(self, key: Any, value: Any) -> None:
        node = self._tree.search(key)
        if node is None:
            self._tree.insert(key, value)
        else:
            node.value = value

    def __delitem__(self, key: Any) -> None:
        if not self._tree.delete(key):
            raise KeyError(key)

    def __iter__(self) -> Iterator[Any]:
        return self.keys()

    def __reversed__(self) -> Iterator[Any]:
        return (node.key for node in reversed(self._tree))

    # comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeMap):
            return NotImplemented
        return len(self) == len(other) and equal(self.items(), other.items())

    def __lt__(self, other: "TreeMap") -> bool:
        if not isinstance(other, TreeMap):
            return NotImplemented
        return lexicographical_compare(self.items(), other.items())

    def __le__(self, other: "TreeMap") -> bool:
        if not isinstance(other, TreeMap):
            return NotImplemented
        return not lexicographical_compare(other.items(), self.items())

    def __gt__(self, other: "TreeMap") -> bool:
        if not isinstance(other, TreeMap):
            return NotImplemented
        return lexicographical_compare(other.items(), self.items())

    def __ge__(self, other: "TreeMap") -> bool:
        if not isinstance(other, TreeMap):
            return NotImplemented
        return not lexicographical_compare(self.items(), other.items())