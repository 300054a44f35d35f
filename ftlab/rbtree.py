"""A red-black tree keyed by a strict-weak-ordering comparator."""

from __future__ import annotations

import operator
from enum import Enum
from typing import Any, Callable, Iterator, Optional


class Color(Enum):
    BLACK = 0
    RED = 1


class Node:
    """One tree node holding a key and its associated value."""

    __slots__ = ("key", "value", "color", "parent", "left", "right")

    def __init__(
        self,
        key: Any = None,
        value: Any = None,
        color: Color = Color.RED,
        nil: Optional["Node"] = None,
    ) -> None:
        self.key = key
        self.value = value
        self.color = color
        self.parent = nil
        self.left = nil
        self.right = nil

    def __repr__(self) -> str:
        return f"Node({self.key!r}, {self.value!r}, {self.color.name})"


class RedBlackTree:
    """Balanced binary search tree with cached first and last nodes.

    Nodes handed out by the public methods stay valid until they are
    deleted; absent results are reported as ``None``.
    """

    def __init__(self, less: Optional[Callable[[Any, Any], bool]] = None) -> None:
        self._less: Callable[[Any, Any], bool] = operator.lt if less is None else less
        self._nil = Node(color=Color.BLACK)
        self._nil.parent = self._nil.left = self._nil.right = self._nil
        self._root = self._nil
        self._front = self._nil
        self._back = self._nil
        self._size = 0

    @property
    def less(self) -> Callable[[Any, Any], bool]:
        """The ordering predicate used by this tree."""
        return self._less

    @property
    def root(self) -> Optional[Node]:
        return self._out(self._root)

    def _out(self, node: Node) -> Optional[Node]:
        return None if node is self._nil else node

    def _in(self, node: Optional[Node]) -> Node:
        return self._nil if node is None else node

    def _equivalent(self, a: Any, b: Any) -> bool:
        return not self._less(a, b) and not self._less(b, a)

    # navigation

    def front(self) -> Optional[Node]:
        """The node with the smallest key."""
        return self._out(self._front)

    def back(self) -> Optional[Node]:
        """The node with the largest key."""
        return self._out(self._back)

    def _minimum(self, node: Node) -> Node:
        while node is not self._nil and node.left is not self._nil:
            node = node.left
        return node

    def _maximum(self, node: Node) -> Node:
        while node is not self._nil and node.right is not self._nil:
            node = node.right
        return node

    def minimum(self, node: Optional[Node]) -> Optional[Node]:
        """The leftmost node of the subtree rooted at ``node``."""
        return self._out(self._minimum(self._in(node)))

    def maximum(self, node: Optional[Node]) -> Optional[Node]:
        """The rightmost node of the subtree rooted at ``node``."""
        return self._out(self._maximum(self._in(node)))

    def successor(self, node: Optional[Node]) -> Optional[Node]:
        """The next node in key order, or ``None`` after the last."""
        if node is None:
            return None
        if node.right is not self._nil:
            return self._out(self._minimum(node.right))
        parent = node.parent
        while parent is not self._nil and node is parent.right:
            node, parent = parent, parent.parent
        return self._out(parent)

    def predecessor(self, node: Optional[Node]) -> Optional[Node]:
        """The previous node in key order, or ``None`` before the first."""
        if node is None:
            return None
        if node.left is not self._nil:
            return self._out(self._maximum(node.left))
        parent = node.parent
        while parent is not self._nil and node is parent.left:
            node, parent = parent, parent.parent
        return self._out(parent)

    # lookup

    def search(self, key: Any) -> Optional[Node]:
        """The node whose key is equivalent to ``key``, if any."""
        node = self._root
        while node is not self._nil:
            if self._less(key, node.key):
                node = node.left
            elif self._less(node.key, key):
                node = node.right
            else:
                return node
        return None

    def lower_bound(self, key: Any) -> Optional[Node]:
        """The first node whose key is not less than ``key``."""
        node, result = self._root, self._nil
        while node is not self._nil:
            if not self._less(node.key, key):
                result, node = node, node.left
            else:
                node = node.right
        return self._out(result)

    def upper_bound(self, key: Any) -> Optional[Node]:
        """The first node whose key is greater than ``key``."""
        node, result = self._root, self._nil
        while node is not self._nil:
            if self._less(key, node.key):
                result, node = node, node.left
            else:
                node = node.right
        return self._out(result)

    # rotations

    def _left_rotate(self, node: Node) -> None:
        child = node.right
        node.right = child.left
        if child.left is not self._nil:
            child.left.parent = node
        child.parent = node.parent
        if node.parent is self._nil:
            self._root = child
        elif node is node.parent.left:
            node.parent.left = child
        else:
            node.parent.right = child
        child.left = node
        node.parent = child

    def _right_rotate(self, node: Node) -> None:
        child = node.left
        node.left = child.right
        if child.right is not self._nil:
            child.right.parent = node
        child.parent = node.parent
        if node.parent is self._nil:
            self._root = child
        elif node is node.parent.right:
            node.parent.right = child
        else:
            node.parent.left = child
        child.right = node
        node.parent = child

    # insertion

    def insert(self, key: Any, value: Any = None) -> Node:
        """Add ``key`` with ``value`` and return its node.

        If an equivalent key is already present its node is returned
        unchanged.
        """
        existing = self.search(key)
        if existing is not None:
            return existing
        node = Node(key, value, Color.RED, self._nil)
        parent, cursor = self._nil, self._root
        while cursor is not self._nil:
            parent = cursor
            cursor = cursor.left if self._less(key, cursor.key) else cursor.right
        node.parent = parent
        if parent is self._nil:
            self._root = node
        elif self._less(key, parent.key):
            parent.left = node
        else:
            parent.right = node
        self._insert_fix(node)
        self._size += 1
        if self._front is self._nil or self._less(key, self._front.key):
            self._front = node
        if self._back is self._nil or self._less(self._back.key, key):
            self._back = node
        return node

    def _insert_fix(self, node: Node) -> None:
        while node.parent.color is Color.RED:
            grand = node.parent.parent
            if node.parent is grand.right:
                uncle = grand.left
                if uncle.color is Color.RED:
                    uncle.color = node.parent.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                else:
                    if node is node.parent.left:
                        node = node.parent
                        self._right_rotate(node)
                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self._left_rotate(node.parent.parent)
            else:
                uncle = grand.right
                if uncle.color is Color.RED:
                    uncle.color = node.parent.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                else:
                    if node is node.parent.right:
                        node = node.parent
                        self._left_rotate(node)
                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self._right_rotate(node.parent.parent)
            if node is self._root:
                break
        self._root.color = Color.BLACK

    # deletion

    def _transplant(self, old: Node, new: Node) -> None:
        if old.parent is self._nil:
            self._root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        new.parent = old.parent

    def delete(self, key: Any) -> bool:
        """Remove the node with ``key``; return whether one was removed."""
        target = self.search(key)
        if target is None:
            return False
        moved = target
        original_color = moved.color
        if target.left is self._nil:
            child = target.right
            self._transplant(target, target.right)
        elif target.right is self._nil:
            child = target.left
            self._transplant(target, target.left)
        else:
            moved = self._minimum(target.right)
            original_color = moved.color
            child = moved.right
            if moved.parent is target:
                child.parent = moved
            else:
                self._transplant(moved, moved.right)
                moved.right = target.right
                moved.right.parent = moved
            self._transplant(target, moved)
            moved.left = target.left
            moved.left.parent = moved
            moved.color = target.color
        if original_color is Color.BLACK:
            self._delete_fix(child)
        self._nil.parent = self._nil
        target.parent = target.left = target.right = self._nil
        self._size -= 1
        if target is self._front:
            self._front = self._minimum(self._root)
        if target is self._back:
            self._back = self._maximum(self._root)
        return True

    def _delete_fix(self, node: Node) -> None:
        while node is not self._root and node.color is Color.BLACK:
            if node is node.parent.left:
                sibling = node.parent.right
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    node.parent.color = Color.RED
                    self._left_rotate(node.parent)
                    sibling = node.parent.right
                if sibling.left.color is Color.BLACK and sibling.right.color is Color.BLACK:
                    sibling.color = Color.RED
                    node = node.parent
                else:
                    if sibling.right.color is Color.BLACK:
                        sibling.left.color = Color.BLACK
                        sibling.color = Color.RED
                        self._right_rotate(sibling)
                        sibling = node.parent.right
                    sibling.color = node.parent.color
                    node.parent.color = Color.BLACK
                    sibling.right.color = Color.BLACK
                    self._left_rotate(node.parent)
                    node = self._root
            else:
                sibling = node.parent.left
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    node.parent.color = Color.RED
                    self._right_rotate(node.parent)
                    sibling = node.parent.left
                if sibling.left.color is Color.BLACK and sibling.right.color is Color.BLACK:
                    sibling.color = Color.RED
                    node = node.parent
                else:
                    if sibling.left.color is Color.BLACK:
                        sibling.right.color = Color.BLACK
                        sibling.color = Color.RED
                        self._left_rotate(sibling)
                        sibling = node.parent.left
                    sibling.color = node.parent.color
                    node.parent.color = Color.BLACK
                    sibling.left.color = Color.BLACK
                    self._right_rotate(node.parent)
                    node = self._root
        node.color = Color.BLACK

    # whole-tree operations

    def copy(self) -> "RedBlackTree":
        """An independent tree with the same shape, colours and contents."""
        dup = type(self)(self._less)

        def clone(node: Node, parent: Node) -> Node:
            if node is self._nil:
                return dup._nil
            fresh = Node(node.key, node.value, node.color, dup._nil)
            fresh.parent = parent
            fresh.left = clone(node.left, fresh)
            fresh.right = clone(node.right, fresh)
            return fresh

        dup._root = clone(self._root, dup._nil)
        dup._front = dup._minimum(dup._root)
        dup._back = dup._maximum(dup._root)
        dup._size = self._size
        return dup

    def clear(self) -> None:
        self._root = self._front = self._back = self._nil
        self._size = 0

    def swap(self, other: "RedBlackTree") -> None:
        """Exchange the contents and ordering of two trees."""
        for name in ("_less", "_nil", "_root", "_front", "_back", "_size"):
            mine, theirs = getattr(self, name), getattr(other, name)
            setattr(self, name, theirs)
            setattr(other, name, mine)

    def is_valid(self) -> bool:
        """Check ordering, parent links and the red-black invariants."""
        nil = self._nil
        if self._root.color is not Color.BLACK:
            return False
        if self._root is not nil and self._root.parent is not nil:
            return False

        def black_height(node: Node) -> int:
            if node is nil:
                return 1
            for child in (node.left, node.right):
                if child is not nil and child.parent is not node:
                    return -1
            if node.color is Color.RED and (
                node.left.color is Color.RED or node.right.color is Color.RED
            ):
                return -1
            if node.left is not nil and not self._less(node.left.key, node.key):
                return -1
            if node.right is not nil and not self._less(node.key, node.right.key):
                return -1
            left, right = black_height(node.left), black_height(node.right)
            if left < 0 or left != right:
                return -1
            return left + (node.color is Color.BLACK)

        if black_height(self._root) < 0:
            return False
        keys = [node.key for node in self]
        if len(keys) != self._size:
            return False
        if any(not self._less(a, b) for a, b in zip(keys, keys[1:])):
            return False
        return self._front is self._minimum(self._root) and self._back is self._maximum(
            self._root
        )

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Node]:
        """Nodes in ascending key order."""
        node = self.front()
        while node is not None:
            yield node
            node = self.successor(node)

    def __reversed__(self) -> Iterator[Node]:
        """Nodes in descending key order."""
        node = self.back()
        while node is not None:
            yield node
            node = self.predecessor(node)