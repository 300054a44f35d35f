"""A last-in first-out adaptor over a back-growing container."""

from __future__ import annotations

import copy
from typing import Any, Iterator, Optional

from ftlab.vector import Vector


class Stack:
    """LIFO adaptor over a container with ``push_back``, ``pop_back`` and ``back``.

    The given container is copied; iterating the stack walks it from bottom
    to top.
    """

    __slots__ = ("_c",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, container: Optional[Any] = None) -> None:
        self._c = Vector() if container is None else copy.copy(container)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._c)!r})"

    def empty(self) -> bool:
        return self._c.empty()

    def push(self, value: Any) -> None:
        self._c.push_back(value)

    def pop(self) -> None:
        """Drop the top element."""
        self._c.pop_back()

    def top(self) -> Any:
        return self._c.back()

    def __len__(self) -> int:
        return len(self._c)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._c)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._c == other._c

    def __lt__(self, other: "Stack") -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._c < other._c

    def __le__(self, other: "Stack") -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._c <= other._c

    def __gt__(self, other: "Stack") -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._c > other._c

    def __ge__(self, other: "Stack") -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._c >= other._c