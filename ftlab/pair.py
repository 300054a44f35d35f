"""A mutable, ordered two-field record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(order=True)
class Pair:
    """Two values compared first by ``first``, then by ``second``."""

    first: Any = None
    second: Any = None

    def __iter__(self) -> Iterator[Any]:
        yield self.first
        yield self.second


def make_pair(first: Any, second: Any) -> Pair:
    """Build a :class:`Pair` from two values."""
    return Pair(first, second)