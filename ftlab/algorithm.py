"""Element-wise comparison of two sequences."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, Optional

_MISSING = object()


def _not_different(a: Any, b: Any) -> bool:
    return not (a != b)


def equal(
    first: Iterable[Any],
    second: Iterable[Any],
    pred: Optional[Callable[[Any, Any], bool]] = None,
) -> bool:
    """Return True if each element of ``first`` matches its counterpart in ``second``.

    Only as many elements of ``second`` as ``first`` holds are looked at; if
    ``second`` runs out first the sequences are not equal.
    """
    match = _not_different if pred is None else pred
    others = iter(second)
    for a in first:
        b = next(others, _MISSING)
        if b is _MISSING or not match(a, b):
            return False
    return True


def lexicographical_compare(
    first: Iterable[Any],
    second: Iterable[Any],
    less: Optional[Callable[[Any, Any], bool]] = None,
) -> bool:
    """Return True if ``first`` orders strictly before ``second``."""
    is_less = operator.lt if less is None else less
    others = iter(second)
    for a in first:
        b = next(others, _MISSING)
        if b is _MISSING or is_less(b, a):
            return False
        if is_less(a, b):
            return True
    return next(others, _MISSING) is not _MISSING