"""Grid maps for the ray-cast maze: storage, lookups and validation."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

MAP_ERROR = "map error!"

CARD_TARGET = -1
EXIT_TARGET = -2

# A blank cell or a wall may border the outside of the map.
_OPEN = (" ", "1")


class CubError(Exception):
    """A scene file or its map is invalid."""


class Cell(str, Enum):
    """Characters that may appear in a map."""

    WALL = "1"
    FLOOR = "0"
    VOID = " "
    LOCKED_DOOR = "C"
    CLOSED_DOOR = "c"
    OPEN_DOOR = "O"
    CARD = "K"
    EXIT = "X"
    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"


_SOLID = frozenset(
    {Cell.WALL.value, Cell.LOCKED_DOOR.value, Cell.CLOSED_DOOR.value}
)
_ELEMENTS = frozenset("10XNSKEWC")
_STARTS = frozenset("NSEW")


def _char(row: Sequence[str], index: int) -> str:
    """The character at ``index``, or an empty string outside the row."""
    return row[index] if 0 <= index < len(row) else ""


class CubMap:
    """A mutable grid of map characters; rows may differ in length."""

    def __init__(self, rows: Iterable[str]) -> None:
        self._rows: List[List[str]] = [list(row) for row in rows]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.rows)!r})"

    @property
    def rows(self) -> Tuple[str, ...]:
        return tuple("".join(row) for row in self._rows)

    def _row(self, y: int) -> List[str]:
        if not 0 <= y < len(self._rows):
            raise IndexError(f"row {y} outside the map")
        return self._rows[y]

    def target_at(self, x: int, y: int) -> int:
        """Classify a cell for movement and ray hits.

        Walls and doors give their character code (always positive), a card
        gives ``CARD_TARGET``, the exit ``EXIT_TARGET``, anything else 0.
        """
        ch = _char(self._row(y), x)
        if ch in _SOLID:
            return ord(ch)
        if ch == Cell.CARD.value:
            return CARD_TARGET
        if ch == Cell.EXIT.value:
            return EXIT_TARGET
        return 0

    def cell(self, x: int, y: int) -> str:
        row = self._row(y)
        if not 0 <= x < len(row):
            raise IndexError(f"column {x} outside row {y}")
        return row[x]

    def set_cell(self, x: int, y: int, value: str) -> None:
        if len(value) != 1:
            raise ValueError("a cell holds exactly one character")
        row = self._row(y)
        if not 0 <= x < len(row):
            raise IndexError(f"column {x} outside row {y}")
        row[x] = value

    def count(self, char: str) -> int:
        """How many cells hold ``char``."""
        return sum(row.count(char) for row in self._rows)

    def sprite_positions(self) -> List[Tuple[float, float, int]]:
        """Cell centres of cards (id 1) and exits (id 2), row by row."""
        return [
            (x + 0.5, y + 0.5, 1 if ch == Cell.CARD.value else 2)
            for y, row in enumerate(self._rows)
            for x, ch in enumerate(row)
            if ch in (Cell.CARD.value, Cell.EXIT.value)
        ]

    def width(self) -> int:
        """Length of the longest row."""
        return max((len(row) for row in self._rows), default=0)

    def height(self) -> int:
        return len(self._rows)


def _neighbour_rows(
    rows: Sequence[Sequence[str]], y: int
) -> Tuple[Sequence[str], Sequence[str]]:
    above = rows[y - 1] if y > 0 else ""
    below = rows[y + 1] if y + 1 < len(rows) else ""
    return above, below


def check_door(rows: Sequence[Sequence[str]], y: int, x: int) -> None:
    """A door must sit between two walls, either across or along the row."""
    row = rows[y]
    if _char(row, x - 1) == "1" and _char(row, x + 1) == "1":
        return
    above, below = _neighbour_rows(rows, y)
    if _char(below, x) == "1" and _char(above, x) == "1":
        return
    raise CubError(MAP_ERROR)


def _check_border_row(row: Sequence[str]) -> None:
    if any(ch not in _OPEN for ch in row):
        raise CubError(MAP_ERROR)


def _check_space(rows: Sequence[Sequence[str]], y: int, x: int) -> None:
    row = rows[y]
    above, below = _neighbour_rows(rows, y)
    for other in (above, below):
        if len(other) >= x and _char(other, x) not in _OPEN:
            raise CubError(MAP_ERROR)
    for side in (_char(row, x + 1), _char(row, x - 1)):
        if side and side not in _OPEN:
            raise CubError(MAP_ERROR)


def _check_element(
    rows: List[List[str]],
    y: int,
    x: int,
    start: Optional[Tuple[int, int, str]],
) -> Optional[Tuple[int, int, str]]:
    row = rows[y]
    ch = row[x]
    if ch not in _ELEMENTS:
        raise CubError(MAP_ERROR)
    if ch in _STARTS:
        if start is not None:
            raise CubError(MAP_ERROR)
        row[x] = Cell.FLOOR.value
        return (x, y, ch)
    if ch == Cell.FLOOR.value:
        above, below = _neighbour_rows(rows, y)
        if not _char(above, x) or not _char(below, x):
            raise CubError(MAP_ERROR)
    return start


def validate_map(
    rows: Iterable[str],
) -> Tuple[CubMap, Tuple[float, float], str]:
    """Check that a map is closed and complete.

    Returns the map with the start cell turned into floor, the centre of the
    start cell and the start direction letter. Raises :class:`CubError`.
    """
    grid = [list(row) for row in rows]
    if len(grid) < 2:
        raise CubError(MAP_ERROR)
    _check_border_row(grid[0])
    start: Optional[Tuple[int, int, str]] = None
    for y, row in enumerate(grid[1:-1], 1):
        if _char(row, 0) not in _OPEN or _char(row, len(row) - 1) not in _OPEN:
            raise CubError(MAP_ERROR)
        for x, ch in enumerate(row):
            if ch == Cell.VOID.value:
                _check_space(grid, y, x)
            elif ch == Cell.LOCKED_DOOR.value:
                check_door(grid, y, x)
            else:
                start = _check_element(grid, y, x, start)
    if start is None:
        raise CubError(MAP_ERROR)
    _check_border_row(grid[-1])
    cubmap = CubMap("".join(row) for row in grid)
    if not cubmap.count(Cell.EXIT.value):
        raise CubError(MAP_ERROR)
    sx, sy, direction = start
    return cubmap, (sx + 0.5, sy + 0.5), direction