"""Shortest paths on a character grid with the A* search."""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter
from typing import Dict, List, Optional, Sequence, Set, Tuple

Position = Tuple[int, int]

WALL = "1"
# Neighbours in the order they are explored: up, left, right, down.
_STEPS: Tuple[Position, ...] = ((0, -1), (-1, 0), (1, 0), (0, 1))


@dataclass(eq=False)
class PathNode:
    """A grid cell reached by the search, with its cost so far and estimate."""

    x: int
    y: int
    g: int = 0
    h: int = 0
    parent: Optional["PathNode"] = None

    @property
    def f(self) -> int:
        return self.g + self.h

    @property
    def position(self) -> Position:
        return (self.x, self.y)

    def trace(self) -> List[Position]:
        """Positions from the search start up to this node."""
        steps: List[Position] = []
        node: Optional[PathNode] = self
        while node is not None:
            steps.append(node.position)
            node = node.parent
        steps.reverse()
        return steps


def heuristic(position: Position, goal: Position) -> int:
    """Manhattan distance between two cells."""
    return abs(position[0] - goal[0]) + abs(position[1] - goal[1])


def _blocked(grid: Sequence[Sequence[str]], position: Position) -> bool:
    x, y = position
    if y < 0 or y >= len(grid) or x < 0 or x >= len(grid[y]):
        return True
    return grid[y][x] == WALL


def a_star(
    grid: Sequence[Sequence[str]], start: Position, goal: Position
) -> Optional[List[Position]]:
    """Find a shortest four-way path from ``start`` to ``goal``.

    Cells holding ``"1"`` are walls. Returns the positions from start to goal
    inclusive, or ``None`` when the goal cannot be reached. Among open nodes
    of equal cost the earliest discovered is expanded first.
    """
    start = tuple(start)  # type: ignore[assignment]
    goal = tuple(goal)  # type: ignore[assignment]
    first = PathNode(start[0], start[1], 0, heuristic(start, goal))
    open_nodes: List[PathNode] = [first]
    open_index: Dict[Position, PathNode] = {first.position: first}
    closed: Set[Position] = set()

    while open_nodes:
        current = min(open_nodes, key=attrgetter("f"))
        if current.position == goal:
            return current.trace()
        open_nodes.remove(current)
        del open_index[current.position]
        closed.add(current.position)

        for dx, dy in _STEPS:
            position = (current.x + dx, current.y + dy)
            if _blocked(grid, position) or position in closed:
                continue
            cost = current.g + 1
            known = open_index.get(position)
            if known is None:
                node = PathNode(
                    position[0], position[1], cost, heuristic(position, goal), current
                )
                open_nodes.append(node)
                open_index[position] = node
            elif cost < known.g:
                known.g = cost
                known.parent = current
    return None