"""The player's position, view direction and movement through the map."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from ftlab.cubmap import CubMap
from ftlab.raycast import start_direction

MOVE_SPEED = 0.035
ROTATE_SPEED = 0.03
_LOOKAHEAD = 4


@dataclass
class Player:
    """Position, direction vector and camera plane."""

    x: float
    y: float
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    doors_opened: int = 0

    @classmethod
    def from_start(cls, x: float, y: float, start_dir: str) -> "Player":
        dir_x, dir_y, plane_x, plane_y = start_direction(start_dir)
        return cls(x, y, dir_x, dir_y, plane_x, plane_y)

    def rotate(self, angle: float) -> None:
        """Turn the view by ``angle`` radians."""
        c, s = math.cos(angle), math.sin(angle)
        self.dir_x, self.dir_y = self.dir_x * c - self.dir_y * s, self.dir_x * s + self.dir_y * c
        self.plane_x, self.plane_y = (
            self.plane_x * c - self.plane_y * s,
            self.plane_x * s + self.plane_y * c,
        )

    def _step(self, cubmap: CubMap, dx: float, dy: float) -> None:
        ahead = MOVE_SPEED * _LOOKAHEAD
        if cubmap.target_at(int(self.x + dx * ahead), int(self.y)) <= 0:
            self.x += dx * MOVE_SPEED
        if cubmap.target_at(int(self.x), int(self.y + dy * ahead)) <= 0:
            self.y += dy * MOVE_SPEED

    def move_front(self, cubmap: CubMap) -> None:
        self._step(cubmap, self.dir_x, self.dir_y)

    def move_back(self, cubmap: CubMap) -> None:
        self._step(cubmap, -self.dir_x, -self.dir_y)

    def move_right(self, cubmap: CubMap) -> None:
        self._step(cubmap, -self.dir_y, self.dir_x)

    def move_left(self, cubmap: CubMap) -> None:
        self._step(cubmap, self.dir_y, -self.dir_x)

    def key_move(self, cubmap: CubMap, held: Sequence[bool]) -> None:
        """Apply held keys: front, back, right, left, turn left, turn right."""
        front, back, right, left, turn_left, turn_right = held
        if front:
            self.move_front(cubmap)
        if back:
            self.move_back(cubmap)
        if right:
            self.move_right(cubmap)
        if left:
            self.move_left(cubmap)
        if turn_left:
            self.rotate(-ROTATE_SPEED)
        if turn_right:
            self.rotate(ROTATE_SPEED)

    def _toggle(self, cubmap: CubMap, x: int, y: int, access_count: int) -> None:
        try:
            cell = cubmap.cell(x, y)
        except IndexError:
            return
        if cell == "c":
            cubmap.set_cell(x, y, "O")
        elif cell == "C" and access_count:
            if self.doors_opened >= access_count:
                return
            self.doors_opened += 1
            cubmap.set_cell(x, y, "O")
        elif cell == "O":
            cubmap.set_cell(x, y, "c")

    def move_door(self, cubmap: CubMap, access_count: int) -> None:
        """Open or close doors next to the player in the facing directions.

        A locked door opens only while fewer locked doors have been opened
        than cards collected.
        """
        px, py = int(self.x), int(self.y)
        if self.dir_y < 0:
            self._toggle(cubmap, px, py - 1, access_count)
        elif self.dir_y > 0:
            self._toggle(cubmap, px, py + 1, access_count)
        if self.dir_x < 0:
            self._toggle(cubmap, px - 1, py, access_count)
        elif self.dir_x > 0:
            self._toggle(cubmap, px + 1, py, access_count)