"""An overhead picture of the map with the player marked."""

from __future__ import annotations

from typing import List, Tuple

from ftlab.cubmap import CubMap

MM_SIZE = 25
BACKGROUND = 0xFF000000
WALL_COLOR = 0xA0000000
DOOR_COLOR = 0xA0FF0000
OPEN_DOOR_COLOR = 0xA000FF00
EXIT_COLOR = 0xA00000FF
FLOOR_COLOR = 0xA0FFFFFF
PLAYER_COLOR = 0x60FFFF00


def minimap_size(cubmap: CubMap) -> Tuple[int, int]:
    """Pixel size: widest row but the last, by the number of rows."""
    rows = cubmap.rows
    width = max((len(row) for row in rows[:-1]), default=0)
    return width * MM_SIZE, len(rows) * MM_SIZE


def _fill(pixels: List[int], width: int, i: int, j: int, color: int, inset: int = 0) -> None:
    top, left = i * MM_SIZE, j * MM_SIZE
    for dy in range(inset, MM_SIZE - inset):
        start = (top + dy) * width + left
        pixels[start + inset : start + MM_SIZE - inset] = [color] * (MM_SIZE - 2 * inset)


def _color(ch: str, exit_open: bool) -> int:
    if ch == "1":
        return WALL_COLOR
    if ch in ("C", "c"):
        return DOOR_COLOR
    if ch == "O":
        return OPEN_DOOR_COLOR
    if ch == "X" and exit_open:
        return EXIT_COLOR
    return FLOOR_COLOR


def draw_minimap(cubmap: CubMap, player, exit_open: bool) -> Tuple[int, int, List[int]]:
    """Return ``(width, height, pixels)`` of the minimap, row-major."""
    width, height = minimap_size(cubmap)
    pixels = [BACKGROUND] * (width * height)
    px, py = int(player.x), int(player.y)
    for i, row in enumerate(cubmap.rows):
        for j in range(width // MM_SIZE):
            if j >= len(row) or row[j] == " ":
                continue
            _fill(pixels, width, i, j, _color(row[j], exit_open))
            if (i, j) == (py, px):
                _fill(pixels, width, i, j, PLAYER_COLOR, 5)
    return width, height, pixels