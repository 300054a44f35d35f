"""Casting one ray per screen column and drawing textured walls."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, MutableSequence, Sequence, Tuple

from ftlab.cubmap import CubMap

W_WIDTH = 1600
W_HEIGHT = 900
P_WIDTH = 64
P_HEIGHT = 64
SHADE_MASK = 8355711

_DIRECTIONS = {
    "E": (1.0, 0.0, 0.0, 0.80),
    "W": (-1.0, 0.0, 0.0, -0.80),
    "S": (0.0, 1.0, -0.80, 0.0),
    "N": (0.0, -1.0, 0.80, 0.0),
}


def start_direction(start_dir: str) -> Tuple[float, float, float, float]:
    """``(dir_x, dir_y, plane_x, plane_y)`` for a start letter N, S, E or W."""
    try:
        return _DIRECTIONS[start_dir]
    except KeyError:
        raise ValueError(f"unknown start direction {start_dir!r}") from None


@dataclass
class Ray:
    """State of one ray walked through the grid."""

    camera_x: float
    dir_x: float
    dir_y: float
    map_x: int
    map_y: int
    step_x: int = 0
    step_y: int = 0
    side_dist_x: float = 0.0
    side_dist_y: float = 0.0
    delta_dist_x: float = 0.0
    delta_dist_y: float = 0.0
    side: int = 0
    hit: int = 0
    perp_wall_dist: float = 0.0


@dataclass
class Column:
    """How a wall slice is drawn into one screen column."""

    line_height: int
    start: int
    end: int
    tex_num: int
    tex_x: int
    wall_x: float
    step: float
    tex_pos: float


def _inverse(value: float) -> float:
    return math.inf if value == 0 else abs(1 / value)


def _hit_at(cubmap: CubMap, x: int, y: int) -> int:
    if x < 0 or y < 0 or y >= cubmap.height() or x > cubmap.width():
        return ord("1")
    return cubmap.target_at(x, y)


def cast_ray(cubmap: CubMap, player, x: int) -> Ray:
    """Walk the ray for screen column ``x`` until it meets a wall or door."""
    camera_x = x * 2 / W_WIDTH - 1
    ray = Ray(
        camera_x,
        player.dir_x + player.plane_x * camera_x,
        player.dir_y + player.plane_y * camera_x,
        int(player.x),
        int(player.y),
    )
    ray.delta_dist_x = _inverse(ray.dir_x)
    ray.delta_dist_y = _inverse(ray.dir_y)
    if ray.dir_x < 0:
        ray.step_x = -1
        ray.side_dist_x = (player.x - ray.map_x) * ray.delta_dist_x
    else:
        ray.step_x = 1
        ray.side_dist_x = (ray.map_x + 1.0 - player.x) * ray.delta_dist_x
    if ray.dir_y < 0:
        ray.step_y = -1
        ray.side_dist_y = (player.y - ray.map_y) * ray.delta_dist_y
    else:
        ray.step_y = 1
        ray.side_dist_y = (ray.map_y + 1.0 - player.y) * ray.delta_dist_y

    while ray.hit < 1:
        if ray.side_dist_x < ray.side_dist_y:
            ray.side_dist_x += ray.delta_dist_x
            ray.map_x += ray.step_x
            ray.side = 0
        else:
            ray.side_dist_y += ray.delta_dist_y
            ray.map_y += ray.step_y
            ray.side = 1
        ray.hit = _hit_at(cubmap, ray.map_x, ray.map_y)
    if ray.side == 0:
        ray.perp_wall_dist = ray.side_dist_x - ray.delta_dist_x
    else:
        ray.perp_wall_dist = ray.side_dist_y - ray.delta_dist_y
    return ray


def texture_number(ray: Ray) -> int:
    """Texture index: 4 for doors, else 0-3 by the face that was hit."""
    if ray.hit in (ord("C"), ord("c")):
        return 4
    if ray.side == 0:
        return 0 if ray.dir_x < 0 else 1
    return 2 if ray.dir_y < 0 else 3


def column_for(player, ray: Ray) -> Column:
    """Work out the screen span and texture coordinates for a ray."""
    distance = ray.perp_wall_dist if ray.perp_wall_dist > 0 else 1e-9
    line_height = int(min(W_HEIGHT / distance, 2**31 - 1))
    start = max(-(line_height // 2) + W_HEIGHT // 2, 0)
    end = min(line_height // 2 + W_HEIGHT // 2, W_HEIGHT - 1)
    if ray.side == 0:
        wall_x = player.y + ray.perp_wall_dist * ray.dir_y
    else:
        wall_x = player.x + ray.perp_wall_dist * ray.dir_x
    wall_x -= math.floor(wall_x)
    tex_x = int(wall_x * P_WIDTH)
    if (ray.side == 0 and ray.dir_x > 0) or (ray.side == 1 and ray.dir_y < 0):
        tex_x = P_WIDTH - tex_x - 1
    step = P_HEIGHT / line_height if line_height else 0.0
    tex_pos = (start - W_HEIGHT // 2 + line_height // 2) * step
    return Column(line_height, start, end, texture_number(ray), tex_x, wall_x, step, tex_pos)


def draw_ceiling_floor(frame: MutableSequence[int], ceiling: int, floor: int) -> None:
    """Fill the upper half of the frame with ``ceiling``, the lower with ``floor``."""
    half = W_HEIGHT // 2 * W_WIDTH
    frame[:half] = [ceiling] * half
    frame[half : W_HEIGHT * W_WIDTH] = [floor] * (W_HEIGHT * W_WIDTH - half)


def render_walls(
    cubmap: CubMap,
    player,
    textures: Sequence[Sequence[int]],
    frame: MutableSequence[int],
) -> List[float]:
    """Draw every wall column into ``frame``; return the per-column distances."""
    z_buffer = [0.0] * W_WIDTH
    for x in range(W_WIDTH):
        ray = cast_ray(cubmap, player, x)
        column = column_for(player, ray)
        texture = textures[column.tex_num]
        tex_pos = column.tex_pos
        for y in range(column.start, column.end):
            tex_y = int(tex_pos) & (P_HEIGHT - 1)
            color = texture[P_HEIGHT * tex_y + column.tex_x]
            if ray.side == 1:
                color = (color >> 1) & SHADE_MASK
            frame[y * W_WIDTH + x] = color
            tex_pos += column.step
        z_buffer[x] = ray.perp_wall_dist
    return z_buffer