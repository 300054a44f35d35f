import math

import pytest

from ftlab.cubmap import CubMap
from ftlab.player import Player
from ftlab.raycast import (
    W_HEIGHT,
    W_WIDTH,
    cast_ray,
    column_for,
    draw_ceiling_floor,
    render_walls,
    start_direction,
    texture_number,
)

BOX = ["11111", "10001", "10001", "10001", "11111"]


def east_player():
    return Player.from_start(2.5, 2.5, "E")


def test_start_direction_east_and_unknown():
    assert start_direction("E") == (1.0, 0.0, 0.0, 0.80)
    with pytest.raises(ValueError):
        start_direction("Q")


def test_center_ray_hits_east_wall():
    ray = cast_ray(CubMap(BOX), east_player(), W_WIDTH // 2)
    assert ray.side == 0
    assert ray.map_x == 4
    assert ray.hit == ord("1")
    assert math.isclose(ray.perp_wall_dist, 1.5)
    assert texture_number(ray) == 1


def test_door_texture():
    rows = ["11111", "100c1", "11111"]
    player = Player.from_start(1.5, 1.5, "E")
    ray = cast_ray(CubMap(rows), player, W_WIDTH // 2)
    assert texture_number(ray) == 4


def test_column_span_is_inside_screen():
    player = east_player()
    for x in (0, 400, 800, 1599):
        column = column_for(player, cast_ray(CubMap(BOX), player, x))
        assert 0 <= column.start <= column.end < W_HEIGHT
        assert 0 <= column.tex_x < 64


def test_ceiling_and_floor():
    frame = [0] * (W_WIDTH * W_HEIGHT)
    draw_ceiling_floor(frame, 7, 9)
    assert frame[0] == 7
    assert frame[-1] == 9
    assert len(frame) == W_WIDTH * W_HEIGHT


def test_render_walls_uses_texture():
    textures = [[0x123456] * 4096 for _ in range(13)]
    frame = [0] * (W_WIDTH * W_HEIGHT)
    z = render_walls(CubMap(BOX), east_player(), textures, frame)
    assert math.isclose(z[W_WIDTH // 2], 1.5)
    assert frame[(W_HEIGHT // 2) * W_WIDTH + W_WIDTH // 2] == 0x123456
    assert all(d > 0 for d in z)