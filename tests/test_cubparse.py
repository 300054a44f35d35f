from pathlib import Path

import pytest

from ftlab.cubmap import CubError
from ftlab.cubparse import (
    BASIC_ERROR,
    FILE_ERROR,
    OPEN_ERROR,
    check_file,
    check_rgb,
    parse_scene,
    parse_scene_lines,
    set_color,
)

MAP_ROWS = ["1111111\n", "1N0K0X1\n", "1111111\n"]
HEADER = [
    "NO ./north.xpm\n",
    "SO ./south.xpm\n",
    "\n",
    "WE ./west.xpm\n",
    "EA ./east.xpm\n",
    "F 220,100,0\n",
    "C 225, 30, 0\n",
    "\n",
]


@pytest.fixture
def textures(tmp_path):
    for name in ("north", "south", "west", "east"):
        (tmp_path / f"{name}.xpm").write_text("xpm")
    return tmp_path


def test_check_file_extension(tmp_path):
    with pytest.raises(CubError, match=FILE_ERROR):
        check_file(tmp_path / "map.txt")
    with pytest.raises(CubError, match=FILE_ERROR):
        check_file("noextension")
    with pytest.raises(CubError, match=FILE_ERROR):
        check_file(tmp_path / "map.cubx")


def test_check_file_missing(tmp_path):
    with pytest.raises(CubError, match=OPEN_ERROR):
        check_file(tmp_path / "absent.cub")


def test_check_file_ok(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_text("")
    assert check_file(path) == str(path)


def test_check_rgb_strips_whitespace():
    assert check_rgb(" 220, 100 ,\t0") == "220,100,0"


@pytest.mark.parametrize(
    "text", ["256,0,0", "1,2", "1,2,3,4", "a,1,2", ",1,2", "1,,2", "-1,2,3"]
)
def test_check_rgb_rejects(text):
    with pytest.raises(CubError, match=BASIC_ERROR):
        check_rgb(text)


def test_set_color_packs_channels():
    color = set_color("12,34,56")
    assert (color >> 16, (color >> 8) & 0xFF, color & 0xFF) == (12, 34, 56)
    assert set_color("255,255,255") == 0xFFFFFF


def test_set_color_needs_three_parts():
    with pytest.raises(CubError):
        set_color("1,2")


def test_parse_scene_lines(textures):
    scene = parse_scene_lines(HEADER + MAP_ROWS, textures)
    assert Path(scene.north).resolve() == (textures / "north.xpm").resolve()
    assert Path(scene.east).resolve() == (textures / "east.xpm").resolve()
    assert scene.floor == set_color("220,100,0")
    assert scene.ceiling == set_color("225,30,0")
    assert scene.start == (1.5, 1.5)
    assert scene.start_dir == "N"
    assert scene.cubmap.rows == ("1111111", "100K0X1", "1111111")


def test_parse_scene_lines_any_order(textures):
    header = [HEADER[5], HEADER[0], HEADER[6], HEADER[1], HEADER[3], HEADER[4]]
    scene = parse_scene_lines(header + MAP_ROWS, textures)
    assert scene.floor == set_color("220,100,0")


@pytest.mark.parametrize(
    "header",
    [
        HEADER[:1] + HEADER,
        ["NO./north.xpm\n"] + HEADER[1:],
        ["NO ./missing.xpm\n"] + HEADER[1:],
        HEADER[:5] + ["F 300,0,0\n"] + HEADER[6:],
        HEADER[:6] + ["C 1,2\n"],
        ["X ./north.xpm\n"] + HEADER[1:],
    ],
)
def test_parse_scene_lines_bad_header(textures, header):
    with pytest.raises(CubError, match=BASIC_ERROR):
        parse_scene_lines(header + MAP_ROWS, textures)


def test_parse_scene_lines_incomplete_header(textures):
    with pytest.raises(CubError, match=BASIC_ERROR):
        parse_scene_lines(HEADER[:4], textures)


def test_parse_scene_lines_no_map(textures):
    with pytest.raises(CubError, match="map error!"):
        parse_scene_lines(HEADER, textures)


def test_parse_scene_lines_blank_line_in_map(textures):
    rows = MAP_ROWS[:2] + ["\n"] + MAP_ROWS[2:]
    with pytest.raises(CubError, match="map error!"):
        parse_scene_lines(HEADER + rows, textures)


def test_parse_scene_lines_trailing_blank_line(textures):
    with pytest.raises(CubError):
        parse_scene_lines(HEADER + MAP_ROWS + ["\n"], textures)


def test_parse_scene_from_file(textures, monkeypatch):
    monkeypatch.chdir(textures)
    path = textures / "scene.cub"
    path.write_text("".join(HEADER + MAP_ROWS))
    scene = parse_scene(path)
    assert scene.start_dir == "N"
    assert scene.cubmap.count("X") == 1
    assert Path(scene.south).resolve() == (textures / "south.xpm").resolve()


def test_parse_scene_wrong_extension(tmp_path):
    path = tmp_path / "scene.txt"
    path.write_text("".join(HEADER + MAP_ROWS))
    with pytest.raises(CubError, match=FILE_ERROR):
        parse_scene(path)