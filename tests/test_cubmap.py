import pytest

from ftlab.cubmap import (
    CARD_TARGET,
    EXIT_TARGET,
    MAP_ERROR,
    Cell,
    CubError,
    CubMap,
    check_door,
    validate_map,
)

SIMPLE = ["1111111", "1N0K0X1", "1111111"]


def test_validate_simple_map():
    cubmap, start, direction = validate_map(SIMPLE)
    assert start == (1.5, 1.5)
    assert direction == "N"
    assert cubmap.rows == ("1111111", "100K0X1", "1111111")


def test_validate_map_with_spaces():
    rows = ["11111", "1 1N1", "11X11", "11111"]
    cubmap, start, direction = validate_map(rows)
    assert start == (3.5, 1.5)
    assert direction == "N"
    assert cubmap.cell(1, 1) == " "


def test_space_next_to_floor_is_rejected():
    with pytest.raises(CubError, match=MAP_ERROR):
        validate_map(["11111", "1 0N1", "11X11", "11111"])


def test_validate_map_with_door():
    rows = ["11111", "1N0X1", "11C11", "10001", "11111"]
    cubmap, _, _ = validate_map(rows)
    assert cubmap.cell(2, 2) == "C"


def test_unsupported_door_is_rejected():
    with pytest.raises(CubError):
        validate_map(["11111", "1N0X1", "10C01", "11111"])


@pytest.mark.parametrize(
    "rows",
    [
        ["1111111", "1N0Z0X1", "1111111"],
        ["1111111", "1N0S0X1", "1111111"],
        ["1111111", "100K0X1", "1111111"],
        ["1111111", "1N0K001", "1111111"],
        ["1111111", "1N0K0X0", "1111111"],
        ["1111111", "\n", "1N0K0X1", "1111111"],
        ["1110111", "1N0K0X1", "1111111"],
        ["1111111", "1N0K0X1", "1111101"],
        ["11111", "1N0X1", "11"],
        ["1111111"],
        [],
    ],
)
def test_invalid_maps(rows):
    with pytest.raises(CubError):
        validate_map(rows)


def test_check_door_between_walls_in_row():
    assert check_door(["111", "1C1", "111"], 1, 1) is None


def test_check_door_between_walls_in_column():
    assert check_door(["111", "0C0", "111"], 1, 1) is None


def test_check_door_unsupported():
    with pytest.raises(CubError):
        check_door(["101", "0C0", "101"], 1, 1)


def test_target_at_classifies_cells():
    cubmap, _, _ = validate_map(SIMPLE)
    assert cubmap.target_at(0, 0) == ord(Cell.WALL.value)
    assert cubmap.target_at(1, 1) == 0
    assert cubmap.target_at(3, 1) == CARD_TARGET
    assert cubmap.target_at(5, 1) == EXIT_TARGET
    assert cubmap.target_at(50, 1) == 0


def test_target_at_doors_are_solid():
    cubmap = CubMap(["1Cc0O"])
    assert cubmap.target_at(1, 0) == ord("C")
    assert cubmap.target_at(2, 0) == ord("c")
    assert cubmap.target_at(4, 0) == 0
    assert all(cubmap.target_at(x, 0) > 0 for x in range(3))


def test_target_at_row_out_of_range():
    cubmap = CubMap(SIMPLE)
    with pytest.raises(IndexError):
        cubmap.target_at(0, len(SIMPLE))


def test_set_cell_round_trip():
    cubmap = CubMap(SIMPLE)
    cubmap.set_cell(2, 1, "O")
    assert cubmap.cell(2, 1) == "O"
    assert cubmap.rows[1] == "1NOK0X1"


def test_set_cell_rejects_bad_values():
    cubmap = CubMap(SIMPLE)
    with pytest.raises(ValueError):
        cubmap.set_cell(1, 1, "00")
    with pytest.raises(IndexError):
        cubmap.set_cell(99, 1, "0")


def test_count_and_sprites():
    cubmap = CubMap(["1111", "1K1X", "1XK1"])
    assert cubmap.count("K") == 2
    assert cubmap.count("X") == 2
    assert cubmap.sprite_positions() == [
        (1.5, 1.5, 1),
        (3.5, 1.5, 2),
        (1.5, 2.5, 2),
        (2.5, 2.5, 1),
    ]


def test_width_and_height():
    cubmap = CubMap(["11", "1111", "111"])
    assert cubmap.width() == 4
    assert cubmap.height() == 3