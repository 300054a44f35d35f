"""Reading ``.cub`` scene files: textures, colours and the map."""

from __future__ import annotations

import itertools
import os
import re
import string
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple, Union

from ftlab.cubmap import MAP_ERROR, CubError, CubMap, validate_map

BASIC_ERROR = "invalid basic info"
FILE_ERROR = "wrong file!"
OPEN_ERROR = "file doesn't open!"
EXTENSION = ".cub"

_WHITESPACE = " \t\n\v\f\r"
_IDENTIFIERS = ("NO", "SO", "WE", "EA", "F", "C")

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class Scene:
    """Everything a scene file describes."""

    north: str
    south: str
    west: str
    east: str
    floor: int
    ceiling: int
    cubmap: CubMap
    start: Tuple[float, float]
    start_dir: str


def check_file(path: PathLike) -> str:
    """Require a ``.cub`` extension and a readable file; return the path."""
    name = os.fspath(path)
    dot = name.rfind(".")
    if dot < 0 or name[dot:] != EXTENSION:
        raise CubError(FILE_ERROR)
    try:
        with open(name, "rb"):
            pass
    except OSError as exc:
        raise CubError(OPEN_ERROR) from exc
    return name


def check_rgb(text: str) -> str:
    """Validate ``R,G,B`` with values 0-255; return it without whitespace."""
    cleaned = "".join(ch for ch in text if ch not in _WHITESPACE)
    if any(ch not in string.digits and ch != "," for ch in cleaned):
        raise CubError(BASIC_ERROR)
    if cleaned.count(",") != 2:
        raise CubError(BASIC_ERROR)
    parts = [part for part in cleaned.split(",") if part]
    if len(parts) != 3 or any(int(part) > 255 for part in parts):
        raise CubError(BASIC_ERROR)
    return cleaned


def _atoi(text: str) -> int:
    match = re.match(r"[ \t\n\v\f\r]*([+-]?[0-9]+)", text)
    return int(match.group(1)) if match else 0


def set_color(text: str) -> int:
    """Pack ``R,G,B`` text into a ``0xRRGGBB`` integer."""
    parts = [part for part in text.split(",") if part]
    if len(parts) < 3:
        raise CubError("color split error")
    red, green, blue = (_atoi(part) for part in parts[:3])
    return red << 16 | green << 8 | blue


def _identifier(line: str, seen: Dict[str, str]) -> Optional[str]:
    for ident in _IDENTIFIERS:
        if (
            line.startswith(ident)
            and ident not in seen
            and line[len(ident) : len(ident) + 1] in (" ", "\t")
        ):
            return ident
    return None


def _texture(line: str, base_dir: Optional[PathLike]) -> str:
    dot = line.find(".")
    if dot < 0:
        raise CubError(BASIC_ERROR)
    relative = line[dot:]
    path = relative if base_dir is None else os.path.join(os.fspath(base_dir), relative)
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise CubError(BASIC_ERROR) from exc
    return path


def _strip_newline(raw: str) -> str:
    return raw[:-1] if raw.endswith("\n") and raw != "\n" else raw


def parse_scene_lines(
    lines: Iterable[str], base_dir: Optional[PathLike] = None
) -> Scene:
    """Build a scene from file lines.

    Texture paths run from the first dot of their line and are looked up
    relative to ``base_dir`` (the working directory when ``None``). Blank
    lines are skipped before the map and rejected inside it.
    """
    remaining = itertools.takewhile(bool, lines)
    basic: Dict[str, str] = {}
    first_row: Optional[str] = None
    for raw in remaining:
        if raw == "\n":
            continue
        line = _strip_newline(raw)
        if len(basic) == len(_IDENTIFIERS):
            first_row = line
            break
        ident = _identifier(line, basic)
        if ident is None:
            raise CubError(BASIC_ERROR)
        basic[ident] = line
    if len(basic) != len(_IDENTIFIERS):
        raise CubError(BASIC_ERROR)

    north = _texture(basic["NO"], base_dir)
    south = _texture(basic["SO"], base_dir)
    west = _texture(basic["WE"], base_dir)
    east = _texture(basic["EA"], base_dir)
    floor = set_color(check_rgb(basic["F"][1:]))
    ceiling = set_color(check_rgb(basic["C"][1:]))

    if first_row is None:
        raise CubError(MAP_ERROR)
    rows = [first_row]
    rows.extend(_strip_newline(raw) for raw in remaining)
    cubmap, start, start_dir = validate_map(rows)
    return Scene(north, south, west, east, floor, ceiling, cubmap, start, start_dir)


def parse_scene(path: PathLike) -> Scene:
    """Read and validate the scene file at ``path``."""
    name = check_file(path)
    with open(name, encoding="utf-8") as handle:
        lines = handle.readlines()
    return parse_scene_lines(lines)