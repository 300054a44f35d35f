# ftlab

`ftlab` is a library in three parts:

- **Containers.** A growable `Vector`, a `Stack` built on it, and the ordered
  `TreeMap` and `TreeSet`, both kept in a `RedBlackTree`. There are also the
  small helpers `Pair`, `make_pair`, `equal` and `lexicographical_compare`.
- **Pathfinding.** An A* search on a grid of walls (`ftlab.pathfinding`).
- **Ray casting.** A parser for `.cub` scene files, a grid map with doors,
  cards and an exit, player movement, wall rendering into a frame buffer,
  and a minimap.

It uses only the standard library and runs on Python 3.10 or later.

## Containers

```python
from ftlab.vector import Vector
from ftlab.stack import Stack
from ftlab.treemap import TreeMap
from ftlab.treeset import TreeSet

v = Vector([3, 1, 2])
v.push_back(4)
print(len(v), v.front(), v.back(), list(reversed(v)))

s = Stack()          # backed by a Vector unless a container is given
s.push("a")
s.push("b")
print(s.top())       # "b"
s.pop()

m = TreeMap()
m[3] = "c"
m[1] = "a"
m[2] = "b"
print(list(m.keys()))            # [1, 2, 3], always in key order

t = TreeSet([5, 1, 4, 1])
print(list(t), t.count(1))       # duplicates are stored once
```

`Vector` tracks its capacity: `capacity()`, `reserve()` and `resize()` work
as their names say. `Vector.at` raises `IndexError` for an index out of
range, and `Vector.reserve` raises `ValueError` for a size above
`max_size()`.

`TreeMap` and `TreeSet` take an optional `less` function that orders keys in
place of `<`. They offer `find`, `count`, `lower_bound`, `upper_bound` and
`equal_range`, and two maps or two sets compare in lexicographic order.
Reading a missing key from a `TreeMap` raises `KeyError`, unless the map was
built with a `default_factory`, in which case the key is inserted with the
factory's value. `RedBlackTree.is_valid()` checks the tree's ordering and
red-black invariants.

## Pathfinding

```python
from ftlab.pathfinding import a_star

grid = [
    "11111",
    "1P0E1",
    "11111",
]
path = a_star(grid, (1, 1), (3, 1))   # [(1, 1), (2, 1), (3, 1)]
```

Steps go in the four straight directions. Cells marked `1` are walls, and
so is anything outside the grid. `a_star` returns the positions from start
to goal inclusive, or `None` when the goal cannot be reached.

## Ray casting

`ftlab.cubparse.parse_scene` reads a `.cub` scene file and returns a
`Scene`. A scene gives four wall textures (`NO`, `SO`, `WE`, `EA`), the
floor and ceiling colours (`F`, `C`, each `r,g,b` with values from 0 to
255), and a map closed by walls. Besides walls and floor, a map may hold
locked doors (`C`), cards (`K`) and an exit (`X`), and exactly one start
cell (`N`, `S`, `E` or `W`). `ftlab.cubmap.validate_map` checks the map's
rules and raises `CubError` for a bad map.

```python
from ftlab.cubparse import parse_scene
from ftlab.player import Player
from ftlab.raycast import W_HEIGHT, W_WIDTH, draw_ceiling_floor, render_walls

scene = parse_scene("maps/example.cub")
player = Player.from_start(*scene.start, scene.start_dir)

frame = [0] * (W_WIDTH * W_HEIGHT)
textures = [[0xFFFFFF] * (64 * 64) for _ in range(5)]  # four walls and a door
draw_ceiling_floor(frame, scene.ceiling, scene.floor)
z_buffer = render_walls(scene.cubmap, player, textures, frame)
```

`Player` moves with `move_front`, `move_back`, `move_left`, `move_right`
and `key_move`, turns with `rotate`, and opens or closes the doors it faces
with `move_door`. `ftlab.minimap.draw_minimap` returns the width, height and
pixels of an overhead view with the player marked.

## What it does not do

The package is a library only. It installs no commands, opens no window and
reads no keyboard or mouse input. It has no reader for `.ber` map files, no
game loop for either the pathfinding grid or the ray-cast maze, and it does
not draw the cards and exit as sprites; the frame buffer it fills is a plain
list of colour integers for the caller to display.

## Tests

Install the `test` extra, then run `pytest` from the project directory.