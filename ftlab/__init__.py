"""Ordered containers, grid pathfinding and grid ray-casting helpers."""

__version__ = "0.1.0"

__all__ = [
    "algorithm",
    "pair",
    "vector",
    "stack",
    "rbtree",
    "treemap",
    "treeset",
    "pathfinding",
    "cubmap",
    "cubparse",
    "raycast",
    "player",
    "minimap",
]