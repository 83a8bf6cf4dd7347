"""Obstacle-grid line walks and line-of-sight.

The world has no tile materials: a cell is either free or blocked, and the
blocked cells are a plain ``set[tuple[int, int]]`` owned by the WorldState.
Everything here is a pure function of that set.
"""

from __future__ import annotations

from typing import AbstractSet, Iterator

from tactics.core.models import Vector2

Cell = tuple[int, int]
Bounds = tuple[int, int, int, int]  # (min_x, min_y, max_x, max_y), inclusive


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def walk_line(a: Vector2, b: Vector2) -> Iterator[Cell]:
    """Yield the cells visited from *a* toward *b*, excluding *b*.

    Independent-axis stepping: each iteration moves one cell along every
    axis that has not reached the target yet, so the walk runs diagonally
    until one axis is done and then straight. This is not Bresenham and
    can slip between two diagonally touching obstacles.
    """
    x, y = a.x, a.y
    dx = _sign(b.x - a.x)
    dy = _sign(b.y - a.y)
    while x != b.x or y != b.y:
        yield (x, y)
        if x != b.x:
            x += dx
        if y != b.y:
            y += dy


def line_cells(a: Vector2, b: Vector2) -> list[Cell]:
    """Cells on the walk from *a* to *b*, both endpoints included."""
    cells = list(walk_line(a, b))
    cells.append((b.x, b.y))
    return cells


def has_line_of_sight(obstacles: AbstractSet[Cell], a: Vector2, b: Vector2) -> bool:
    """True when no cell on the walk from *a* to *b* is blocked.

    The start cell is checked, the goal cell is not.
    """
    for cell in walk_line(a, b):
        if cell in obstacles:
            return False
    return True


def in_bounds(x: int, y: int, bounds: Bounds) -> bool:
    min_x, min_y, max_x, max_y = bounds
    return min_x <= x <= max_x and min_y <= y <= max_y
