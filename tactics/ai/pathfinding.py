"""Grid reachability, A* pathfinding and cover search over an obstacle set.

Provides a `Pathfinder` bound to one obstacle set and one inclusive bounds
rectangle. Movement is 4-connected with a uniform step cost of 1.

Usage:
    pf = Pathfinder(world.obstacles, config.bounds)
    pf.path_exists(start, goal)          # bool (BFS)
    pf.find_path(start, goal)            # list[Vector2], start..goal, or []
    pf.cover_positions(me, player, enemy, radius)
"""

from __future__ import annotations

import heapq
from collections import deque
from typing import AbstractSet

from tactics.core.grid import Bounds, Cell, has_line_of_sight, in_bounds
from tactics.core.models import Vector2

# Cardinal directions only, Manhattan grid
_DIRS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class Pathfinder:
    """Stateless queries over a (possibly live) obstacle set.

    The obstacle set is read, never copied or mutated, so results always
    reflect the set at call time.
    """

    __slots__ = ("_obstacles", "_bounds")

    def __init__(self, obstacles: AbstractSet[Cell], bounds: Bounds) -> None:
        self._obstacles = obstacles
        self._bounds = bounds

    def _neighbors(self, x: int, y: int) -> list[Cell]:
        out: list[Cell] = []
        for dx, dy in _DIRS:
            nx, ny = x + dx, y + dy
            if not in_bounds(nx, ny, self._bounds):
                continue
            if (nx, ny) in self._obstacles:
                continue
            out.append((nx, ny))
        return out

    # ------------------------------------------------------------------
    # Reachability (BFS)
    # ------------------------------------------------------------------

    def path_exists(self, start: Vector2, goal: Vector2) -> bool:
        """Breadth-first search; True as soon as *goal* is dequeued."""
        target = (goal.x, goal.y)
        queue: deque[Cell] = deque([(start.x, start.y)])
        seen: set[Cell] = {(start.x, start.y)}
        while queue:
            cur = queue.popleft()
            if cur == target:
                return True
            for nkey in self._neighbors(*cur):
                if nkey not in seen:
                    seen.add(nkey)
                    queue.append(nkey)
        return False

    # ------------------------------------------------------------------
    # Shortest path (A*)
    # ------------------------------------------------------------------

    def find_path(self, start: Vector2, goal: Vector2) -> list[Vector2]:
        """Compute an A* path from *start* to *goal*.

        Returns every cell from *start* to *goal* inclusive, or an empty list
        when the goal cannot be reached.
        """
        gx, gy = goal.x, goal.y
        skey = (start.x, start.y)

        # A* open set: (f_score, counter, x, y)
        counter = 0
        open_heap: list[tuple[int, int, int, int]] = []
        heapq.heappush(open_heap, (start.manhattan(goal), counter, start.x, start.y))

        g_score: dict[Cell, int] = {skey: 0}
        came_from: dict[Cell, Cell] = {}
        closed: set[Cell] = set()

        while open_heap:
            _, _, cx, cy = heapq.heappop(open_heap)
            ckey = (cx, cy)

            if cx == gx and cy == gy:
                return self._reconstruct(came_from, ckey)

            if ckey in closed:
                continue
            closed.add(ckey)

            tentative_g = g_score[ckey] + 1
            for nkey in self._neighbors(cx, cy):
                if nkey in closed:
                    continue
                if tentative_g < g_score.get(nkey, 1 << 62):
                    g_score[nkey] = tentative_g
                    came_from[nkey] = ckey
                    h = abs(nkey[0] - gx) + abs(nkey[1] - gy)  # Manhattan heuristic
                    counter += 1
                    heapq.heappush(open_heap, (tentative_g + h, counter, nkey[0], nkey[1]))

        return []

    @staticmethod
    def _reconstruct(came_from: dict[Cell, Cell], current: Cell) -> list[Vector2]:
        """Walk back through came_from to build the path (start included)."""
        path: list[Vector2] = [Vector2(*current)]
        while current in came_from:
            current = came_from[current]
            path.append(Vector2(*current))
        path.reverse()
        return path

    # ------------------------------------------------------------------
    # Cover
    # ------------------------------------------------------------------

    def cover_positions(self, origin: Vector2, player: Vector2, enemy: Vector2, radius: int) -> list[Vector2]:
        """Free cells within a square of *radius* around *origin* that the
        player can see and the enemy cannot."""
        out: list[Vector2] = []
        for dx in range(-radius, radius + 1):
            for dy in range(-radius, radius + 1):
                nx, ny = origin.x + dx, origin.y + dy
                if not in_bounds(nx, ny, self._bounds) or (nx, ny) in self._obstacles:
                    continue
                cell = Vector2(nx, ny)
                if has_line_of_sight(self._obstacles, player, cell) and not has_line_of_sight(
                    self._obstacles, enemy, cell
                ):
                    out.append(cell)
        return out
