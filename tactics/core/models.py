"""Core data models: Vector2, Rect and the per-entity components."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic.dataclasses import dataclass as pydantic_dataclass


def _half(n: int) -> int:
    return n // 2 if n >= 0 else -(-n // 2)


@pydantic_dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D integer coordinate."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def manhattan(self, other: Vector2) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def midpoint(self, other: Vector2) -> Vector2:
        """Integer midpoint, truncated toward zero on each axis."""
        return Vector2(_half(self.x + other.x), _half(self.y + other.y))

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


@pydantic_dataclass(frozen=True, slots=True)
class Rect:
    """Inclusive axis-aligned cell rectangle."""

    x0: int
    y0: int
    x1: int
    y1: int

    def cells(self) -> list[tuple[int, int]]:
        """Every cell covered by the rectangle, corners in any order."""
        lo_x, hi_x = min(self.x0, self.x1), max(self.x0, self.x1)
        lo_y, hi_y = min(self.y0, self.y1), max(self.y0, self.y1)
        return [(x, y) for y in range(lo_y, hi_y + 1) for x in range(lo_x, hi_x + 1)]


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Pose:
    pos: Vector2


@dataclass(slots=True)
class Health:
    """Hit points. Damage never clamps; only revival sets a floor."""

    hp: int


@dataclass(slots=True)
class Ammo:
    rounds: int = 0

    def spend(self, n: int) -> None:
        self.rounds = max(0, self.rounds - n)


@dataclass(slots=True)
class Cooldowns:
    """Ability key -> seconds remaining."""

    map: dict[str, float] = field(default_factory=dict)

    def remaining(self, key: str) -> float:
        return self.map.get(key, 0.0)

    def decay(self, dt: float) -> None:
        for key, value in self.map.items():
            self.map[key] = max(0.0, value - dt)

    def copy(self) -> Cooldowns:
        return Cooldowns(map=dict(self.map))
