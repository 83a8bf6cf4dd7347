"""Director vocabulary: budget counters, world-editing ops, plans.

``DirectorOp`` is a closed union discriminated by ``op``. Plan order is apply
order and budget-consumption order.
"""

from __future__ import annotations

from typing import Annotated, ClassVar, Literal, Union

from pydantic import Field, TypeAdapter
from pydantic.dataclasses import dataclass as pydantic_dataclass

from tactics.core.enums import DirectorOpKind
from tactics.core.models import Rect, Vector2


@pydantic_dataclass
class DirectorBudget:
    """Consumable counters; each accepted op spends one unit of its kind."""

    traps: int = 0
    terrain_edits: int = 0
    spawns: int = 0

    def try_spend(self, counter: str) -> bool:
        """Spend one unit of *counter* if any is left."""
        left = getattr(self, counter)
        if left <= 0:
            return False
        setattr(self, counter, left - 1)
        return True

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.traps, self.terrain_edits, self.spawns)


@pydantic_dataclass(frozen=True)
class Fortify:
    """Block every cell of a rectangle."""

    rect: Rect
    op: Literal["Fortify"] = "Fortify"

    kind: ClassVar[DirectorOpKind] = DirectorOpKind.FORTIFY


@pydantic_dataclass(frozen=True)
class Collapse:
    """Block a line of cells from *a* to *b* ("bridge down")."""

    a: Vector2
    b: Vector2
    op: Literal["Collapse"] = "Collapse"

    kind: ClassVar[DirectorOpKind] = DirectorOpKind.COLLAPSE


@pydantic_dataclass(frozen=True)
class SpawnWave:
    archetype: str
    count: int
    origin: Vector2
    op: Literal["SpawnWave"] = "SpawnWave"

    kind: ClassVar[DirectorOpKind] = DirectorOpKind.SPAWN_WAVE


DirectorOp = Annotated[Union[Fortify, Collapse, SpawnWave], Field(discriminator="op")]

# Budget counter consumed by each op kind.
BUDGET_COUNTER: dict[DirectorOpKind, str] = {
    DirectorOpKind.FORTIFY: "terrain_edits",
    DirectorOpKind.COLLAPSE: "terrain_edits",
    DirectorOpKind.SPAWN_WAVE: "spawns",
}


@pydantic_dataclass(frozen=True)
class DirectorPlan:
    ops: tuple[DirectorOp, ...] = ()


director_plan_adapter = TypeAdapter(DirectorPlan)
