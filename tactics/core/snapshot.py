"""Immutable, partially-observed view of the world for one planning cycle.

Snapshots are built by ``tactics.ai.perception.Perception`` and handed to an
orchestrator. They never alias WorldState memory, so an orchestrator may hold
one for as long as it likes (including across a remote call) without
touching live state.
"""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter
from pydantic.dataclasses import dataclass as pydantic_dataclass

from tactics.core.models import Vector2


@pydantic_dataclass(frozen=True)
class PlayerState:
    hp: int
    pos: Vector2
    stance: str = "crouch"
    orders: tuple[str, ...] = ()


@pydantic_dataclass(frozen=True)
class CompanionState:
    ammo: int
    cooldowns: tuple[tuple[str, float], ...]   # (key, seconds) pairs, sorted by key
    morale: float
    pos: Vector2

    def cooldown(self, key: str) -> float:
        for k, remaining in self.cooldowns:
            if k == key:
                return remaining
        return 0.0


@pydantic_dataclass(frozen=True)
class EnemyState:
    id: int
    pos: Vector2
    hp: int
    cover: str          # "low" inside the perception radius, "unknown" beyond
    last_seen: float


@pydantic_dataclass(frozen=True)
class Poi:
    """Point of interest."""

    k: str
    pos: Vector2


@pydantic_dataclass(frozen=True)
class WorldSnapshot:
    t: float
    player: PlayerState
    me: CompanionState
    enemies: tuple[EnemyState, ...]
    pois: tuple[Poi, ...]
    objective: str | None = None

    @property
    def boss(self) -> EnemyState | None:
        """The first listed enemy, treated as the encounter boss by directors."""
        return self.enemies[0] if self.enemies else None


_snapshot_ta = TypeAdapter(WorldSnapshot)


def snapshot_to_dict(snapshot: WorldSnapshot) -> dict[str, Any]:
    """JSON-compatible dump, for orchestrators living behind a transport."""
    return _snapshot_ta.dump_python(snapshot, mode="json")


def snapshot_from_dict(data: dict[str, Any]) -> WorldSnapshot:
    return _snapshot_ta.validate_python(data)
