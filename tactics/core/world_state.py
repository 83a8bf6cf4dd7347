"""Mutable authoritative world state.

One WorldState per simulation; it owns every component store, the obstacle
set, the entity id allocator and the clock. Nothing here removes an entity:
entity lifetime spans the whole WorldState lifetime.
"""

from __future__ import annotations

import logging

from tactics.core.enums import Team
from tactics.core.grid import Cell
from tactics.core.models import Ammo, Cooldowns, Health, Pose, Vector2

logger = logging.getLogger(__name__)


class WorldState:
    """The single source of truth for the simulation."""

    __slots__ = ("t", "obstacles", "_next_entity_id", "_poses", "_health", "_team", "_ammo", "_cooldowns", "_names")

    def __init__(self) -> None:
        self.t: float = 0.0
        self.obstacles: set[Cell] = set()
        self._next_entity_id: int = 1
        self._poses: dict[int, Pose] = {}
        self._health: dict[int, Health] = {}
        self._team: dict[int, Team] = {}
        self._ammo: dict[int, Ammo] = {}
        self._cooldowns: dict[int, Cooldowns] = {}
        self._names: dict[int, str] = {}

    # -- lifecycle --

    def allocate_entity_id(self) -> int:
        eid = self._next_entity_id
        self._next_entity_id += 1
        return eid

    def spawn(self, name: str, pos: Vector2, team: Team, hp: int, ammo: int) -> int:
        """Create an entity with the default component set and return its id."""
        eid = self.allocate_entity_id()
        self._poses[eid] = Pose(pos)
        self._health[eid] = Health(hp)
        self._team[eid] = Team(team)
        self._ammo[eid] = Ammo(ammo)
        self._cooldowns[eid] = Cooldowns()
        self._names[eid] = name
        logger.debug("Spawned #%d %r at %s (team=%s hp=%d)", eid, name, pos, Team(team).name, hp)
        return eid

    def tick(self, dt: float) -> None:
        """Advance the clock and decay every cooldown toward zero."""
        self.t += dt
        for cds in self._cooldowns.values():
            cds.decay(dt)

    # -- accessors (None when the entity or component is absent) --

    def pose(self, eid: int) -> Pose | None:
        return self._poses.get(eid)

    def pos_of(self, eid: int) -> Vector2 | None:
        pose = self._poses.get(eid)
        return pose.pos if pose is not None else None

    def set_pos(self, eid: int, pos: Vector2) -> None:
        pose = self._poses.get(eid)
        if pose is not None:
            pose.pos = pos

    def health(self, eid: int) -> Health | None:
        return self._health.get(eid)

    def team(self, eid: int) -> Team | None:
        return self._team.get(eid)

    def ammo(self, eid: int) -> Ammo | None:
        return self._ammo.get(eid)

    def cooldowns(self, eid: int) -> Cooldowns | None:
        return self._cooldowns.get(eid)

    def name(self, eid: int) -> str | None:
        return self._names.get(eid)

    # -- queries --

    def entities(self) -> list[int]:
        """All entity ids, in allocation order."""
        return sorted(self._poses)

    def all_of_team(self, team: Team) -> list[int]:
        return sorted(eid for eid, t in self._team.items() if t == team)

    def enemies_of(self, team: Team) -> list[int]:
        return sorted(eid for eid, t in self._team.items() if t != team)

    def is_obstacle(self, pos: Vector2) -> bool:
        return (pos.x, pos.y) in self.obstacles

    def add_obstacles(self, cells: list[Cell]) -> int:
        """Block *cells*; return how many were newly blocked."""
        before = len(self.obstacles)
        self.obstacles.update(cells)
        return len(self.obstacles) - before
