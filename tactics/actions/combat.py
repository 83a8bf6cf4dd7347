"""Combat steps: CoverFire (suppressing damage) and Revive."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from tactics.core.grid import has_line_of_sight
from tactics.core.models import Vector2
from tactics.errors import InvalidAction, LosBlocked

if TYPE_CHECKING:
    from tactics.actions.schema import CoverFire, Revive
    from tactics.config import ValidateConfig
    from tactics.core.world_state import WorldState


def cover_fire_damage(duration: float, dmg_per_second: float) -> int:
    """Damage dealt by a burst; never less than 1."""
    return max(1, math.floor(duration * dmg_per_second))


class CoverFireAction:
    """Stateless handler for CoverFire steps.

    Ammo is not checked before firing; it is spent afterward and floored at 0.
    """

    @staticmethod
    def validate(step: CoverFire, world: WorldState, origin: Vector2) -> Vector2:
        target_pos = world.pos_of(step.target_id)
        if target_pos is None:
            raise InvalidAction("target gone")
        if not has_line_of_sight(world.obstacles, origin, target_pos):
            raise LosBlocked()
        return target_pos

    @staticmethod
    def apply(step: CoverFire, actor: int, world: WorldState, config: ValidateConfig) -> str:
        health = world.health(step.target_id)
        if health is not None:
            health.hp -= cover_fire_damage(step.duration, config.cover_fire_dmg_per_second)
        ammo = world.ammo(actor)
        if ammo is not None:
            ammo.spend(config.cover_fire_ammo_cost)
        return f"COVER_FIRE on #{step.target_id} for {step.duration:.1f}s"


class ReviveAction:
    """Stateless handler for Revive steps. Reviving a standing ally is a no-op."""

    @staticmethod
    def apply(step: Revive, world: WorldState, revive_hp: int) -> str:
        health = world.health(step.ally_id)
        if health is not None and health.hp <= 0:
            health.hp = revive_hp
        return f"REVIVE #{step.ally_id}"
