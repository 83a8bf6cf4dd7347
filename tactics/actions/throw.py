"""ThrowAction: line-of-sight and per-item cooldown."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tactics.core.grid import has_line_of_sight
from tactics.core.models import Vector2
from tactics.errors import CooldownBlocked, LosBlocked

if TYPE_CHECKING:
    from tactics.actions.schema import Throw
    from tactics.core.models import Cooldowns
    from tactics.core.world_state import WorldState


def cooldown_key(item: str) -> str:
    return f"throw:{item}"


class ThrowAction:
    """Stateless handler for Throw steps.

    The cooldown set on success is the same for every item.
    """

    @staticmethod
    def validate(step: Throw, world: WorldState, origin: Vector2, cooldowns: Cooldowns) -> str:
        if not has_line_of_sight(world.obstacles, origin, Vector2(step.x, step.y)):
            raise LosBlocked()
        key = cooldown_key(step.item)
        if cooldowns.remaining(key) > 0.0:
            raise CooldownBlocked(key)
        return key

    @staticmethod
    def apply(step: Throw, key: str, cooldowns: Cooldowns, duration: float) -> str:
        cooldowns.map[key] = duration
        return f"THROW {step.item} -> ({step.x},{step.y})"
