"""MoveToAction: reachability check, then a direct pose update.

Only static obstacles matter; other entities never block a move and the
actor does not pass through intermediate cells.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tactics.ai.pathfinding import Pathfinder
from tactics.core.models import Vector2
from tactics.errors import NoPath

if TYPE_CHECKING:
    from tactics.actions.schema import MoveTo
    from tactics.config import ValidateConfig
    from tactics.core.world_state import WorldState


class MoveToAction:
    """Stateless handler for MoveTo steps."""

    @staticmethod
    def validate(step: MoveTo, world: WorldState, origin: Vector2, config: ValidateConfig) -> Vector2:
        dest = Vector2(step.x, step.y)
        if not Pathfinder(world.obstacles, config.bounds).path_exists(origin, dest):
            raise NoPath()
        return dest

    @staticmethod
    def apply(actor: int, dest: Vector2, world: WorldState) -> str:
        world.set_pos(actor, dest)
        return f"MOVE_TO -> ({dest.x},{dest.y})"
