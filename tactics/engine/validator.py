"""Plan validation and execution against the live WorldState.

Steps run strictly in order. The first illegal step raises its EngineError
and ends the plan; steps already applied stay applied (no rollback). Wrap
the call with a copy-then-commit layer if a caller needs atomic plans.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tactics.actions.combat import CoverFireAction, ReviveAction
from tactics.actions.move import MoveToAction
from tactics.actions.schema import CoverFire, MoveTo, Revive, Throw
from tactics.actions.throw import ThrowAction
from tactics.errors import EngineError, InvalidAction

if TYPE_CHECKING:
    from tactics.actions.schema import ActionStep, PlanIntent
    from tactics.config import ValidateConfig
    from tactics.core.models import Vector2
    from tactics.core.world_state import WorldState
    from tactics.utils.event_log import LogSink

logger = logging.getLogger(__name__)


def _actor_pos(world: WorldState, actor: int) -> Vector2:
    pos = world.pos_of(actor)
    if pos is None:
        raise InvalidAction(f"actor #{actor} has no pose")
    return pos


def _execute_step(world: WorldState, actor: int, step: ActionStep, config: ValidateConfig) -> str:
    """Validate then apply one step; return its trace line."""
    match step:
        case MoveTo():
            dest = MoveToAction.validate(step, world, _actor_pos(world, actor), config)
            return MoveToAction.apply(actor, dest, world)

        case Throw():
            cooldowns = world.cooldowns(actor)
            if cooldowns is None:
                raise InvalidAction(f"actor #{actor} has no cooldowns")
            key = ThrowAction.validate(step, world, _actor_pos(world, actor), cooldowns)
            return ThrowAction.apply(step, key, cooldowns, config.throw_cooldown)

        case CoverFire():
            CoverFireAction.validate(step, world, _actor_pos(world, actor))
            return CoverFireAction.apply(step, actor, world, config)

        case Revive():
            return ReviveAction.apply(step, world, config.revive_hp)

    raise InvalidAction(f"unknown step {step!r}")


def validate_and_execute(
    world: WorldState,
    actor: int,
    plan: PlanIntent,
    config: ValidateConfig,
    log: LogSink,
) -> None:
    """Apply *plan* for *actor*, raising the first step's EngineError."""
    log(f"Plan {plan.plan_id} with {len(plan.steps)} steps")
    for i, step in enumerate(plan.steps):
        try:
            line = _execute_step(world, actor, step, config)
        except EngineError as exc:
            exc.step_index = i
            log(f"  [{i}] {step.act} failed: {exc}")
            logger.debug("Plan %s aborted at step %d for #%d: %s", plan.plan_id, i, actor, exc)
            raise
        log(f"  [{i}] {line}")
