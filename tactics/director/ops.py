"""Director op engine: applies a DirectorPlan under a consumable budget.

Director ops are system-authored and advisory: an op whose budget counter is
exhausted is skipped with a log line and the rest of the plan still runs.
Nothing here raises for budget reasons.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tactics.config import SimulationConfig
from tactics.core.enums import Domain, Team
from tactics.core.grid import in_bounds, line_cells
from tactics.core.models import Vector2
from tactics.director.schema import BUDGET_COUNTER, Collapse, Fortify, SpawnWave
from tactics.systems.rng import DeterministicRNG

if TYPE_CHECKING:
    from tactics.core.world_state import WorldState
    from tactics.director.schema import DirectorBudget, DirectorOp, DirectorPlan
    from tactics.utils.event_log import LogSink

logger = logging.getLogger(__name__)


def _spawn_wave(
    world: WorldState,
    op: SpawnWave,
    op_index: int,
    rng: DeterministicRNG,
    config: SimulationConfig,
) -> list[int]:
    """Create ``op.count`` hostiles scattered around the wave origin."""
    step = int(world.t * 1000)
    r = config.spawn_scatter
    spawned: list[int] = []
    for i in range(op.count):
        key = op_index * 1000 + i
        dx = rng.next_int(Domain.SPAWN, key, step, -r, r)
        dy = rng.next_int(Domain.SPAWN_Y, key, step, -r, r)
        pos = Vector2(op.origin.x + dx, op.origin.y + dy)
        if world.is_obstacle(pos) or not in_bounds(pos.x, pos.y, config.bounds):
            pos = op.origin
        spawned.append(world.spawn(f"{op.archetype}#{i}", pos, Team.ENEMY, config.spawn_hp, 0))
    return spawned


def _apply_op(
    world: WorldState,
    op: DirectorOp,
    op_index: int,
    rng: DeterministicRNG,
    config: SimulationConfig,
) -> str:
    match op:
        case Fortify():
            added = world.add_obstacles(op.rect.cells())
            r = op.rect
            return f"FORTIFY ({r.x0},{r.y0})-({r.x1},{r.y1}) +{added} cells"

        case Collapse():
            added = world.add_obstacles(line_cells(op.a, op.b))
            return f"COLLAPSE ({op.a.x},{op.a.y})->({op.b.x},{op.b.y}) +{added} cells"

        case SpawnWave():
            ids = _spawn_wave(world, op, op_index, rng, config)
            return f"SPAWN_WAVE {op.count}x {op.archetype} at ({op.origin.x},{op.origin.y}) -> {ids}"

    raise TypeError(f"unknown director op {op!r}")


def apply_director_plan(
    world: WorldState,
    budget: DirectorBudget,
    plan: DirectorPlan,
    log: LogSink,
    config: SimulationConfig | None = None,
) -> list[DirectorOp]:
    """Apply *plan* in order, spending *budget*; return the ops applied."""
    config = config or SimulationConfig()
    rng = DeterministicRNG(config.world_seed)
    applied: list[DirectorOp] = []
    for i, op in enumerate(plan.ops):
        counter = BUDGET_COUNTER[op.kind]
        if not budget.try_spend(counter):
            log(f"  [{i}] SKIP {op.op}: {counter} budget exhausted")
            logger.debug("Director op %d (%s) skipped, %s exhausted", i, op.op, counter)
            continue
        log(f"  [{i}] {_apply_op(world, op, i, rng, config)}")
        applied.append(op)
    return applied
