"""BossDirector: single-phase heuristic director.

Ranged player (far from the boss): raise a choke at the midpoint.
Close player: flank with a small wave and drop a line of rubble between them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tactics.core.models import Rect, Vector2
from tactics.director.schema import Collapse, DirectorPlan, Fortify, SpawnWave

if TYPE_CHECKING:
    from tactics.core.snapshot import WorldSnapshot
    from tactics.director.schema import DirectorBudget, DirectorOp

RANGED_DISTANCE = 8
# Where a wave appears relative to the player.
FLANK_OFFSET = Vector2(-2, 1)
# Assumed boss position when the snapshot lists no enemies.
DEFAULT_TARGET_OFFSET = Vector2(6, 0)


def director_target(snapshot: WorldSnapshot) -> Vector2:
    boss = snapshot.boss
    if boss is not None:
        return boss.pos
    return snapshot.player.pos + DEFAULT_TARGET_OFFSET


def choke_rect(center: Vector2) -> Rect:
    return Rect(x0=center.x - 1, y0=center.y - 1, x1=center.x + 1, y1=center.y + 1)


class BossDirector:
    __slots__ = ()

    def plan(self, snapshot: WorldSnapshot, budget: DirectorBudget) -> DirectorPlan:
        ppos = snapshot.player.pos
        target = director_target(snapshot)
        mid = ppos.midpoint(target)
        ops: list[DirectorOp] = []

        if ppos.manhattan(target) > RANGED_DISTANCE and budget.terrain_edits > 0:
            ops.append(Fortify(rect=choke_rect(mid)))
        else:
            if budget.spawns > 0:
                ops.append(SpawnWave(archetype="minion", count=3, origin=ppos + FLANK_OFFSET))
            if budget.terrain_edits > 0:
                ops.append(Collapse(a=ppos, b=mid))
        return DirectorPlan(ops=tuple(ops))
