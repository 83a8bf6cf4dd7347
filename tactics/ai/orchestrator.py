"""Orchestrator: the pluggable decision boundary.

Anything with a ``propose_plan(snapshot) -> PlanIntent`` method is an
orchestrator: rule tables, remote reasoning adapters, scripted test doubles.
The engine trusts none of them; every plan is re-validated on execution.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from tactics.actions.schema import CoverFire, MoveTo, PlanIntent, Throw
from tactics.actions.throw import cooldown_key
from tactics.core.snapshot import WorldSnapshot


@runtime_checkable
class Orchestrator(Protocol):
    def propose_plan(self, snapshot: WorldSnapshot) -> PlanIntent: ...


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


class RuleOrchestrator:
    """Deterministic baseline companion.

    Smoke available: smoke the midpoint, close two cells, long cover burst.
    Smoke cooling down: close one cell, short cover burst.
    No enemy in the snapshot: empty plan.
    """

    __slots__ = ()

    def propose_plan(self, snapshot: WorldSnapshot) -> PlanIntent:
        plan_id = f"plan-{int(snapshot.t * 1000)}"
        if not snapshot.enemies:
            return PlanIntent(plan_id=plan_id, steps=())

        first = snapshot.enemies[0]
        me = snapshot.me.pos
        sx = _sign(first.pos.x - me.x)
        sy = _sign(first.pos.y - me.y)

        if snapshot.me.cooldown(cooldown_key("smoke")) <= 0.0:
            mid = me.midpoint(first.pos)
            return PlanIntent(plan_id=plan_id, steps=(
                Throw(item="smoke", x=mid.x, y=mid.y),
                MoveTo(x=me.x + sx * 2, y=me.y + sy * 2),
                CoverFire(target_id=first.id, duration=2.5),
            ))

        return PlanIntent(plan_id=plan_id, steps=(
            MoveTo(x=me.x + sx, y=me.y + sy),
            CoverFire(target_id=first.id, duration=1.5),
        ))
