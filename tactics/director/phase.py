"""PhaseDirector: multi-phase boss encounters keyed to boss health.

Phases are ordered; the cursor only moves forward. A sharp health drop can
cross several thresholds in a single ``step`` call, and every crossing emits
its own telegraph. The active phase's ``terrain_bias`` picks the op pattern:

  bias > 0.5 with terrain budget -> one Fortify choke at the player/boss midpoint
  otherwise -> a SpawnWave behind the player plus a Collapse toward the midpoint,
               each only while its budget counter is positive
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable

from pydantic import TypeAdapter
from pydantic.dataclasses import dataclass as pydantic_dataclass

from tactics.director.boss import FLANK_OFFSET, choke_rect, director_target
from tactics.director.schema import Collapse, DirectorPlan, Fortify, SpawnWave

if TYPE_CHECKING:
    from tactics.core.snapshot import WorldSnapshot
    from tactics.director.schema import DirectorBudget, DirectorOp

logger = logging.getLogger(__name__)

TELEGRAPH_FORTIFY = "The ground trembles, ramparts rise!"
TELEGRAPH_SPAWN = "A spectral cohort joins the fray!"
TELEGRAPH_COLLAPSE = "Bridges shatter, paths rerouted!"


@pydantic_dataclass(frozen=True)
class PhaseSpec:
    name: str
    hp_threshold: int       # entering this phase once boss hp <= threshold
    terrain_bias: float     # 0..1, preference for terrain edits over spawns
    aggression: float       # 0..1


_phases_ta = TypeAdapter(list[PhaseSpec])


def load_phases(data: Iterable[dict[str, Any]]) -> list[PhaseSpec]:
    """Validate encounter-authoring data into PhaseSpecs."""
    return _phases_ta.validate_python(list(data))


@dataclass(slots=True)
class PhaseState:
    idx: int = 0
    last_switch_t: float = 0.0
    telegraph: str | None = None


@dataclass(frozen=True, slots=True)
class PhasePlan:
    phase_name: str
    telegraphs: tuple[str, ...]
    director: DirectorPlan


@dataclass
class PhaseDirector:
    phases: list[PhaseSpec]
    state: PhaseState = field(default_factory=PhaseState)

    def __post_init__(self) -> None:
        if not self.phases:
            raise ValueError("PhaseDirector needs at least one phase")

    @property
    def current(self) -> PhaseSpec:
        return self.phases[self.state.idx]

    @property
    def is_final(self) -> bool:
        return self.state.idx == len(self.phases) - 1

    def _advance(self, boss_hp: int, t: float) -> list[str]:
        telegraphs: list[str] = []
        while self.state.idx + 1 < len(self.phases) and boss_hp <= self.phases[self.state.idx + 1].hp_threshold:
            self.state.idx += 1
            self.state.last_switch_t = t
            self.state.telegraph = f"Boss shifts into phase: {self.phases[self.state.idx].name}"
            telegraphs.append(self.state.telegraph)
            logger.info("Phase -> %d (%s) at t=%.2f, boss hp=%d",
                        self.state.idx, self.current.name, t, boss_hp)
        return telegraphs

    def step(self, snapshot: WorldSnapshot, budget: DirectorBudget) -> PhasePlan:
        """Maybe advance the phase, then propose the active phase's ops."""
        telegraphs: list[str] = []
        boss = snapshot.boss
        if boss is not None:
            telegraphs.extend(self._advance(boss.hp, snapshot.t))

        phase = self.current
        ppos = snapshot.player.pos
        mid = ppos.midpoint(director_target(snapshot))
        ops: list[DirectorOp] = []

        if phase.terrain_bias > 0.5 and budget.terrain_edits > 0:
            ops.append(Fortify(rect=choke_rect(mid)))
            telegraphs.append(TELEGRAPH_FORTIFY)
        else:
            if budget.spawns > 0:
                ops.append(SpawnWave(archetype="phase_add", count=4, origin=ppos + FLANK_OFFSET))
                telegraphs.append(TELEGRAPH_SPAWN)
            if budget.terrain_edits > 0:
                ops.append(Collapse(a=ppos, b=mid))
                telegraphs.append(TELEGRAPH_COLLAPSE)

        return PhasePlan(phase_name=phase.name, telegraphs=tuple(telegraphs), director=DirectorPlan(ops=tuple(ops)))
