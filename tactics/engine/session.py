"""EncounterSession: one companion, one player, a boss fight, one tick at a time.

Tick cycle:
  1. Advance: world clock and cooldowns
  2. Perceive: build the companion's snapshot (the only copy out of the store)
  3. Plan & Execute: ask the orchestrator, validate + apply its plan
  4. Direct: phase director reacts to boss health and edits the world

The session is the single owner of its WorldState; callers that share it
across threads must serialize access (the API's EngineManager does).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tactics.ai.orchestrator import RuleOrchestrator
from tactics.ai.perception import Perception
from tactics.config import SimulationConfig
from tactics.core.enums import Team
from tactics.core.models import Vector2
from tactics.core.world_state import WorldState
from tactics.director.ops import apply_director_plan
from tactics.director.phase import PhaseDirector, PhaseSpec
from tactics.director.schema import DirectorBudget
from tactics.engine.validator import validate_and_execute
from tactics.errors import EngineError
from tactics.utils.event_log import EventLog

if TYPE_CHECKING:
    from tactics.actions.schema import PlanIntent
    from tactics.ai.orchestrator import Orchestrator
    from tactics.core.snapshot import WorldSnapshot
    from tactics.director.schema import DirectorOp

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TickReport:
    """What happened during one ``EncounterSession.step``."""

    t: float
    plan: PlanIntent | None = None
    error: EngineError | None = None
    phase_name: str | None = None
    telegraphs: tuple[str, ...] = ()
    applied_ops: list[DirectorOp] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


class EncounterSession:
    """Drives the per-tick flow for one encounter."""

    __slots__ = (
        "world",
        "config",
        "orchestrator",
        "companion",
        "player",
        "enemies",
        "phase_director",
        "budget",
        "objective",
        "event_log",
        "ticks",
    )

    def __init__(
        self,
        world: WorldState,
        config: SimulationConfig,
        orchestrator: Orchestrator,
        companion: int,
        player: int,
        enemies: list[int],
        phase_director: PhaseDirector | None = None,
        budget: DirectorBudget | None = None,
        objective: str | None = None,
        event_log: EventLog | None = None,
    ) -> None:
        self.world = world
        self.config = config
        self.orchestrator = orchestrator
        self.companion = companion
        self.player = player
        self.enemies = list(enemies)
        self.phase_director = phase_director
        self.budget = budget if budget is not None else DirectorBudget()
        self.objective = objective
        self.event_log = event_log if event_log is not None else EventLog()
        self.ticks = 0

    def snapshot(self) -> WorldSnapshot:
        return Perception.build_snapshot(
            self.world,
            self.player,
            self.companion,
            self.enemies,
            self.objective,
            self.config.perception_config(),
        )

    def execute(self, plan: PlanIntent) -> EngineError | None:
        """Run *plan* for the companion; return the error instead of raising."""
        sink = self.event_log.sink("plan", self.world.t, (self.companion,))
        try:
            validate_and_execute(self.world, self.companion, plan, self.config.validate_config(), sink)
        except EngineError as exc:
            logger.info("Plan %s stopped at step %s: %s", plan.plan_id, exc.step_index, exc)
            return exc
        return None

    def step(self) -> TickReport:
        # 1. Advance
        self.world.tick(self.config.dt)
        self.ticks += 1
        report = TickReport(t=self.world.t)

        # 2-3. Perceive, plan, execute
        snapshot = self.snapshot()
        plan = self.orchestrator.propose_plan(snapshot)
        report.plan = plan
        report.error = self.execute(plan)

        # 4. Direct
        if self.phase_director is not None:
            phase_plan = self.phase_director.step(self.snapshot(), self.budget)
            report.phase_name = phase_plan.phase_name
            report.telegraphs = phase_plan.telegraphs
            for line in phase_plan.telegraphs:
                self.event_log.sink("telegraph", self.world.t)(line)
            report.applied_ops = apply_director_plan(
                self.world,
                self.budget,
                phase_plan.director,
                self.event_log.sink("director", self.world.t),
                self.config,
            )
            # Waves join the snapshot after the boss, which stays first.
            self.enemies.extend(
                eid for eid in self.world.all_of_team(Team.ENEMY) if eid not in self.enemies
            )

        logger.debug(
            "Tick %d t=%.2f plan=%s ok=%s ops=%d",
            self.ticks, report.t, plan.plan_id, report.ok, len(report.applied_ops),
        )
        return report

    def run(self, ticks: int) -> list[TickReport]:
        return [self.step() for _ in range(ticks)]


DEFAULT_PHASES: tuple[PhaseSpec, ...] = (
    PhaseSpec(name="Dreadwatch", hp_threshold=250, terrain_bias=0.6, aggression=0.3),
    PhaseSpec(name="Lashing Gale", hp_threshold=150, terrain_bias=0.3, aggression=0.6),
    PhaseSpec(name="Terminal Spiral", hp_threshold=50, terrain_bias=0.7, aggression=0.9),
)


def build_demo_session(config: SimulationConfig | None = None) -> EncounterSession:
    """Standard arena: player and companion on the west side, boss to the east."""
    config = config or SimulationConfig()
    world = WorldState()
    player = world.spawn("Player", Vector2(2, 2), Team.PLAYER, 100, 0)
    companion = world.spawn("Companion", Vector2(3, 2), Team.COMPANION, 80, 30)
    boss = world.spawn("Boss", Vector2(14, 2), Team.ENEMY, 300, 0)
    return EncounterSession(
        world=world,
        config=config,
        orchestrator=RuleOrchestrator(),
        companion=companion,
        player=player,
        enemies=[boss],
        phase_director=PhaseDirector(list(DEFAULT_PHASES)),
        budget=DirectorBudget(traps=2, terrain_edits=3, spawns=2),
        objective="defeat_boss",
    )
