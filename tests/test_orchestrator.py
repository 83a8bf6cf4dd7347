"""Tests for the orchestrator boundary and the rule-based companion."""

from tactics.actions.schema import CoverFire, MoveTo, PlanIntent, Throw
from tactics.ai.orchestrator import Orchestrator, RuleOrchestrator
from tests.helpers.snapshots import make_snapshot


class _Scripted:
    """A test double that replays one fixed plan."""

    def __init__(self, plan: PlanIntent) -> None:
        self.plan = plan
        self.seen = []

    def propose_plan(self, snapshot):
        self.seen.append(snapshot)
        return self.plan


class TestOrchestratorProtocol:
    def test_rule_orchestrator_conforms(self):
        assert isinstance(RuleOrchestrator(), Orchestrator)

    def test_any_propose_plan_object_conforms(self):
        assert isinstance(_Scripted(PlanIntent(plan_id="x")), Orchestrator)

    def test_unrelated_object_does_not(self):
        assert not isinstance(object(), Orchestrator)


class TestRuleOrchestrator:
    def test_smoke_ready(self):
        snap = make_snapshot(me=(3, 2), enemies=((7, (14, 2), 300),), t=1.25)
        plan = RuleOrchestrator().propose_plan(snap)
        assert plan.plan_id == "plan-1250"
        assert plan.steps == (
            Throw(item="smoke", x=8, y=2),
            MoveTo(x=5, y=2),
            CoverFire(target_id=7, duration=2.5),
        )

    def test_smoke_cooling_down(self):
        snap = make_snapshot(me=(3, 2), enemies=((7, (14, 2), 300),), cooldowns={"throw:smoke": 4.0})
        plan = RuleOrchestrator().propose_plan(snap)
        assert plan.steps == (MoveTo(x=4, y=2), CoverFire(target_id=7, duration=1.5))

    def test_other_cooldowns_ignored(self):
        snap = make_snapshot(cooldowns={"throw:grenade": 4.0})
        assert isinstance(RuleOrchestrator().propose_plan(snap).steps[0], Throw)

    def test_moves_toward_first_enemy_diagonally(self):
        snap = make_snapshot(me=(10, 8), enemies=((2, (4, 1), 50), (3, (19, 9), 50)),
                             cooldowns={"throw:smoke": 1.0})
        plan = RuleOrchestrator().propose_plan(snap)
        assert plan.steps[0] == MoveTo(x=9, y=7)
        assert plan.steps[1].target_id == 2

    def test_same_cell_holds_position(self):
        snap = make_snapshot(me=(5, 5), enemies=((2, (5, 5), 50),), cooldowns={"throw:smoke": 1.0})
        assert RuleOrchestrator().propose_plan(snap).steps[0] == MoveTo(x=5, y=5)

    def test_no_enemies_empty_plan(self):
        plan = RuleOrchestrator().propose_plan(make_snapshot(enemies=(), t=0.5))
        assert plan == PlanIntent(plan_id="plan-500", steps=())

    def test_deterministic(self):
        snap = make_snapshot()
        assert RuleOrchestrator().propose_plan(snap) == RuleOrchestrator().propose_plan(snap)
