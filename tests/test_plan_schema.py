"""Tests for the plan schema, tool registry and plan parsing."""

import json

import pytest

from tactics.actions.schema import CoverFire, MoveTo, PlanIntent, Revive, Throw
from tactics.actions.tools import Constraints, ToolRegistry, ToolSpec, parse_plan, plan_to_json
from tactics.core.enums import ActionKind
from tactics.errors import PlanRejected

_PLAN_JSON = json.dumps({
    "plan_id": "p-7",
    "steps": [
        {"act": "Throw", "item": "smoke", "x": 5, "y": 2},
        {"act": "MoveTo", "x": 4, "y": 2},
        {"act": "CoverFire", "target_id": 3, "duration": 2.5},
        {"act": "Revive", "ally_id": 1},
    ],
})


class TestSchema:
    def test_step_kinds(self):
        assert MoveTo(x=1, y=2).kind == ActionKind.MOVE_TO
        assert Throw(item="smoke", x=1, y=2).kind == ActionKind.THROW
        assert CoverFire(target_id=3, duration=1.0).kind == ActionKind.COVER_FIRE
        assert Revive(ally_id=1).kind == ActionKind.REVIVE

    def test_plan_keeps_step_order(self):
        plan = PlanIntent(plan_id="x", steps=(MoveTo(x=1, y=1), Revive(ally_id=2), MoveTo(x=2, y=2)))
        assert [s.act for s in plan.steps] == ["MoveTo", "Revive", "MoveTo"]

    def test_empty_plan(self):
        assert PlanIntent(plan_id="idle").steps == ()


class TestParsePlan:
    def test_parses_all_step_kinds(self):
        plan = parse_plan(_PLAN_JSON, ToolRegistry.basic_combat())
        assert plan.plan_id == "p-7"
        assert plan.steps == (
            Throw(item="smoke", x=5, y=2),
            MoveTo(x=4, y=2),
            CoverFire(target_id=3, duration=2.5),
            Revive(ally_id=1),
        )

    def test_surrounding_whitespace_is_ignored(self):
        plan = parse_plan("\n  " + _PLAN_JSON + "  \n", ToolRegistry.basic_combat())
        assert len(plan.steps) == 4

    def test_serialized_plan_parses_back(self):
        plan = PlanIntent(plan_id="q", steps=(MoveTo(x=3, y=4), CoverFire(target_id=9, duration=1.5)))
        assert parse_plan(plan_to_json(plan), ToolRegistry.basic_combat()) == plan

    @pytest.mark.parametrize("text", [
        "not json",
        json.dumps({"steps": []}),
        json.dumps({"plan_id": "p", "steps": [{"act": "Teleport", "x": 1, "y": 1}]}),
        json.dumps({"plan_id": "p", "steps": [{"x": 1, "y": 1}]}),
        json.dumps({"plan_id": "p", "steps": [{"act": "MoveTo", "x": "left", "y": 1}]}),
    ])
    def test_malformed_plans_rejected(self, text):
        with pytest.raises(PlanRejected):
            parse_plan(text, ToolRegistry.basic_combat())

    def test_disallowed_tool_rejected(self):
        registry = ToolRegistry(tools=(ToolSpec("move_to", {"x": "i32", "y": "i32"}),))
        with pytest.raises(PlanRejected, match="throw"):
            parse_plan(_PLAN_JSON, registry)

    def test_item_outside_enum_rejected(self):
        text = json.dumps({"plan_id": "p", "steps": [{"act": "Throw", "item": "anvil", "x": 1, "y": 1}]})
        with pytest.raises(PlanRejected):
            parse_plan(text, ToolRegistry.basic_combat())


class TestRegistry:
    def test_basic_combat_tools(self):
        reg = ToolRegistry.basic_combat()
        assert reg.names == {"move_to", "throw", "cover_fire", "revive"}
        assert reg.spec("throw").args["item"] == "enum[smoke,grenade]"
        assert reg.spec("teleport") is None

    def test_default_constraints(self):
        c = ToolRegistry.basic_combat().constraints
        assert c == Constraints(enforce_cooldowns=True, enforce_los=True, enforce_stamina=False)

    def test_allows(self):
        reg = ToolRegistry.basic_combat()
        assert reg.allows(Throw(item="grenade", x=0, y=0))
        assert not reg.allows(Throw(item="flare", x=0, y=0))
        assert not ToolRegistry().allows(MoveTo(x=0, y=0))
