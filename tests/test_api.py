"""Tests for the debug API layer: EngineManager, serializers and route handlers.

Route handlers are plain functions, so they are called directly with an
explicit manager instead of going through an HTTP client.
"""

import json

import pytest
from fastapi import HTTPException

from tactics.api.dependencies import get_engine_manager, set_engine_manager
from tactics.api.engine_manager import EngineManager
from tactics.api.routes.config import get_config
from tactics.api.routes.control import ControlAction, control
from tactics.api.routes.map import get_map
from tactics.api.routes.plan import run_plan, submit_plan
from tactics.api.routes.state import get_state, serialize_state
from tactics.api.schemas import WorldStateResponse
from tactics.config import SimulationConfig
from tactics.core.models import Vector2
from tactics.errors import PlanRejected


@pytest.fixture
def manager():
    return EngineManager(SimulationConfig())


class TestEngineManager:
    def test_step_advances_clock(self, manager):
        reports = manager.step(4)
        assert len(reports) == 4
        assert manager.read(lambda s: s.world.t) == 1.0

    def test_reset_restores_fresh_session(self, manager):
        manager.step(3)
        manager.reset()
        assert manager.read(lambda s: (s.world.t, s.ticks, s.budget.as_tuple())) == (0.0, 0, (2, 3, 2))

    def test_submit_plan_ok(self, manager):
        plan_id, error, _ = manager.submit_plan('{"plan_id": "ext-1", "steps": [{"act": "MoveTo", "x": 3, "y": 4}]}')
        assert plan_id == "ext-1"
        assert error is None
        assert manager.read(lambda s: s.world.pos_of(s.companion)) == Vector2(3, 4)

    def test_submit_plan_rejected(self, manager):
        with pytest.raises(PlanRejected):
            manager.submit_plan('{"plan_id": "bad", "steps": [{"act": "Teleport"}]}')


class TestSerializeState:
    def test_demo_state(self, manager):
        state = manager.read(serialize_state)
        assert isinstance(state, WorldStateResponse)
        assert [e.team for e in state.entities] == ["player", "companion", "enemy"]
        assert state.budget.terrain_edits == 3
        assert state.phase.name == "Dreadwatch"
        assert state.events == []

    def test_events_after_step(self, manager):
        manager.step(1)
        state = manager.read(lambda s: serialize_state(s, limit=2))
        assert len(state.events) == 2
        comp = next(e for e in state.entities if e.team == "companion")
        assert comp.cooldowns == {"throw:smoke": 8.0}
        assert comp.ammo == 27

    def test_get_state_route(self, manager):
        assert get_state(limit=10, manager=manager).t == 0.0


class TestRoutes:
    def test_map_lists_new_obstacles(self, manager):
        assert get_map(manager=manager).obstacles == []
        manager.step(1)
        m = get_map(manager=manager)
        assert (m.width, m.height) == (20, 10)
        assert (8, 2) in m.obstacles
        assert len(m.obstacles) == 9

    def test_control_step(self, manager):
        resp = control(ControlAction.step, ticks=2, manager=manager)
        assert resp.t == 0.5
        assert "1 plan(s) stopped early" in resp.message
        assert resp.telegraphs == [
            "The ground trembles, ramparts rise!",
            "The ground trembles, ramparts rise!",
        ]

    def test_control_reset(self, manager):
        manager.step(2)
        resp = control(ControlAction.reset, manager=manager)
        assert resp.t == 0.0

    def test_config(self, manager):
        cfg = get_config(manager=manager)
        assert cfg.grid_width == 20
        assert cfg.throw_cooldown == 8.0

    def test_plan_stopped(self, manager):
        manager.read(lambda s: s.world.cooldowns(s.companion).map.update({"throw:smoke": 3.0}))
        payload = {"plan_id": "p", "steps": [
            {"act": "MoveTo", "x": 3, "y": 3},
            {"act": "Throw", "item": "smoke", "x": 5, "y": 3},
        ]}
        resp = submit_plan(payload=payload, manager=manager)
        assert resp.status == "stopped"
        assert resp.error_kind == "cooldown"
        assert resp.failed_step == 1

    def test_plan_ok(self, manager):
        resp = run_plan(manager, json.dumps({"plan_id": "q", "steps": []}))
        assert resp.status == "ok"
        assert resp.error is None

    def test_plan_rejected_is_422(self, manager):
        with pytest.raises(HTTPException) as info:
            run_plan(manager, '{"plan_id": "q", "steps": [{"act": "MoveTo", "x": "far"}]}')
        assert info.value.status_code == 422


class TestDependencies:
    def test_uninitialized_is_503(self):
        set_engine_manager(None)
        with pytest.raises(HTTPException) as info:
            get_engine_manager()
        assert info.value.status_code == 503

    def test_initialized(self, manager):
        set_engine_manager(manager)
        try:
            assert get_engine_manager() is manager
        finally:
            set_engine_manager(None)
