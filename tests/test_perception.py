"""Tests for the snapshot builder."""

import pytest

from tactics.ai.perception import Perception
from tactics.config import PerceptionConfig, SimulationConfig
from tactics.core.enums import Team
from tactics.core.models import Vector2
from tactics.core.snapshot import snapshot_from_dict, snapshot_to_dict
from tactics.core.world_state import WorldState
from tactics.errors import InvalidAction


def _arena():
    w = WorldState()
    player = w.spawn("Player", Vector2(2, 2), Team.PLAYER, 100, 0)
    comp = w.spawn("Comp", Vector2(3, 2), Team.COMPANION, 80, 30)
    near = w.spawn("Grunt", Vector2(6, 2), Team.ENEMY, 40, 0)
    far = w.spawn("Sniper", Vector2(19, 9), Team.ENEMY, 60, 0)
    return w, player, comp, near, far


class TestBuildSnapshot:
    def test_reads_player_and_companion(self):
        w, player, comp, near, far = _arena()
        w.cooldowns(comp).map["throw:smoke"] = 3.0
        snap = Perception.build_snapshot(w, player, comp, [near, far], "hold", PerceptionConfig())
        assert snap.player.hp == 100
        assert snap.player.pos == Vector2(2, 2)
        assert snap.me.ammo == 30
        assert snap.me.pos == Vector2(3, 2)
        assert snap.me.cooldowns == (("throw:smoke", 3.0),)
        assert snap.objective == "hold"

    def test_cover_tag_by_distance_to_player(self):
        w, player, comp, near, far = _arena()
        snap = Perception.build_snapshot(w, player, comp, [near, far], None, PerceptionConfig(los_max=12))
        tags = {e.id: e.cover for e in snap.enemies}
        assert tags[near] == "low"        # distance 4
        assert tags[far] == "unknown"     # distance 24

    def test_cover_tag_ignores_obstacles(self):
        w, player, comp, near, _ = _arena()
        w.add_obstacles([(4, 2), (5, 2)])
        snap = Perception.build_snapshot(w, player, comp, [near], None, PerceptionConfig())
        assert snap.enemies[0].cover == "low"

    def test_enemy_order_and_last_seen(self):
        w, player, comp, near, far = _arena()
        w.tick(1.5)
        snap = Perception.build_snapshot(w, player, comp, [far, near], None, PerceptionConfig())
        assert [e.id for e in snap.enemies] == [far, near]
        assert all(e.last_seen == pytest.approx(1.5) for e in snap.enemies)
        assert snap.t == pytest.approx(1.5)
        assert snap.boss.id == far

    def test_unknown_enemy_ids_are_skipped(self):
        w, player, comp, near, _ = _arena()
        snap = Perception.build_snapshot(w, player, comp, [near, 999], None, PerceptionConfig())
        assert [e.id for e in snap.enemies] == [near]

    def test_placeholder_poi_always_present(self):
        w, player, comp, _, _ = _arena()
        snap = Perception.build_snapshot(w, player, comp, [], None, SimulationConfig().perception_config())
        assert len(snap.pois) == 1
        assert snap.pois[0].k == "breach_door"
        assert snap.pois[0].pos == Vector2(15, 8)

    def test_missing_player_raises(self):
        w, _, comp, _, _ = _arena()
        with pytest.raises(InvalidAction):
            Perception.build_snapshot(w, 999, comp, [], None, PerceptionConfig())


class TestDetached:
    def test_snapshot_does_not_alias_live_state(self):
        w, player, comp, near, _ = _arena()
        w.cooldowns(comp).map["throw:smoke"] = 3.0
        snap = Perception.build_snapshot(w, player, comp, [near], None, PerceptionConfig())

        w.cooldowns(comp).map["throw:smoke"] = 0.0
        w.cooldowns(comp).map["throw:grenade"] = 8.0
        w.health(near).hp = 1
        w.set_pos(comp, Vector2(9, 9))
        w.tick(1.0)

        assert snap.me.cooldowns == (("throw:smoke", 3.0),)
        assert snap.enemies[0].hp == 40
        assert snap.me.pos == Vector2(3, 2)
        assert snap.t == 0.0

    def test_cooldowns_are_read_only(self):
        w, player, comp, _, _ = _arena()
        w.cooldowns(comp).map["throw:smoke"] = 3.0
        snap = Perception.build_snapshot(w, player, comp, [], None, PerceptionConfig())
        with pytest.raises(TypeError):
            snap.me.cooldowns[0] = ("throw:smoke", 99.0)
        with pytest.raises(AttributeError):
            snap.me.cooldowns = ()
        assert snap.me.cooldown("throw:smoke") == 3.0
        assert snap.me.cooldown("throw:grenade") == 0.0
        assert w.cooldowns(comp).map == {"throw:smoke": 3.0}

    def test_dict_round_trip_for_remote_planners(self):
        w, player, comp, near, _ = _arena()
        w.cooldowns(comp).map["throw:grenade"] = 2.0
        snap = Perception.build_snapshot(w, player, comp, [near], "defeat_boss", PerceptionConfig())
        data = snapshot_to_dict(snap)
        assert data["me"]["pos"] == {"x": 3, "y": 2}
        assert data["me"]["cooldowns"] == [["throw:grenade", 2.0]]
        assert data["enemies"][0]["cover"] == "low"
        assert snapshot_from_dict(data) == snap
