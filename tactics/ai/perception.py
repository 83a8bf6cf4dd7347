"""Perception system: projects the WorldState into a WorldSnapshot.

The snapshot is the only thing that crosses from live state into an
orchestrator. Every value is copied out; nothing in the result refers back
to WorldState memory.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from tactics.core.models import Vector2
from tactics.core.snapshot import CompanionState, EnemyState, PlayerState, Poi, WorldSnapshot
from tactics.errors import InvalidAction

if TYPE_CHECKING:
    from tactics.config import PerceptionConfig
    from tactics.core.world_state import WorldState

logger = logging.getLogger(__name__)

# Placeholder values until stance/orders/morale have real sources.
_DEFAULT_STANCE = "crouch"
_DEFAULT_ORDERS = ("hold_east",)
_DEFAULT_MORALE = 0.8


class Perception:
    """Stateless snapshot builder."""

    __slots__ = ()

    @staticmethod
    def cover_tag(enemy_pos: Vector2, player_pos: Vector2, los_max: int) -> str:
        """Coarse cover estimate by Manhattan distance to the player.

        Cheaper than, and independent of, grid line-of-sight.
        """
        return "unknown" if enemy_pos.manhattan(player_pos) > los_max else "low"

    @staticmethod
    def build_snapshot(
        world: WorldState,
        player: int,
        companion: int,
        enemies: Sequence[int],
        objective: str | None,
        config: PerceptionConfig,
    ) -> WorldSnapshot:
        """Build the snapshot *companion* plans against.

        Enemies without a Pose or Health are silently left out.
        """
        ppos = world.pos_of(player)
        p_health = world.health(player)
        if ppos is None or p_health is None:
            raise InvalidAction(f"player #{player} is missing pose or health")
        cpos = world.pos_of(companion)
        if cpos is None:
            raise InvalidAction(f"companion #{companion} is missing pose")

        ammo = world.ammo(companion)
        cds = world.cooldowns(companion)
        me = CompanionState(
            ammo=ammo.rounds if ammo is not None else 0,
            cooldowns=tuple(sorted(cds.map.items())) if cds is not None else (),
            morale=_DEFAULT_MORALE,
            pos=cpos,
        )
        player_state = PlayerState(
            hp=p_health.hp,
            pos=ppos,
            stance=_DEFAULT_STANCE,
            orders=_DEFAULT_ORDERS,
        )

        seen: list[EnemyState] = []
        for eid in enemies:
            epos = world.pos_of(eid)
            health = world.health(eid)
            if epos is None or health is None:
                continue
            seen.append(EnemyState(
                id=eid,
                pos=epos,
                hp=health.hp,
                cover=Perception.cover_tag(epos, ppos, config.los_max),
                last_seen=world.t,
            ))

        # TODO: confirm with encounter design whether this fixed POI is content
        # or scaffolding; it is injected into every snapshot until then.
        px, py = config.placeholder_poi_pos
        pois = (Poi(k=config.placeholder_poi_key, pos=Vector2(px, py)),)

        logger.debug("Snapshot t=%.2f for #%d: %d enemies visible", world.t, companion, len(seen))
        return WorldSnapshot(
            t=world.t,
            player=player_state,
            me=me,
            enemies=tuple(seen),
            pois=pois,
            objective=objective,
        )
