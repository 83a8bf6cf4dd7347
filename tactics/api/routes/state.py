"""GET /api/v1/state: entities, budget, phase and recent events."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from tactics.api.dependencies import get_engine_manager
from tactics.api.engine_manager import EngineManager
from tactics.api.schemas import BudgetSchema, EntitySchema, EventSchema, PhaseSchema, WorldStateResponse
from tactics.engine.session import EncounterSession

router = APIRouter()


def _serialize_entity(session: EncounterSession, eid: int) -> EntitySchema:
    world = session.world
    pos = world.pos_of(eid)
    health = world.health(eid)
    team = world.team(eid)
    ammo = world.ammo(eid)
    cds = world.cooldowns(eid)
    return EntitySchema(
        id=eid,
        name=world.name(eid) or "",
        team=team.name.lower() if team is not None else "none",
        x=pos.x,
        y=pos.y,
        hp=health.hp if health is not None else 0,
        ammo=ammo.rounds if ammo is not None else 0,
        cooldowns=dict(cds.map) if cds is not None else {},
    )


def serialize_state(session: EncounterSession, limit: int = 50) -> WorldStateResponse:
    phase = None
    pd = session.phase_director
    if pd is not None:
        phase = PhaseSchema(
            idx=pd.state.idx,
            name=pd.current.name,
            last_switch_t=pd.state.last_switch_t,
            telegraph=pd.state.telegraph,
        )
    b = session.budget
    return WorldStateResponse(
        t=session.world.t,
        ticks=session.ticks,
        entities=[_serialize_entity(session, eid) for eid in session.world.entities()],
        budget=BudgetSchema(traps=b.traps, terrain_edits=b.terrain_edits, spawns=b.spawns),
        phase=phase,
        events=[
            EventSchema(t=e.t, category=e.category, message=e.message)
            for e in session.event_log.latest(limit)
        ],
    )


@router.get("/state", response_model=WorldStateResponse)
def get_state(
    limit: Annotated[int, Query(ge=1, le=500, description="Max events returned")] = 50,
    manager: EngineManager = Depends(get_engine_manager),
) -> WorldStateResponse:
    return manager.read(lambda s: serialize_state(s, limit))
