"""Pydantic response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


# --- Entity ---

class EntitySchema(BaseModel):
    id: int
    name: str
    team: str
    x: int
    y: int
    hp: int
    ammo: int = 0
    cooldowns: dict[str, float] = Field(default_factory=dict)


# --- Director ---

class BudgetSchema(BaseModel):
    traps: int
    terrain_edits: int
    spawns: int


class PhaseSchema(BaseModel):
    idx: int
    name: str
    last_switch_t: float
    telegraph: str | None = None


# --- World State ---

class EventSchema(BaseModel):
    t: float
    category: str
    message: str


class WorldStateResponse(BaseModel):
    t: float
    ticks: int
    entities: list[EntitySchema]
    budget: BudgetSchema
    phase: PhaseSchema | None = None
    events: list[EventSchema] = Field(default_factory=list)


# --- Map ---

class MapResponse(BaseModel):
    width: int
    height: int
    obstacles: list[tuple[int, int]] = Field(description="Blocked cells as [x, y] pairs, sorted")


# --- Control ---

class ControlResponse(BaseModel):
    status: str
    message: str
    t: float = 0.0
    telegraphs: list[str] = Field(default_factory=list)


# --- Plans ---

class PlanResultResponse(BaseModel):
    plan_id: str
    status: str
    error_kind: str | None = None
    error: str | None = None
    failed_step: int | None = None
    t: float = 0.0


# --- Config ---

class SimulationConfigResponse(BaseModel):
    world_seed: int
    grid_width: int
    grid_height: int
    dt: float
    los_max: int
    throw_cooldown: float
    revive_hp: int
    spawn_hp: int
