"""GET /api/v1/config: expose encounter configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from tactics.api.dependencies import get_engine_manager
from tactics.api.engine_manager import EngineManager
from tactics.api.schemas import SimulationConfigResponse

router = APIRouter()


@router.get("/config", response_model=SimulationConfigResponse)
def get_config(
    manager: EngineManager = Depends(get_engine_manager),
) -> SimulationConfigResponse:
    cfg = manager.config
    return SimulationConfigResponse(
        world_seed=cfg.world_seed,
        grid_width=cfg.grid_width,
        grid_height=cfg.grid_height,
        dt=cfg.dt,
        los_max=cfg.los_max,
        throw_cooldown=cfg.throw_cooldown,
        revive_hp=cfg.revive_hp,
        spawn_hp=cfg.spawn_hp,
    )
