"""GET /api/v1/map: grid size and blocked cells."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from tactics.api.dependencies import get_engine_manager
from tactics.api.engine_manager import EngineManager
from tactics.api.schemas import MapResponse

router = APIRouter()


@router.get("/map", response_model=MapResponse)
def get_map(manager: EngineManager = Depends(get_engine_manager)) -> MapResponse:
    cfg = manager.config
    obstacles = manager.read(lambda s: sorted(s.world.obstacles))
    return MapResponse(width=cfg.grid_width, height=cfg.grid_height, obstacles=obstacles)
