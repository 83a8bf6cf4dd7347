"""POST /api/v1/control/{action}: step or reset the encounter."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from tactics.api.dependencies import get_engine_manager
from tactics.api.engine_manager import EngineManager
from tactics.api.schemas import ControlResponse

router = APIRouter()


class ControlAction(str, Enum):
    step = "step"
    reset = "reset"


@router.post("/control/{action}", response_model=ControlResponse)
def control(
    action: ControlAction,
    ticks: Annotated[int, Query(ge=1, le=1000, description="Ticks to run for 'step'")] = 1,
    manager: EngineManager = Depends(get_engine_manager),
) -> ControlResponse:
    match action:
        case ControlAction.step:
            reports = manager.step(ticks)
            telegraphs = [line for r in reports for line in r.telegraphs]
            failed = sum(1 for r in reports if not r.ok)
            return ControlResponse(
                status="ok",
                message=f"{len(reports)} tick(s) executed, {failed} plan(s) stopped early.",
                t=reports[-1].t,
                telegraphs=telegraphs,
            )

        case ControlAction.reset:
            manager.reset()
            t = manager.read(lambda s: s.world.t)
            return ControlResponse(status="ok", message="Encounter reset.", t=t)
