"""POST /api/v1/plan: execute an externally produced plan for the companion.

The body is the plan JSON exactly as a remote planner emits it. Structural
problems are a 422; a rule failure during execution is a normal response
with ``status="stopped"`` since earlier steps have already been applied.
"""

from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from tactics.api.dependencies import get_engine_manager
from tactics.api.engine_manager import EngineManager
from tactics.api.schemas import PlanResultResponse
from tactics.errors import PlanRejected

router = APIRouter()


def run_plan(manager: EngineManager, text: str) -> PlanResultResponse:
    try:
        plan_id, error, t = manager.submit_plan(text)
    except PlanRejected as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    if error is None:
        return PlanResultResponse(plan_id=plan_id, status="ok", t=t)
    return PlanResultResponse(
        plan_id=plan_id,
        status="stopped",
        error_kind=error.kind,
        error=str(error),
        failed_step=error.step_index,
        t=t,
    )


@router.post("/plan", response_model=PlanResultResponse)
def submit_plan(
    payload: dict[str, Any] = Body(...),
    manager: EngineManager = Depends(get_engine_manager),
) -> PlanResultResponse:
    return run_plan(manager, json.dumps(payload))
