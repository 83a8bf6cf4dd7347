"""Versioned API route modules."""

from fastapi import APIRouter

from tactics.api.routes.config import router as config_router
from tactics.api.routes.control import router as control_router
from tactics.api.routes.map import router as map_router
from tactics.api.routes.plan import router as plan_router
from tactics.api.routes.state import router as state_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(map_router, tags=["Map"])
api_router.include_router(state_router, tags=["State"])
api_router.include_router(control_router, tags=["Control"])
api_router.include_router(plan_router, tags=["Plan"])
api_router.include_router(config_router, tags=["Config"])

__all__ = ["api_router"]
