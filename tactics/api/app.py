"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tactics.api.dependencies import set_engine_manager
from tactics.api.engine_manager import EngineManager
from tactics.api.routes import api_router
from tactics.config import SimulationConfig
from tactics.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: SimulationConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = SimulationConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        set_engine_manager(EngineManager(_config))
        logger.info("API server started, encounter ready.")
        yield
        set_engine_manager(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Companion Tactics Core",
        description=(
            "Deterministic tactical simulation core, debug and visualization API.\n\n"
            "## API Groups\n\n"
            "- **State**: Entities, director budget, boss phase, recent events\n"
            "- **Map**: Grid size and blocked cells\n"
            "- **Control**: Step or reset the encounter\n"
            "- **Plan**: Execute an externally produced companion plan\n"
            "- **Config**: Read-only encounter configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS: any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    return app
