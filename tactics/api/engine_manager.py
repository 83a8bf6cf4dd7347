"""EngineManager: lock-guarded owner of the encounter session for the API.

Every read and write goes through one lock, so the session keeps exactly one
owner at a time even though requests arrive on many threads.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Callable, TypeVar

from tactics.actions.tools import ToolRegistry, parse_plan
from tactics.engine.session import EncounterSession, TickReport, build_demo_session
from tactics.errors import EngineError

if TYPE_CHECKING:
    from tactics.config import SimulationConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EngineManager:
    """Manages one EncounterSession on behalf of the API."""

    def __init__(
        self,
        config: SimulationConfig,
        factory: Callable[[SimulationConfig], EncounterSession] = build_demo_session,
    ) -> None:
        self._config = config
        self._factory = factory
        self._lock = threading.Lock()
        self._registry = ToolRegistry.basic_combat()
        self._session: EncounterSession = factory(config)

    @property
    def config(self) -> SimulationConfig:
        return self._config

    def read(self, fn: Callable[[EncounterSession], T]) -> T:
        """Run *fn* against the session while holding the lock."""
        with self._lock:
            return fn(self._session)

    # -- control --

    def step(self, ticks: int = 1) -> list[TickReport]:
        with self._lock:
            return self._session.run(ticks)

    def reset(self) -> None:
        with self._lock:
            self._session = self._factory(self._config)
        logger.info("Session reset.")

    # -- external plans --

    def submit_plan(self, text: str) -> tuple[str, EngineError | None, float]:
        """Parse *text* and execute it for the companion.

        Raises PlanRejected when the plan is malformed or uses a disallowed
        tool; execution failures are returned, not raised.
        """
        plan = parse_plan(text, self._registry)
        with self._lock:
            error = self._session.execute(plan)
            return plan.plan_id, error, self._session.world.t
