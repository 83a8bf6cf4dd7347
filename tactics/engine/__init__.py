"""Engine layer: plan validation/execution and the encounter session."""

from tactics.engine.session import EncounterSession, TickReport, build_demo_session
from tactics.engine.validator import validate_and_execute

__all__ = ["EncounterSession", "TickReport", "build_demo_session", "validate_and_execute"]
