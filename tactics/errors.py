"""Engine error taxonomy.

Every error is fatal to the remainder of the plan being executed and to
nothing else; the caller decides whether to retry, skip the actor or surface
the failure. Side effects of earlier steps are kept.
"""

from __future__ import annotations


class EngineError(Exception):
    """Base class for plan execution failures."""

    kind: str = "engine_error"

    def __init__(self, message: str, step_index: int | None = None) -> None:
        super().__init__(message)
        self.step_index = step_index


class InvalidAction(EngineError):
    """A referenced entity or target no longer exists."""

    kind = "invalid_action"

    def __init__(self, reason: str, step_index: int | None = None) -> None:
        super().__init__(f"invalid action: {reason}", step_index)
        self.reason = reason


class CooldownBlocked(EngineError):
    """The ability is still cooling down."""

    kind = "cooldown"

    def __init__(self, key: str, step_index: int | None = None) -> None:
        super().__init__(f"cooldown blocked: {key}", step_index)
        self.key = key


class LosBlocked(EngineError):
    kind = "los_blocked"

    def __init__(self, step_index: int | None = None) -> None:
        super().__init__("line of sight blocked", step_index)


class NoPath(EngineError):
    kind = "no_path"

    def __init__(self, step_index: int | None = None) -> None:
        super().__init__("path not found", step_index)


class PlanRejected(ValueError):
    """A plan failed deserialization or the tool allowlist."""
