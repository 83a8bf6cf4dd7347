"""Action system: plan schema, tool registry, and per-step handlers."""

from tactics.actions.combat import CoverFireAction, ReviveAction
from tactics.actions.move import MoveToAction
from tactics.actions.schema import ActionStep, CoverFire, MoveTo, PlanIntent, Revive, Throw
from tactics.actions.throw import ThrowAction
from tactics.actions.tools import Constraints, ToolRegistry, ToolSpec, parse_plan, plan_to_json

__all__ = [
    "ActionStep",
    "Constraints",
    "CoverFire",
    "CoverFireAction",
    "MoveTo",
    "MoveToAction",
    "PlanIntent",
    "Revive",
    "ReviveAction",
    "Throw",
    "ThrowAction",
    "ToolRegistry",
    "ToolSpec",
    "parse_plan",
    "plan_to_json",
]
