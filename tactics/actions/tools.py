"""Tool registry: which action kinds a planner may currently use.

Lets a planner's output be checked structurally before any live-state rule
is evaluated. Rule enforcement itself happens in the plan validator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pydantic import ValidationError

from tactics.actions.schema import CoverFire, MoveTo, PlanIntent, Revive, Throw, plan_adapter
from tactics.core.enums import ActionKind
from tactics.errors import PlanRejected

logger = logging.getLogger(__name__)

TOOL_NAMES: dict[ActionKind, str] = {
    ActionKind.MOVE_TO: "move_to",
    ActionKind.THROW: "throw",
    ActionKind.COVER_FIRE: "cover_fire",
    ActionKind.REVIVE: "revive",
}


@dataclass(frozen=True, slots=True)
class ToolSpec:
    name: str
    args: dict[str, str]  # arg name -> type ("i32", "f32", "enum[...]")


@dataclass(frozen=True, slots=True)
class Constraints:
    enforce_cooldowns: bool = True
    enforce_los: bool = True
    enforce_stamina: bool = False


@dataclass(frozen=True)
class ToolRegistry:
    tools: tuple[ToolSpec, ...] = ()
    constraints: Constraints = field(default_factory=Constraints)

    @classmethod
    def basic_combat(cls) -> ToolRegistry:
        """All four combat tools with their argument shapes."""
        return cls(
            tools=(
                ToolSpec("move_to", {"x": "i32", "y": "i32"}),
                ToolSpec("throw", {"item": "enum[smoke,grenade]", "x": "i32", "y": "i32"}),
                ToolSpec("cover_fire", {"target_id": "u32", "duration": "f32"}),
                ToolSpec("revive", {"ally_id": "u32"}),
            ),
            constraints=Constraints(),
        )

    @property
    def names(self) -> frozenset[str]:
        return frozenset(t.name for t in self.tools)

    def spec(self, name: str) -> ToolSpec | None:
        for t in self.tools:
            if t.name == name:
                return t
        return None

    def allows(self, step: MoveTo | Throw | CoverFire | Revive) -> bool:
        name = TOOL_NAMES[step.kind]
        tool = self.spec(name)
        if tool is None:
            return False
        if isinstance(step, Throw):
            return _enum_allows(tool.args.get("item", ""), step.item)
        return True

    def check_plan(self, plan: PlanIntent) -> None:
        """Raise PlanRejected on the first step this registry does not allow."""
        for i, step in enumerate(plan.steps):
            if not self.allows(step):
                raise PlanRejected(f"step {i}: tool {TOOL_NAMES[step.kind]!r} not allowed ({step.act})")


def _enum_allows(arg_type: str, value: str) -> bool:
    """True unless *arg_type* is an ``enum[...]`` that excludes *value*."""
    if not (arg_type.startswith("enum[") and arg_type.endswith("]")):
        return True
    return value in {v.strip() for v in arg_type[5:-1].split(",")}


def parse_plan(text: str, registry: ToolRegistry) -> PlanIntent:
    """Deserialize a JSON plan and check it against *registry*."""
    try:
        plan = plan_adapter.validate_json(text.strip())
    except ValidationError as exc:
        logger.debug("Malformed plan: %s", exc)
        raise PlanRejected(f"malformed plan: {exc.error_count()} error(s)") from exc
    registry.check_plan(plan)
    return plan


def plan_to_json(plan: PlanIntent) -> str:
    return plan_adapter.dump_json(plan).decode("utf-8")
