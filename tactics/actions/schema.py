"""Plan schema: the contract every orchestrator must emit.

``ActionStep`` is a closed union discriminated by the ``act`` field, which is
also the JSON wire shape remote planners produce::

    {"plan_id": "p-1", "steps": [{"act": "MoveTo", "x": 4, "y": 2}]}
"""

from __future__ import annotations

from typing import Annotated, ClassVar, Literal, Union

from pydantic import Field, TypeAdapter
from pydantic.dataclasses import dataclass as pydantic_dataclass

from tactics.core.enums import ActionKind


@pydantic_dataclass(frozen=True)
class MoveTo:
    x: int
    y: int
    act: Literal["MoveTo"] = "MoveTo"

    kind: ClassVar[ActionKind] = ActionKind.MOVE_TO


@pydantic_dataclass(frozen=True)
class Throw:
    item: str
    x: int
    y: int
    act: Literal["Throw"] = "Throw"

    kind: ClassVar[ActionKind] = ActionKind.THROW


@pydantic_dataclass(frozen=True)
class CoverFire:
    target_id: int
    duration: float
    act: Literal["CoverFire"] = "CoverFire"

    kind: ClassVar[ActionKind] = ActionKind.COVER_FIRE


@pydantic_dataclass(frozen=True)
class Revive:
    ally_id: int
    act: Literal["Revive"] = "Revive"

    kind: ClassVar[ActionKind] = ActionKind.REVIVE


ActionStep = Annotated[Union[MoveTo, Throw, CoverFire, Revive], Field(discriminator="act")]


@pydantic_dataclass(frozen=True)
class PlanIntent:
    """Ordered steps; the id is caller-chosen and not checked for uniqueness."""

    plan_id: str
    steps: tuple[ActionStep, ...] = ()


plan_adapter = TypeAdapter(PlanIntent)
