"""Core data models and world representation."""

from tactics.core.enums import ActionKind, DirectorOpKind, Domain, Team
from tactics.core.models import Ammo, Cooldowns, Health, Pose, Rect, Vector2
from tactics.core.snapshot import CompanionState, EnemyState, PlayerState, Poi, WorldSnapshot
from tactics.core.world_state import WorldState

__all__ = [
    "ActionKind",
    "Ammo",
    "CompanionState",
    "Cooldowns",
    "DirectorOpKind",
    "Domain",
    "EnemyState",
    "Health",
    "PlayerState",
    "Poi",
    "Pose",
    "Rect",
    "Team",
    "Vector2",
    "WorldSnapshot",
    "WorldState",
]
