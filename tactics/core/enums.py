"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class Team(IntEnum):
    """Partition key for entities."""

    PLAYER = 0
    COMPANION = 1
    ENEMY = 2


@unique
class ActionKind(IntEnum):
    """Kinds of steps a plan may contain."""

    MOVE_TO = 0
    THROW = 1
    COVER_FIRE = 2
    REVIVE = 3


@unique
class DirectorOpKind(IntEnum):
    """Kinds of world-editing operations the director may issue."""

    FORTIFY = 0
    COLLAPSE = 1
    SPAWN_WAVE = 2


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    SPAWN = 0
    SPAWN_Y = 1
