"""Simulation configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidateConfig:
    """Rules applied by the plan validator."""

    bounds: tuple[int, int, int, int]    # inclusive (min_x, min_y, max_x, max_y)
    throw_cooldown: float = 8.0
    revive_hp: int = 20
    cover_fire_dmg_per_second: float = 5.0
    cover_fire_ammo_cost: int = 3


@dataclass(frozen=True, slots=True)
class PerceptionConfig:
    """Snapshot builder settings."""

    los_max: int = 12
    placeholder_poi_key: str = "breach_door"
    placeholder_poi_pos: tuple[int, int] = (15, 8)


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable configuration for an encounter run."""

    # World
    world_seed: int = 42
    grid_width: int = 20
    grid_height: int = 10

    # Timing
    dt: float = 0.25                # seconds advanced per tick

    # Perception
    los_max: int = 12               # Manhattan radius for the coarse cover tag
    placeholder_poi_key: str = "breach_door"
    placeholder_poi_pos: tuple[int, int] = (15, 8)

    # Plan execution
    throw_cooldown: float = 8.0
    revive_hp: int = 20
    cover_fire_dmg_per_second: float = 5.0
    cover_fire_ammo_cost: int = 3

    # Director
    spawn_hp: int = 40
    spawn_scatter: int = 1          # max per-axis offset of a spawned unit from its wave origin

    # Logging
    log_level: str = "INFO"

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        return (0, 0, self.grid_width - 1, self.grid_height - 1)

    def validate_config(self) -> ValidateConfig:
        return ValidateConfig(
            bounds=self.bounds,
            throw_cooldown=self.throw_cooldown,
            revive_hp=self.revive_hp,
            cover_fire_dmg_per_second=self.cover_fire_dmg_per_second,
            cover_fire_ammo_cost=self.cover_fire_ammo_cost,
        )

    def perception_config(self) -> PerceptionConfig:
        return PerceptionConfig(
            los_max=self.los_max,
            placeholder_poi_key=self.placeholder_poi_key,
            placeholder_poi_pos=self.placeholder_poi_pos,
        )
