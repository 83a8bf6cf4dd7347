"""Engine systems: deterministic RNG."""

from tactics.systems.rng import DeterministicRNG

__all__ = ["DeterministicRNG"]
