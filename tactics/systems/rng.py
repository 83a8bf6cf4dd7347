"""Domain-separated deterministic RNG using xxhash.

A value depends only on (seed, domain, key, step), never on call order, so
two runs of the same encounter place spawned units identically.
"""

from __future__ import annotations

import struct

import xxhash

from tactics.core.enums import Domain


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator."""

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        self._seed = seed

    def _hash(self, domain: Domain, key: int, step: int) -> int:
        payload = struct.pack("<qiqq", self._seed, domain.value, key, step)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, key: int, step: int) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, key, step) / (self._MAX_UINT64 + 1)

    def next_int(self, domain: Domain, key: int, step: int, low: int, high: int) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        f = self.next_float(domain, key, step)
        return low + int(f * (high - low + 1))
