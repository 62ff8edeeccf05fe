"""Domain-separated deterministic RNG using xxhash.

Every draw is a pure function of (seed, domain, stream, step), so replaying
the same seed and command sequence reproduces the same dungeon.

Formula: RNG_Value = Hash(Seed, Domain, Stream, Step)
"""

from __future__ import annotations

import struct

import xxhash

from crawl.core.enums import Domain


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator.

    Each call is a pure function of (seed, domain, stream, step); no
    internal mutable state.
    """

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    # Floors per run; keeps every run and floor on its own stream
    STREAMS_PER_RUN = 10_000

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    @classmethod
    def stream_for(cls, run: int, floor: int) -> int:
        """Stream id for *floor* of the *run*-th game started on this seed."""
        return run * cls.STREAMS_PER_RUN + floor

    def _hash(self, domain: Domain, stream: int, step: int) -> int:
        payload = struct.pack("<qiqq", self._seed, domain.value, stream, step)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, stream: int, step: int) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, stream, step) / (self._MAX_UINT64 + 1)

    def next_int(self, domain: Domain, stream: int, step: int, low: int, high: int) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        f = self.next_float(domain, stream, step)
        return low + int(f * (high - low + 1))
