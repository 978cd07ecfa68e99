"""
Seeded random number sources for the firefly swarm.

All randomness is drawn from numpy PCG64 generators seeded with 16-byte
(128-bit) seeds, so a run is fully determined by the two seeds in
FireflyOptions.
"""

from __future__ import annotations

from typing import List, Sequence, Union

import numpy as np

from SwarmCore.errors import ConfigurationError
from SwarmCore.problem import Bounds

SEED_LENGTH = 16

SeedLike = Union[bytes, bytearray, Sequence[int], str]


def normalize_seed(seed: SeedLike) -> bytes:
    """Converts bytes, a sequence of byte values or a hex string into a 16-byte seed."""
    if isinstance(seed, str):
        try:
            raw = bytes.fromhex(seed)
        except ValueError as exc:
            raise ConfigurationError(f"Seed is not a valid hex string: {seed!r}") from exc
    elif isinstance(seed, (bytes, bytearray)):
        raw = bytes(seed)
    else:
        values = list(seed)
        if any(not 0 <= int(v) <= 255 for v in values):
            raise ConfigurationError(f"Seed values must be bytes (0-255), got {values}")
        raw = bytes(int(v) for v in values)

    if len(raw) != SEED_LENGTH:
        raise ConfigurationError(f"Seed must be exactly {SEED_LENGTH} bytes, got {len(raw)}")
    return raw


def seeded_generator(seed: SeedLike) -> np.random.Generator:
    """Builds a PCG64-backed generator from a 128-bit seed."""
    return np.random.Generator(np.random.PCG64(int.from_bytes(normalize_seed(seed), "little")))


class UniformRNG:
    """Uniformly distributed reals inside `bounds`, reproducible from a seed."""

    def __init__(self, bounds: Bounds, seed: SeedLike):
        self.bounds = bounds
        self._generator = seeded_generator(seed)

    def sample(self) -> float:
        return float(self._generator.uniform(self.bounds.lower, self.bounds.upper))

    def sample_multiple(self, count: int) -> np.ndarray:
        """One independent draw per coordinate."""
        return self._generator.uniform(self.bounds.lower, self.bounds.upper, size=count)


def derive_agent_seeds(seed: SeedLike, count: int) -> List[bytes]:
    """
    Derives `count` sub-seeds from a single seed, one per agent index.

    The i-th sub-seed depends only on `seed` and `i`, never on when an agent's
    work is scheduled, so agents can be processed in parallel without losing
    reproducibility.
    """
    generator = seeded_generator(seed)
    return [
        generator.integers(0, 255, size=SEED_LENGTH, dtype=np.uint8, endpoint=True).tobytes()
        for _ in range(count)
    ]
