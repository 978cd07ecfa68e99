"""
Hyperparameters of the Firefly Algorithm.

References:
    [1] X.-S. Yang, X. He, "Firefly Algorithm: Recent Advances and Applications",
        https://arxiv.org/abs/1308.3898
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping

from SwarmCore.errors import ConfigurationError

from .rng import normalize_seed

DEFAULT_IN_BOUNDS_SEED = bytes([
    199, 248, 17, 170, 248, 248, 15, 82, 75, 207, 232, 76, 38, 70, 37, 111,
])
DEFAULT_ZERO_TO_ONE_SEED = bytes([
    160, 142, 67, 136, 64, 230, 125, 10, 243, 246, 140, 229, 12, 95, 173, 104,
])


@dataclass(frozen=True)
class FireflyOptions:
    """
    Attributes:
        swarm_size: Amount of fireflies in the swarm. In FA the swarm size is
            constant; according to [1] good values lie between 15 and 100.
        in_bounds_random_generator_seed: 16-byte seed for the initial positions.
        zero_to_one_random_generator_seed: 16-byte seed from which every
            firefly's private movement-jitter seed is derived.
        maximum_iterations: Maximum number of iterations to perform.
        stuck_run_iterations_count: How many consecutive iterations without
            improvement to tolerate before aborting the run.
        attractiveness_coefficient: Attraction to brighter fireflies (beta_0 in [1]),
            generally in [0, 1]; 0 turns the swarm into a random search.
        light_absorption_coefficient: gamma in [1], generally in [0, 1]. The smaller,
            the further light travels and the wider the attraction field.
        movement_jitter_coefficient: Scale of the random jitter added to every
            movement, generally around 0.01 * problem scale.
        workers: Threads used for the per-firefly pass. Does not change results.
    """
    swarm_size: int = 150
    in_bounds_random_generator_seed: bytes = DEFAULT_IN_BOUNDS_SEED
    zero_to_one_random_generator_seed: bytes = DEFAULT_ZERO_TO_ONE_SEED
    maximum_iterations: int = 5000
    stuck_run_iterations_count: int = 500
    attractiveness_coefficient: float = 0.8
    light_absorption_coefficient: float = 0.025
    movement_jitter_coefficient: float = 0.1
    workers: int = 1

    def __post_init__(self):
        # Frozen dataclass: normalized seeds have to go through object.__setattr__.
        object.__setattr__(
            self, "in_bounds_random_generator_seed", normalize_seed(self.in_bounds_random_generator_seed)
        )
        object.__setattr__(
            self, "zero_to_one_random_generator_seed", normalize_seed(self.zero_to_one_random_generator_seed)
        )

        for name in ("swarm_size", "maximum_iterations", "stuck_run_iterations_count", "workers"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")

        for name in (
            "attractiveness_coefficient",
            "light_absorption_coefficient",
            "movement_jitter_coefficient",
        ):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not value >= 0:
                raise ConfigurationError(f"{name} must be a non-negative number, got {value!r}")

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "FireflyOptions":
        """Builds options from a plain mapping, starting from the defaults."""
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigurationError(f"Unknown firefly options: {', '.join(unknown)}")
        return cls(**dict(values))

    def to_dict(self) -> dict:
        data = dataclasses.asdict(self)
        data["in_bounds_random_generator_seed"] = self.in_bounds_random_generator_seed.hex()
        data["zero_to_one_random_generator_seed"] = self.zero_to_one_random_generator_seed.hex()
        return data
