from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from SwarmCore.problem import ProblemInterface, Solution

from .options import FireflyOptions
from .rng import UniformRNG


class Firefly(Solution):
    """
    A single firefly: a position, its objective value and a private jitter RNG.

    The RNG is owned by the firefly alone, so fireflies can be moved
    concurrently without any synchronization.
    """

    def __init__(
        self,
        rng: UniformRNG,
        position: Sequence[float],
        problem: ProblemInterface,
        objective_function_value: Optional[float] = None,
    ):
        super().__init__(position, problem)
        self.rng = rng
        self.objective_function_value = objective_function_value
        self.evaluate()

    def copy(self) -> "Firefly":
        """Next-generation copy of this firefly.

        The RNG is handed over rather than duplicated: only the copy keeps
        drawing from it, the firefly it was copied from stays a read-only snapshot.
        """
        return Firefly(self.rng, self.position.copy(), self.problem, self.objective_function_value)

    def move_towards(self, brighter: Firefly, options: FireflyOptions) -> None:
        """Moves this firefly towards a brighter one and re-evaluates it.

        The moved position is always adopted, as in the classical algorithm;
        moving towards a brighter firefly is not re-checked against the old value.
        """
        difference = brighter.position - self.position
        distance_squared = float(np.dot(difference, difference))

        attractiveness = options.attractiveness_coefficient * math.exp(
            -options.light_absorption_coefficient * distance_squared
        )

        jitter = self.rng.sample_multiple(self.position.shape[0]) - 0.5
        new_position = (
            self.position
            + attractiveness * difference
            + options.movement_jitter_coefficient * jitter
        )

        self.position = self.problem.bounds().clip(new_position)
        self.objective_function_value = float(self.problem.evaluate(self.position))
