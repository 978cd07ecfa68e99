"""
Firefly Algorithm (FA).

Every firefly is attracted to each brighter (lower objective value) firefly,
with an attraction that decays exponentially with the squared distance, plus
a small random jitter. The swarm is kept sorted from dimmest to brightest so
that the brighter neighbours of a firefly are always found after it.
"""

from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

from SwarmCore.errors import SwarmConsistencyError
from SwarmCore.problem import Bounds, ProblemInterface, Solution
from SwarmCore.search_algorithm import IterationResult, Minimum, SearchAlgorithm

from .firefly import Firefly
from .options import FireflyOptions
from .rng import UniformRNG, derive_agent_seeds

logger = logging.getLogger(__name__)

ZERO_TO_ONE = Bounds(0.0, 1.0)


def _brightness_key(firefly: Firefly):
    # NaN values sort as the dimmest, like a total order on floats would place them.
    value = firefly.objective_function_value
    return (not math.isnan(value), -value if not math.isnan(value) else 0.0)


def _sort_dimmest_first(fireflies: List[Firefly]) -> None:
    fireflies.sort(key=_brightness_key)


def _is_brighter(candidate: Firefly, firefly: Firefly) -> bool:
    """True when `candidate` has a strictly lower value; NaN is never brighter."""
    if math.isnan(candidate.objective_function_value):
        return False
    if math.isnan(firefly.objective_function_value):
        return True
    return candidate.objective_function_value < firefly.objective_function_value


class FireflySwarm(SearchAlgorithm):
    """Entire firefly swarm."""

    def __init__(self, problem: ProblemInterface, options: Optional[FireflyOptions] = None):
        options = options or FireflyOptions()
        super().__init__(problem, options.swarm_size)
        self.options = options
        self._fireflies: List[Firefly] = []
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def fireflies(self) -> Tuple[Firefly, ...]:
        """Read-only view of the current generation, dimmest first."""
        return tuple(self._fireflies)

    def initialize(self):
        """Places every firefly at a random in-bounds position and sorts the swarm."""
        self.iteration = 0
        self.best_solution = None

        # Initial positions come from one in-bounds stream, while every firefly gets
        # its own jitter stream from a derived seed. This keeps runs deterministic
        # even when fireflies are moved on several threads.
        in_bounds_generator = UniformRNG(self.problem.bounds(), self.options.in_bounds_random_generator_seed)
        firefly_seeds = derive_agent_seeds(self.options.zero_to_one_random_generator_seed, self.population_size)

        fireflies = [
            Firefly(
                UniformRNG(ZERO_TO_ONE, firefly_seed),
                in_bounds_generator.sample_multiple(self.problem.input_dimensions),
                self.problem,
            )
            for firefly_seed in firefly_seeds
        ]
        _sort_dimmest_first(fireflies)
        self._fireflies = fireflies

        logger.info(
            f"Initialized swarm of {self.population_size} fireflies for {self.problem.name} "
            f"({self.problem.input_dimensions} dimensions)"
        )

    def get_population(self) -> Tuple[Firefly, ...]:
        return self.fireflies

    def is_better_than_minimum(self, value: float) -> bool:
        return not math.isnan(value) and super().is_better_than_minimum(value)

    def _move_firefly(self, index: int) -> Firefly:
        """Computes the next-generation state of the firefly at `index`.

        Reads the current generation only, so calls for different indices are
        independent of each other.
        """
        new_firefly = self._fireflies[index].copy()

        # The swarm is sorted from dimmest to brightest, so every firefly brighter
        # than this one comes after it.
        for brighter_firefly in self._fireflies[index + 1:]:
            if _is_brighter(brighter_firefly, new_firefly):
                new_firefly.move_towards(brighter_firefly, self.options)

        return new_firefly

    def _check_swarm_size(self, fireflies: List[Firefly]) -> None:
        if len(fireflies) != self.population_size:
            raise SwarmConsistencyError(
                f"Swarm has {len(fireflies)} fireflies, expected {self.population_size}"
            )

    def _get_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=self.options.workers)
        return self._executor

    def close(self) -> None:
        """Shuts down the worker threads, if any were started."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self) -> "FireflySwarm":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def perform_iteration(self) -> IterationResult:
        """Advances the swarm by one generation."""
        self._check_swarm_size(self._fireflies)

        indices = range(len(self._fireflies))
        if self.options.workers > 1:
            new_fireflies = list(self._get_executor().map(self._move_firefly, indices))
        else:
            new_fireflies = [self._move_firefly(index) for index in indices]

        # Merge in index order so the best solution does not depend on scheduling.
        result = IterationResult(new_global_minimum=False)
        for new_firefly in new_fireflies:
            if self.is_better_than_minimum(new_firefly.objective_function_value):
                best = Solution(new_firefly.position.copy(), self.problem)
                best.objective_function_value = new_firefly.objective_function_value
                self.best_solution = best
                result.new_global_minimum = True

        _sort_dimmest_first(new_fireflies)
        self._check_swarm_size(new_fireflies)
        self._fireflies = new_fireflies
        self.iteration += 1

        if result.new_global_minimum:
            logger.debug(
                f"Iteration {self.iteration}: new minimum {self.best_solution.objective_function_value:.6f}"
            )

        return result

    def step(self) -> IterationResult:
        if not self._fireflies:
            self.initialize()
        return self.perform_iteration()

    def run(self, maximum_iterations: int, stuck_run_iterations_count: int) -> Minimum:
        """Runs the stopping policy, reusing one thread pool for every iteration."""
        try:
            return super().run(maximum_iterations, stuck_run_iterations_count)
        finally:
            self.close()


def optimize(problem: ProblemInterface, options: Optional[FireflyOptions] = None) -> Minimum:
    """
    Minimizes `problem` with the Firefly Algorithm.

    Args:
        problem: The objective to minimize.
        options: Hyperparameters; defaults are used when omitted.

    Returns:
        The best value and position found, with the number of iterations run.

    Raises:
        InvalidRunError: if no best solution was found at all.
    """
    options = options or FireflyOptions()

    swarm = FireflySwarm(problem, options)
    swarm.initialize()
    return swarm.run(options.maximum_iterations, options.stuck_run_iterations_count)
