import abc
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .errors import InvalidRunError
from .problem import ProblemInterface, Solution

logger = logging.getLogger(__name__)

STOP_MAXIMUM_ITERATIONS = "maximum_iterations"
STOP_STAGNATION = "stagnation"


@dataclass
class IterationResult:
    """Outcome of a single `step`."""
    new_global_minimum: bool = False


@dataclass
class Minimum:
    """Best point found by a run, plus how the run ended."""
    value: float
    position: List[float]
    iterations: int = 0
    stop_reason: str = STOP_MAXIMUM_ITERATIONS
    history: List[float] = field(default_factory=list)


class SearchAlgorithm(abc.ABC):
    """
    Abstract base class for population-based search algorithms.

    Subclasses own their population and implement `initialize` and `step`;
    the stopping policy in `run` is shared.
    """

    def __init__(self, problem: ProblemInterface, population_size: int):
        """
        Args:
            problem: An object implementing ProblemInterface.
            population_size: The size of the population to maintain.
        """
        self.problem = problem
        self.population_size = population_size
        self.best_solution: Optional[Solution] = None
        self.iteration = 0

    @abc.abstractmethod
    def initialize(self):
        """
        Sets up the algorithm's initial state, including the population.
        Should be called before starting the search steps.
        """
        pass

    @abc.abstractmethod
    def step(self) -> IterationResult:
        """
        Performs a single step (iteration/generation) of the search algorithm
        and reports whether the best-known solution improved.
        """
        pass

    @abc.abstractmethod
    def get_population(self) -> Sequence[Solution]:
        pass

    def is_better_than_minimum(self, value: float) -> bool:
        return self.best_solution is None or value < self.best_solution.objective_function_value

    def get_best_solution(self) -> Optional[Solution]:
        """
        Returns the best solution found by the algorithm so far, or None if
        no iteration has completed yet.
        """
        return self.best_solution

    def run(self, maximum_iterations: int, stuck_run_iterations_count: int) -> Minimum:
        """
        Steps until `maximum_iterations` have run or the best value has not
        improved for `stuck_run_iterations_count` consecutive iterations.

        Raises:
            InvalidRunError: if the run ends without any best solution.
        """
        iterations_run = 0
        iterations_since_improvement = 0
        stop_reason = STOP_MAXIMUM_ITERATIONS
        history: List[float] = []

        while iterations_run < maximum_iterations:
            result = self.step()
            iterations_run += 1

            if result.new_global_minimum:
                iterations_since_improvement = 0
            else:
                iterations_since_improvement += 1

            if self.best_solution is not None:
                history.append(self.best_solution.objective_function_value)

            # We probably got stuck in a local minimum, return what we have.
            if iterations_since_improvement >= stuck_run_iterations_count:
                stop_reason = STOP_STAGNATION
                break

        if self.best_solution is None:
            raise InvalidRunError("Invalid run: no best solution at all")

        logger.info(
            f"Run finished after {iterations_run} iterations ({stop_reason}), "
            f"minimum: {self.best_solution.objective_function_value:.6f}"
        )

        return Minimum(
            value=self.best_solution.objective_function_value,
            position=self.best_solution.position.tolist(),
            iterations=iterations_run,
            stop_reason=stop_reason,
            history=history,
        )
