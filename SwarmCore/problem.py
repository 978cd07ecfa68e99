import abc
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

import numpy as np

from .errors import ConfigurationError


@dataclass(frozen=True)
class Bounds:
    """Closed interval [lower, upper], replicated across every input dimension."""
    lower: float
    upper: float

    def __post_init__(self):
        if not self.lower <= self.upper:
            raise ConfigurationError(
                f"Invalid bounds: lower ({self.lower}) must not exceed upper ({self.upper})"
            )

    def clip(self, vector: Sequence[float]) -> np.ndarray:
        """Clamps every coordinate of `vector` into the interval."""
        return np.clip(np.asarray(vector, dtype=float), self.lower, self.upper)

    def contains(self, vector: Sequence[float]) -> bool:
        values = np.asarray(vector, dtype=float)
        return bool(np.all((values >= self.lower) & (values <= self.upper)))

    @property
    def width(self) -> float:
        return self.upper - self.lower


class Solution:
    """A point in the search space together with its cached objective value."""

    def __init__(self, position: Sequence[float], problem: 'ProblemInterface'):
        self.position = np.asarray(position, dtype=float)
        self.problem = problem
        self.objective_function_value: Optional[float] = None

    def evaluate(self) -> float:
        """Calculates and stores the objective value of this solution."""
        if self.objective_function_value is None:
            self.objective_function_value = float(self.problem.evaluate(self.position))
        return self.objective_function_value

    def copy(self) -> 'Solution':
        """Creates a detached copy; the position array is not shared."""
        new_solution = Solution(self.position.copy(), self.problem)
        new_solution.objective_function_value = self.objective_function_value
        return new_solution

    def __lt__(self, other: 'Solution') -> bool:
        """Allows comparison based on objective value (assuming minimization)."""
        if self.objective_function_value is None or other.objective_function_value is None:
            return False # Cannot compare if the value is unknown
        return self.objective_function_value < other.objective_function_value

    def __gt__(self, other: 'Solution') -> bool:
        if self.objective_function_value is None or other.objective_function_value is None:
            return False
        return self.objective_function_value > other.objective_function_value

    def __str__(self) -> str:
        return f"Solution({self.position}, Value: {self.objective_function_value})"


class ProblemInterface(abc.ABC):
    """
    Abstract base class for a bounded, continuous black-box objective.

    Optimizers only ever call `evaluate`, `bounds` and read `input_dimensions`;
    they never look inside the function. Lower values are better.
    """

    name: str = "problem"
    input_dimensions: int

    @abc.abstractmethod
    def bounds(self) -> Bounds:
        """
        Returns the domain bounds, identical for every dimension.
        """
        pass

    @abc.abstractmethod
    def evaluate(self, position: np.ndarray) -> float:
        """
        Evaluates the objective at `position`. Must be deterministic and free
        of side effects so it can be called from several threads at once.

        Args:
            position: Vector of length `input_dimensions`.

        Returns:
            The objective value (float).
        """
        pass

    def get_problem_info(self) -> Dict[str, Any]:
        """
        Returns a dictionary describing the problem, for reports and logs.
        """
        bounds = self.bounds()
        return {
            'name': self.name,
            'dimension': self.input_dimensions,
            'lower_bounds': [bounds.lower] * self.input_dimensions,
            'upper_bounds': [bounds.upper] * self.input_dimensions,
            'problem_type': 'continuous',
        }
