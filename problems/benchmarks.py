"""
Continuous benchmark functions for the optimizers.

All functions are defined on [-5, 5]^d by default, like the BBOB noiseless
suite, and have their global minimum value 0 unless stated otherwise.
"""

import abc

import numpy as np

from SwarmCore.problem import Bounds, ProblemInterface


class BenchmarkProblem(ProblemInterface):
    """
    Base class for analytic benchmark functions with uniform scalar bounds.
    """

    name = "benchmark"

    def __init__(self, dimension=10, lower_bound=-5.0, upper_bound=5.0):
        if int(dimension) < 1:
            raise ValueError(f"dimension must be at least 1, got {dimension}")
        self.input_dimensions = int(dimension)
        self._bounds = Bounds(float(lower_bound), float(upper_bound))

    def bounds(self):
        return self._bounds

    def evaluate(self, position):
        x = np.asarray(position, dtype=float)
        if x.shape != (self.input_dimensions,):
            raise ValueError(
                f"{self.name} expects a vector of length {self.input_dimensions}, got shape {x.shape}"
            )
        return float(self._function(x))

    @abc.abstractmethod
    def _function(self, x):
        """Value of the benchmark function at the validated vector `x`."""


class SphereProblem(BenchmarkProblem):
    """f(x) = sum(x_i^2), minimum at x = 0."""

    name = "sphere"

    def _function(self, x):
        return np.sum(x ** 2)


class EllipsoidProblem(BenchmarkProblem):
    """Separable ellipsoid with condition number 1e6."""

    name = "ellipsoid"

    def _function(self, x):
        n = x.shape[0]
        if n == 1:
            return x[0] ** 2
        exponents = 6.0 * np.arange(n) / (n - 1)
        return np.sum(10.0 ** exponents * x ** 2)


class RastriginProblem(BenchmarkProblem):
    """
    Rastrigin function - a multimodal benchmark problem.

    f(x) = A*n + sum(x_i^2 - A*cos(2*pi*x_i))
    Global minimum at x = 0, f(x) = 0
    """

    name = "rastrigin"

    def __init__(self, dimension=10, lower_bound=-5.0, upper_bound=5.0, A=10.0):
        super().__init__(dimension, lower_bound, upper_bound)
        self.A = A

    def _function(self, x):
        return self.A * x.shape[0] + np.sum(x ** 2 - self.A * np.cos(2 * np.pi * x))


class RosenbrockProblem(BenchmarkProblem):
    """
    Rosenbrock function - a classic optimization benchmark.

    Global minimum at x = (1, ..., 1), f(x) = 0
    """

    name = "rosenbrock"

    def _function(self, x):
        return np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (1.0 - x[:-1]) ** 2)


class AckleyProblem(BenchmarkProblem):
    name = "ackley"

    def _function(self, x):
        n = x.shape[0]
        first = -20.0 * np.exp(-0.2 * np.sqrt(np.sum(x ** 2) / n))
        second = -np.exp(np.sum(np.cos(2 * np.pi * x)) / n)
        return first + second + 20.0 + np.e


class GriewankProblem(BenchmarkProblem):
    name = "griewank"

    def _function(self, x):
        indices = np.arange(1, x.shape[0] + 1)
        return 1.0 + np.sum(x ** 2) / 4000.0 - np.prod(np.cos(x / np.sqrt(indices)))


class BentCigarProblem(BenchmarkProblem):
    """One well-conditioned direction against a 1e6-scaled remainder."""

    name = "bent_cigar"

    def _function(self, x):
        return x[0] ** 2 + 1e6 * np.sum(x[1:] ** 2)


class DifferentPowersProblem(BenchmarkProblem):
    name = "different_powers"

    def _function(self, x):
        n = x.shape[0]
        if n == 1:
            return np.abs(x[0]) ** 2
        exponents = 2.0 + 4.0 * np.arange(n) / (n - 1)
        return np.sqrt(np.sum(np.abs(x) ** exponents))


BENCHMARK_PROBLEMS = [
    SphereProblem,
    EllipsoidProblem,
    RastriginProblem,
    RosenbrockProblem,
    AckleyProblem,
    GriewankProblem,
    BentCigarProblem,
    DifferentPowersProblem,
]
