"""
Benchmark problems and registry utilities.
"""

from .benchmarks import BENCHMARK_PROBLEMS, BenchmarkProblem
from .registry import (
    ProblemDefinition,
    get_problem_definition,
    instantiate_problem,
    list_problem_definitions,
    register_problem,
)

__all__ = [
    "BENCHMARK_PROBLEMS",
    "BenchmarkProblem",
    "ProblemDefinition",
    "get_problem_definition",
    "instantiate_problem",
    "list_problem_definitions",
    "register_problem",
]
