"""
Shared building blocks for the swarm optimizers: the objective (problem)
interface, the search-algorithm base with its stopping policy, and errors.
"""

from .errors import ConfigurationError, InvalidRunError, SwarmConsistencyError, SwarmError
from .problem import Bounds, ProblemInterface, Solution
from .search_algorithm import IterationResult, Minimum, SearchAlgorithm

__all__ = [
    'Bounds', 'ProblemInterface', 'Solution',
    'IterationResult', 'Minimum', 'SearchAlgorithm',
    'SwarmError', 'ConfigurationError', 'SwarmConsistencyError', 'InvalidRunError',
]
