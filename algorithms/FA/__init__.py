"""Firefly Algorithm for bounded continuous minimization."""

from .FA import FireflySwarm, optimize
from .firefly import Firefly
from .options import FireflyOptions
from .rng import UniformRNG, derive_agent_seeds

__all__ = ["FireflySwarm", "Firefly", "FireflyOptions", "UniformRNG", "derive_agent_seeds", "optimize"]
