"""
Exception types raised by the swarm optimizers.

Every failure surfaced to callers derives from `SwarmError` so a driver can
catch the whole family at once.
"""


class SwarmError(Exception):
    """Base class for all optimizer failures."""


class ConfigurationError(SwarmError, ValueError):
    """Malformed bounds, seeds or hyperparameters, rejected at construction."""


class SwarmConsistencyError(SwarmError, RuntimeError):
    """The population diverged from its configured size (a logic bug)."""


class InvalidRunError(SwarmError, RuntimeError):
    """A run finished without producing any best-known solution."""
