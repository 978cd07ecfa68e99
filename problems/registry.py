"""
Registry of named benchmark problems.

Each definition knows how to build its problem for a given dimension. The
suite runner enumerates the registry in registration order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Type

from SwarmCore.problem import ProblemInterface

from .benchmarks import BENCHMARK_PROBLEMS


@dataclass
class ProblemDefinition:
    """Declarative description of a problem and its default constructor arguments."""
    name: str
    problem_cls: Type[ProblemInterface]
    default_kwargs: Dict[str, Any] = field(default_factory=dict)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def instantiate(self, **overrides: Any) -> ProblemInterface:
        params: Dict[str, Any] = dict(self.default_kwargs)
        params.update(overrides)
        return self.problem_cls(**params)


_problem_definitions: Dict[str, ProblemDefinition] = {}
_BUILTINS_REGISTERED = False


def register_problem(definition: ProblemDefinition) -> None:
    """Register (or override) a problem definition."""
    _problem_definitions[definition.name] = definition


def get_problem_definition(name: str) -> Optional[ProblemDefinition]:
    _ensure_builtin_definitions()
    return _problem_definitions.get(name)


def list_problem_definitions() -> Dict[str, ProblemDefinition]:
    _ensure_builtin_definitions()
    return dict(_problem_definitions)


def instantiate_problem(name: str, **kwargs: Any) -> ProblemInterface:
    definition = get_problem_definition(name)
    if definition is None:
        raise KeyError(f"Problem '{name}' is not registered.")
    return definition.instantiate(**kwargs)


def _ensure_builtin_definitions():
    global _BUILTINS_REGISTERED
    if _BUILTINS_REGISTERED:
        return
    _BUILTINS_REGISTERED = True
    for problem_cls in BENCHMARK_PROBLEMS:
        # Keep user overrides registered before first use.
        if problem_cls.name not in _problem_definitions:
            register_problem(ProblemDefinition(name=problem_cls.name, problem_cls=problem_cls))
