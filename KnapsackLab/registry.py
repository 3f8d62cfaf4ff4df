"""
Solver registry.

The registry is built from an ordered list of ``SolverFactory`` entries, each
describing a solver class and its default constructor arguments. Lookups are
by display name; the registry itself never computes anything.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Type

from .core.errors import AlgorithmNotFoundError
from .core.models import Knapsack
from .core.solver import KnapsackSolver
from .solvers import (
    BitMaskKnapsackSolver,
    BranchAndBoundKnapsackSolver,
    DynamicKnapsackSolver,
    FptasKnapsackSolver,
    GreedyKnapsackSolver,
    LazyDynamicKnapsackSolver,
    MeetInTheMiddleKnapsackSolver,
    RecursiveKnapsackSolver,
)

logger = logging.getLogger(__name__)

DEFAULT_FPTAS_EPSILON = 0.1


@dataclass
class SolverFactory:
    """Describes how to instantiate one catalog entry."""
    cls: Type[KnapsackSolver]
    default_kwargs: Dict[str, Any] = field(default_factory=dict)

    def build(self, overrides: Optional[Dict[str, Any]] = None) -> KnapsackSolver:
        params: Dict[str, Any] = dict(self.default_kwargs)
        if overrides:
            params.update(overrides)
        return self.cls(**params)


class AlgorithmRegistry:
    """Fixed, ordered catalog of solver instances."""

    def __init__(self, solvers: Iterable[KnapsackSolver]):
        self._solvers: List[KnapsackSolver] = list(solvers)
        names = [solver.name for solver in self._solvers]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate solver names in registry: {duplicates}")

    @classmethod
    def from_factories(
        cls,
        factories: Sequence[SolverFactory],
        *,
        overrides: Optional[Dict[Type[KnapsackSolver], Dict[str, Any]]] = None,
    ) -> "AlgorithmRegistry":
        overrides = overrides or {}
        return cls(factory.build(overrides.get(factory.cls)) for factory in factories)

    def __len__(self) -> int:
        return len(self._solvers)

    def __iter__(self):
        return iter(self._solvers)

    def __contains__(self, name: object) -> bool:
        return any(solver.name == name for solver in self._solvers)

    def list(self) -> List[KnapsackSolver]:
        """Return the solvers in catalog order."""
        return list(self._solvers)

    def names(self) -> List[str]:
        return [solver.name for solver in self._solvers]

    def find_by_name(self, name: str) -> KnapsackSolver:
        for solver in self._solvers:
            if solver.name == name:
                return solver
        raise AlgorithmNotFoundError(name)

    def filter_by_names(self, names: Iterable[str]) -> List[KnapsackSolver]:
        """
        Return the solvers whose name is in ``names``, in catalog order.
        Names that match nothing are ignored.
        """
        wanted = set(names)
        unknown = wanted.difference(self.names())
        if unknown:
            logger.debug(f"Ignoring unknown algorithm names: {sorted(unknown)}")
        return [solver for solver in self._solvers if solver.name in wanted]

    def solve_by_name(self, name: str, knapsack: Knapsack) -> int:
        """Look up ``name`` and delegate; solver exceptions propagate unchanged."""
        solver = self.find_by_name(name)
        logger.debug(f"Solving {len(knapsack)} items (capacity {knapsack.capacity}) with {name!r}")
        return solver.solve(knapsack)


def default_factories(fptas_epsilon: float = DEFAULT_FPTAS_EPSILON) -> List[SolverFactory]:
    """Catalog entries in their reporting order."""
    return [
        SolverFactory(RecursiveKnapsackSolver),
        SolverFactory(BitMaskKnapsackSolver),
        SolverFactory(DynamicKnapsackSolver),
        SolverFactory(LazyDynamicKnapsackSolver),
        SolverFactory(GreedyKnapsackSolver),
        SolverFactory(BranchAndBoundKnapsackSolver),
        SolverFactory(MeetInTheMiddleKnapsackSolver),
        SolverFactory(FptasKnapsackSolver, {"epsilon": fptas_epsilon}),
    ]


def build_default_registry(
    fptas_epsilon: float = DEFAULT_FPTAS_EPSILON,
    *,
    overrides: Optional[Dict[Type[KnapsackSolver], Dict[str, Any]]] = None,
) -> AlgorithmRegistry:
    return AlgorithmRegistry.from_factories(default_factories(fptas_epsilon), overrides=overrides)
