"""
KnapsackLab: interchangeable 0/1 knapsack solvers and an experiment harness
for comparing them.
"""

from .core.models import Item, Knapsack
from .core.solver import KnapsackSolver
from .registry import AlgorithmRegistry, SolverFactory, build_default_registry

__all__ = [
    'Item',
    'Knapsack',
    'KnapsackSolver',
    'AlgorithmRegistry',
    'SolverFactory',
    'build_default_registry',
]
