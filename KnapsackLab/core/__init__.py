"""
Core data model, error taxonomy and the solver contract.
"""

from .errors import (
    AlgorithmNotFoundError,
    CapacityTooLargeError,
    ConfigError,
    InvalidKnapsackError,
    KnapsackError,
    TooManyItemsError,
)
from .models import Item, Knapsack
from .solver import KnapsackSolver

__all__ = [
    'Item',
    'Knapsack',
    'KnapsackSolver',
    'KnapsackError',
    'InvalidKnapsackError',
    'CapacityTooLargeError',
    'TooManyItemsError',
    'AlgorithmNotFoundError',
    'ConfigError',
]
