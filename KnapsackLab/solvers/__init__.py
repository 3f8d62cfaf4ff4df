"""
Knapsack solver implementations.

Exact variants:
- RecursiveKnapsackSolver, BitMaskKnapsackSolver (exhaustive)
- DynamicKnapsackSolver, LazyDynamicKnapsackSolver (dynamic programming)
- BranchAndBoundKnapsackSolver
- MeetInTheMiddleKnapsackSolver

Approximate variants:
- GreedyKnapsackSolver
- FptasKnapsackSolver
"""

from .exhaustive import BitMaskKnapsackSolver, RecursiveKnapsackSolver
from .dynamic import DynamicKnapsackSolver, LazyDynamicKnapsackSolver
from .approximate import FptasKnapsackSolver, GreedyKnapsackSolver
from .branch_bound import BranchAndBoundKnapsackSolver
from .meet_in_the_middle import MeetInTheMiddleKnapsackSolver

# =============================================================================
# Solver Lists for Registry
# =============================================================================
EXACT_SOLVER_CLASSES = [
    RecursiveKnapsackSolver,
    BitMaskKnapsackSolver,
    DynamicKnapsackSolver,
    LazyDynamicKnapsackSolver,
    BranchAndBoundKnapsackSolver,
    MeetInTheMiddleKnapsackSolver,
]

APPROXIMATE_SOLVER_CLASSES = [
    GreedyKnapsackSolver,
    FptasKnapsackSolver,
]

__all__ = [
    "RecursiveKnapsackSolver",
    "BitMaskKnapsackSolver",
    "DynamicKnapsackSolver",
    "LazyDynamicKnapsackSolver",
    "GreedyKnapsackSolver",
    "BranchAndBoundKnapsackSolver",
    "MeetInTheMiddleKnapsackSolver",
    "FptasKnapsackSolver",
    "EXACT_SOLVER_CLASSES",
    "APPROXIMATE_SOLVER_CLASSES",
]
