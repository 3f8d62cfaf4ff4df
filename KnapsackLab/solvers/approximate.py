"""
Approximate solvers: ratio-greedy heuristic and the value-scaling FPTAS.
"""

from __future__ import annotations

import logging
import math
from fractions import Fraction

from ..core.models import Knapsack
from ..core.solver import KnapsackSolver
from .dynamic import best_value_table

logger = logging.getLogger(__name__)


class GreedyKnapsackSolver(KnapsackSolver):
    """
    Takes items by value/weight ratio (descending) while they fit.

    No approximation ratio is guaranteed for the 0/1 problem; the result is
    only known to be feasible, hence never above the optimum.
    """
    exact = False

    @property
    def name(self) -> str:
        return "Greedy"

    def solve(self, knapsack: Knapsack) -> int:
        # sorted() is stable: equal ratios keep their original order.
        order = sorted(knapsack.items, key=lambda item: item.ratio_key, reverse=True)
        remaining = knapsack.capacity
        total_value = 0
        for item in order:
            if item.weight <= remaining:
                remaining -= item.weight
                total_value += item.value
        return total_value


class FptasKnapsackSolver(KnapsackSolver):
    """
    Fully polynomial-time approximation scheme.

    Item values are divided (integer division) by a scale factor ``k`` and
    the exact DP runs on the reduced values; the optimum of the reduced
    problem is multiplied back by ``k``. With ``k = floor(ε * v_max / m)``,
    where ``m`` items fit and ``v_max`` is the largest of their values, each
    selected item loses less than ``k`` so the result stays within
    ``[(1 - ε) * OPT, OPT]``.
    """
    exact = False

    def __init__(self, epsilon: float = 0.1):
        if not 0.0 < epsilon < 1.0:
            raise ValueError(f"Epsilon must be between 0 and 1, got {epsilon}")
        self.epsilon = float(epsilon)

    @property
    def name(self) -> str:
        return f"FPTAS (ε = {self.epsilon:.3f})"

    def scale_factor(self, knapsack: Knapsack) -> int:
        """Return ``k`` for ``knapsack``, or 0 when no positive value can be taken."""
        fitting = [item for item in knapsack.items if item.weight <= knapsack.capacity]
        max_value = max((item.value for item in fitting), default=0)
        if max_value == 0:
            return 0
        # Dividing by the fitting item count bounds the total rounding loss by ε * v_max <= ε * OPT.
        return max(1, math.floor(Fraction(self.epsilon) * max_value / len(fitting)))

    def solve(self, knapsack: Knapsack) -> int:
        # k is 0 when nothing of positive value fits (no items, zero capacity, zero values).
        k = self.scale_factor(knapsack)
        if k == 0:
            return 0

        fitting = [item for item in knapsack.items if item.weight <= knapsack.capacity]
        scaled = best_value_table(
            [item.weight for item in fitting],
            [item.value // k for item in fitting],
            knapsack.capacity,
        )
        logger.debug(f"{self.name}: scale factor {k}, scaled optimum {scaled}")
        return scaled * k
