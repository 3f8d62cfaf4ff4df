"""
Branch-and-bound solver with a fractional-relaxation upper bound.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..core.models import Item, Knapsack
from ..core.solver import KnapsackSolver

logger = logging.getLogger(__name__)


def fractional_bound(items: Sequence[Item], start: int, remaining: int) -> int:
    """
    Floor of the LP-relaxation value obtainable from ``items[start:]`` with
    ``remaining`` capacity. ``items`` must be sorted by ratio, descending.
    """
    bound = 0
    for item in items[start:]:
        if item.weight <= remaining:
            remaining -= item.weight
            bound += item.value
        else:
            # Boundary item: take a fractional slice of it (weight > remaining >= 0).
            bound += remaining * item.value // item.weight
            break
    return bound


class BranchAndBoundKnapsackSolver(KnapsackSolver):
    """
    Depth-first search over ratio-sorted items, include branch first.

    A node is abandoned when its current value plus the fractional bound
    of the remaining items cannot beat the best value found so far.
    """

    @property
    def name(self) -> str:
        return "Branch and Bound"

    def solve(self, knapsack: Knapsack) -> int:
        capacity = knapsack.capacity
        items = sorted(knapsack.items, key=lambda item: item.ratio_key, reverse=True)
        n = len(items)
        best_value = 0
        pruned = 0

        def branch(index: int, current_weight: int, current_value: int) -> None:
            nonlocal best_value, pruned
            if current_value > best_value:
                best_value = current_value
            if index >= n:
                return

            if current_value + fractional_bound(items, index, capacity - current_weight) <= best_value:
                pruned += 1
                return

            item = items[index]
            if current_weight + item.weight <= capacity:
                branch(index + 1, current_weight + item.weight, current_value + item.value)
            branch(index + 1, current_weight, current_value)

        branch(0, 0, 0)
        logger.debug(f"Branch and Bound: pruned {pruned} subtrees over {n} items")
        return best_value
