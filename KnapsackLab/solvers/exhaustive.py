"""
Exhaustive enumeration solvers.

Both variants visit every feasible subset and are meant as correctness
oracles for small instances (n up to ~20).
"""

from __future__ import annotations

import logging

from ..core.errors import TooManyItemsError
from ..core.models import Knapsack
from ..core.solver import KnapsackSolver

logger = logging.getLogger(__name__)


class RecursiveKnapsackSolver(KnapsackSolver):
    """Depth-first include/exclude search over the full decision tree. O(2^n)."""

    @property
    def name(self) -> str:
        return "Recursion"

    def solve(self, knapsack: Knapsack) -> int:
        items = knapsack.items
        capacity = knapsack.capacity
        n = len(items)
        best_value = 0

        def recurse(index: int, current_weight: int, current_value: int) -> None:
            nonlocal best_value
            if index == n:
                if current_value > best_value:
                    best_value = current_value
                return

            # Skip the item at position `index`.
            recurse(index + 1, current_weight, current_value)

            # Take it, if it still fits.
            item = items[index]
            if current_weight + item.weight <= capacity:
                recurse(index + 1, current_weight + item.weight, current_value + item.value)

        recurse(0, 0, 0)
        return best_value


class BitMaskKnapsackSolver(KnapsackSolver):
    """Enumerates every subset as an integer bit mask. O(n * 2^n)."""

    max_items = 64

    @property
    def name(self) -> str:
        return "Bit mask"

    def solve(self, knapsack: Knapsack) -> int:
        item_count = len(knapsack)
        if item_count > self.max_items:
            raise TooManyItemsError(item_count, self.max_items)

        weights = knapsack.weights()
        values = knapsack.values()
        capacity = knapsack.capacity
        best_value = 0
        skipped = 0

        for mask in range(1 << item_count):
            current_weight = 0
            current_value = 0
            feasible = True
            for i in range(item_count):
                if (mask >> i) & 1:
                    current_weight += weights[i]
                    if current_weight > capacity:
                        feasible = False
                        break
                    current_value += values[i]
            if not feasible:
                skipped += 1
                continue
            if current_value > best_value:
                best_value = current_value

        logger.debug(f"Bit mask: {skipped} of {1 << item_count} subsets exceeded capacity")
        return best_value
