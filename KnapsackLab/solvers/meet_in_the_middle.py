"""
Meet-in-the-middle solver: enumerate both halves, merge with binary search.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import List, Sequence, Tuple

from ..core.models import Item, Knapsack
from ..core.solver import KnapsackSolver


def subset_sums(items: Sequence[Item], capacity: int) -> List[Tuple[int, int]]:
    """All ``(total_weight, total_value)`` pairs of subsets within ``capacity``."""
    sums = [(0, 0)]
    for item in items:
        sums.extend([
            (weight + item.weight, value + item.value)
            for weight, value in sums
            if weight + item.weight <= capacity
        ])
    return sums


def value_frontier(pairs: List[Tuple[int, int]]) -> Tuple[List[int], List[int]]:
    """
    Sort ``pairs`` by weight and replace each value with the best value
    reachable at or below that weight.
    """
    pairs = sorted(pairs)
    weights = [weight for weight, _ in pairs]
    best_values: List[int] = []
    best = 0
    for _, value in pairs:
        best = max(best, value)
        best_values.append(best)
    return weights, best_values


class MeetInTheMiddleKnapsackSolver(KnapsackSolver):
    """Splits the items in halves. O(2^(n/2) * n) time and space."""

    @property
    def name(self) -> str:
        return "Meet in the Middle"

    def solve(self, knapsack: Knapsack) -> int:
        capacity = knapsack.capacity
        items = knapsack.items
        mid = len(items) // 2

        first_half = subset_sums(items[:mid], capacity)
        second_weights, second_values = value_frontier(subset_sums(items[mid:], capacity))

        max_value = 0
        for weight, value in first_half:
            # (0, 0) is always in the second half, so idx >= 1.
            idx = bisect_right(second_weights, capacity - weight)
            max_value = max(max_value, value + second_values[idx - 1])
        return max_value
