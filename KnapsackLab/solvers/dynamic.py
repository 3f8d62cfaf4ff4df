"""
Dynamic-programming solvers: bottom-up table and lazy memoised recursion.
"""

from __future__ import annotations

import logging
import sys
from typing import Dict, List, Sequence, Tuple

import numpy as np

from ..core.errors import CapacityTooLargeError
from ..core.models import Knapsack
from ..core.solver import KnapsackSolver

logger = logging.getLogger(__name__)

# Capacities at or above this cannot index a table.
MAX_TABLE_CAPACITY = sys.maxsize
INT64_MAX = int(np.iinfo(np.int64).max)


def check_table_capacity(capacity: int) -> None:
    if capacity >= MAX_TABLE_CAPACITY:
        raise CapacityTooLargeError(capacity, MAX_TABLE_CAPACITY)


def best_value_table(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """
    Runs the 0/1 recurrence ``dp[w] = max(dp[w], dp[w - weight] + value)`` on a
    single rolling array of length ``capacity + 1`` and returns ``dp[capacity]``.

    The shifted slice is evaluated from the previous row before assignment,
    so every item is counted at most once. The table is int64 while the
    total value fits, otherwise it holds Python ints.
    """
    check_table_capacity(capacity)
    dtype = np.int64 if sum(values) <= INT64_MAX else object
    dp = np.zeros(capacity + 1, dtype=dtype)
    for weight, value in zip(weights, values):
        if weight > capacity or value == 0:
            continue
        if weight == 0:
            dp += value
            continue
        dp[weight:] = np.maximum(dp[weight:], dp[:capacity + 1 - weight] + value)
    return int(dp[capacity])


class DynamicKnapsackSolver(KnapsackSolver):
    """Bottom-up DP. O(n * W) time, O(W) space."""

    @property
    def name(self) -> str:
        return "Dynamic"

    def solve(self, knapsack: Knapsack) -> int:
        return best_value_table(knapsack.weights(), knapsack.values(), knapsack.capacity)


class LazyDynamicKnapsackSolver(KnapsackSolver):
    """
    Top-down DP over ``(item_count, remaining_capacity)`` states.

    Only states reachable from ``(n, capacity)`` are evaluated. The memo is
    owned by a single ``solve`` call. States are resolved with an explicit
    work stack rather than recursion, so large item counts are fine.
    """

    @property
    def name(self) -> str:
        return "Lazy Dynamic"

    def solve(self, knapsack: Knapsack) -> int:
        capacity = knapsack.capacity
        check_table_capacity(capacity)
        items = knapsack.items
        memo: Dict[Tuple[int, int], int] = {}

        def resolved(state: Tuple[int, int]) -> bool:
            return state[0] == 0 or state in memo

        def lookup(state: Tuple[int, int]) -> int:
            if state[0] == 0:
                return 0
            return memo[state]

        root = (len(items), capacity)
        stack: List[Tuple[int, int]] = [root]
        while stack:
            state = stack[-1]
            if resolved(state):
                stack.pop()
                continue

            i, w = state
            item = items[i - 1]
            skip = (i - 1, w)
            take = (i - 1, w - item.weight) if item.weight <= w else None

            pending = [s for s in (skip, take) if s is not None and not resolved(s)]
            if pending:
                stack.extend(pending)
                continue

            result = lookup(skip)
            if take is not None:
                result = max(result, lookup(take) + item.value)
            memo[state] = result
            stack.pop()

        logger.debug(f"Lazy Dynamic: evaluated {len(memo)} states (full table {len(items) * (capacity + 1)})")
        return lookup(root)
