"""
Tests for the exact solvers: fixed scenarios, degenerate inputs, solver-specific
limits and cross-solver agreement on random instances.
"""

import sys
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from KnapsackLab.core.errors import CapacityTooLargeError, TooManyItemsError
from KnapsackLab.core.models import Item, Knapsack
from KnapsackLab.registry import build_default_registry
from KnapsackLab.solvers import (
    EXACT_SOLVER_CLASSES,
    BitMaskKnapsackSolver,
    BranchAndBoundKnapsackSolver,
    DynamicKnapsackSolver,
    LazyDynamicKnapsackSolver,
    MeetInTheMiddleKnapsackSolver,
)
from KnapsackLab.solvers.branch_bound import fractional_bound
from KnapsackLab.solvers.meet_in_the_middle import subset_sums, value_frontier

ALL_SOLVERS = build_default_registry().list()

SCENARIOS = [
    pytest.param(10, [(5, 10), (3, 7), (2, 5)], 22, id="all-items-fit-exactly"),
    pytest.param(10, [(5, 10), (3, 7), (3, 5)], 17, id="one-item-left-out"),
    pytest.param(10, [(15, 10), (33, 7), (3666, 5)], 0, id="nothing-fits"),
    pytest.param(10, [(1, 2), (5, 15), (2, 4), (5, 15), (3, 8)], 30, id="value-not-count"),
]


def brute_force_optimum(knapsack: Knapsack) -> int:
    best = 0
    n = len(knapsack)
    for mask in range(1 << n):
        chosen = [knapsack.item(i) for i in range(n) if mask >> i & 1]
        if sum(item.weight for item in chosen) <= knapsack.capacity:
            best = max(best, sum(item.value for item in chosen))
    return best


def random_knapsack(rng: np.random.Generator, max_items: int = 12) -> Knapsack:
    n = int(rng.integers(0, max_items, endpoint=True))
    weights = rng.integers(0, 30, size=n, endpoint=True)
    values = rng.integers(0, 100, size=n, endpoint=True)
    capacity = int(rng.integers(0, max(1, int(weights.sum())), endpoint=True))
    return Knapsack(capacity, tuple(Item(int(w), int(v)) for w, v in zip(weights, values)))


# =============================================================================
# Scenarios shared by every registered algorithm
# =============================================================================

class TestScenarios:

    @pytest.mark.parametrize("solver", ALL_SOLVERS, ids=lambda s: s.name)
    @pytest.mark.parametrize("capacity, pairs, expected", SCENARIOS)
    def test_every_algorithm_solves_scenario(self, solver, capacity, pairs, expected):
        assert solver.solve(Knapsack.from_pairs(capacity, pairs)) == expected

    @pytest.mark.parametrize("solver", ALL_SOLVERS, ids=lambda s: s.name)
    def test_no_items_gives_zero(self, solver):
        assert solver.solve(Knapsack(10, ())) == 0

    @pytest.mark.parametrize("solver", ALL_SOLVERS, ids=lambda s: s.name)
    def test_zero_capacity_gives_zero(self, solver):
        assert solver.solve(Knapsack.from_pairs(0, [(1, 1), (2, 2), (5, 9)])) == 0

    @pytest.mark.parametrize("solver_cls", EXACT_SOLVER_CLASSES)
    def test_weightless_items_count_at_zero_capacity(self, solver_cls):
        knapsack = Knapsack.from_pairs(0, [(0, 5), (1, 3), (0, 2)])
        assert solver_cls().solve(knapsack) == 7

    @pytest.mark.parametrize("solver", ALL_SOLVERS, ids=lambda s: s.name)
    def test_solve_does_not_mutate_knapsack(self, solver, value_driven_knapsack):
        snapshot = (value_driven_knapsack.capacity, value_driven_knapsack.items)
        solver.solve(value_driven_knapsack)
        assert (value_driven_knapsack.capacity, value_driven_knapsack.items) == snapshot


# =============================================================================
# Cross-solver agreement
# =============================================================================

class TestAgreement:

    def test_exact_solvers_match_enumeration(self):
        rng = np.random.default_rng(1234)
        solvers = [cls() for cls in EXACT_SOLVER_CLASSES]
        for _ in range(40):
            knapsack = random_knapsack(rng)
            expected = brute_force_optimum(knapsack)
            results = {solver.name: solver.solve(knapsack) for solver in solvers}
            assert set(results.values()) == {expected}, (knapsack, results)

    def test_exact_solvers_agree_on_larger_instances(self):
        rng = np.random.default_rng(7)
        knapsack = random_knapsack(rng, max_items=16)
        while len(knapsack) < 14:
            knapsack = random_knapsack(rng, max_items=16)
        results = {cls().solve(knapsack) for cls in EXACT_SOLVER_CLASSES}
        assert len(results) == 1

    def test_exact_solvers_match_enumeration_on_near_tied_large_values(self):
        # Ratios differ only past float precision.
        rng = np.random.default_rng(2024)
        solvers = [cls() for cls in EXACT_SOLVER_CLASSES]
        for _ in range(30):
            n = int(rng.integers(2, 10, endpoint=True))
            weights = [int(w) for w in rng.integers(1, 9, size=n, endpoint=True)]
            pairs = [(w, w * 10**17 + int(rng.integers(-3, 3, endpoint=True))) for w in weights]
            knapsack = Knapsack.from_pairs(sum(weights) // 2, pairs)
            expected = brute_force_optimum(knapsack)
            results = {solver.name: solver.solve(knapsack) for solver in solvers}
            assert set(results.values()) == {expected}, (knapsack, results)

    def test_concurrent_solves_match_sequential(self, value_driven_knapsack):
        rng = np.random.default_rng(99)
        knapsacks = [value_driven_knapsack] + [random_knapsack(rng) for _ in range(6)]
        jobs = [(solver, k) for solver in ALL_SOLVERS for k in knapsacks]
        expected = [solver.solve(k) for solver, k in jobs]
        with ThreadPoolExecutor(max_workers=4) as pool:
            actual = list(pool.map(lambda job: job[0].solve(job[1]), jobs))
        assert actual == expected


# =============================================================================
# Solver-specific behaviour
# =============================================================================

class TestBitMask:

    def test_more_than_64_items_is_rejected(self):
        knapsack = Knapsack.from_pairs(1000, [(1, 1)] * 65)
        with pytest.raises(TooManyItemsError) as excinfo:
            BitMaskKnapsackSolver().solve(knapsack)
        assert excinfo.value.item_count == 65

    def test_rejected_regardless_of_capacity(self):
        with pytest.raises(TooManyItemsError):
            BitMaskKnapsackSolver().solve(Knapsack.from_pairs(0, [(1, 1)] * 65))


class TestDynamicProgramming:

    @pytest.mark.parametrize("solver_cls", [DynamicKnapsackSolver, LazyDynamicKnapsackSolver])
    def test_capacity_at_host_limit_is_rejected(self, solver_cls):
        knapsack = Knapsack.from_pairs(sys.maxsize, [(1, 1)])
        with pytest.raises(CapacityTooLargeError):
            solver_cls().solve(knapsack)

    def test_lazy_handles_more_items_than_recursion_limit(self):
        n = sys.getrecursionlimit() + 500
        knapsack = Knapsack.from_pairs(5, [(1, 1)] * n)
        assert LazyDynamicKnapsackSolver().solve(knapsack) == 5
        assert DynamicKnapsackSolver().solve(knapsack) == 5

    def test_each_item_used_at_most_once(self):
        # An unbounded recurrence would take (1, 3) ten times.
        knapsack = Knapsack.from_pairs(10, [(1, 3), (10, 11)])
        assert DynamicKnapsackSolver().solve(knapsack) == 11
        assert LazyDynamicKnapsackSolver().solve(knapsack) == 11

    @pytest.mark.parametrize("capacity, pairs, expected", [
        pytest.param(2, [(1, 2**62), (1, 2**62)], 2**63, id="sum-past-int64"),
        pytest.param(1, [(1, 2**63)], 2**63, id="single-value-past-int64"),
        pytest.param(3, [(1, 2**64 - 1), (2, 2**64 - 1), (0, 5)], 2**65 + 3, id="past-uint64"),
    ])
    @pytest.mark.parametrize("solver_cls", EXACT_SOLVER_CLASSES)
    def test_values_beyond_int64(self, solver_cls, capacity, pairs, expected):
        assert solver_cls().solve(Knapsack.from_pairs(capacity, pairs)) == expected


class TestBranchAndBound:

    def test_fractional_bound_takes_slice_of_boundary_item(self):
        items = [Item(2, 10), Item(4, 12), Item(5, 5)]
        # 10 + 12 fully, then 1/5 of the last item.
        assert fractional_bound(items, 0, 7) == 23
        assert fractional_bound(items, 1, 2) == 6
        assert fractional_bound(items, 3, 100) == 0

    def test_finds_optimum_that_greedy_misses(self):
        knapsack = Knapsack.from_pairs(50, [(10, 60), (20, 100), (30, 120)])
        assert BranchAndBoundKnapsackSolver().solve(knapsack) == 220

    def test_bound_holds_when_float_ratios_tie(self):
        pairs = [
            (4, 4 * 10**17), (7, 7 * 10**17 + 1), (3, 3 * 10**17 - 3),
            (7, 7 * 10**17 + 1), (1, 10**17 - 3), (6, 6 * 10**17 + 3),
        ]
        knapsack = Knapsack.from_pairs(13, pairs)
        assert BranchAndBoundKnapsackSolver().solve(knapsack) == 13 * 10**17 + 4
        assert BranchAndBoundKnapsackSolver().solve(knapsack) == brute_force_optimum(knapsack)


class TestMeetInTheMiddle:

    def test_dominated_pair_is_not_selected(self):
        # Second half sums: (1, 10) and (2, 1); the heavier pair is worse.
        knapsack = Knapsack.from_pairs(2, [(100, 1), (1, 10), (2, 1)])
        assert MeetInTheMiddleKnapsackSolver().solve(knapsack) == 10

    def test_value_frontier_is_monotonic(self):
        weights, values = value_frontier([(2, 1), (0, 0), (1, 10), (3, 11)])
        assert weights == [0, 1, 2, 3]
        assert values == [0, 10, 10, 11]

    def test_subset_sums_skip_overweight_subsets(self):
        sums = subset_sums([Item(2, 3), Item(4, 5)], capacity=5)
        assert sorted(sums) == [(0, 0), (2, 3), (4, 5)]
