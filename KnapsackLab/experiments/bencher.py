"""
Benchmarking utility for comparing knapsack solvers.

Each solver is timed on every knapsack (``repeats`` runs per knapsack) and
its answers are compared with the best answer any solver produced for the
same knapsack, which gives the success rate.
"""

from __future__ import annotations

import logging
import time
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..core.errors import KnapsackError
from ..core.models import Knapsack
from ..core.solver import KnapsackSolver
from .reporter import Reporter, format_markdown_table

logger = logging.getLogger(__name__)

TABLE_HEADERS = [
    "Algorithm",
    "Success Rate",
    "Execution Time (ms) (mean/std_dev/median/median_abs_dev)",
]


@dataclass(frozen=True)
class TimeStats:
    """Summary of per-knapsack solve times, in milliseconds."""
    mean: float
    std_dev: float
    median: float
    median_abs_dev: float
    samples: int

    @classmethod
    def from_samples(cls, samples_ms: Sequence[float]) -> "TimeStats":
        if len(samples_ms) == 0:
            return cls(0.0, 0.0, 0.0, 0.0, 0)
        arr = np.asarray(samples_ms, dtype=float)
        median = float(np.median(arr))
        return cls(
            mean=float(np.mean(arr)),
            std_dev=float(np.std(arr, ddof=1)) if arr.size > 1 else 0.0,
            median=median,
            median_abs_dev=float(np.median(np.abs(arr - median))),
            samples=int(arr.size),
        )


@dataclass(frozen=True)
class Measurement:
    """Performance of one solver over one group of knapsacks."""
    solver_name: str
    correct_rate: float  # percent, 0-100
    time_stats: TimeStats
    failures: int = 0

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)

    def table_row(self) -> List[str]:
        ts = self.time_stats
        return [
            self.solver_name,
            f"{self.correct_rate:3.2f}%",
            f"{ts.mean:6.3f}/{ts.std_dev:6.3f}/{ts.median:6.3f}/{ts.median_abs_dev:6.3f}",
        ]


def run_solver(solver: KnapsackSolver, knapsack: Knapsack) -> Tuple[Optional[int], float]:
    """Solve once; return ``(value or None on failure, elapsed milliseconds)``."""
    start = time.perf_counter()
    try:
        value: Optional[int] = solver.solve(knapsack)
    except KnapsackError as exc:
        value = None
        logger.warning(f"{solver.name} failed on {len(knapsack)} items: {exc}")
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return value, elapsed_ms


def correct_rates_from_results(results: Dict[str, List[Optional[int]]]) -> Dict[str, float]:
    """
    ``results`` maps solver name to its answer per knapsack (None = failed,
    scored as 0). The per-knapsack reference is the best answer of any solver.
    """
    if not results:
        return {}
    table = {name: [0 if value is None else value for value in answers] for name, answers in results.items()}
    columns = list(zip(*table.values()))
    if not columns:
        return {name: 0.0 for name in results}
    best = [max(column) for column in columns]
    return {
        name: sum(1 for value, top in zip(answers, best) if value == top) / len(best) * 100.0
        for name, answers in table.items()
    }


def calculate_correct_rates(solvers: Sequence[KnapsackSolver], knapsacks: Sequence[Knapsack]) -> Dict[str, float]:
    results = {solver.name: [run_solver(solver, k)[0] for k in knapsacks] for solver in solvers}
    return correct_rates_from_results(results)


class Bencher:
    """Times solvers on knapsack groups and reports the results."""

    def __init__(self, repeats: int = 3, reporter: Optional[Reporter] = None):
        self.repeats = max(1, int(repeats))
        self.reporter = reporter if reporter is not None else Reporter()

    def time_solver(self, solver: KnapsackSolver, knapsacks: Sequence[Knapsack]) -> Tuple[List[Optional[int]], List[float]]:
        """Return the solver's answer per knapsack and every successful timing sample (ms)."""
        answers: List[Optional[int]] = []
        samples: List[float] = []
        for knapsack in knapsacks:
            answer: Optional[int] = None
            for _ in range(self.repeats):
                value, elapsed_ms = run_solver(solver, knapsack)
                if value is None:
                    # Deterministic solvers fail the same way every time.
                    break
                answer = value
                samples.append(elapsed_ms)
            answers.append(answer)
        return answers, samples

    def measure(self, solvers: Sequence[KnapsackSolver], knapsacks: Sequence[Knapsack]) -> List[Measurement]:
        """Measurements sorted by solver name."""
        results: Dict[str, List[Optional[int]]] = {}
        timings: Dict[str, List[float]] = {}
        for solver in solvers:
            logger.info(f"Benchmarking {solver.name} on {len(knapsacks)} knapsacks")
            results[solver.name], timings[solver.name] = self.time_solver(solver, knapsacks)

        rates = correct_rates_from_results(results)
        return [
            Measurement(
                solver_name=name,
                correct_rate=rates.get(name, 0.0),
                time_stats=TimeStats.from_samples(timings[name]),
                failures=sum(1 for answer in results[name] if answer is None),
            )
            for name in sorted(results)
        ]

    def conduct_experiment(self, solvers: Sequence[KnapsackSolver], knapsacks: Sequence[Knapsack]) -> List[Measurement]:
        """Measure ``solvers`` on ``knapsacks`` and report a markdown section."""
        if not solvers or not knapsacks:
            return []
        measurements = self.measure(solvers, knapsacks)
        self.reporter.report(format_section(len(knapsacks[0]), measurements))
        return measurements


def format_section(num_items: int, measurements: Sequence[Measurement]) -> str:
    table = format_markdown_table([m.table_row() for m in measurements], TABLE_HEADERS)
    return f"\n#### {num_items} items\n\n{table}"
