"""
Command-line entry point for running knapsack solver experiments.

Examples:
    knapsack-lab --list
    knapsack-lab --items 20 --capacity 100 --weights-range 1-30 --costs-range 1-100 --generations 10
    knapsack-lab --config experiments.json --report docs/experiment.md --json results.json
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional, Sequence

from ..core.errors import AlgorithmNotFoundError, ConfigError
from ..core.solver import KnapsackSolver
from ..core.utils import int_range_type, range_bounds, setup_logging
from ..registry import DEFAULT_FPTAS_EPSILON, AlgorithmRegistry, build_default_registry
from .bencher import Bencher
from .config import ExperimentConfig, load_experiment_configs
from .generator import generate_knapsacks
from .plots import plot_mean_times
from .reporter import Reporter, write_json

EXIT_OK = 0
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Benchmark 0/1 knapsack solvers on randomly generated instances."
    )
    parser.add_argument("--list", action="store_true", default=False, help="List algorithm names and exit")
    parser.add_argument("--config", type=str, default=None, help="JSON file with an array of experiments")

    group = parser.add_argument_group("single experiment (used when --config is absent)")
    group.add_argument("--items", type=int, default=20, help="Items per knapsack (default: 20)")
    group.add_argument("--capacity", type=int, default=50, help="Knapsack capacity (default: 50)")
    group.add_argument("--weights-range", type=int_range_type(0, "weights-range"), default=(1, 20))
    group.add_argument("--costs-range", type=int_range_type(0, "costs-range"), default=(1, 100))
    group.add_argument("--generations", type=int, default=5, help="Knapsacks to generate (default: 5)")

    parser.add_argument("--algorithms", nargs="+", default=None, help="Restrict to these algorithm names")
    parser.add_argument("--epsilon", type=float, default=DEFAULT_FPTAS_EPSILON, help="FPTAS epsilon in (0, 1)")
    parser.add_argument("--repeats", type=int, default=3, help="Timed runs per knapsack (default: 3)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--report", type=str, default=None, help="Append the markdown report to this file")
    parser.add_argument("--json", type=str, default=None, help="Write measurements as JSON")
    parser.add_argument("--plot", type=str, default=None, help="Save mean execution time plot(s)")
    parser.add_argument("--log-dir", type=str, default=None)
    return parser


def config_from_args(args: argparse.Namespace) -> ExperimentConfig:
    return ExperimentConfig(
        num_items=args.items,
        capacity=args.capacity,
        weights_range=range_bounds(args.weights_range),
        costs_range=range_bounds(args.costs_range),
        generations=args.generations,
    )


def select_solvers(registry: AlgorithmRegistry, names: Optional[Sequence[str]]) -> List[KnapsackSolver]:
    """Every solver when ``names`` is empty; otherwise the named ones, unknown names rejected."""
    if not names:
        return registry.list()
    for name in names:
        registry.find_by_name(name)
    return registry.filter_by_names(names)


def _plot_path(base: str, num_items: int, multiple: bool) -> Path:
    path = Path(base)
    if not multiple:
        return path
    return path.with_name(f"{path.stem}_{num_items}_items{path.suffix or '.png'}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logging("bench", "knapsack", log_dir=args.log_dir)

    try:
        registry = build_default_registry(args.epsilon)
    except ValueError as exc:
        logger.error(f"Invalid solver parameters: {exc}")
        return EXIT_USAGE

    if args.list:
        for name in registry.names():
            print(name)
        return EXIT_OK

    try:
        configs = load_experiment_configs(args.config) if args.config else [config_from_args(args)]
    except ConfigError as exc:
        logger.error(str(exc))
        return EXIT_USAGE

    bencher = Bencher(repeats=args.repeats, reporter=Reporter(args.report))
    groups = []
    for index, config in enumerate(configs):
        try:
            solvers = select_solvers(registry, args.algorithms or config.algorithms)
        except AlgorithmNotFoundError as exc:
            logger.error(f"{exc} Available: {registry.names()}")
            return EXIT_USAGE

        seed = None if args.seed is None else args.seed + index
        knapsacks = generate_knapsacks(config, seed=seed)
        logger.info(
            f"Experiment {index + 1}/{len(configs)}: {config.generations} knapsacks, "
            f"{config.num_items} items, capacity {config.capacity}, {len(solvers)} algorithms"
        )
        measurements = bencher.conduct_experiment(solvers, knapsacks)
        groups.append({"config": config.to_dict(), "measurements": measurements})

        if args.plot and measurements:
            saved = plot_mean_times(
                measurements,
                _plot_path(args.plot, config.num_items, len(configs) > 1),
                title=f"Mean execution time ({config.num_items} items)",
            )
            logger.info(f"Plot saved to {saved}")

    if args.json:
        logger.info(f"Measurements saved to {write_json(args.json, groups)}")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
