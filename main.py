#!/bin/python
"""
Unified entry point for benchmarking the 0/1 knapsack solvers.

Equivalent to the ``knapsack-lab`` console script; run with ``--help`` for
the available options.
"""
from KnapsackLab.experiments.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
