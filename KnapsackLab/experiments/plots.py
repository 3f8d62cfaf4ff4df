"""Execution-time plots for benchmark measurements."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Union

import matplotlib.pyplot as plt

from .bencher import Measurement


def plot_mean_times(measurements: Sequence[Measurement], save_path: Union[str, Path], *, title: str = "Mean execution time") -> Path:
    save_path = Path(save_path)
    save_path.parent.mkdir(parents=True, exist_ok=True)
    names = [m.solver_name for m in measurements]
    means = [m.time_stats.mean for m in measurements]
    errors = [m.time_stats.std_dev for m in measurements]

    fig, ax = plt.subplots(figsize=(max(6, 1.2 * len(names)), 4))
    ax.bar(range(len(names)), means, yerr=errors, capsize=4, color="tab:blue", alpha=0.8)
    ax.set_xticks(range(len(names)))
    ax.set_xticklabels(names, rotation=30, ha="right")
    ax.set_title(title)
    ax.set_ylabel("Time per knapsack (ms)")
    ax.grid(True, axis="y", linestyle="--", alpha=0.4)
    fig.tight_layout()
    fig.savefig(save_path, dpi=150)
    plt.close(fig)
    return save_path
