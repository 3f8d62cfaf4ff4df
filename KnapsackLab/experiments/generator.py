"""Random knapsack generation from an ExperimentConfig."""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from ..core.models import Item, Knapsack
from .config import ExperimentConfig


def generate_knapsack(config: ExperimentConfig, rng: np.random.Generator) -> Knapsack:
    """Draw ``config.num_items`` items with weights/values uniform over the inclusive ranges."""
    weights = rng.integers(config.weights_range[0], config.weights_range[1], size=config.num_items, endpoint=True)
    values = rng.integers(config.costs_range[0], config.costs_range[1], size=config.num_items, endpoint=True)
    items = tuple(Item(int(w), int(v)) for w, v in zip(weights, values))
    return Knapsack(config.capacity, items)


def generate_knapsacks(config: ExperimentConfig, seed: Optional[int] = None) -> List[Knapsack]:
    """Generate ``config.generations`` knapsacks from a single seeded generator."""
    rng = np.random.default_rng(seed)
    return [generate_knapsack(config, rng) for _ in range(config.generations)]
