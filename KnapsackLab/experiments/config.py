"""
Experiment configuration: which random knapsacks to generate and which
algorithms to run on them.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from ..core.errors import ConfigError

_REQUIRED_KEYS = ("num_items", "capacity", "weights_range", "costs_range")


def _as_int(value: Any, label: str, *, min_value: int = 0) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{label} must be an integer, got {value!r}")
    if value < min_value:
        raise ConfigError(f"{label} must be >= {min_value}, got {value}")
    return value


def _as_range(value: Any, label: str) -> Tuple[int, int]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ConfigError(f"{label} must be a [min, max] pair, got {value!r}")
    lo = _as_int(value[0], f"{label}[0]")
    hi = _as_int(value[1], f"{label}[1]")
    if lo > hi:
        raise ConfigError(f"{label} minimum {lo} exceeds maximum {hi}")
    return (lo, hi)


@dataclass
class ExperimentConfig:
    """
    Parameters of one experiment.

    Attributes
    ----------
    num_items : int
        Number of items per generated knapsack.
    capacity : int
        Capacity of every generated knapsack.
    weights_range, costs_range : (int, int)
        Inclusive ranges item weights and values are drawn from.
    generations : int
        How many random knapsacks to generate.
    algorithms : list of str
        Algorithm names to run; empty means every registered algorithm.
    """
    num_items: int
    capacity: int
    weights_range: Tuple[int, int]
    costs_range: Tuple[int, int]
    generations: int = 1
    algorithms: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.num_items = _as_int(self.num_items, "num_items")
        self.capacity = _as_int(self.capacity, "capacity")
        self.weights_range = _as_range(self.weights_range, "weights_range")
        self.costs_range = _as_range(self.costs_range, "costs_range")
        self.generations = _as_int(self.generations, "generations", min_value=1)
        if not isinstance(self.algorithms, (list, tuple)) or not all(isinstance(a, str) for a in self.algorithms):
            raise ConfigError(f"algorithms must be a list of names, got {self.algorithms!r}")
        self.algorithms = list(self.algorithms)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExperimentConfig":
        if not isinstance(data, dict):
            raise ConfigError(f"Experiment entry must be an object, got {type(data).__name__}")
        missing = [key for key in _REQUIRED_KEYS if key not in data]
        if missing:
            raise ConfigError(f"Experiment entry is missing keys: {missing}")
        unknown = sorted(set(data) - set(_REQUIRED_KEYS) - {"generations", "algorithms"})
        if unknown:
            raise ConfigError(f"Experiment entry has unknown keys: {unknown}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["weights_range"] = list(self.weights_range)
        data["costs_range"] = list(self.costs_range)
        return data


def load_experiment_configs(path: Union[str, Path]) -> List[ExperimentConfig]:
    """Read a JSON array of experiment objects."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read experiment config {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in experiment config {path}: {exc}") from exc

    if not isinstance(raw, list):
        raise ConfigError(f"Experiment config {path} must contain a JSON array")
    return [ExperimentConfig.from_dict(entry) for entry in raw]
