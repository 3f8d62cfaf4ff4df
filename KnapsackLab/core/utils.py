"""
Shared utilities for CLI parsing and logging configuration.
"""

from typing import Callable, Tuple, Union
import argparse
import logging
import re
import time
from pathlib import Path

IntRangeSpec = Union[int, Tuple[int, int]]

# "7", "1-20", "20:1" or "5,5"; bounds may come in either order.
_INT_RANGE = re.compile(r"(\d+)(?:\s*[,:-]\s*(\d+))?")


def parse_int_range(spec: str, *, min_value: int, label: str) -> IntRangeSpec:
    """
    Parse a weight/cost bound given as one integer or an inclusive range.

    Bounds are raised to ``min_value``; a range whose ends coincide collapses
    to a single integer.
    """
    raw = (spec or "").strip()
    if not raw:
        raise ValueError(f"{label} cannot be empty")
    match = _INT_RANGE.fullmatch(raw)
    if match is None:
        raise ValueError(f"{label} must be an integer or a range like 1-20, got {spec!r}")
    first, second = match.groups()
    lo = hi = max(min_value, int(first))
    if second is not None:
        lo, hi = sorted((lo, max(min_value, int(second))))
    return lo if lo == hi else (lo, hi)


def int_range_type(min_value: int, label: str) -> Callable[[str], IntRangeSpec]:
    """argparse ``type=`` adapter around :func:`parse_int_range`."""
    def _parser(text: str) -> IntRangeSpec:
        try:
            return parse_int_range(text, min_value=min_value, label=label)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from exc
    return _parser


def range_bounds(spec: IntRangeSpec) -> Tuple[int, int]:
    """Expand a scalar or (lo, hi) spec into an inclusive (lo, hi) pair."""
    if isinstance(spec, tuple):
        return int(spec[0]), int(spec[1])
    return int(spec), int(spec)


def setup_logging(log_type: str, label: str, log_dir: Union[str, Path, None] = 'logs') -> logging.Logger:
    """Sets up the package logger for a benchmarking run.

    Records from every ``KnapsackLab.*`` module propagate to it. When
    ``log_dir`` is None only the stream handler is attached.
    """
    logger = logging.getLogger("KnapsackLab")
    logger.setLevel(logging.INFO)

    # Prevent adding multiple handlers if the logger already exists
    if not logger.handlers:
        session_id = int(time.time())
        formatter = logging.Formatter(
            f'%(asctime)s - %(levelname)s - [Session: {session_id}]-[{log_type}: {label}] - %(message)s'
        )
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if log_dir is not None:
            log_dir_path = Path(log_dir)
            log_dir_path.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_dir_path / f"{log_type}_logs.log", mode='a'))
        for handler in handlers:
            handler.setFormatter(formatter)
            logger.addHandler(handler)

    return logger
