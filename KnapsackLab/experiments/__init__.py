"""
Experiment harness: configuration, random instances, benchmarking and reports.
"""

from .bencher import Bencher, Measurement, TimeStats, calculate_correct_rates
from .config import ExperimentConfig, load_experiment_configs
from .generator import generate_knapsack, generate_knapsacks
from .reporter import Reporter, format_markdown_table, write_json

__all__ = [
    'Bencher',
    'Measurement',
    'TimeStats',
    'calculate_correct_rates',
    'ExperimentConfig',
    'load_experiment_configs',
    'generate_knapsack',
    'generate_knapsacks',
    'Reporter',
    'format_markdown_table',
    'write_json',
]
