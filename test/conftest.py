import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from KnapsackLab.core.models import Knapsack


@pytest.fixture
def exact_fit_knapsack():
    """All three items fit exactly."""
    return Knapsack.from_pairs(10, [(5, 10), (3, 7), (2, 5)])


@pytest.fixture
def value_driven_knapsack():
    """Optimum picks the two heavy valuable items, not the most items."""
    return Knapsack.from_pairs(10, [(1, 2), (5, 15), (2, 4), (5, 15), (3, 8)])
