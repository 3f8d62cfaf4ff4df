"""
Exceptions raised by the solvers, the registry and the experiment layer.
"""


class KnapsackError(Exception):
    """Base class for every recoverable KnapsackLab error."""


class InvalidKnapsackError(KnapsackError, ValueError):
    """Raised when an Item or Knapsack is built from invalid data."""


class CapacityTooLargeError(KnapsackError):
    """Raised by table-based solvers when the capacity cannot index a table."""

    def __init__(self, capacity: int, limit: int):
        super().__init__(f"Capacity {capacity} is too large to process (limit {limit}).")
        self.capacity = capacity
        self.limit = limit


class TooManyItemsError(KnapsackError):
    """Raised when a solver cannot handle the number of items."""

    def __init__(self, item_count: int, limit: int):
        super().__init__(f"The number of items ({item_count}) exceeds the maximum allowed ({limit}).")
        self.item_count = item_count
        self.limit = limit


class AlgorithmNotFoundError(KnapsackError, LookupError):
    """Raised when the registry has no solver with the requested name."""

    def __init__(self, name: str):
        super().__init__(f"Can't find algorithm named {name!r}.")
        self.name = name


class ConfigError(KnapsackError, ValueError):
    """Raised when an experiment configuration violates the expected schema."""
