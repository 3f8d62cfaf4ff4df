import abc

from .models import Knapsack


class KnapsackSolver(abc.ABC):
    """
    Abstract base class for knapsack solving algorithms.
    """
    # Whether the returned value is guaranteed to be the optimum.
    exact: bool = True

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Stable, human-readable identifier used for lookup and reporting."""
        pass

    @abc.abstractmethod
    def solve(self, knapsack: Knapsack) -> int:
        """
        Computes the best total value this algorithm can achieve.

        Args:
            knapsack: The instance to solve. It is never mutated.

        Returns:
            The achieved total value (int).

        Raises:
            KnapsackError: A solver-specific, recoverable failure.
        """
        pass

    def get_name(self) -> str:
        """Return the solver name (compat accessor)."""
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
