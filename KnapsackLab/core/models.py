"""
Immutable knapsack instance models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Iterable, List, Tuple

from .errors import InvalidKnapsackError


def _check_non_negative_int(value: object, label: str) -> None:
    # bool is an int subclass but never a meaningful weight/value.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidKnapsackError(f"{label} must be an integer, got {value!r}.")
    if value < 0:
        raise InvalidKnapsackError(f"{label} must be >= 0, got {value}.")


@dataclass(frozen=True)
class Item:
    """
    An indivisible item.

    Attributes
    ----------
    weight : int
        Nonnegative capacity consumption.
    value : int
        Nonnegative objective contribution if selected.
    """
    weight: int
    value: int

    def __post_init__(self) -> None:
        _check_non_negative_int(self.weight, "Item.weight")
        _check_non_negative_int(self.value, "Item.value")

    @property
    def ratio(self) -> float:
        """Value per unit of weight; weightless items with value rank first."""
        if self.weight == 0:
            return float("inf") if self.value > 0 else 0.0
        return self.value / self.weight

    @property
    def ratio_key(self) -> Tuple[int, Fraction]:
        """Exact sort key ordering items like ``ratio``, without float rounding."""
        if self.weight == 0:
            return (1, Fraction(0)) if self.value > 0 else (0, Fraction(0))
        return (0, Fraction(self.value, self.weight))


@dataclass(frozen=True)
class Knapsack:
    """
    A capacity and an ordered, read-only sequence of items.

    Item order only matters for indexing; solvers must not rely on it for
    their result.
    """
    capacity: int
    items: Tuple[Item, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _check_non_negative_int(self.capacity, "Knapsack.capacity")
        items = tuple(self.items)
        for index, item in enumerate(items):
            if not isinstance(item, Item):
                raise InvalidKnapsackError(f"Knapsack item #{index} is not an Item: {item!r}")
        # Frozen dataclass: normalise lists to tuples through object.__setattr__.
        object.__setattr__(self, "items", items)

    @classmethod
    def from_pairs(cls, capacity: int, pairs: Iterable[Tuple[int, int]]) -> "Knapsack":
        """Build a knapsack from ``(weight, value)`` pairs."""
        return cls(capacity, tuple(Item(weight, value) for weight, value in pairs))

    def __len__(self) -> int:
        return len(self.items)

    def item(self, index: int) -> Item:
        return self.items[index]

    def weights(self) -> List[int]:
        return [item.weight for item in self.items]

    def values(self) -> List[int]:
        return [item.value for item in self.items]

    def total_weight(self) -> int:
        return sum(item.weight for item in self.items)

    def total_value(self) -> int:
        return sum(item.value for item in self.items)
