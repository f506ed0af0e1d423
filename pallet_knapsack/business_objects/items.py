# -*- coding: utf-8 -*-
"""
Item (pallet) model for the 0/1 knapsack.
"""

from __future__ import annotations
from dataclasses import dataclass
from .errors import StateValidationError


@dataclass(frozen=True)
class Item:
    """
    A pallet that can be loaded into the truck at most once.

    Attributes
    ----------
    id : int
        Unique, caller-assigned identifier.
    weight : int
        Nonnegative weight (capacity consumption).
    profit : int
        Nonnegative objective contribution if selected.
    """
    id: int
    weight: int
    profit: int

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.weight < 0:
            raise StateValidationError(f"Item[{self.id}] weight must be >= 0.")
        if self.profit < 0:
            raise StateValidationError(f"Item[{self.id}] profit must be >= 0.")

    @property
    def ratio(self) -> float:
        """
        Profit per unit of weight.

        Zero-weight convention:
          - profit > 0  -> +inf (always worth loading first)
          - profit == 0 -> 0.0
        """
        if self.weight == 0:
            return float("inf") if self.profit > 0 else 0.0
        return self.profit / self.weight
