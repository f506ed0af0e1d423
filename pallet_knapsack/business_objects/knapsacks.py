# -*- coding: utf-8 -*-
"""
Knapsack (truck) model.
"""

from __future__ import annotations
from dataclasses import dataclass
from .errors import StateValidationError


@dataclass(frozen=True)
class KnapsackSpec:
    """
    Immutable truck description as read from the truck CSV.

    Attributes
    ----------
    capacity : int
        Nonnegative weight limit.
    item_count : int
        Number of pallets the dataset declares (informational only).
    """
    capacity: int
    item_count: int = 0

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.capacity < 0:
            raise StateValidationError("KnapsackSpec capacity must be >= 0.")
        if self.item_count < 0:
            raise StateValidationError("KnapsackSpec item_count must be >= 0.")
