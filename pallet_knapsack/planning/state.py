# -*- coding: utf-8 -*-
"""
Problem instance container for the knapsack solvers.

Notes
-----
- Business (timeless) entities live in `business_objects/`:
  * business_objects.items.Item
  * business_objects.knapsacks.KnapsackSpec
- A ProblemInstance bundles one truck with its candidate pallets. Solvers
  only ever see `(capacity, items)`; the instance is what loaders, the
  runner and the tracker pass around.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List

from pallet_knapsack.business_objects.errors import StateValidationError
from pallet_knapsack.business_objects.items import Item
from pallet_knapsack.business_objects.knapsacks import KnapsackSpec


@dataclass(frozen=True)
class ProblemInstance:
    """
    Immutable problem input for a solver run.

    Attributes
    ----------
    knapsack : KnapsackSpec
        The truck (capacity + declared pallet count).
    items : list[Item]
        All available pallets (each can be loaded at most once). Treat as read-only.
    """
    knapsack: KnapsackSpec
    items: List[Item]

    def __post_init__(self) -> None:  # type: ignore[override]
        seen: set[int] = set()
        for it in self.items:
            if it.id in seen:
                raise StateValidationError(f"Duplicate Item.id: {it.id}")
            seen.add(it.id)

    @property
    def capacity(self) -> int:
        return self.knapsack.capacity

    def items_by_id(self) -> Dict[int, Item]:
        """Convenience lookup table by item id."""
        return {it.id: it for it in self.items}
