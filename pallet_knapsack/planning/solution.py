# -*- coding: utf-8 -*-
"""
Solver result model and its consistency check.

Every solver returns a SolverResult; the reporting layer and the tracker
consume it.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, Sequence, Tuple

from pallet_knapsack.business_objects.errors import StateValidationError
from pallet_knapsack.business_objects.items import Item


@dataclass(frozen=True)
class SolverResult:
    """
    Outcome of a single solver invocation.

    Attributes
    ----------
    selection : tuple[int, ...]
        Selected item ids, in the order the solver discovered them.
    total_profit : int
        Sum of profits of the selected items.
    total_weight : int
        Sum of weights of the selected items.
    """
    selection: Tuple[int, ...]
    total_profit: int
    total_weight: int

    @classmethod
    def from_selection(cls, selection: Iterable[int], items: Sequence[Item]) -> "SolverResult":
        """Build a result whose totals are recomputed from the referenced items."""
        ids = tuple(selection)
        by_id: Dict[int, Item] = {it.id: it for it in items}
        profit = sum(by_id[iid].profit for iid in ids)
        weight = sum(by_id[iid].weight for iid in ids)
        return cls(selection=ids, total_profit=profit, total_weight=weight)

    @classmethod
    def empty(cls) -> "SolverResult":
        return cls(selection=(), total_profit=0, total_weight=0)

    def __len__(self) -> int:
        return len(self.selection)


def validate_result(result: SolverResult, items: Sequence[Item], capacity: int) -> None:
    """
    Recompute profit and weight from `result.selection` and compare them with
    the stored totals.

    Raises
    ------
    StateValidationError
        On an unknown or repeated id, a profit/weight mismatch, or a total
        weight above `capacity`.
    """
    by_id: Dict[int, Item] = {it.id: it for it in items}
    seen: set[int] = set()
    profit = 0
    weight = 0
    for iid in result.selection:
        if iid not in by_id:
            raise StateValidationError(f"Selection references unknown Item.id: {iid}")
        if iid in seen:
            raise StateValidationError(f"Selection contains Item.id {iid} more than once.")
        seen.add(iid)
        profit += by_id[iid].profit
        weight += by_id[iid].weight

    if profit != result.total_profit:
        raise StateValidationError(
            f"Reported profit {result.total_profit} != recomputed profit {profit}."
        )
    if weight != result.total_weight:
        raise StateValidationError(
            f"Reported weight {result.total_weight} != recomputed weight {weight}."
        )
    if weight > capacity:
        raise StateValidationError(f"Total weight {weight} exceeds capacity {capacity}.")
