# -*- coding: utf-8 -*-
"""
Greedy ratio heuristic.

Items are ranked by profit/weight (descending, stable: equal ratios keep
their input order) and admitted one by one while the running weight stays
within capacity. A skipped item is never reconsidered, so the result is an
approximation: never better than the optimum, often equal to it.

Zero-weight items follow Item.ratio (+inf with profit, 0.0 without) and
always fit.
"""

from __future__ import annotations
from typing import List, Sequence

from pallet_knapsack.business_objects.items import Item
from pallet_knapsack.planning.solution import SolverResult
from pallet_knapsack.planning.reporting import log_result


def rank_by_ratio(items: Sequence[Item]) -> List[Item]:
    """Return a new list of items sorted by ratio, highest first."""
    return sorted(items, key=lambda it: it.ratio, reverse=True)


def solve_greedy(capacity: int, items: Sequence[Item]) -> SolverResult:
    """
    Approximate profit by filling the truck in ratio order.
    """
    total_weight = 0
    total_profit = 0
    selected: List[int] = []

    for it in rank_by_ratio(items):
        if total_weight + it.weight <= capacity:
            selected.append(it.id)
            total_weight += it.weight
            total_profit += it.profit

    result = SolverResult(
        selection=tuple(selected),
        total_profit=total_profit,
        total_weight=total_weight,
    )
    log_result("greedy", result, items, capacity)
    return result
