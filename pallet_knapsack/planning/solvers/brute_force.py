# -*- coding: utf-8 -*-
"""
Exhaustive (brute-force) depth-first solver.

Enumerates every include/exclude decision in item order, so it runs in
O(2^n). It is the correctness baseline the other solvers are checked
against and must stay unmemoized; keep it to small instances.

Tie-break at the leaves:
  1) higher profit wins
  2) equal profit -> fewer items wins
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from pallet_knapsack.business_objects.items import Item
from pallet_knapsack.planning.solution import SolverResult
from pallet_knapsack.planning.reporting import log_result


# Selection chain: None or (item_id, parent_chain); extending it is O(1).
Chain = Optional[Tuple[int, "Chain"]]


def _unwind(chain: Chain) -> List[int]:
    ids: List[int] = []
    while chain is not None:
        ids.append(chain[0])
        chain = chain[1]
    ids.reverse()
    return ids


@dataclass
class _BestSoFar:
    profit: int = 0
    subset: List[int] = field(default_factory=list)


def _search(items: Sequence[Item], capacity: int, best: _BestSoFar) -> None:
    """
    Depth-first walk of the include/exclude tree with an explicit stack, so
    long single-path trees (e.g. capacity 0) do not hit the recursion limit.
    Frames are (index, remaining, profit, size, chain).
    """
    n = len(items)
    stack: List[Tuple[int, int, int, int, Chain]] = [(0, capacity, 0, 0, None)]
    while stack:
        index, remaining, profit, size, chain = stack.pop()
        if index == n:
            if profit > best.profit or (profit == best.profit and size < len(best.subset)):
                best.profit = profit
                best.subset = _unwind(chain)
            continue

        # include is pushed first so the exclude branch is explored first
        it = items[index]
        if it.weight <= remaining:
            stack.append((index + 1, remaining - it.weight, profit + it.profit, size + 1, (it.id, chain)))
        stack.append((index + 1, remaining, profit, size, chain))


def solve_brute_force(capacity: int, items: Sequence[Item]) -> SolverResult:
    """
    Maximum profit over all subsets that fit `capacity`.

    Parameters
    ----------
    capacity : int
        Truck capacity (>= 0).
    items : sequence of Item
        Candidate pallets; not modified.

    Returns
    -------
    SolverResult
        Best subset found (fewest items among equal-profit optima).
    """
    best = _BestSoFar()
    _search(items, capacity, best)

    result = SolverResult.from_selection(best.subset, items)
    log_result("brute_force", result, items, capacity)
    return result
