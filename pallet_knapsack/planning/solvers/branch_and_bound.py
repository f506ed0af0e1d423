# -*- coding: utf-8 -*-
"""
Branch-and-bound solver with a three-level tie-break.

Same include/exclude tree as the brute-force solver, except that:
  - the include branch is tried first and pruned *before* descending when
    the item would push the load over capacity (no frame is pushed for it);
  - leaves are ranked lexicographically by
        (1) higher profit
        (2) fewer items
        (3) lower total weight
    with strict comparisons, so the first subset found wins a full tie.

No relaxation bound is computed, so the worst case is still O(2^n).

Because of the stricter tie-break this solver can report a different
optimal subset than `solve_brute_force`; the optimal profit is the same.
"""

from __future__ import annotations
import math
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
class _Incumbent:
    profit: int = 0
    weight: float = math.inf
    selection: List[int] = field(default_factory=list)

    def is_beaten_by(self, profit: int, weight: int, size: int) -> bool:
        if profit != self.profit:
            return profit > self.profit
        if size != len(self.selection):
            return size < len(self.selection)
        return weight < self.weight


def _branch(items: Sequence[Item], capacity: int, best: _Incumbent) -> None:
    """
    Depth-first search over an explicit stack of
    (idx, weight, profit, size, chain) frames; depth is not bounded by the
    interpreter's recursion limit.
    """
    n = len(items)
    stack: List[Tuple[int, int, int, int, Chain]] = [(0, 0, 0, 0, None)]
    while stack:
        idx, weight, profit, size, chain = stack.pop()
        if idx >= n:
            if best.is_beaten_by(profit, weight, size):
                best.profit = profit
                best.weight = weight
                best.selection = _unwind(chain)
            continue

        # exclude is pushed first so the include branch is explored first
        stack.append((idx + 1, weight, profit, size, chain))
        it = items[idx]
        if weight + it.weight <= capacity:
            stack.append((idx + 1, weight + it.weight, profit + it.profit, size + 1, (it.id, chain)))


def solve_branch_and_bound(capacity: int, items: Sequence[Item]) -> SolverResult:
    """
    Optimal subset under the (profit, -cardinality, -weight) ordering.

    An empty item list returns the zero result straight away, without
    entering the search.
    """
    if not items:
        result = SolverResult.empty()
        log_result("branch_and_bound", result, items, capacity)
        return result

    best = _Incumbent()
    _branch(items, capacity, best)

    result = SolverResult.from_selection(best.selection, items)
    log_result("branch_and_bound", result, items, capacity)
    return result
