# -*- coding: utf-8 -*-
"""
Bottom-up dynamic programming solver.

Tables (both (n+1) x (C+1), row 0 / column 0 are zero):
  dp[i][w]    best profit using the first i items within capacity w
  count[i][w] fewest items attaining dp[i][w]

Recurrence (item i-1 has weight wi, profit pi):
  dp[i][w] = max(dp[i-1][w], pi + dp[i-1][w-wi])   if wi <= w
           = dp[i-1][w]                             otherwise

Reconstruction walks back from (n, C): whenever dp[i][w] != dp[i-1][w],
item i-1 is in the subset and w shrinks by its weight. It stops at i == 0,
or at w == 0 once the remaining prefix holds no zero-weight profit
(dp[i][0] == 0); the ids are then reversed into ascending discovery order.

Runs in O(n*C) time and memory.
"""

from __future__ import annotations
from typing import List, Sequence, Tuple

from pallet_knapsack.business_objects.items import Item
from pallet_knapsack.planning.solution import SolverResult
from pallet_knapsack.planning.reporting import log_result

Table = List[List[int]]


def build_tables(capacity: int, items: Sequence[Item]) -> Tuple[Table, Table]:
    """Fill and return the (dp, count) tables."""
    n = len(items)
    dp: Table = [[0] * (capacity + 1) for _ in range(n + 1)]
    count: Table = [[0] * (capacity + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        wi = items[i - 1].weight
        pi = items[i - 1].profit
        prev_dp = dp[i - 1]
        prev_count = count[i - 1]
        row_dp = dp[i]
        row_count = count[i]
        for w in range(capacity + 1):
            if wi > w:
                row_dp[w] = prev_dp[w]
                row_count[w] = prev_count[w]
                continue

            include = pi + prev_dp[w - wi]
            exclude = prev_dp[w]
            if include > exclude:
                row_dp[w] = include
                row_count[w] = prev_count[w - wi] + 1
            elif include < exclude:
                row_dp[w] = exclude
                row_count[w] = prev_count[w]
            else:
                # equal profit: keep whichever needs fewer items
                row_dp[w] = include
                row_count[w] = min(prev_count[w - wi] + 1, prev_count[w])

    return dp, count


def reconstruct(dp: Table, capacity: int, items: Sequence[Item]) -> List[int]:
    """Walk the profit table back from (n, capacity) and return the chosen ids."""
    selected: List[int] = []
    w = capacity
    i = len(items)
    # w == 0 only ends the walk once no zero-weight profit is left in the prefix
    while i > 0 and (w > 0 or dp[i][0] > 0):
        if dp[i][w] != dp[i - 1][w]:
            selected.append(items[i - 1].id)
            w -= items[i - 1].weight
        i -= 1
    selected.reverse()
    return selected


def solve_dynamic(capacity: int, items: Sequence[Item]) -> SolverResult:
    """
    Optimal profit via the O(n*C) table; same optimum as the brute-force solver.
    """
    dp, _ = build_tables(capacity, items)
    selected = reconstruct(dp, capacity, items)

    result = SolverResult.from_selection(selected, items)
    log_result("dynamic", result, items, capacity)
    return result
