# -*- coding: utf-8 -*-
"""
pallet_knapsack: 0/1 knapsack solvers for truck pallet loading.

Four independent strategies share one signature,
`solver(capacity, items) -> SolverResult`:

  - solve_brute_force       exhaustive search (baseline)
  - solve_dynamic           dynamic programming, O(n*C)
  - solve_greedy            profit/weight ratio heuristic
  - solve_branch_and_bound  pruned search, (profit, fewer items, lighter) tie-break
"""

from pallet_knapsack.business_objects import Item, KnapsackSpec, SchemaError, StateValidationError
from pallet_knapsack.planning import ProblemInstance, RunConfig, SolverResult, validate_result
from pallet_knapsack.planning.solvers import (
    SOLVERS,
    get_solver,
    solve_brute_force,
    solve_dynamic,
    solve_greedy,
    solve_branch_and_bound,
)

__all__ = [
    "Item",
    "KnapsackSpec",
    "SchemaError",
    "StateValidationError",
    "ProblemInstance",
    "RunConfig",
    "SolverResult",
    "validate_result",
    "SOLVERS",
    "get_solver",
    "solve_brute_force",
    "solve_dynamic",
    "solve_greedy",
    "solve_branch_and_bound",
]
