# -*- coding: utf-8 -*-
"""
Solver registry.

Every solver has the signature `(capacity, items) -> SolverResult` and is
independent of the others. Menu numbers follow the interactive program:

  1 - brute_force        (exhaustive, fewest-items tie-break)
  2 - dynamic            (O(n*C) table)
  3 - greedy             (ratio heuristic, not guaranteed optimal)
  4 - branch_and_bound   (fewest items, then lightest)
"""

from __future__ import annotations
from typing import Callable, Dict, Sequence

from pallet_knapsack.business_objects.items import Item
from pallet_knapsack.planning.solution import SolverResult
from .brute_force import solve_brute_force
from .dynamic import solve_dynamic
from .greedy import solve_greedy
from .branch_and_bound import solve_branch_and_bound

SolverFn = Callable[[int, Sequence[Item]], SolverResult]

SOLVERS: Dict[str, SolverFn] = {
    "brute_force": solve_brute_force,
    "dynamic": solve_dynamic,
    "greedy": solve_greedy,
    "branch_and_bound": solve_branch_and_bound,
}

DISPLAY_NAMES: Dict[str, str] = {
    "brute_force": "Brute Force",
    "dynamic": "Dynamic Programming",
    "greedy": "Greedy Approximation",
    "branch_and_bound": "Integer Linear Programming",
}

MENU_CHOICES: Dict[int, str] = {
    1: "brute_force",
    2: "dynamic",
    3: "greedy",
    4: "branch_and_bound",
}


def get_solver(algorithm: str) -> SolverFn:
    """Look up a solver by key; raises ValueError for unknown keys."""
    try:
        return SOLVERS[algorithm]
    except KeyError:
        raise ValueError(
            f"Unknown algorithm '{algorithm}'. Allowed: {sorted(SOLVERS)}"
        ) from None


__all__ = [
    "SolverFn",
    "SOLVERS",
    "DISPLAY_NAMES",
    "MENU_CHOICES",
    "get_solver",
    "solve_brute_force",
    "solve_dynamic",
    "solve_greedy",
    "solve_branch_and_bound",
]
