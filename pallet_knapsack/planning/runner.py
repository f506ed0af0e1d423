# -*- coding: utf-8 -*-
"""
Timed solver runs.

Wraps a solver call with wall-clock timing and renders the console block
the interactive program prints after each run:

    Selected Pallets (ID | Value | Weight):
    2 | 40 | 4
    3 | 30 | 6
    Total weight: 10 / Capacity: 10
    Algorithm: Dynamic Programming
    Max profit: 70
    Execution time: 0.0312 ms
"""

from __future__ import annotations
import time
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from pallet_knapsack.planning.policy import RunConfig
from pallet_knapsack.planning.state import ProblemInstance
from pallet_knapsack.planning.solution import SolverResult
from pallet_knapsack.planning.reporting import format_selection
from pallet_knapsack.planning.solvers import DISPLAY_NAMES, SOLVERS, get_solver
from pallet_knapsack.utils.read_csvs import load_dataset
import pallet_knapsack.utils.logs

logger = pallet_knapsack.utils.logs.logger


@dataclass(frozen=True)
class RunRecord:
    """
    One timed solver invocation.

    Attributes
    ----------
    algorithm : str
        Solver key (see planning.solvers.SOLVERS).
    display_name : str
        Human-readable solver name.
    result : SolverResult
    elapsed_ms : float
        Wall-clock time of the solver call in milliseconds.
    """
    algorithm: str
    display_name: str
    result: SolverResult
    elapsed_ms: float


def run_solver(algorithm: str, instance: ProblemInstance) -> RunRecord:
    solver = get_solver(algorithm)
    logger.info(f"Running {algorithm} on {len(instance.items)} item(s), capacity {instance.capacity}")

    start = time.perf_counter()
    result = solver(instance.capacity, instance.items)
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    return RunRecord(
        algorithm=algorithm,
        display_name=DISPLAY_NAMES[algorithm],
        result=result,
        elapsed_ms=elapsed_ms,
    )


def run_all(instance: ProblemInstance, algorithms: Optional[Iterable[str]] = None) -> List[RunRecord]:
    """Run several solvers (all of them by default) on the same instance."""
    keys = list(SOLVERS) if algorithms is None else list(algorithms)
    return [run_solver(key, instance) for key in keys]


def run_dataset(config: RunConfig) -> Tuple[ProblemInstance, RunRecord]:
    """
    Load the dataset named by `config` and run `config.algorithm` on it.

    Raises
    ------
    ValueError
        For an unknown algorithm key (checked before any file is read).
    SchemaError
        When either dataset file cannot be loaded.
    """
    get_solver(config.algorithm)
    instance = load_dataset(config.truck_path, config.pallets_path)
    return instance, run_solver(config.algorithm, instance)


def format_run(record: RunRecord, instance: ProblemInstance) -> str:
    lines = [
        format_selection(record.result.selection, instance.items),
        f"Total weight: {record.result.total_weight} / Capacity: {instance.capacity}",
        f"Algorithm: {record.display_name}",
        f"Max profit: {record.result.total_profit}",
        f"Execution time: {record.elapsed_ms:.4f} ms",
    ]
    return "\n".join(lines)
