# -*- coding: utf-8 -*-
"""
Interactive console menu.

Loop:
  1) show the menu and read an option (0 leaves)
  2) read a dataset number and load its two CSV files
  3) run the chosen solver and print the run block

Input and output are injectable so the loop can be driven without a terminal.
"""

from __future__ import annotations
from typing import Callable

from pallet_knapsack.business_objects.errors import SchemaError
from pallet_knapsack.planning.policy import RunConfig
from pallet_knapsack.planning.runner import format_run, run_solver
from pallet_knapsack.planning.solvers import MENU_CHOICES
from pallet_knapsack.utils.read_csvs import load_dataset
import pallet_knapsack.utils.logs

logger = pallet_knapsack.utils.logs.logger

MENU_TEXT = "\n".join([
    "===== Knapsack =====",
    "Choose an option:",
    "  1 - Brute Force",
    "  2 - Dynamic Programming",
    "  3 - Approximation (Greedy Method)",
    "  4 - Integer Linear Programming",
    "  0 - Leave",
])


def show_menu(print_fn: Callable[[str], None] = print) -> None:
    print_fn(MENU_TEXT)


def _parse_choice(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def run_menu(
    config: RunConfig,
    input_fn: Callable[[str], str] = input,
    print_fn: Callable[[str], None] = print,
) -> int:
    """
    Run the menu loop until the user picks 0 (or input runs out).

    Returns
    -------
    int
        Number of solver runs completed.
    """
    runs = 0
    while True:
        show_menu(print_fn)
        try:
            choice = _parse_choice(input_fn("Option: "))
        except EOFError:
            break

        if choice == 0:
            print_fn("Leaving program...")
            break

        algorithm = MENU_CHOICES.get(choice) if choice is not None else None
        if algorithm is None:
            print_fn("Invalid option.")
            continue

        try:
            dataset_id = input_fn("Choose the dataset number: ")
        except EOFError:
            break

        cfg = config.with_dataset(dataset_id)
        try:
            instance = load_dataset(cfg.truck_path, cfg.pallets_path)
        except SchemaError as e:
            logger.error(str(e))
            print_fn(f"Error loading dataset {cfg.dataset_id}: {e}")
            continue

        record = run_solver(algorithm, instance)
        print_fn(format_run(record, instance))
        print_fn("")
        runs += 1

    return runs
