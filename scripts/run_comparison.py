#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run every solver on one dataset and export comparison artifacts.

Outputs under OUT_DIR:
  - <algorithm>_selection.csv  (selected pallets per solver)
  - comparison.csv             (profit / weight / time per solver)

Usage:
  python scripts/run_comparison.py
"""

from __future__ import annotations
import os

# ====== CONFIGURATION ======
DATA_DIR   = "data"
DATASET_ID = "01"
OUT_DIR    = "reports/dataset_01"

# Exponential solvers ("brute_force", "branch_and_bound") are only
# practical for a few dozen pallets; drop them for large datasets.
ALGORITHMS = ["brute_force", "dynamic", "greedy", "branch_and_bound"]

LOG_LEVEL = "INFO"
# ===========================

from pallet_knapsack.planning import RunConfig, validate_result
from pallet_knapsack.planning.runner import format_run, run_all
from pallet_knapsack.planning.tracker import Tracker
from pallet_knapsack.utils.logs import set_log_level
from pallet_knapsack.utils.read_csvs import load_dataset


def main() -> None:
    config = RunConfig(data_dir=DATA_DIR, dataset_id=DATASET_ID, out_dir=OUT_DIR, log_level=LOG_LEVEL)
    set_log_level(config.log_level)

    # Load problem
    instance = load_dataset(config.truck_path, config.pallets_path)

    # Run and check every solver
    records = run_all(instance, ALGORITHMS)
    for rec in records:
        validate_result(rec.result, instance.items, instance.capacity)

    # Write artifacts
    tracker = Tracker(out_dir=config.out_dir)
    for rec in records:
        tracker.write_selection_csv(instance, rec)
    tracker.write_comparison_csv(instance, records)

    # Console summary
    print(f"\n=== Dataset {config.dataset_id}: capacity {instance.capacity}, {len(instance.items)} pallets ===")
    for rec in records:
        print()
        print(format_run(rec, instance))

    print(f"\nArtifacts written under: {os.path.abspath(config.out_dir)}")


if __name__ == "__main__":
    main()
