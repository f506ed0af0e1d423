#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run one solver on one dataset and export its selection.

Outputs under OUT_DIR:
  - <algorithm>_selection.csv  (selected pallets, in subset order)

Usage:
  python scripts/run_dataset.py
"""

from __future__ import annotations
import os

# ====== CONFIGURATION ======
DATA_DIR   = "data"
DATASET_ID = "02"
OUT_DIR    = "reports/dataset_02"

# One of: "brute_force", "dynamic", "greedy", "branch_and_bound"
ALGORITHM = "dynamic"

LOG_LEVEL = "VERBOSE"
# ===========================

from pallet_knapsack.planning import RunConfig, validate_result
from pallet_knapsack.planning.runner import format_run, run_dataset
from pallet_knapsack.planning.tracker import Tracker
from pallet_knapsack.utils.logs import set_log_level


def main() -> None:
    config = RunConfig(
        data_dir=DATA_DIR,
        dataset_id=DATASET_ID,
        algorithm=ALGORITHM,
        out_dir=OUT_DIR,
        log_level=LOG_LEVEL,
    )
    set_log_level(config.log_level)

    instance, record = run_dataset(config)
    validate_result(record.result, instance.items, instance.capacity)

    path = Tracker(out_dir=config.out_dir).write_selection_csv(instance, record)

    print(format_run(record, instance))
    print(f"\nSelection CSV written to: {os.path.abspath(path)}")


if __name__ == "__main__":
    main()
