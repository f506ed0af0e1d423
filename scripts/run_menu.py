#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Interactive knapsack menu.

Pick an algorithm (1-4), then a dataset number; the program loads
DATA_DIR/TruckAndPallets_XX.csv and DATA_DIR/Pallets_XX.csv, runs the
solver and prints the selected pallets, profit and execution time.

This version does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_menu.py
"""

from __future__ import annotations

# ====== CONFIGURATION ======
DATA_DIR = "data"

# "WARNING" keeps the console quiet; "VERBOSE"/"DEBUG" show solver diagnostics
LOG_LEVEL = "WARNING"
# ===========================

from pallet_knapsack.planning import RunConfig
from pallet_knapsack.planning.menu import run_menu
from pallet_knapsack.utils.logs import set_log_level


def main() -> None:
    config = RunConfig(data_dir=DATA_DIR, log_level=LOG_LEVEL)
    set_log_level(config.log_level)
    run_menu(config)


if __name__ == "__main__":
    main()
