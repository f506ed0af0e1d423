# -*- coding: utf-8 -*-
"""
Planning tracker: CSV artifacts for solver runs.

Files produced (when Tracker is used):
  - <algorithm>_selection.csv  (selected pallets of one run, in subset order)
  - comparison.csv             (one row per run, for side-by-side comparison)

Callers decide when to invoke these writers.
"""

from __future__ import annotations
import csv
import os
from dataclasses import dataclass
from typing import List

from pallet_knapsack.planning.state import ProblemInstance
from pallet_knapsack.planning.runner import RunRecord


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)

    def write_selection_csv(
        self,
        instance: ProblemInstance,
        record: RunRecord,
        filename: str | None = None,
    ) -> str:
        """
        Persist the selected pallets of a single run.

        Columns:
          order_index, item_id, profit, weight
        """
        path = os.path.join(self.out_dir, filename or f"{record.algorithm}_selection.csv")
        items_by_id = instance.items_by_id()

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["order_index", "item_id", "profit", "weight"])
            for idx, iid in enumerate(record.result.selection):
                it = items_by_id[iid]
                w.writerow([idx, iid, it.profit, it.weight])

        return path

    def write_comparison_csv(
        self,
        instance: ProblemInstance,
        records: List[RunRecord],
        filename: str = "comparison.csv",
    ) -> str:
        """
        One row per run.

        Columns:
          algorithm, display_name, total_profit, total_weight, capacity,
          items_selected, utilization_pct, elapsed_ms
        """
        path = os.path.join(self.out_dir, filename)
        cap = instance.capacity

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow([
                "algorithm",
                "display_name",
                "total_profit",
                "total_weight",
                "capacity",
                "items_selected",
                "utilization_pct",
                "elapsed_ms",
            ])
            for rec in records:
                res = rec.result
                util = 0.0 if cap == 0 else (res.total_weight / cap) * 100.0
                w.writerow([
                    rec.algorithm,
                    rec.display_name,
                    res.total_profit,
                    res.total_weight,
                    cap,
                    len(res.selection),
                    round(util, 4),
                    round(rec.elapsed_ms, 4),
                ])
        return path
