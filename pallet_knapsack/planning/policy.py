# -*- coding: utf-8 -*-
"""
Run configuration (knobs) for loading a dataset and running a solver.

Dataset files follow the naming used by the bundled data folder:
  - <data_dir>/TruckAndPallets_<id>.csv   (capacity, pallet count)
  - <data_dir>/Pallets_<id>.csv           (id, weight, profit per pallet)

Single-digit dataset ids are zero-padded ("3" -> "03").

Algorithms (keys of planning.solvers.SOLVERS):
  - "brute_force"
  - "dynamic"
  - "greedy"
  - "branch_and_bound"
"""

from __future__ import annotations
import os
from dataclasses import dataclass, replace


def normalize_dataset_id(dataset_id: str | int) -> str:
    """Strip whitespace and left-pad single-character ids with '0'."""
    did = str(dataset_id).strip()
    if len(did) == 1:
        did = "0" + did
    return did


@dataclass(frozen=True)
class RunConfig:
    """
    Run knobs (pure data holder).

    Attributes
    ----------
    data_dir : str
        Folder holding the TruckAndPallets_XX.csv / Pallets_XX.csv files.
    dataset_id : str
        Dataset number; normalised with `normalize_dataset_id`.
    algorithm : str
        Solver key, see module docstring.
    out_dir : str
        Folder for CSV artifacts written by the Tracker.
    log_level : str
        Package log level name ("WARNING", "INFO", "VERBOSE", "DEBUG").
    """
    data_dir: str = "data"
    dataset_id: str = "01"
    algorithm: str = "dynamic"
    out_dir: str = "reports"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:  # type: ignore[override]
        # frozen: bypass __setattr__ to store the normalised id
        object.__setattr__(self, "dataset_id", normalize_dataset_id(self.dataset_id))

    def with_dataset(self, dataset_id: str | int) -> "RunConfig":
        return replace(self, dataset_id=str(dataset_id))

    @property
    def truck_path(self) -> str:
        return os.path.join(self.data_dir, f"TruckAndPallets_{self.dataset_id}.csv")

    @property
    def pallets_path(self) -> str:
        return os.path.join(self.data_dir, f"Pallets_{self.dataset_id}.csv")
