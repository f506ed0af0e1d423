# -*- coding: utf-8 -*-
"""
I/O helpers for loading truck/pallet datasets.

CSV formats (first line is always a header and is skipped):
- TruckAndPallets_XX.csv : Capacity,Pallets
                           <capacity>,<pallet count>
- Pallets_XX.csv         : Pallet,Weight,Profit
                           <id>,<weight>,<profit>   (one line per pallet)

These map directly to:
- business_objects.knapsacks.KnapsackSpec
- business_objects.items.Item
"""

from __future__ import annotations
import csv
from typing import List

from pallet_knapsack.business_objects.errors import SchemaError, StateValidationError
from pallet_knapsack.business_objects.items import Item
from pallet_knapsack.business_objects.knapsacks import KnapsackSpec
from pallet_knapsack.planning.state import ProblemInstance
import pallet_knapsack.utils.logs

logger = pallet_knapsack.utils.logs.logger


def _read_rows(path: str) -> List[List[str]]:
    """Return the non-blank data rows of a CSV file (header dropped)."""
    try:
        with open(path, "r", newline="", encoding="utf-8") as f:
            rows = [row for row in csv.reader(f)]
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise SchemaError(f"{path}: failed to read CSV: {e}") from e

    if not rows:
        raise SchemaError(f"{path}: missing header line.")
    data = [row for row in rows[1:] if any(cell.strip() for cell in row)]
    logger.debug(f"Read {len(data)} data row(s) from {path}")
    return data


def _to_int(value: str, path: str, row: int, column: str) -> int:
    try:
        return int(value.strip())
    except ValueError as e:
        raise SchemaError(f"{path}[{row}]: column '{column}' is not an integer: {value!r}") from e


def read_truck_csv(path: str) -> KnapsackSpec:
    """
    Load the truck description. The first data line must hold:
      - capacity (int)
      - pallet count (int)
    """
    rows = _read_rows(path)
    if not rows:
        raise SchemaError(f"{path}: expected a data line after the header.")

    row = rows[0]
    if len(row) < 2:
        raise SchemaError(f"{path}[1]: expected 2 columns (capacity, pallets), got {len(row)}.")
    capacity = _to_int(row[0], path, 1, "capacity")
    item_count = _to_int(row[1], path, 1, "pallets")
    try:
        return KnapsackSpec(capacity=capacity, item_count=item_count)
    except StateValidationError as e:
        raise SchemaError(f"{path}[1]: {e}") from e


def read_pallets_csv(path: str) -> List[Item]:
    """
    Load pallets. Each data line must have:
      - id (int, unique)
      - weight (int >= 0)
      - profit (int >= 0)
    """
    items: List[Item] = []
    seen: set[int] = set()
    for idx, row in enumerate(_read_rows(path), start=1):
        if len(row) < 3:
            raise SchemaError(f"{path}[{idx}]: expected 3 columns (id, weight, profit), got {len(row)}.")
        iid = _to_int(row[0], path, idx, "id")
        weight = _to_int(row[1], path, idx, "weight")
        profit = _to_int(row[2], path, idx, "profit")
        if iid in seen:
            raise SchemaError(f"{path}[{idx}]: duplicate pallet id {iid}.")
        seen.add(iid)
        try:
            items.append(Item(id=iid, weight=weight, profit=profit))
        except StateValidationError as e:
            raise SchemaError(f"{path}[{idx}]: {e}") from e
    return items


def load_dataset(truck_path: str, pallets_path: str) -> ProblemInstance:
    """Read both files of a dataset into a ProblemInstance."""
    knapsack = read_truck_csv(truck_path)
    items = read_pallets_csv(pallets_path)
    if knapsack.item_count != len(items):
        logger.warning(
            f"{truck_path} declares {knapsack.item_count} pallet(s) but "
            f"{pallets_path} lists {len(items)}"
        )
    return ProblemInstance(knapsack=knapsack, items=items)
