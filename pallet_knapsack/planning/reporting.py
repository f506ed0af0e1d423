# -*- coding: utf-8 -*-
"""
Shared result reporting.

Every strategy lists its selection the same way so runs can be compared
line by line:

    Selected Pallets (ID | Value | Weight):
    2 | 40 | 4
    3 | 30 | 6
"""

from __future__ import annotations
import logging
from typing import Dict, List, Sequence

from pallet_knapsack.business_objects.items import Item
from pallet_knapsack.planning.solution import SolverResult
import pallet_knapsack.utils.logs

logger = pallet_knapsack.utils.logs.logger

SELECTION_HEADER = "Selected Pallets (ID | Value | Weight):"


def format_selection_lines(selection: Sequence[int], items: Sequence[Item]) -> List[str]:
    """
    One "id | profit | weight" line per selected item, in subset order.
    Ids that do not resolve to an item are skipped.
    """
    by_id: Dict[int, Item] = {it.id: it for it in items}
    lines: List[str] = []
    for iid in selection:
        it = by_id.get(iid)
        if it is not None:
            lines.append(f"{it.id} | {it.profit} | {it.weight}")
    return lines


def format_selection(selection: Sequence[int], items: Sequence[Item]) -> str:
    return "\n".join([SELECTION_HEADER] + format_selection_lines(selection, items))


def log_result(algorithm: str, result: SolverResult, items: Sequence[Item], capacity: int) -> None:
    """Diagnostic output emitted by each solver once it has finished."""
    logger.verbose(
        f"{algorithm}: profit={result.total_profit} weight={result.total_weight}/{capacity} "
        f"items={len(result.selection)}"
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(format_selection(result.selection, items))
