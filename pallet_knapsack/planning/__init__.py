# -*- coding: utf-8 -*-
"""
Planning layer public API.

This module exposes the core planning-time data contracts:
  - ProblemInstance
  - SolverResult and validate_result
  - RunConfig

Solvers, runner, tracker and menu are intentionally not exported here to
avoid cluttering the namespace. They should be imported explicitly when
needed.
"""

from .state import ProblemInstance
from .solution import SolverResult, validate_result
from .policy import RunConfig, normalize_dataset_id

__all__ = [
    "ProblemInstance",
    "SolverResult",
    "validate_result",
    "RunConfig",
    "normalize_dataset_id",
]
