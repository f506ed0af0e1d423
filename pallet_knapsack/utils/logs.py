# -*- coding: utf-8 -*-
"""
Package-wide logger ("pallet_knapsack").

Modules share a single logger:

    import pallet_knapsack.utils.logs
    logger = pallet_knapsack.utils.logs.logger

Beyond the stock logging module this adds:
  - a VERBOSE level (INFO - 1) and `logger.verbose(...)`, used by the
    solvers for their one-line result summary;
  - `set_log_level(level)`, which takes a number or a case-insensitive
    name ("debug", "VERBOSE", ...) so scripts and RunConfig can carry the
    level as a string;
  - timestamps in the console format once the level drops to DEBUG.
"""

import logging

# Add a 'VERBOSE' logging level
logging.VERBOSE = logging.INFO - 1
logging.addLevelName(logging.VERBOSE, "VERBOSE")


#  Add a convenience method to the Logger class
def verbose(self, message, *args, **kws):
    if self.isEnabledFor(logging.VERBOSE):
        self._log(logging.VERBOSE, message, args, **kws)


logging.Logger.verbose = verbose


logger = logging.getLogger("pallet_knapsack")
handler = logging.StreamHandler()
formatter = logging.Formatter("%(levelname)s - %(message)s")
handler.setFormatter(formatter)
logger.addHandler(handler)


def use_debugging_formatter():
    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)


def set_log_level(level):
    """
    Set the package log level. Accepts a number or a level name such as
    "DEBUG" or "VERBOSE"; DEBUG also switches on timestamps.
    """
    if isinstance(level, str):
        name = level.strip().upper()
        numeric = logging.getLevelName(name)
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level '{level}'")
        level = numeric
    if level <= logging.DEBUG:
        use_debugging_formatter()
    logger.setLevel(level)
