# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import SchemaError, StateValidationError
from .items import Item
from .knapsacks import KnapsackSpec

__all__ = [
    # errors
    "SchemaError",
    "StateValidationError",
    # core models
    "Item",
    "KnapsackSpec",
]
