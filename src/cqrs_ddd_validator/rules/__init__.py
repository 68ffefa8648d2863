"""
Built-in rule declarations.

Rules are immutable values. Their evaluation lives in
:mod:`cqrs_ddd_validator.handlers`.
"""

from __future__ import annotations

from .basic import Boolean, Callback, Required
from .compare import COMPARE_OPERATORS, CompareTo, Number
from .composite import Each, GroupRule, Nested
from .set import InRange, Subset
from .string import HasLength, Regex

__all__ = [
    # Basic
    "Boolean",
    "Callback",
    "Required",
    # Comparison
    "COMPARE_OPERATORS",
    "CompareTo",
    "Number",
    # String
    "HasLength",
    "Regex",
    # Set
    "InRange",
    "Subset",
    # Composite
    "Each",
    "GroupRule",
    "Nested",
]
