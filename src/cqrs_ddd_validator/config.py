"""Validator configuration."""

from __future__ import annotations

from collections.abc import Callable, Sized
from dataclasses import dataclass, field
from typing import Any

from .formatter import Formatter, SimpleFormatter


def default_is_empty(value: Any) -> bool:
    """True for ``None``, ``""`` and empty sized collections.

    ``0``, ``0.0`` and ``False`` are *not* empty.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def default_formatter_factory() -> Formatter:
    return SimpleFormatter()


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Configuration shared by the validator, evaluator and handlers.

    Attributes:
        is_empty: Emptiness policy used by ``skip_on_empty`` and by the
            ``Required`` rule.
        formatter: Default formatter of the results produced by the
            validator and evaluator, and of ``Validator.dump_rules``.
    """

    is_empty: Callable[[Any], bool] = default_is_empty
    formatter: Formatter = field(default_factory=default_formatter_factory)
