"""Comparison handlers: number, compare-to."""

from __future__ import annotations

import operator as op
import re
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ..registry import RuleHandler
from ..result import Result
from ..rules.compare import CompareTo, Number

if TYPE_CHECKING:
    from ..context import ValidationContext
    from ..evaluator import RuleSetEvaluator

_INTEGER_RE = re.compile(r"^\s*[-+]?\d+\s*$")
_NUMBER_RE = re.compile(r"^\s*[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?\s*$")

_ORDERING: dict[str, Callable[[Any, Any], bool]] = {
    ">": op.gt,
    ">=": op.ge,
    "<": op.lt,
    "<=": op.le,
}


def to_number(value: Any) -> int | float | None:
    """Numeric value of *value*, or ``None`` when it is not numeric.

    Numbers and numeric strings qualify; booleans do not.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return value
    if isinstance(value, str):
        if _INTEGER_RE.match(value):
            return int(value)
        if _NUMBER_RE.match(value):
            return float(value)
    return None


def loose_equals(left: Any, right: Any) -> bool:
    """Equality that treats numeric strings and booleans as numbers.

    ``"1" == 1`` and ``True == "1"`` hold; ``None`` only equals ``None``.
    """
    left_num, right_num = _loose_number(left), _loose_number(right)
    if left_num is not None and right_num is not None:
        return left_num == right_num
    return bool(left == right)


def _loose_number(value: Any) -> int | float | None:
    if isinstance(value, bool):
        return int(value)
    return to_number(value)


def strict_equals(left: Any, right: Any) -> bool:
    """Equality that also requires the same type."""
    return type(left) is type(right) and bool(left == right)


class NumberHandler(RuleHandler):
    @property
    def rule_type(self) -> type[Number]:
        return Number

    def validate(
        self,
        value: Any,
        rule: Number,
        evaluator: RuleSetEvaluator,
        context: ValidationContext,
    ) -> Result:
        result = Result()

        number = to_number(value)
        if rule.as_integer and not _is_integer(value):
            return result.add_error(rule.not_an_integer_message)
        if number is None:
            return result.add_error(rule.not_a_number_message)

        if rule.min is not None and number < rule.min:
            result.add_error(rule.too_small_message, {"min": rule.min})
        elif rule.max is not None and number > rule.max:
            result.add_error(rule.too_big_message, {"max": rule.max})
        return result


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return value.is_integer()
    return isinstance(value, str) and bool(_INTEGER_RE.match(value))


class CompareToHandler(RuleHandler):
    @property
    def rule_type(self) -> type[CompareTo]:
        return CompareTo

    def validate(
        self,
        value: Any,
        rule: CompareTo,
        evaluator: RuleSetEvaluator,
        context: ValidationContext,
    ) -> Result:
        result = Result()
        if not self._compare(rule.operator, value, rule.target_value):
            result.add_error(rule.get_message_template(), {"value": rule.target_value})
        return result

    @staticmethod
    def _compare(operator: str, value: Any, target: Any) -> bool:
        if operator == "==":
            return loose_equals(value, target)
        if operator == "===":
            return strict_equals(value, target)
        if operator == "!=":
            return not loose_equals(value, target)
        if operator == "!==":
            return not strict_equals(value, target)

        compare = _ORDERING[operator]
        value_num, target_num = to_number(value), to_number(target)
        if value_num is not None and target_num is not None:
            return compare(value_num, target_num)
        try:
            return bool(compare(value, target))
        except TypeError:
            return False
