"""Set handlers: in-range, subset."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from ..registry import RuleHandler
from ..result import Result
from ..rules.set import InRange, Subset
from .compare import loose_equals, strict_equals

if TYPE_CHECKING:
    from ..context import ValidationContext
    from ..evaluator import RuleSetEvaluator


def _contains(values: Iterable[Any], candidate: Any, strict: bool) -> bool:
    equals = strict_equals if strict else loose_equals
    return any(equals(candidate, value) for value in values)


class InRangeHandler(RuleHandler):
    @property
    def rule_type(self) -> type[InRange]:
        return InRange

    def validate(
        self,
        value: Any,
        rule: InRange,
        evaluator: RuleSetEvaluator,
        context: ValidationContext,
    ) -> Result:
        result = Result()
        if _contains(rule.range, value, rule.strict) == rule.not_:
            result.add_error(rule.message)
        return result


class SubsetHandler(RuleHandler):
    @property
    def rule_type(self) -> type[Subset]:
        return Subset

    def validate(
        self,
        value: Any,
        rule: Subset,
        evaluator: RuleSetEvaluator,
        context: ValidationContext,
    ) -> Result:
        result = Result()
        if isinstance(value, str | bytes) or not isinstance(value, Iterable):
            return result.add_error(rule.iterable_message)

        items = value.values() if isinstance(value, Mapping) else value
        if not all(_contains(rule.values, item, rule.strict) for item in items):
            result.add_error(rule.subset_message, {"values": rule.quoted_values()})
        return result
