"""String handlers: has-length, regex."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..registry import RuleHandler
from ..result import Result
from ..rules.string import HasLength, Regex

if TYPE_CHECKING:
    from ..context import ValidationContext
    from ..evaluator import RuleSetEvaluator


class HasLengthHandler(RuleHandler):
    @property
    def rule_type(self) -> type[HasLength]:
        return HasLength

    def validate(
        self,
        value: Any,
        rule: HasLength,
        evaluator: RuleSetEvaluator,
        context: ValidationContext,
    ) -> Result:
        result = Result()
        if not isinstance(value, str):
            return result.add_error(rule.message)

        length = len(value)
        if rule.min is not None and length < rule.min:
            result.add_error(rule.too_short_message, {"min": rule.min})
        if rule.max is not None and length > rule.max:
            result.add_error(rule.too_long_message, {"max": rule.max})
        return result


class RegexHandler(RuleHandler):
    """Matches with ``re.search``; ``not_`` inverts the verdict."""

    @property
    def rule_type(self) -> type[Regex]:
        return Regex

    def validate(
        self,
        value: Any,
        rule: Regex,
        evaluator: RuleSetEvaluator,
        context: ValidationContext,
    ) -> Result:
        result = Result()
        if not isinstance(value, str):
            return result.add_error(rule.incorrect_input_message)

        matched = rule.compiled().search(value) is not None
        if matched == rule.not_:
            result.add_error(rule.message)
        return result
