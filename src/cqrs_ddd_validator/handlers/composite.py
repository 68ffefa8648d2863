"""Composite handlers: each, group."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from ..registry import RuleHandler
from ..result import Result
from ..rules.composite import Each, GroupRule

if TYPE_CHECKING:
    from ..context import ValidationContext
    from ..evaluator import RuleSetEvaluator


class EachHandler(RuleHandler):
    """Runs the rule list on every item; errors are re-homed under the item key."""

    @property
    def rule_type(self) -> type[Each]:
        return Each

    def validate(
        self,
        value: Any,
        rule: Each,
        evaluator: RuleSetEvaluator,
        context: ValidationContext,
    ) -> Result:
        result = Result()
        if isinstance(value, str | bytes) or not isinstance(value, Iterable):
            return result.add_error(rule.incorrect_input_message)

        items = value.items() if isinstance(value, Mapping) else enumerate(value)
        for key, item in items:
            item_result = evaluator.evaluate(
                item, rule.rules, context.for_attribute(context.attribute)
            )
            result.extend(
                error.with_value_path_prefix([key]) for error in item_result.errors
            )
        return result


class GroupRuleHandler(RuleHandler):
    """Reports a single error with the group message if any inner rule fails."""

    @property
    def rule_type(self) -> type[GroupRule]:
        return GroupRule

    def validate(
        self,
        value: Any,
        rule: GroupRule,
        evaluator: RuleSetEvaluator,
        context: ValidationContext,
    ) -> Result:
        result = Result()
        inner = evaluator.evaluate(
            value, rule.get_rule_set(), context.for_attribute(context.attribute)
        )
        if not inner.is_valid:
            result.add_error(rule.message)
        return result
