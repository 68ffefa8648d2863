"""Basic handlers: required, boolean, callback."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..exceptions import InvalidCallbackReturnTypeError
from ..registry import RuleHandler
from ..result import Result
from ..rules.basic import Boolean, Callback, Required
from .compare import loose_equals, strict_equals

if TYPE_CHECKING:
    from ..context import ValidationContext
    from ..evaluator import RuleSetEvaluator


class RequiredHandler(RuleHandler):
    @property
    def rule_type(self) -> type[Required]:
        return Required

    def validate(
        self,
        value: Any,
        rule: Required,
        evaluator: RuleSetEvaluator,
        context: ValidationContext,
    ) -> Result:
        result = Result()
        if evaluator.is_empty(value):
            result.add_error(rule.message)
        return result


class BooleanHandler(RuleHandler):
    @property
    def rule_type(self) -> type[Boolean]:
        return Boolean

    def validate(
        self,
        value: Any,
        rule: Boolean,
        evaluator: RuleSetEvaluator,
        context: ValidationContext,
    ) -> Result:
        equals = strict_equals if rule.strict else loose_equals
        result = Result()
        if not (equals(value, rule.true_value) or equals(value, rule.false_value)):
            result.add_error(rule.message, rule.message_parameters())
        return result


class CallbackHandler(RuleHandler):
    """Runs ``rule.callback(value, context)``; it must return a Result."""

    @property
    def rule_type(self) -> type[Callback]:
        return Callback

    def validate(
        self,
        value: Any,
        rule: Callback,
        evaluator: RuleSetEvaluator,
        context: ValidationContext,
    ) -> Result:
        result = rule.callback(value, context)
        if not isinstance(result, Result):
            raise InvalidCallbackReturnTypeError(result)
        return result
