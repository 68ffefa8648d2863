"""
Per-value rule-list evaluation.

The :class:`RuleSetEvaluator` applies an ordered list of rules to one
value. It is the primitive used by the validator for every attribute and,
recursively, by rules such as ``Nested`` and ``Each`` for sub-values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .config import ValidatorConfig
from .context import ValidationContext
from .result import Result
from .rule import as_rule_list, normalize_rule

if TYPE_CHECKING:
    from .formatter import Formatter
    from .registry import RuleHandlerRegistry
    from .rule import Rule


class RuleSetEvaluator:
    """Runs rule lists through a :class:`RuleHandlerRegistry`.

    Every rule runs, in order, unless its ``when`` predicate, its
    ``skip_on_empty`` flag or its ``skip_on_error`` flag says otherwise.
    Failures are concatenated in rule order; value paths are left as the
    handlers produced them.
    """

    def __init__(
        self,
        registry: RuleHandlerRegistry,
        config: ValidatorConfig | None = None,
    ) -> None:
        self._registry = registry
        self._config = config or ValidatorConfig()

    @property
    def registry(self) -> RuleHandlerRegistry:
        return self._registry

    @property
    def formatter(self) -> Formatter:
        return self._config.formatter

    def is_empty(self, value: Any) -> bool:
        return self._config.is_empty(value)

    def evaluate(
        self,
        value: Any,
        rules: Rule | list[Any] | tuple[Any, ...],
        context: ValidationContext | None = None,
    ) -> Result:
        """
        Apply *rules* to *value*.

        Args:
            value: The value under validation.
            rules: A rule, a callable, or a list of them.
            context: Context for this target. A bare context is created when
                omitted; its ``previous_rules_errored`` flag is set on the
                first failure.

        Returns:
            The accumulated Result.
        """
        if context is None:
            context = ValidationContext()

        result = Result(formatter=self.formatter)
        for entry in as_rule_list(rules):
            rule = normalize_rule(entry)
            if self._should_skip(rule, value, context):
                continue

            rule_result = self._registry.dispatch(rule, value, self, context)
            if rule_result.is_valid:
                continue

            context.mark_errored()
            result.extend(rule_result.errors)

        return result

    def _should_skip(
        self, rule: Rule, value: Any, context: ValidationContext
    ) -> bool:
        if rule.when is not None and not rule.when(value, context):
            return True
        if rule.skip_on_empty and self.is_empty(value):
            return True
        return rule.skip_on_error and context.previous_rules_errored
