"""
Nested handler — recursive structural validation.

For every ``path -> rules`` entry of a :class:`Nested` rule the handler
resolves the path inside the value, runs the rules through the evaluator
against the resolved sub-value, and re-homes each produced error under the
path segments. Nested rules inside nested rules therefore yield fully
qualified value paths, depth-first, in configuration order.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..registry import RuleHandler
from ..result import Result
from ..rules.composite import Nested
from ..utils import MISSING, get_value_by_path, is_keyed, split_path, to_keyed

if TYPE_CHECKING:
    from ..context import ValidationContext
    from ..evaluator import RuleSetEvaluator

logger = logging.getLogger("cqrs_ddd.validator.nested")


class NestedHandler(RuleHandler):
    @property
    def rule_type(self) -> type[Nested]:
        return Nested

    def validate(
        self,
        value: Any,
        rule: Nested,
        evaluator: RuleSetEvaluator,
        context: ValidationContext,
    ) -> Result:
        result = Result()
        if not is_keyed(value):
            return result.add_error(
                rule.incorrect_input_message, {"type": type(value).__name__}
            )

        data = to_keyed(value)
        for path, rules in rule.rules.items():
            segments = split_path(path)
            validated_value = get_value_by_path(data, path)

            if validated_value is MISSING:
                if rule.error_when_property_path_is_not_found:
                    result.add_error(
                        rule.property_path_is_not_found_message,
                        {"path": path},
                        value_path=segments,
                    )
                else:
                    logger.debug("Property path %r not found, skipping", path)
                continue

            item_context = context.for_attribute(
                _child_attribute(context.attribute, segments)
            )
            item_result = evaluator.evaluate(validated_value, rules, item_context)
            result.extend(
                error.with_value_path_prefix(segments) for error in item_result.errors
            )

        return result


def _child_attribute(parent: str | None, segments: list[str]) -> str:
    child = ".".join(segments)
    return f"{parent}.{child}" if parent else child
