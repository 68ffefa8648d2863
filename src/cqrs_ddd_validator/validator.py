"""Validator — applies attribute rule sets to a data set."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .config import ValidatorConfig
from .context import ValidationContext
from .data_set import PostValidationHook, RulesProvider, normalize_data_set
from .dumper import RulesDumper
from .evaluator import RuleSetEvaluator
from .exceptions import InvalidRuleConfigurationError, RuleHandlerNotFoundError
from .handlers import build_default_registry
from .result import Result
from .rule import normalize_rules

if TYPE_CHECKING:
    from .registry import RuleHandlerRegistry

logger = logging.getLogger("cqrs_ddd.validator")


class Validator:
    """
    Validates data against ``{attribute: rules}``.

    Usage::

        validator = Validator()
        result = validator.validate(
            {"name": "Al", "age": 17},
            {
                "name": [Required(), HasLength(min=3)],
                "age": Number(min=18),
            },
        )
        result.is_attribute_valid("age")  # False

    Data is wrapped into a data set first: mappings and objects become
    attribute-keyed, other values are validated as a scalar. A data set
    that provides its own rules replaces the ``rules`` argument. Integer
    attributes validate the whole payload.

    Validation failures are collected into the returned Result.
    Configuration problems (malformed rules, unregistered rule classes)
    are raised.
    """

    def __init__(
        self,
        registry: RuleHandlerRegistry | None = None,
        config: ValidatorConfig | None = None,
    ) -> None:
        self._config = config or ValidatorConfig()
        self._registry = registry if registry is not None else build_default_registry()
        self._evaluator = RuleSetEvaluator(self._registry, self._config)

    @property
    def evaluator(self) -> RuleSetEvaluator:
        return self._evaluator

    @property
    def registry(self) -> RuleHandlerRegistry:
        return self._registry

    def validate(self, data: Any, rules: Mapping[Any, Any] | None = None) -> Result:
        """
        Validate *data* and return the collected errors.

        Raises:
            InvalidRuleConfigurationError: A rule entry is neither a rule nor
                a callable, or a rule is otherwise misconfigured.
            RuleHandlerNotFoundError: No handler is registered for a rule.
        """
        data_set = normalize_data_set(data)
        if isinstance(data_set, RulesProvider):
            rules = data_set.get_rules()
        rules = rules if rules is not None else {}

        context = ValidationContext(data_set=data_set)
        result = Result(formatter=self._config.formatter)

        for attribute, attribute_rules in rules.items():
            if isinstance(attribute, int) and not isinstance(attribute, bool):
                key = str(attribute)
                value = data_set.get_data()
            else:
                key = attribute
                value = data_set.get_attribute_value(attribute)

            try:
                attribute_result = self._evaluator.evaluate(
                    value,
                    normalize_rules(attribute_rules),
                    context.for_attribute(key),
                )
            except (InvalidRuleConfigurationError, RuleHandlerNotFoundError) as exc:
                logger.warning("Invalid rule configuration for %r: %s", key, exc)
                raise

            logger.debug(
                "Attribute %r validated: %d error(s)", key, len(attribute_result.errors)
            )
            result.extend(
                error.with_attribute(key) for error in attribute_result.errors
            )

        if isinstance(data_set, PostValidationHook):
            data_set.process_validation_result(result)

        logger.debug(
            "Validated %d attribute(s) of %s: %d error(s)",
            len(rules),
            type(data_set).__name__,
            len(result.errors),
        )
        return result

    def validate_value(
        self,
        value: Any,
        rules: Any,
        context: ValidationContext | None = None,
    ) -> Result:
        """Apply a rule (or list of rules) to a bare value."""
        return self._evaluator.evaluate(value, normalize_rules(rules), context)

    def dump_rules(
        self, rules: Mapping[Any, Any], include_rule_name: bool = False
    ) -> dict[str, Any]:
        """Dump *rules* with the configured formatter (see :class:`RulesDumper`)."""
        return RulesDumper(self._config.formatter).as_dict(rules, include_rule_name)
