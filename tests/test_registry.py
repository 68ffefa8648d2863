"""Tests for RuleHandlerRegistry and custom handlers."""

from __future__ import annotations

from typing import Any

import pytest

from cqrs_ddd_validator import (
    Number,
    ParametrizedRule,
    Required,
    Result,
    RuleHandler,
    RuleHandlerNotFoundError,
    RuleHandlerRegistry,
    Validator,
)
from cqrs_ddd_validator.handlers import NumberHandler, RequiredHandler


class Even(ParametrizedRule):
    message: str = "Value must be even."


class EvenHandler(RuleHandler):
    @property
    def rule_type(self) -> type[Even]:
        return Even

    def validate(self, value: Any, rule: Even, evaluator, context) -> Result:
        result = Result()
        if value % 2:
            result.add_error(rule.message)
        return result


class StrictRequired(Required):
    message: str = "Strictly required."


# -- registration ------------------------------------------------------------


def test_register_and_get():
    registry = RuleHandlerRegistry()
    handler = RequiredHandler()

    registry.register(handler)

    assert registry.get(Required) is handler
    assert registry.has(Required)
    assert not registry.has(Number)
    assert registry.supported_rules == {Required}


def test_register_all_and_unregister():
    registry = RuleHandlerRegistry()
    registry.register_all(RequiredHandler(), NumberHandler())

    registry.unregister(Number)

    assert registry.has(Required)
    assert registry.get(Number) is None


def test_default_registry_covers_built_in_rules(registry):
    assert len(registry.supported_rules) == 12


# -- resolution --------------------------------------------------------------


def test_subclass_resolves_to_base_handler(evaluator):
    result = evaluator.evaluate("", StrictRequired())

    assert result.get_error_messages() == ["Strictly required."]


def test_specific_handler_wins_over_base(registry):
    class StrictRequiredHandler(RequiredHandler):
        @property
        def rule_type(self) -> type[StrictRequired]:
            return StrictRequired

    registry.get(StrictRequired)  # cache the base resolution
    specific = StrictRequiredHandler()
    registry.register(specific)

    assert registry.get(StrictRequired) is specific


def test_custom_rule_with_validator(registry):
    registry.register(EvenHandler())
    validator = Validator(registry=registry)

    result = validator.validate({"n": 3}, {"n": [Even()]})

    assert result.get_error_messages() == ["Value must be even."]


# -- dispatch errors ---------------------------------------------------------


def test_dispatch_unknown_rule_suggests_names(evaluator):
    class Evan(ParametrizedRule):
        pass

    registry = RuleHandlerRegistry()
    registry.register(EvenHandler())

    with pytest.raises(RuleHandlerNotFoundError) as exc_info:
        registry.dispatch(Evan(), 1, evaluator, None)

    assert exc_info.value.rule_name == "Evan"
    assert "Even" in exc_info.value.suggestions
