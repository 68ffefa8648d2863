"""Tests for RuleSetEvaluator."""

from __future__ import annotations

from cqrs_ddd_validator import (
    Callback,
    HasLength,
    Number,
    Required,
    Result,
    RuleSetEvaluator,
    ValidationContext,
    ValidatorConfig,
)


def _failing(message: str):
    def rule(value, context) -> Result:
        return Result().add_error(message)

    return rule


# -- ordering ----------------------------------------------------------------


def test_errors_follow_rule_order(evaluator):
    result = evaluator.evaluate(
        "x", [_failing("first"), HasLength(min=3), _failing("third")]
    )

    assert [e.message for e in result.errors] == [
        "first",
        "This value must contain at least {min} characters.",
        "third",
    ]


def test_single_rule_and_nested_lists(evaluator):
    assert not evaluator.evaluate(None, Required()).is_valid
    assert len(evaluator.evaluate(None, [[Required()], [Required()]]).errors) == 2


def test_empty_rule_list_is_valid(evaluator):
    assert evaluator.evaluate(None, []).is_valid


# -- skip flags --------------------------------------------------------------


def test_skip_on_error_skips_after_failure(evaluator):
    calls = []

    def track(value, context) -> Result:
        calls.append(value)
        return Result()

    result = evaluator.evaluate(
        "", [Required(), Callback(callback=track, skip_on_error=True)]
    )

    assert calls == []
    assert len(result.errors) == 1


def test_skip_on_error_runs_when_nothing_failed(evaluator):
    result = evaluator.evaluate(
        "ab", [Required(), HasLength(min=3, skip_on_error=True)]
    )

    assert len(result.errors) == 1


def test_rules_without_skip_on_error_keep_running(evaluator):
    result = evaluator.evaluate("", [Required(), HasLength(min=1)])

    assert len(result.errors) == 2


def test_skip_on_empty(evaluator):
    rule = Number(min=1, skip_on_empty=True)

    assert evaluator.evaluate("", rule).is_valid
    assert evaluator.evaluate(None, rule).is_valid
    assert not evaluator.evaluate(0, rule).is_valid


def test_context_flag_is_set_on_failure(evaluator):
    context = ValidationContext(attribute="name")

    evaluator.evaluate("", Required(), context)

    assert context.previous_rules_errored


def test_preset_flag_skips_rule(evaluator):
    context = ValidationContext(previous_rules_errored=True)

    result = evaluator.evaluate("", Required(skip_on_error=True), context)

    assert result.is_valid


def test_when_predicate(evaluator):
    rule = Required(when=lambda value, context: context.attribute == "name")

    assert evaluator.evaluate("", rule, ValidationContext(attribute="other")).is_valid
    assert not evaluator.evaluate(
        "", rule, ValidationContext(attribute="name")
    ).is_valid


# -- configuration -----------------------------------------------------------


def test_custom_emptiness_policy(registry):
    evaluator = RuleSetEvaluator(
        registry, ValidatorConfig(is_empty=lambda value: value in (None, "", 0))
    )

    assert not evaluator.evaluate(0, Required()).is_valid
    assert evaluator.evaluate(0, Number(min=1, skip_on_empty=True)).is_valid


def test_zero_and_false_are_not_empty(evaluator):
    assert evaluator.evaluate(0, Required()).is_valid
    assert evaluator.evaluate(False, Required()).is_valid
    assert not evaluator.evaluate([], Required()).is_valid
