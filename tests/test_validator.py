"""Tests for Validator.validate."""

from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from cqrs_ddd_validator import (
    Boolean,
    CompareTo,
    InvalidRuleConfigurationError,
    MappingDataSet,
    Nested,
    Number,
    Required,
    Result,
    RuleHandlerNotFoundError,
    RuleHandlerRegistry,
    RulesProviderDataSet,
    SimpleFormatter,
    ValidationContext,
    ValidationFailedError,
    Validator,
    ValidatorConfig,
)


def _must_be_42(value, context: ValidationContext) -> Result:
    result = Result()
    if value != 42:
        result.add_error("Value should be 42!")
    return result


# -- attribute rules ---------------------------------------------------------


def test_attribute_errors_are_collected(validator):
    result = validator.validate(
        {"bool": True, "int": 41},
        {
            "bool": [Boolean()],
            "int": [
                Number(as_integer=True),
                Number(as_integer=True, min=44),
                _must_be_42,
            ],
        },
    )

    assert result.is_attribute_valid("bool")
    assert not result.is_attribute_valid("int")
    assert len(result.get_attribute_errors("int")) == 2


@pytest.mark.parametrize(
    "data",
    [
        SimpleNamespace(property=True),
        True,
        "true",
        12345,
        12.345,
        False,
    ],
)
def test_diverse_data_types(validator, data):
    result = validator.validate(data, {"property": [Required()]})

    assert result.is_valid


def test_none_as_data(validator):
    result = validator.validate(None, {"property": [CompareTo(target_value=None)]})

    assert result.is_valid


def test_missing_attribute_reads_as_none(validator):
    result = validator.validate({"name": "x"}, {"email": Required()})

    assert result.get_attribute_errors("email")[0].message == "Value cannot be blank."


def test_dotted_attribute(validator):
    result = validator.validate(
        {"author": {"age": 18}}, {"author.age": Number(min=20)}
    )

    error = result.errors[0]
    assert error.attribute == "author.age"
    assert error.parameters == {"min": 20}


def test_literal_key_with_dot_wins_over_path(validator):
    result = validator.validate(
        {"a.b": "present", "a": {"b": ""}}, {"a.b": Required()}
    )

    assert result.is_valid


def test_integer_attribute_validates_whole_payload(validator):
    seen = []

    def remember(value, context: ValidationContext) -> Result:
        seen.append(value)
        return Result().add_error("Nope.")

    data = {"a": 1}
    result = validator.validate(data, {0: remember})

    assert seen == [data]
    assert result.get_attribute_errors(0)[0].attribute == "0"


def test_nested_errors_keep_relative_value_path(validator):
    result = validator.validate(
        {"author": {"age": 18}},
        {"author": Nested(rules={"age": Number(min=20)})},
    )

    error = result.errors[0]
    assert error.attribute == "author"
    assert error.value_path == ("age",)
    assert result.get_errors_indexed_by_attribute() == {"author": [error]}


def test_validate_without_rules(validator):
    assert validator.validate({"a": ""}).is_valid


# -- skip_on_error scoping ---------------------------------------------------


def test_skip_on_error_does_not_leak_between_attributes(validator):
    result = validator.validate(
        {"a": "", "b": 0},
        {
            "a": Required(),
            "b": Number(min=1, skip_on_error=True),
        },
    )

    assert not result.is_attribute_valid("a")
    assert not result.is_attribute_valid("b")


def test_skip_on_error_does_not_leak_into_positional_attribute(validator):
    result = validator.validate(
        {"a": ""},
        {
            "a": Required(),
            0: Nested(rules={"a": Required()}, skip_on_error=True),
        },
    )

    assert len(result.get_attribute_errors("0")) == 1


def test_skip_on_error_within_attribute(validator):
    result = validator.validate(
        {"age": "abc"},
        {"age": [Number(), Number(min=18, skip_on_error=True)]},
    )

    assert result.get_error_messages() == ["Value must be a number."]


# -- data sets ---------------------------------------------------------------


def test_data_set_rules_replace_argument(validator):
    data_set = RulesProviderDataSet({"a": ""}, {"a": Required()})

    result = validator.validate(data_set, {"a": []})

    assert not result.is_attribute_valid("a")


def test_custom_data_set_passes_through(validator):
    data_set = MappingDataSet({"a": None})

    result = validator.validate(data_set, {"a": Required()})

    assert not result.is_valid


def test_post_validation_hook_called_once(validator):
    class Form:
        def __init__(self) -> None:
            self.results: list[Result] = []

        def get_attribute_value(self, attribute):
            return None

        def get_data(self):
            return {}

        def process_validation_result(self, result: Result) -> None:
            self.results.append(result)

    form = Form()
    result = validator.validate(form, {"a": Required(), "b": Required()})

    assert form.results == [result]
    assert len(result.errors) == 2


# -- configuration errors ----------------------------------------------------


def test_invalid_rule_entry_raises_and_logs(validator, caplog):
    caplog.set_level(logging.WARNING, logger="cqrs_ddd.validator")

    with pytest.raises(InvalidRuleConfigurationError, match="int given"):
        validator.validate({"a": 1}, {"a": [42]})

    assert "Invalid rule configuration" in caplog.text


def test_unregistered_rule_raises():
    validator = Validator(registry=RuleHandlerRegistry())

    with pytest.raises(RuleHandlerNotFoundError, match="Required"):
        validator.validate({"a": 1}, {"a": Required()})


def test_rule_class_instead_of_instance_raises(validator):
    with pytest.raises(InvalidRuleConfigurationError, match="class Required given"):
        validator.validate({"a": 1}, {"a": [Required]})


def test_default_registry_is_built():
    assert Validator().registry.has(Required)


# -- result usage ------------------------------------------------------------


def test_validate_is_repeatable(validator):
    data = {"name": "", "age": 10}
    rules = {"name": Required(), "age": Number(min=18)}

    assert validator.validate(data, rules) == validator.validate(data, rules)


def test_raise_for_errors(validator):
    result = validator.validate(
        {"author": {"age": 18}},
        {"author": Nested(rules={"age": Number(min=20)})},
    )

    with pytest.raises(ValidationFailedError) as exc_info:
        result.raise_for_errors()

    assert exc_info.value.errors == {"age": ["Value must be no less than 20."]}


# -- configured formatter ----------------------------------------------------


class UpperFormatter:
    def format(self, template, parameters):
        return SimpleFormatter().format(template, parameters).upper()


def test_configured_formatter_renders_messages():
    validator = Validator(config=ValidatorConfig(formatter=UpperFormatter()))

    result = validator.validate(
        {"a": "", "n": 5}, {"a": Required(), "n": Number(min=9)}
    )

    assert result.get_error_messages() == [
        "VALUE CANNOT BE BLANK.",
        "VALUE MUST BE NO LESS THAN 9.",
    ]
    assert validator.validate_value("", Required()).get_error_messages() == [
        "VALUE CANNOT BE BLANK."
    ]


def test_configured_formatter_reaches_raised_errors():
    validator = Validator(config=ValidatorConfig(formatter=UpperFormatter()))
    result = validator.validate({"a": ""}, {"a": Required()})

    with pytest.raises(ValidationFailedError) as exc_info:
        result.raise_for_errors()

    assert exc_info.value.errors == {"": ["VALUE CANNOT BE BLANK."]}


def test_explicit_formatter_overrides_configured_one():
    validator = Validator(config=ValidatorConfig(formatter=UpperFormatter()))

    result = validator.validate({"a": ""}, {"a": Required()})

    assert result.get_error_messages(SimpleFormatter()) == ["Value cannot be blank."]


def test_dump_rules_uses_configured_formatter():
    validator = Validator(config=ValidatorConfig(formatter=UpperFormatter()))

    dumped = validator.dump_rules({"n": Number(max=100)}, include_rule_name=True)

    name, options = dumped["n"]
    assert name == "number"
    assert options["too_big_message"] == "VALUE MUST BE NO GREATER THAN 100."


# -- bare values -------------------------------------------------------------


def test_validate_value(validator):
    result = validator.validate_value(5, [Number(min=10)])

    assert result.get_error_messages() == ["Value must be no less than 10."]
