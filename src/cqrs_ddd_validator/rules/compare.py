"""Comparison rules: number bounds and compare-to-target."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import field_validator, model_validator

from ..exceptions import InvalidRuleConfigurationError
from ..rule import ParametrizedRule, static_parameters

if TYPE_CHECKING:
    from ..formatter import Formatter

COMPARE_OPERATORS: frozenset[str] = frozenset(
    {"==", "===", "!=", "!==", ">", ">=", "<", "<="}
)

_OPERATOR_MESSAGES: dict[str, str] = {
    "==": 'Value must be equal to "{value}".',
    "===": 'Value must be equal to "{value}".',
    "!=": 'Value must not be equal to "{value}".',
    "!==": 'Value must not be equal to "{value}".',
    ">": 'Value must be greater than "{value}".',
    ">=": 'Value must be greater than or equal to "{value}".',
    "<": 'Value must be less than "{value}".',
    "<=": 'Value must be less than or equal to "{value}".',
}


class Number(ParametrizedRule):
    """
    Value must be a number (or a numeric string) within optional bounds.

    Bound violations carry the bound as a ``min`` / ``max`` parameter.
    """

    as_integer: bool = False
    min: int | float | None = None
    max: int | float | None = None
    not_a_number_message: str = "Value must be a number."
    not_an_integer_message: str = "Value must be an integer."
    too_small_message: str = "Value must be no less than {min}."
    too_big_message: str = "Value must be no greater than {max}."

    @model_validator(mode="after")
    def check_bounds(self) -> Number:
        if self.min is not None and self.max is not None and self.min > self.max:
            raise InvalidRuleConfigurationError(
                f"Number rule 'min' ({self.min}) is greater than 'max' ({self.max})"
            )
        return self

    def with_min(self, value: int | float | None) -> Number:
        return self._evolve(min=value)  # type: ignore[return-value]

    def with_max(self, value: int | float | None) -> Number:
        return self._evolve(max=value)  # type: ignore[return-value]

    def with_as_integer(self, value: bool) -> Number:
        return self._evolve(as_integer=value)  # type: ignore[return-value]

    def get_options(
        self, formatter: Formatter, include_rule_name: bool = False
    ) -> dict[str, Any]:
        return {
            **super().get_options(formatter, include_rule_name),
            "as_integer": self.as_integer,
            "min": self.min,
            "max": self.max,
            "not_a_number_message": formatter.format(
                self.not_an_integer_message
                if self.as_integer
                else self.not_a_number_message,
                {},
            ),
            "too_small_message": formatter.format(
                self.too_small_message, static_parameters(min=self.min)
            ),
            "too_big_message": formatter.format(
                self.too_big_message, static_parameters(max=self.max)
            ),
        }


class CompareTo(ParametrizedRule):
    """
    Compares the value with ``target_value`` using ``operator``.

    ``==`` / ``!=`` compare loosely (``"100"`` equals ``100``); ``===`` /
    ``!==`` also require the same type. Ordering operators compare numbers
    numerically and anything else with Python ordering.
    """

    target_value: Any = None
    operator: str = "=="
    message: str | None = None

    @field_validator("operator")
    @classmethod
    def check_operator(cls, value: str) -> str:
        if value not in COMPARE_OPERATORS:
            raise InvalidRuleConfigurationError(
                f'Operator "{value}" is not supported. '
                f"Supported operators: {', '.join(sorted(COMPARE_OPERATORS))}",
            )
        return value

    def with_operator(self, value: str) -> CompareTo:
        return self._evolve(operator=value)  # type: ignore[return-value]

    def with_target_value(self, value: Any) -> CompareTo:
        return self._evolve(target_value=value)  # type: ignore[return-value]

    def get_message_template(self) -> str:
        if self.message is not None:
            return self.message
        return _OPERATOR_MESSAGES[self.operator]

    def get_options(
        self, formatter: Formatter, include_rule_name: bool = False
    ) -> dict[str, Any]:
        return {
            **super().get_options(formatter, include_rule_name),
            "target_value": self.target_value,
            "operator": self.operator,
            "message": formatter.format(
                self.get_message_template(), {"value": self.target_value}
            ),
        }
