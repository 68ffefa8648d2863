"""String rules: length bounds and regular expressions."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from pydantic import field_validator, model_validator

from ..exceptions import InvalidRuleConfigurationError
from ..rule import ParametrizedRule, static_parameters

if TYPE_CHECKING:
    from ..formatter import Formatter


class HasLength(ParametrizedRule):
    """Value must be a string whose length is within ``min`` / ``max``."""

    min: int | None = None
    max: int | None = None
    message: str = "This value must be a string."
    too_short_message: str = "This value must contain at least {min} characters."
    too_long_message: str = "This value must contain at most {max} characters."

    @model_validator(mode="after")
    def check_bounds(self) -> HasLength:
        for bound in (self.min, self.max):
            if bound is not None and bound < 0:
                raise InvalidRuleConfigurationError(
                    f"HasLength bounds must not be negative, {bound} given"
                )
        if self.min is not None and self.max is not None and self.min > self.max:
            raise InvalidRuleConfigurationError(
                f"HasLength rule 'min' ({self.min}) is greater than 'max' ({self.max})"
            )
        return self

    def with_min(self, value: int | None) -> HasLength:
        return self._evolve(min=value)  # type: ignore[return-value]

    def with_max(self, value: int | None) -> HasLength:
        return self._evolve(max=value)  # type: ignore[return-value]

    def get_options(
        self, formatter: Formatter, include_rule_name: bool = False
    ) -> dict[str, Any]:
        return {
            **super().get_options(formatter, include_rule_name),
            "min": self.min,
            "max": self.max,
            "message": self.message,
            "too_short_message": formatter.format(
                self.too_short_message, static_parameters(min=self.min)
            ),
            "too_long_message": formatter.format(
                self.too_long_message, static_parameters(max=self.max)
            ),
        }


class Regex(ParametrizedRule):
    """
    Value must match ``pattern`` (``re.search`` semantics).

    With ``not_=True`` the value must *not* match.
    """

    pattern: str
    not_: bool = False
    message: str = "Value is invalid."
    incorrect_input_message: str = "Value should be string."

    @field_validator("pattern")
    @classmethod
    def check_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise InvalidRuleConfigurationError(
                f"Invalid regular expression {value!r}: {exc}"
            ) from exc
        return value

    def with_not(self, value: bool) -> Regex:
        return self._evolve(not_=value)  # type: ignore[return-value]

    def compiled(self) -> re.Pattern[str]:
        return re.compile(self.pattern)

    def get_options(
        self, formatter: Formatter, include_rule_name: bool = False
    ) -> dict[str, Any]:
        return {
            **super().get_options(formatter, include_rule_name),
            "pattern": self.pattern,
            "not": self.not_,
            "message": self.message,
            "incorrect_input_message": self.incorrect_input_message,
        }
