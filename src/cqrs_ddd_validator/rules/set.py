"""Set rules: in-range membership and subset checks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import field_validator

from ..exceptions import InvalidRuleConfigurationError
from ..rule import ParametrizedRule

if TYPE_CHECKING:
    from ..formatter import Formatter


def _as_tuple(value: Any) -> tuple[Any, ...]:
    if isinstance(value, str | bytes) or not hasattr(value, "__iter__"):
        raise InvalidRuleConfigurationError(
            f"Expected an iterable of values, {type(value).__name__} given"
        )
    return tuple(value)


class InRange(ParametrizedRule):
    """
    Value must be one of ``range``.

    Loose comparison by default (``"1"`` matches ``1``); ``strict=True``
    also requires the same type. ``not_=True`` inverts the check.
    """

    range: tuple[Any, ...]
    strict: bool = False
    not_: bool = False
    message: str = "This value is invalid."

    @field_validator("range", mode="before")
    @classmethod
    def check_range(cls, value: Any) -> tuple[Any, ...]:
        return _as_tuple(value)

    def with_strict(self, value: bool) -> InRange:
        return self._evolve(strict=value)  # type: ignore[return-value]

    def with_not(self, value: bool) -> InRange:
        return self._evolve(not_=value)  # type: ignore[return-value]

    def get_options(
        self, formatter: Formatter, include_rule_name: bool = False
    ) -> dict[str, Any]:
        return {
            **super().get_options(formatter, include_rule_name),
            "range": list(self.range),
            "strict": self.strict,
            "not": self.not_,
            "message": self.message,
        }


class Subset(ParametrizedRule):
    """Every element of an iterable value must be one of ``values``."""

    values: tuple[Any, ...]
    strict: bool = False
    iterable_message: str = "Value must be iterable."
    subset_message: str = "Values must be ones of {values}."

    @field_validator("values", mode="before")
    @classmethod
    def check_values(cls, value: Any) -> tuple[Any, ...]:
        return _as_tuple(value)

    def quoted_values(self) -> str:
        return ", ".join(f'"{value}"' for value in self.values)

    def get_options(
        self, formatter: Formatter, include_rule_name: bool = False
    ) -> dict[str, Any]:
        return {
            **super().get_options(formatter, include_rule_name),
            "values": list(self.values),
            "strict": self.strict,
            "iterable_message": self.iterable_message,
            "subset_message": formatter.format(
                self.subset_message, {"values": self.quoted_values()}
            ),
        }
