"""Basic rules: required, boolean, callback."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ..rule import ParametrizedRule, Rule

if TYPE_CHECKING:
    from ..formatter import Formatter


class Required(ParametrizedRule):
    """Value must not be empty (according to the configured emptiness policy)."""

    message: str = "Value cannot be blank."

    def get_options(
        self, formatter: Formatter, include_rule_name: bool = False
    ) -> dict[str, Any]:
        return {
            **super().get_options(formatter, include_rule_name),
            "message": self.message,
        }


class Boolean(ParametrizedRule):
    """
    Value must equal ``true_value`` or ``false_value``.

    With ``strict=False`` the comparison is loose (``1`` matches ``"1"``);
    with ``strict=True`` both type and value must match.
    """

    true_value: Any = "1"
    false_value: Any = "0"
    strict: bool = False
    message: str = 'The value must be either "{true}" or "{false}".'

    def with_true_value(self, value: Any) -> Boolean:
        return self._evolve(true_value=value)  # type: ignore[return-value]

    def with_false_value(self, value: Any) -> Boolean:
        return self._evolve(false_value=value)  # type: ignore[return-value]

    def with_strict(self, value: bool) -> Boolean:
        return self._evolve(strict=value)  # type: ignore[return-value]

    def message_parameters(self) -> dict[str, Any]:
        return {"true": self.true_value, "false": self.false_value}

    def get_options(
        self, formatter: Formatter, include_rule_name: bool = False
    ) -> dict[str, Any]:
        return {
            **super().get_options(formatter, include_rule_name),
            "true_value": self.true_value,
            "false_value": self.false_value,
            "strict": self.strict,
            "message": formatter.format(self.message, self.message_parameters()),
        }


class Callback(Rule):
    """
    Delegates to ``callback(value, context)``, which must return a
    :class:`~cqrs_ddd_validator.result.Result`.

    Plain callables in a rule list are wrapped into this rule. It exposes no
    options and is skipped when rules are dumped.
    """

    callback: Callable[..., Any]
