"""
Rule values.

A rule is an immutable description of one check: its parameters, its
message templates and its guard conditions. Evaluation lives elsewhere,
in a :class:`~cqrs_ddd_validator.registry.RuleHandler` registered for the
rule class.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from .exceptions import InvalidRuleConfigurationError
from .utils import to_snake

if TYPE_CHECKING:
    from .formatter import Formatter


class Rule(BaseModel):
    """Base class for all rules.

    Rules are frozen; every ``with_*`` modifier returns a new instance and
    re-runs construction checks.

    Attributes:
        skip_on_empty: Skip the rule when the value is empty.
        skip_on_error: Skip the rule when a previous rule on the same target
            already failed.
        when: Optional ``(value, context) -> bool`` predicate; the rule only
            runs when it returns ``True``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    skip_on_empty: bool = False
    skip_on_error: bool = False
    when: Callable[..., bool] | None = None

    @classmethod
    def get_name(cls) -> str:
        """Canonical rule name used by the dumper (``HasLength`` -> ``has_length``)."""
        return to_snake(cls.__name__)

    # -- modifiers -----------------------------------------------------------

    def with_skip_on_empty(self, value: bool) -> Rule:
        return self._evolve(skip_on_empty=value)

    def with_skip_on_error(self, value: bool) -> Rule:
        return self._evolve(skip_on_error=value)

    def with_when(self, value: Callable[..., bool] | None) -> Rule:
        return self._evolve(when=value)

    def with_message(self, value: str) -> Rule:
        if "message" not in type(self).model_fields:
            raise InvalidRuleConfigurationError(
                f"Rule '{self.get_name()}' has no 'message' option"
            )
        return self._evolve(message=value)

    def _evolve(self, **changes: Any) -> Rule:
        """Build a validated copy with *changes* applied."""
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(changes)
        return type(self)(**data)


class ParametrizedRule(Rule):
    """A rule whose options can be dumped for reuse outside the engine."""

    def get_options(
        self, formatter: Formatter, include_rule_name: bool = False
    ) -> dict[str, Any]:
        """
        Static options of this rule.

        Message templates are interpolated with the rule's own parameters;
        placeholders for values only known at validation time are kept.
        ``include_rule_name`` is forwarded by rules that dump inner rule sets.
        """
        return {
            "skip_on_empty": self.skip_on_empty,
            "skip_on_error": self.skip_on_error,
        }


# ---------------------------------------------------------------------------
# Normalisation
# ---------------------------------------------------------------------------


def as_rule_list(rules: Any) -> list[Any]:
    """Wrap a single rule (or callable) in a list; flatten nested lists."""
    if not isinstance(rules, list | tuple):
        return [rules]
    flat: list[Any] = []
    for rule in rules:
        flat.extend(as_rule_list(rule) if isinstance(rule, list | tuple) else [rule])
    return flat


def normalize_rule(rule: Any) -> Rule:
    """
    Return *rule* as a :class:`Rule`.

    Plain callables are wrapped into a
    :class:`~cqrs_ddd_validator.rules.Callback` rule.

    Raises:
        InvalidRuleConfigurationError: For classes (``Required`` instead of
            ``Required()``) and anything else that is not callable.
    """
    if isinstance(rule, Rule):
        return rule
    if isinstance(rule, type):
        raise InvalidRuleConfigurationError(
            f"Rule should be an instance of Rule, class {rule.__name__} given."
        )
    if callable(rule):
        from .rules.basic import Callback

        return Callback(callback=rule)
    raise InvalidRuleConfigurationError(
        "Rule should be either an instance of Rule or a callable, "
        f"{type(rule).__name__} given."
    )


def normalize_rules(rules: Any) -> list[Rule]:
    return [normalize_rule(rule) for rule in as_rule_list(rules)]


def invalid_rules(rules: Iterable[Any]) -> list[Any]:
    """Entries (searching nested lists) that are not rules."""
    found: list[Any] = []
    for rule in rules:
        if isinstance(rule, list | tuple):
            found.extend(invalid_rules(rule))
        elif not isinstance(rule, Rule):
            found.append(rule)
    return found


def static_parameters(**parameters: Any) -> dict[str, Any]:
    """Parameters with a known value; unset (``None``) ones keep their placeholder."""
    return {name: value for name, value in parameters.items() if value is not None}
