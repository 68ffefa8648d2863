"""
Composite rules: rules that apply other rules.

``Nested`` validates values found at property paths inside a structure,
``Each`` validates every item of an iterable and ``GroupRule`` bundles a
reusable rule set behind a single message.

For example, an inbound request::

    request = {"author": {"name": "Dmitry", "age": 18}}

is validated with::

    Nested(rules={
        "author": Nested(rules={
            "name": [HasLength(min=3)],
            "age": [Number(min=18)],
        }),
    })

Errors produced inside a nested rule set are re-homed under the path that
led to them, e.g. ``("author", "age")``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from pydantic import field_validator

from ..dumper import RulesDumper
from ..exceptions import InvalidRuleConfigurationError
from ..rule import ParametrizedRule, Rule, as_rule_list, invalid_rules

if TYPE_CHECKING:
    from ..formatter import Formatter


def _check_rule_list(rules: list[Any], owner: str) -> list[Any]:
    if not rules:
        raise InvalidRuleConfigurationError(f"{owner} rules must not be empty.")
    invalid = invalid_rules(rules)
    if invalid:
        raise InvalidRuleConfigurationError(
            f"Each {owner} rule should be an instance of Rule, "
            f"{type(invalid[0]).__name__} given."
        )
    return rules


def _freeze(rules: Any) -> Any:
    """Lists become tuples, recursively; rules are already immutable."""
    if isinstance(rules, list | tuple):
        return tuple(_freeze(rule) for rule in rules)
    return rules


def _dump_rules(rules: Any, formatter: Formatter, include_rule_name: bool) -> Any:
    return RulesDumper(formatter).dump_entry(rules, include_rule_name)


class Nested(ParametrizedRule):
    """
    Applies rule sets to property paths inside a mapping or object.

    Attributes:
        rules: ``{path: rule | [rules]}``. Paths are dotted strings
            (``"author.age"``) or integer keys. Stored read-only, with rule
            lists as tuples.
        error_when_property_path_is_not_found: Report a missing path as an
            error instead of skipping it.
        property_path_is_not_found_message: Template for that error; the
            ``path`` parameter holds the unresolved path.
        incorrect_input_message: Template used when the value is not a
            keyed structure; the ``type`` parameter holds its type name.
    """

    rules: Mapping[Any, Any]
    error_when_property_path_is_not_found: bool = False
    property_path_is_not_found_message: str = 'Property path "{path}" is not found.'
    incorrect_input_message: str = (
        "Value should be a mapping or an object. {type} given."
    )

    @field_validator("rules", mode="before")
    @classmethod
    def check_rules(cls, value: Any) -> dict[Any, Any]:
        if not isinstance(value, Mapping):
            raise InvalidRuleConfigurationError(
                f"Nested rules must be a mapping, {type(value).__name__} given."
            )
        rules = dict(value)
        if not rules:
            raise InvalidRuleConfigurationError("Nested rules must not be empty.")
        _check_rule_list(list(rules.values()), "Nested")
        return rules

    @field_validator("rules")
    @classmethod
    def freeze_rules(cls, value: Mapping[Any, Any]) -> Mapping[Any, Any]:
        frozen = {path: _freeze(rules) for path, rules in value.items()}
        return MappingProxyType(frozen)

    def with_rules(self, value: Mapping[Any, Any]) -> Nested:
        return self._evolve(rules=value)  # type: ignore[return-value]

    def with_error_when_property_path_is_not_found(self, value: bool) -> Nested:
        return self._evolve(  # type: ignore[return-value]
            error_when_property_path_is_not_found=value
        )

    def with_property_path_is_not_found_message(self, value: str) -> Nested:
        return self._evolve(  # type: ignore[return-value]
            property_path_is_not_found_message=value
        )

    def get_options(
        self, formatter: Formatter, include_rule_name: bool = False
    ) -> dict[str, Any]:
        return {
            **super().get_options(formatter, include_rule_name),
            "error_when_property_path_is_not_found": (
                self.error_when_property_path_is_not_found
            ),
            "property_path_is_not_found_message": (
                self.property_path_is_not_found_message
            ),
            "rules": _dump_rules(self.rules, formatter, include_rule_name),
        }


class Each(ParametrizedRule):
    """
    Applies a rule list to every item of an iterable.

    Errors are re-homed under the item's key (its position for lists).
    """

    rules: tuple[Any, ...]
    incorrect_input_message: str = "Value must be array or iterable."

    @field_validator("rules", mode="before")
    @classmethod
    def check_rules(cls, value: Any) -> tuple[Any, ...]:
        return tuple(_check_rule_list(as_rule_list(value), "Each"))

    def with_rules(self, value: Any) -> Each:
        return self._evolve(rules=value)  # type: ignore[return-value]

    def get_options(
        self, formatter: Formatter, include_rule_name: bool = False
    ) -> dict[str, Any]:
        return {
            **super().get_options(formatter, include_rule_name),
            "incorrect_input_message": self.incorrect_input_message,
            "rules": _dump_rules(self.rules, formatter, include_rule_name),
        }


class GroupRule(ParametrizedRule, ABC):
    """
    A reusable rule set reported under one message.

    Subclasses return their rules from :meth:`get_rule_set`; if any of them
    fails, the group produces a single error with :attr:`message`.
    """

    message: str = "This value is not a valid."

    @abstractmethod
    def get_rule_set(self) -> list[Rule]:
        ...

    def get_options(
        self, formatter: Formatter, include_rule_name: bool = False
    ) -> dict[str, Any]:
        return {
            **super().get_options(formatter, include_rule_name),
            "message": self.message,
            "rules": _dump_rules(self.get_rule_set(), formatter, include_rule_name),
        }
