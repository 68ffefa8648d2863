"""
Rule-set serialisation.

:class:`RulesDumper` turns a rule-set map into plain, JSON-friendly data,
usually handed to a client-side validator. Example output::

    {
        "amount": [
            ["number", {"as_integer": True, "max": 100,
                        "too_big_message": "Value must be no greater than 100.", ...}],
        ],
        "name": [
            ["has_length", {"max": 20, ...}],
        ],
    }

Without ``include_rule_name`` each rule is emitted as its options mapping
alone.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .exceptions import InvalidRuleConfigurationError
from .formatter import SimpleFormatter
from .rule import ParametrizedRule, Rule

if TYPE_CHECKING:
    from .formatter import Formatter

logger = logging.getLogger("cqrs_ddd.validator.dumper")

_SKIPPED = object()


class RulesDumper:
    """Walks ``{attribute: rule | [rules] | {nested map}}`` and dumps options.

    Rules without options (e.g. ``Callback``, or a plain callable) are
    skipped; any other non-rule entry is a configuration error.
    """

    def __init__(self, formatter: Formatter | None = None) -> None:
        self._formatter = formatter or SimpleFormatter()

    def as_dict(
        self, rule_set_map: Mapping[Any, Any], include_rule_name: bool = False
    ) -> dict[str, Any]:
        """
        Dump a rule-set map.

        Raises:
            InvalidRuleConfigurationError: If *rule_set_map* is not a mapping or
                holds an entry that is neither a rule nor a list/mapping of rules.
        """
        if not isinstance(rule_set_map, Mapping):
            raise InvalidRuleConfigurationError(
                f"Rule set map must be a mapping, {type(rule_set_map).__name__} given.",
                path="<root>",
            )
        return self._dump_mapping(rule_set_map, include_rule_name, "<root>")

    def dump_entry(self, entry: Any, include_rule_name: bool = False) -> Any:
        """Dump a single entry; ``None`` when it is a rule without options."""
        dumped = self._dump(entry, include_rule_name, "<root>")
        return None if dumped is _SKIPPED else dumped

    # -- internals -----------------------------------------------------------

    def _dump(self, entry: Any, include_rule_name: bool, path: str) -> Any:
        if isinstance(entry, Mapping):
            return self._dump_mapping(entry, include_rule_name, path)
        if isinstance(entry, list | tuple):
            return self._dump_list(entry, include_rule_name, path)
        if isinstance(entry, ParametrizedRule):
            options = entry.get_options(self._formatter, include_rule_name)
            if include_rule_name:
                return [entry.get_name(), options]
            return options
        if isinstance(entry, Rule) or callable(entry):
            logger.debug("Skipping rule without options at %s: %r", path, entry)
            return _SKIPPED
        raise InvalidRuleConfigurationError(
            "Rules should be rules, lists of rules or mappings of rules, "
            f"{type(entry).__name__} given.",
            path=path,
        )

    def _dump_mapping(
        self, rules: Mapping[Any, Any], include_rule_name: bool, path: str
    ) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for attribute, entry in rules.items():
            dumped = self._dump(entry, include_rule_name, f"{path}.{attribute}")
            if dumped is not _SKIPPED:
                result[str(attribute)] = dumped
        return result

    def _dump_list(
        self, rules: list[Any] | tuple[Any, ...], include_rule_name: bool, path: str
    ) -> list[Any]:
        result: list[Any] = []
        for index, entry in enumerate(rules):
            dumped = self._dump(entry, include_rule_name, f"{path}[{index}]")
            if dumped is not _SKIPPED:
                result.append(dumped)
        return result
