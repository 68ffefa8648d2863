"""
Data sets — the payload being validated.

Three variants are selected once, at the top of ``Validator.validate``:

- :class:`MappingDataSet` — mappings, lists and objects (attribute access
  by key).
- :class:`ScalarDataSet` — a single unnamed value.
- :class:`RulesProviderDataSet` — a mapping data set that also supplies
  its own ``attribute -> rules`` mapping.

Any object implementing :class:`DataSet` is used as-is; one that also
implements :class:`RulesProvider` or :class:`PostValidationHook` gets the
corresponding behaviour.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from .utils import MISSING, get_value_by_path, is_keyed, to_keyed

if TYPE_CHECKING:
    from .result import Result


@runtime_checkable
class DataSet(Protocol):
    """Protocol for validated payloads."""

    def get_attribute_value(self, attribute: str) -> Any:
        ...

    def get_data(self) -> Any:
        ...


@runtime_checkable
class RulesProvider(Protocol):
    """A data set that declares its own rules."""

    def get_rules(self) -> Mapping[Any, Any]:
        ...


@runtime_checkable
class PostValidationHook(Protocol):
    """A data set notified once the validation result is final."""

    def process_validation_result(self, result: Result) -> None:
        ...


class MappingDataSet:
    """Attribute-keyed data set over a mapping, list or object.

    Attributes are looked up by key first; a dotted name with no literal
    key resolves nested values. Missing attributes read as ``None``.
    """

    def __init__(self, data: Any) -> None:
        self._data = data
        self._keyed = to_keyed(data)

    def get_attribute_value(self, attribute: str) -> Any:
        value = self._lookup(attribute)
        return None if value is MISSING else value

    def get_data(self) -> Any:
        return self._data

    def has_attribute(self, attribute: str) -> bool:
        return self._lookup(attribute) is not MISSING

    def _lookup(self, attribute: str) -> Any:
        if attribute in self._keyed:
            return self._keyed[attribute]
        return get_value_by_path(self._keyed, attribute)


class ScalarDataSet:
    """A single value; every attribute resolves to the value itself."""

    def __init__(self, value: Any) -> None:
        self._value = value

    def get_attribute_value(self, attribute: str) -> Any:
        return self._value

    def get_data(self) -> Any:
        return self._value


class RulesProviderDataSet(MappingDataSet):
    """Mapping data set carrying its own rules.

    The rules returned by :meth:`get_rules` replace whatever rules the
    caller passes to ``validate``.
    """

    def __init__(self, data: Any, rules: Mapping[Any, Any]) -> None:
        super().__init__(data)
        self._rules = dict(rules)

    def get_rules(self) -> Mapping[Any, Any]:
        return dict(self._rules)


def normalize_data_set(data: Any) -> DataSet:
    """
    Wrap raw input into a :class:`DataSet`.

    Data sets pass through unchanged, keyed structures become a
    :class:`MappingDataSet`, everything else a :class:`ScalarDataSet`.
    """
    if isinstance(data, DataSet):
        return data
    if is_keyed(data):
        return MappingDataSet(data)
    return ScalarDataSet(data)
