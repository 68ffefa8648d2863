"""Tests for data sets."""

from __future__ import annotations

from types import SimpleNamespace

from cqrs_ddd_validator import (
    DataSet,
    MappingDataSet,
    PostValidationHook,
    RulesProvider,
    RulesProviderDataSet,
    ScalarDataSet,
    normalize_data_set,
)


def test_mapping_data_set():
    data = {"author": {"name": "Dmitry"}}
    data_set = MappingDataSet(data)

    assert data_set.get_attribute_value("author.name") == "Dmitry"
    assert data_set.get_attribute_value("missing") is None
    assert data_set.has_attribute("author")
    assert not data_set.has_attribute("missing")
    assert data_set.get_data() is data


def test_literal_dotted_key():
    data_set = MappingDataSet({"a.b": 1, "a": {"b": 2}})

    assert data_set.get_attribute_value("a.b") == 1
    assert data_set.has_attribute("a.b")
    assert MappingDataSet({"a": {"b": 2}}).get_attribute_value("a.b") == 2


def test_object_data_set_hides_private_attributes():
    data_set = MappingDataSet(SimpleNamespace(name="x", _secret="y"))

    assert data_set.get_attribute_value("name") == "x"
    assert data_set.get_attribute_value("_secret") is None


def test_scalar_data_set():
    data_set = ScalarDataSet(5)

    assert data_set.get_attribute_value("anything") == 5
    assert data_set.get_data() == 5


def test_rules_provider_data_set():
    data_set = RulesProviderDataSet({"a": 1}, {"a": []})

    assert isinstance(data_set, RulesProvider)
    assert data_set.get_rules() == {"a": []}
    assert data_set.get_attribute_value("a") == 1


def test_normalize_data_set():
    existing = ScalarDataSet(1)

    assert normalize_data_set(existing) is existing
    assert isinstance(normalize_data_set({"a": 1}), MappingDataSet)
    assert isinstance(normalize_data_set([1, 2]), MappingDataSet)
    assert isinstance(normalize_data_set(SimpleNamespace()), MappingDataSet)
    assert isinstance(normalize_data_set("text"), ScalarDataSet)
    assert isinstance(normalize_data_set(None), ScalarDataSet)


def test_protocols():
    assert isinstance(MappingDataSet({}), DataSet)
    assert not isinstance(MappingDataSet({}), RulesProvider)
    assert not isinstance(MappingDataSet({}), PostValidationHook)
