"""Shared fixtures for validator tests."""

from __future__ import annotations

import pytest

from cqrs_ddd_validator import RuleSetEvaluator, Validator
from cqrs_ddd_validator.handlers import build_default_registry


@pytest.fixture
def registry():
    """Default rule handler registry."""
    return build_default_registry()


@pytest.fixture
def evaluator(registry):
    return RuleSetEvaluator(registry)


@pytest.fixture
def validator(registry):
    return Validator(registry=registry)
