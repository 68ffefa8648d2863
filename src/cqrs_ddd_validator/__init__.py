"""Declarative rule-based validation for inbound request and form data."""

from __future__ import annotations

from .config import ValidatorConfig, default_is_empty
from .context import ValidationContext
from .data_set import (
    DataSet,
    MappingDataSet,
    PostValidationHook,
    RulesProvider,
    RulesProviderDataSet,
    ScalarDataSet,
    normalize_data_set,
)
from .dumper import RulesDumper
from .evaluator import RuleSetEvaluator
from .exceptions import (
    InvalidCallbackReturnTypeError,
    InvalidRuleConfigurationError,
    RuleHandlerNotFoundError,
    ValidationFailedError,
    ValidatorError,
)
from .formatter import Formatter, SimpleFormatter
from .handlers import build_default_registry
from .registry import RuleHandler, RuleHandlerRegistry
from .result import Error, Result
from .rule import ParametrizedRule, Rule, normalize_rule, normalize_rules
from .rules import (
    Boolean,
    Callback,
    CompareTo,
    Each,
    GroupRule,
    HasLength,
    InRange,
    Nested,
    Number,
    Regex,
    Required,
    Subset,
)
from .validator import Validator

__all__ = [
    # Core types
    "Validator",
    "RuleSetEvaluator",
    "ValidationContext",
    "ValidatorConfig",
    "default_is_empty",
    # Results
    "Error",
    "Result",
    # Data sets
    "DataSet",
    "MappingDataSet",
    "ScalarDataSet",
    "RulesProviderDataSet",
    "RulesProvider",
    "PostValidationHook",
    "normalize_data_set",
    # Rules
    "Rule",
    "ParametrizedRule",
    "normalize_rule",
    "normalize_rules",
    "Boolean",
    "Callback",
    "CompareTo",
    "Each",
    "GroupRule",
    "HasLength",
    "InRange",
    "Nested",
    "Number",
    "Regex",
    "Required",
    "Subset",
    # Dispatch
    "RuleHandler",
    "RuleHandlerRegistry",
    "build_default_registry",
    # Serialisation / presentation
    "RulesDumper",
    "Formatter",
    "SimpleFormatter",
    # Exceptions
    "ValidatorError",
    "InvalidRuleConfigurationError",
    "InvalidCallbackReturnTypeError",
    "RuleHandlerNotFoundError",
    "ValidationFailedError",
]
