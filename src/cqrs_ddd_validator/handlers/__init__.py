"""
Built-in rule handlers.

Provides one RuleHandler per built-in rule class and a factory function
to create registries.

Usage::

    from cqrs_ddd_validator.handlers import build_default_registry

    registry = build_default_registry()
    handler = registry.get(Required)
"""

from __future__ import annotations

from ..registry import RuleHandlerRegistry
from .basic import BooleanHandler, CallbackHandler, RequiredHandler
from .compare import CompareToHandler, NumberHandler
from .composite import EachHandler, GroupRuleHandler
from .nested import NestedHandler
from .set import InRangeHandler, SubsetHandler
from .string import HasLengthHandler, RegexHandler


def build_default_registry() -> RuleHandlerRegistry:
    """
    Create a registry with all built-in handlers.

    Returns a fresh instance on every call; use it for dependency injection
    and extend it with ``register()`` for custom rules.

    Example:
        >>> registry = build_default_registry()
        >>> registry.has(Required)
        True
    """
    registry = RuleHandlerRegistry()
    registry.register_all(
        # Basic
        RequiredHandler(),
        BooleanHandler(),
        CallbackHandler(),
        # Comparison
        NumberHandler(),
        CompareToHandler(),
        # String
        HasLengthHandler(),
        RegexHandler(),
        # Set
        InRangeHandler(),
        SubsetHandler(),
        # Composite
        NestedHandler(),
        EachHandler(),
        GroupRuleHandler(),
    )
    return registry


__all__ = [
    "build_default_registry",
    "BooleanHandler",
    "CallbackHandler",
    "CompareToHandler",
    "EachHandler",
    "GroupRuleHandler",
    "HasLengthHandler",
    "InRangeHandler",
    "NestedHandler",
    "NumberHandler",
    "RegexHandler",
    "RequiredHandler",
    "SubsetHandler",
]
