"""
Rule handler dispatch.

Provides the RuleHandler strategy interface and a registry that maps a
rule class to the handler evaluating it. Rules stay plain data; new rule
kinds are added by subclassing :class:`RuleHandler` and registering it.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .exceptions import RuleHandlerNotFoundError

if TYPE_CHECKING:
    from .context import ValidationContext
    from .evaluator import RuleSetEvaluator
    from .result import Result
    from .rule import Rule

logger = logging.getLogger("cqrs_ddd.validator.registry")


class RuleHandler(ABC):
    """
    Strategy interface for evaluating one rule class.

    Handlers are stateless: the same value and rule always yield the same
    result. Rules that recurse (``Nested``, ``Each``) use the *evaluator*
    to run inner rule lists.
    """

    @property
    @abstractmethod
    def rule_type(self) -> type[Rule]:
        """The rule class this handler evaluates."""
        ...

    @abstractmethod
    def validate(
        self,
        value: Any,
        rule: Any,
        evaluator: RuleSetEvaluator,
        context: ValidationContext,
    ) -> Result:
        """
        Evaluate *rule* against *value*.

        Args:
            value: The value under validation.
            rule: The rule instance (of :attr:`rule_type`) with its parameters.
            evaluator: Per-value rule-list evaluator, for recursion.
            context: Current validation context.

        Returns:
            A Result; empty when the value passes.
        """
        ...


class RuleHandlerRegistry:
    """
    Registry of RuleHandler instances keyed by rule class.

    Lookup walks the rule class MRO, so subclasses of a registered rule
    resolve to the base handler. Resolutions are cached per class.

    Usage::

        registry = RuleHandlerRegistry()
        registry.register(RequiredHandler())

        result = registry.dispatch(Required(), value, evaluator, context)
    """

    def __init__(self) -> None:
        self._handlers: dict[type[Any], RuleHandler] = {}
        self._resolved: dict[type[Any], RuleHandler | None] = {}

    # -- registration --------------------------------------------------------

    def register(self, handler: RuleHandler) -> None:
        """Register a handler instance for its rule class."""
        self._handlers[handler.rule_type] = handler
        self._resolved.clear()
        logger.debug(
            "Registered rule handler %s -> %s",
            handler.rule_type.__name__,
            type(handler).__name__,
        )

    def register_all(self, *handlers: RuleHandler) -> None:
        """Register multiple handler instances at once."""
        for handler in handlers:
            self.register(handler)

    def unregister(self, rule_type: type[Any]) -> None:
        """Remove the handler for *rule_type*."""
        self._handlers.pop(rule_type, None)
        self._resolved.clear()

    # -- look-up -------------------------------------------------------------

    def get(self, rule_type: type[Any]) -> RuleHandler | None:
        """Return the handler for *rule_type* (or a base class), or ``None``."""
        if rule_type in self._resolved:
            return self._resolved[rule_type]

        handler = None
        for klass in rule_type.__mro__:
            handler = self._handlers.get(klass)
            if handler is not None:
                break
        self._resolved[rule_type] = handler
        logger.debug(
            "Resolved %s -> %s",
            rule_type.__name__,
            type(handler).__name__ if handler is not None else None,
        )
        return handler

    def has(self, rule_type: type[Any]) -> bool:
        return self.get(rule_type) is not None

    @property
    def supported_rules(self) -> set[type[Any]]:
        return set(self._handlers.keys())

    # -- dispatch ------------------------------------------------------------

    def dispatch(
        self,
        rule: Rule,
        value: Any,
        evaluator: RuleSetEvaluator,
        context: ValidationContext,
    ) -> Result:
        """
        Look up the handler for *rule* and evaluate.

        Raises:
            RuleHandlerNotFoundError: If no handler is registered.
        """
        handler = self.get(type(rule))
        if handler is None:
            raise RuleHandlerNotFoundError(
                type(rule).__name__,
                [rule_type.__name__ for rule_type in self._handlers],
            )
        return handler.validate(value, rule, evaluator, context)
