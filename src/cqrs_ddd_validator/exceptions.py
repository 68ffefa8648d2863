"""
Validator exception hierarchy.

Configuration errors (a broken rule set) are raised immediately and never
end up inside a :class:`~cqrs_ddd_validator.result.Result`. Validation
failures are collected, not raised, unless a caller explicitly asks for it
via :meth:`Result.raise_for_errors`.

All exceptions inherit from ``ValidatorError`` and provide ``to_dict()``
for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .result import Result


class ValidatorError(Exception):
    """Base exception for all validator errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidRuleConfigurationError(ValidatorError):
    """A rule or rule set is malformed.

    Raised for empty nested rule sets, entries that are neither rules nor
    callables, and invalid rule parameters.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_RULE_CONFIGURATION",
            "message": self.message,
            "path": self.path,
        }


class RuleHandlerNotFoundError(ValidatorError):
    """
    No handler is registered for a rule class.

    Provides fuzzy-matched suggestions among the registered rule names.
    """

    def __init__(self, rule_name: str, registered_rules: list[str]) -> None:
        self.rule_name = rule_name
        self.registered_rules = registered_rules
        self.suggestions = get_close_matches(
            rule_name, registered_rules, n=3, cutoff=0.6
        )

        message = f"No handler registered for rule '{rule_name}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        if registered_rules:
            message += f" Registered rules: {', '.join(sorted(registered_rules)[:10])}"
            if len(registered_rules) > 10:
                message += ", ..."
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "RULE_HANDLER_NOT_FOUND",
            "rule": self.rule_name,
            "suggestions": self.suggestions,
            "registered_rules": sorted(self.registered_rules),
        }


class InvalidCallbackReturnTypeError(InvalidRuleConfigurationError):
    """A callback rule returned something other than a ``Result``."""

    def __init__(self, returned: Any) -> None:
        self.returned_type = type(returned).__name__
        super().__init__(
            f"Callback must return a Result instance, {self.returned_type} returned."
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_CALLBACK_RETURN_TYPE",
            "message": self.message,
            "returned_type": self.returned_type,
        }


class ValidationFailedError(ValidatorError):
    """Raised on demand when a validation result holds errors.

    Carries the full :class:`Result` and exposes messages grouped by
    dot-joined value path: ``{path: [messages]}``.
    """

    def __init__(self, result: Result) -> None:
        self.result = result
        self.errors: dict[str, list[str]] = result.get_error_messages_indexed_by_path()
        super().__init__(str(self.errors))

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_FAILED",
            "errors": self.errors,
        }
