"""Result and Error — path-addressed validation outcomes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from .formatter import SimpleFormatter

if TYPE_CHECKING:
    from .formatter import Formatter

_DEFAULT_FORMATTER = SimpleFormatter()


def default_parameters_factory() -> dict[str, Any]:
    """Factory for the mutable ``parameters`` default of :class:`Error`."""
    return {}


@dataclass(frozen=True, slots=True)
class Error:
    """A single validation failure.

    Attributes:
        message: Message template, e.g. ``"Value must be no less than {min}."``.
        parameters: Interpolation values for ``message``. Presentational only.
        value_path: Traversal segments from the validated data set to the
            failing value, e.g. ``("author", "age")``.
        attribute: Top-level attribute the error was collected under, or
            ``None`` when produced below the validator (inside a rule).
    """

    message: str
    parameters: dict[str, Any] = field(default_factory=default_parameters_factory)
    value_path: tuple[str, ...] = ()
    attribute: str | None = None

    def get_message(self, formatter: Formatter | None = None) -> str:
        """Render the template with this error's parameters."""
        return (formatter or _DEFAULT_FORMATTER).format(self.message, self.parameters)

    def with_value_path_prefix(self, prefix: Iterable[Any]) -> Error:
        """Return a copy whose value path is ``prefix + value_path``."""
        segments = tuple(str(segment) for segment in prefix)
        return replace(self, value_path=segments + self.value_path)

    def with_attribute(self, attribute: str | None) -> Error:
        return replace(self, attribute=attribute)

    @property
    def path_string(self) -> str:
        """Dot-joined value path (empty string for untargeted errors)."""
        return ".".join(self.value_path)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "parameters": dict(self.parameters),
            "value_path": list(self.value_path),
            "attribute": self.attribute,
        }


def default_errors_factory() -> list[Error]:
    """Factory for the mutable ``errors`` default of :class:`Result`."""
    return []


@dataclass
class Result:
    """Ordered, append-only collection of :class:`Error`.

    ``formatter`` renders messages when a query is given none; the
    validator sets it from its configuration. It takes no part in equality.

    Usage::

        result = Result()
        result.add_error("Value cannot be blank.", value_path=["name"])
        result.is_valid  # False
    """

    errors: list[Error] = field(default_factory=default_errors_factory)
    formatter: Formatter | None = field(default=None, compare=False, repr=False)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    # ── Building ─────────────────────────────────────────────────

    def add_error(
        self,
        message: str,
        parameters: Mapping[str, Any] | None = None,
        value_path: Iterable[Any] = (),
        attribute: str | None = None,
    ) -> Result:
        """Append a new error and return ``self`` for chaining."""
        self.errors.append(
            Error(
                message=message,
                parameters=dict(parameters or {}),
                value_path=tuple(str(segment) for segment in value_path),
                attribute=attribute,
            )
        )
        return self

    def append(self, error: Error) -> None:
        self.errors.append(error)

    def extend(self, errors: Iterable[Error]) -> None:
        self.errors.extend(errors)

    def merge(self, other: Result) -> Result:
        """Return a new result holding this result's errors, then *other*'s."""
        return Result(
            errors=[*self.errors, *other.errors],
            formatter=self.formatter or other.formatter,
        )

    # ── Queries ──────────────────────────────────────────────────

    def get_errors(self) -> list[Error]:
        return list(self.errors)

    def is_attribute_valid(self, attribute: str | int) -> bool:
        return not self.get_attribute_errors(attribute)

    def get_attribute_errors(self, attribute: str | int) -> list[Error]:
        key = str(attribute)
        return [error for error in self.errors if error.attribute == key]

    def get_errors_indexed_by_attribute(self) -> dict[str | None, list[Error]]:
        indexed: dict[str | None, list[Error]] = {}
        for error in self.errors:
            indexed.setdefault(error.attribute, []).append(error)
        return indexed

    def get_error_messages(self, formatter: Formatter | None = None) -> list[str]:
        formatter = formatter or self.formatter
        return [error.get_message(formatter) for error in self.errors]

    def get_error_messages_indexed_by_path(
        self, formatter: Formatter | None = None
    ) -> dict[str, list[str]]:
        """Rendered messages keyed by dot-joined value path."""
        formatter = formatter or self.formatter
        indexed: dict[str, list[str]] = {}
        for error in self.errors:
            indexed.setdefault(error.path_string, []).append(
                error.get_message(formatter)
            )
        return indexed

    def raise_for_errors(self) -> None:
        """Raise :class:`ValidationFailedError` when the result is invalid."""
        if not self.is_valid:
            from .exceptions import ValidationFailedError

            raise ValidationFailedError(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "errors": [error.to_dict() for error in self.errors],
        }