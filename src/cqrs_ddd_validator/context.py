"""Per-call validation state threaded through rule evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .data_set import DataSet


@dataclass
class ValidationContext:
    """
    State for one evaluation target within a ``validate`` call.

    A fresh context is created for every top-level attribute and for every
    path a :class:`~cqrs_ddd_validator.rules.Nested` rule descends into, so
    ``previous_rules_errored`` never leaks between unrelated targets.

    Attributes:
        data_set: The data set passed to the top-level ``validate`` call.
        attribute: Attribute (or nested property path) being validated,
            ``None`` when validating a bare value.
        previous_rules_errored: Set once any rule on this target fails;
            rules with ``skip_on_error`` read it.
    """

    data_set: DataSet | None = None
    attribute: str | None = None
    previous_rules_errored: bool = False

    def for_attribute(self, attribute: str | None) -> ValidationContext:
        """Return a fresh context for *attribute* sharing the same data set."""
        return ValidationContext(data_set=self.data_set, attribute=attribute)

    def mark_errored(self) -> None:
        self.previous_rules_errored = True
