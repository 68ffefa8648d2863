"""Message formatting: template + parameters -> human-readable string."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

_PLACEHOLDER_RE = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


@runtime_checkable
class Formatter(Protocol):
    """Protocol for message formatters.

    Errors store a template and raw parameters; a formatter renders them
    only when a presentation layer asks for text.
    """

    def format(self, template: str, parameters: Mapping[str, Any]) -> str:
        ...


class SimpleFormatter:
    """
    Replaces ``{name}`` placeholders with parameter values.

    Unknown placeholders are left untouched so that templates with values
    only known at validation time survive static interpolation.
    ``True``/``False``/``None`` render as ``true``/``false``/``null``.
    """

    def format(self, template: str, parameters: Mapping[str, Any]) -> str:
        def _replace(match: re.Match[str]) -> str:
            name = match.group(1)
            if name not in parameters:
                return match.group(0)
            return _stringify(parameters[name])

        return _PLACEHOLDER_RE.sub(_replace, template)


def _stringify(value: Any) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    return str(value)
