"""Human-readable reporting of accumulated validation errors."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from morphkit.core.exceptions import PropertyValidationError

Formatter = Callable[[PropertyValidationError], str]


def default_formatter(error: PropertyValidationError) -> str:
    """Format one validation error."""
    return (
        f"Invalid value {error.value} supplied at property {error.target_property}. "
        f"Expecting: {error.expect}"
    )


def _collect_errors(result: Any) -> list[PropertyValidationError]:
    if result is None:
        return []
    errors = getattr(result, "errors", None)
    if errors is not None:
        return list(errors)
    if isinstance(result, Iterable):
        collected: list[PropertyValidationError] = []
        for item in result:
            if isinstance(item, PropertyValidationError):
                collected.append(item)
            else:
                collected.extend(_collect_errors(item))
        return collected
    return []


class Reporter:
    """Turns the errors of a mapping into messages.

    Args:
        formatter: Called once per error. Defaults to default_formatter.
    """

    def __init__(self, formatter: Formatter = default_formatter) -> None:
        self._formatter = formatter

    def report(self, result: Any) -> list[str] | None:
        """Report the errors of a mapping result.

        Args:
            result: A MappingResult, a list of MappingResults, or an iterable
                of PropertyValidationError.

        Returns:
            One message per error, or None when there are no errors.
        """
        errors = _collect_errors(result)
        if not errors:
            return None
        return [self._formatter(error) for error in errors]


reporter = Reporter()
