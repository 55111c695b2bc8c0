"""Validation layer - validator rule chains and error reporting."""

from __future__ import annotations

from morphkit.validation.reporter import Formatter, Reporter, default_formatter, reporter
from morphkit.validation.validators import (
    BaseValidator,
    BooleanValidator,
    NumberValidator,
    Rule,
    StringValidator,
    Validation,
    ValidationResult,
    ValidatorCatalog,
)

__all__ = [
    "Validation",
    "ValidatorCatalog",
    "ValidationResult",
    "Rule",
    "BaseValidator",
    "StringValidator",
    "NumberValidator",
    "BooleanValidator",
    "Reporter",
    "Formatter",
    "default_formatter",
    "reporter",
]
