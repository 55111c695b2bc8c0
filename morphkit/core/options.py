"""Schema options.

SchemaOptions is a Pydantic model attached to a schema out-of-band. It
controls automapping of typed targets, the handling of properties that end
up without a value, and what happens to accumulated validation errors.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field


class UndefinedValuesOptions(BaseModel):
    """Policy for properties whose final value is missing."""

    strip: bool = False
    # Called as default(target, target_property_path).
    default: Callable[..., Any] | None = None


class ValidationOptions(BaseModel):
    """Policy for accumulated validation errors."""

    throw: bool = False
    # Called as formatter(property_validation_error) -> str.
    formatter: Callable[..., str] | None = None


class SchemaOptions(BaseModel):
    """Options for compiling and evaluating a schema."""

    automapping: bool = True
    undefined_values: UndefinedValuesOptions = Field(default_factory=UndefinedValuesOptions)
    validation: ValidationOptions = Field(default_factory=ValidationOptions)


def coerce_options(options: SchemaOptions | dict[str, Any] | None) -> SchemaOptions:
    """Return a SchemaOptions instance from an instance, a dict or None."""
    if options is None:
        return SchemaOptions()
    if isinstance(options, SchemaOptions):
        return options
    return SchemaOptions.model_validate(options)
