"""Schema DSL builder.

Provides a fluent builder for defining schemas and their options.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from morphkit.core.exceptions import SchemaCompilationError
from morphkit.core.options import SchemaOptions, UndefinedValuesOptions, ValidationOptions
from morphkit.mapping.mapper import SchemaMapper
from morphkit.mapping.schema import Schema, Selector
from morphkit.mapping.tree import parse_schema


def schema(target_class: type | None = None) -> SchemaBuilder:
    """Entry point for the schema DSL.

    Args:
        target_class: Optional class the schema maps to. Only used by
            ``SchemaBuilder.mapper()``.

    Returns:
        A builder for chaining property declarations.
    """
    return SchemaBuilder(target_class)


class SchemaBuilder:
    """Fluent builder for schema definitions."""

    def __init__(self, target_class: type | None = None) -> None:
        self._target_class = target_class
        self._actions: dict[str, Any] = {}
        self._automapping = True
        self._strip_undefined = False
        self._undefined_default: Callable[..., Any] | None = None
        self._raise_on_invalid = False
        self._formatter: Callable[..., str] | None = None

    def _declare(self, name: str, action: Any) -> SchemaBuilder:
        if name in self._actions:
            raise SchemaCompilationError(f"Property '{name}' is already declared")
        self._actions[name] = action
        return self

    def field(self, name: str, path: str | None = None) -> SchemaBuilder:
        """Copy a source path (the property name by default) verbatim."""
        return self._declare(name, path or name)

    def compute(self, name: str, fn: Callable[..., Any]) -> SchemaBuilder:
        """Compute a property as ``fn(source, items, target)``."""
        return self._declare(name, fn)

    def aggregate(self, name: str, *paths: str) -> SchemaBuilder:
        """Collect several source paths into one sub-object."""
        if not paths:
            raise SchemaCompilationError(f"Aggregate '{name}' needs at least one path")
        return self._declare(name, list(paths))

    def select(
        self,
        name: str,
        path: str | list[str] | None = None,
        fn: Callable[..., Any] | None = None,
        validation: Any = None,
    ) -> SchemaBuilder:
        """Extract a path, then transform and/or validate it."""
        return self._declare(name, Selector(path=path, fn=fn, validation=validation))

    def nested(self, name: str, sub_schema: Mapping[str, Any] | SchemaBuilder) -> SchemaBuilder:
        """Describe a sub-object of the target with its own schema."""
        if isinstance(sub_schema, SchemaBuilder):
            sub_schema = dict(sub_schema._actions)
        return self._declare(name, dict(sub_schema))

    def auto_fields(self, enabled: bool = True) -> SchemaBuilder:
        """Enable or disable one-to-one mapping of the target class fields."""
        self._automapping = enabled
        return self

    def strip_undefined(self, default: Callable[..., Any] | None = None) -> SchemaBuilder:
        """Leave properties without a value unset, or fill them via ``default``."""
        self._strip_undefined = True
        self._undefined_default = default
        return self

    def raise_on_invalid(self, formatter: Callable[..., str] | None = None) -> SchemaBuilder:
        """Raise ValidationFailedError instead of accumulating errors."""
        self._raise_on_invalid = True
        self._formatter = formatter
        return self

    def build(self) -> Schema:
        """Compile and validate the declarations into a Schema."""
        options = SchemaOptions(
            automapping=self._automapping,
            undefined_values=UndefinedValuesOptions(
                strip=self._strip_undefined,
                default=self._undefined_default,
            ),
            validation=ValidationOptions(
                throw=self._raise_on_invalid,
                formatter=self._formatter,
            ),
        )
        built = Schema(dict(self._actions), options)
        # Fail fast on invalid leaves
        parse_schema(built)
        return built

    def mapper(self) -> SchemaMapper[Any]:
        """Build the schema and compile a mapper for the target class."""
        return SchemaMapper(self.build(), self._target_class)
