"""Schema-driven mapper.

SchemaMapper compiles a schema once and maps single items or collections to
plain dicts or to instances of a target class (Pydantic models, dataclasses
and plain classes).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Generic, TypeVar, overload

from morphkit.core.options import SchemaOptions
from morphkit.mapping.evaluator import MappingResult, evaluate
from morphkit.mapping.paths import MISSING
from morphkit.mapping.schema import (
    check_model_fields,
    get_field_names,
    new_instance,
    schema_options,
)
from morphkit.mapping.tree import SchemaTree, parse_schema

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _is_collection(data: Any) -> bool:
    return isinstance(data, (list, tuple))


class SchemaMapper(Generic[T]):
    """Reusable mapper for one schema and optional target class.

    With a target class and automapping enabled (the default), every field of
    the class is first mapped one-to-one from the source attribute of the same
    name; explicit schema entries override those defaults.

    Args:
        schema: The schema mapping (a Schema carries its own options).
        target_class: Class to instantiate per source item. Plain dicts are
            produced when omitted.

    Raises:
        SchemaCompilationError: If the schema is invalid, or names a property
            that a Pydantic target class does not declare.
        TargetConstructionError: If field names must be read from an instance
            of a class that cannot be constructed without arguments.
    """

    def __init__(
        self,
        schema: Mapping[str, Any] | None = None,
        target_class: type[T] | None = None,
    ) -> None:
        self._schema: Mapping[str, Any] = schema if schema is not None else {}
        self._options = schema_options(schema)
        self._target_class = target_class

        final_schema: Mapping[str, Any] = self._schema
        if target_class is not None:
            check_model_fields(target_class, self._schema)
        if target_class is not None and self._options.automapping:
            defaults: dict[str, Any] = {name: name for name in get_field_names(target_class)}
            final_schema = {**defaults, **self._schema}

        self._tree = parse_schema(final_schema)
        logger.debug(
            "Compiled schema with %d nodes for %s",
            len(self._tree),
            target_class.__name__ if target_class is not None else "dict",
        )

    @property
    def schema(self) -> Mapping[str, Any]:
        return self._schema

    @property
    def options(self) -> SchemaOptions:
        return self._options

    @property
    def target_class(self) -> type[T] | None:
        return self._target_class

    @property
    def tree(self) -> SchemaTree:
        return self._tree

    def _new_target(self) -> Any:
        if self._target_class is None:
            return {}
        return new_instance(self._target_class)

    def _evaluate(self, source: Any, items: Any) -> MappingResult[T]:
        return evaluate(self._tree, source, items, self._new_target(), self._options)

    def map_one(self, source: Any) -> T:
        """Map a single source item."""
        return self._evaluate(source, [source]).target

    def map_many(self, sources: list[Any]) -> list[T]:
        """Map every item of a collection, preserving order."""
        return [self._evaluate(source, sources).target for source in sources]

    def map_with_errors(self, data: Any) -> Any:
        """Map like __call__, returning MappingResult(s) with validation errors."""
        if data is None:
            return None
        if _is_collection(data):
            return [self._evaluate(source, data) for source in data]
        return self._evaluate(data, [data])

    @overload
    def __call__(self, data: None) -> None: ...

    @overload
    def __call__(self, data: list[Any] | tuple[Any, ...]) -> list[T]: ...

    @overload
    def __call__(self, data: Any) -> T: ...

    def __call__(self, data: Any) -> Any:
        """Map a single item, or each item of a list/tuple; None passes through."""
        if data is None:
            return None
        if _is_collection(data):
            return self.map_many(list(data))
        return self.map_one(data)

    def __repr__(self) -> str:
        target = self._target_class.__name__ if self._target_class is not None else "dict"
        return f"SchemaMapper(target={target}, properties={len(self._tree)})"


def morph(
    schema: Mapping[str, Any] | None = None,
    data: Any = MISSING,
    target_class: type[T] | None = None,
) -> Any:
    """Transform data with a schema.

    ``morph(schema)`` and ``morph(schema, None, cls)`` return a reusable
    SchemaMapper. ``morph(schema, data)`` and ``morph(schema, data, cls)``
    return the mapped item, or a list when ``data`` is a list/tuple.
    ``morph(schema, None)`` returns None.

    Args:
        schema: The schema mapping.
        data: Source item or collection. Omit to get a mapper.
        target_class: Optional class to instantiate per item.
    """
    if data is MISSING or (data is None and target_class is not None):
        return SchemaMapper(schema, target_class)
    if data is None:
        return None
    return SchemaMapper(schema, target_class)(data)
