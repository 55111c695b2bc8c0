"""Schema values.

A schema is any mapping from target property paths to actions. ``Schema`` is
a dict subclass that additionally carries ``SchemaOptions`` without changing
its keys, so ``create_schema({"a": "b"}) == {"a": "b"}``.
"""

from __future__ import annotations

import dataclasses
import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from morphkit.core.exceptions import SchemaCompilationError, TargetConstructionError
from morphkit.core.options import SchemaOptions, coerce_options
from morphkit.mapping.paths import normalize_path


class Schema(dict):  # type: ignore[type-arg]
    """A schema mapping with options attached out-of-band."""

    def __init__(
        self,
        actions: Mapping[str, Any] | None = None,
        options: SchemaOptions | dict[str, Any] | None = None,
    ) -> None:
        super().__init__(actions or {})
        self.options = coerce_options(options)

    def __repr__(self) -> str:
        return f"Schema({dict.__repr__(self)}, options={self.options!r})"


@dataclass(frozen=True)
class Selector:
    """Path + function action.

    ``path`` is extracted from the source (or the whole source when None),
    then passed to ``fn`` as ``fn(value, source, items, target)``, then to
    ``validation``: a validator's ``validate(value)``, or a plain function
    ``validation(value)`` returning a ValidationResult or a
    ``{"value": ..., "error": ...}`` mapping.
    """

    path: str | list[str] | tuple[str, ...] | None = None
    fn: Callable[..., Any] | None = None
    validation: Any = None


def create_schema(
    actions: Mapping[str, Any] | None,
    options: SchemaOptions | dict[str, Any] | None = None,
) -> Schema:
    """Attach options to a schema mapping.

    Args:
        actions: The schema mapping.
        options: SchemaOptions or an equivalent nested dict.

    Returns:
        A Schema equal to ``actions`` and carrying ``options``.
    """
    return Schema(actions, options)


def schema_options(schema: Mapping[str, Any] | None) -> SchemaOptions:
    """Options attached to ``schema``, or the defaults for a plain mapping."""
    if isinstance(schema, Schema):
        return schema.options
    return SchemaOptions()


def _is_pydantic_model(cls: type) -> bool:
    """Check if a class is a Pydantic BaseModel."""
    return inspect.isclass(cls) and issubclass(cls, BaseModel)


def new_instance(cls: type) -> Any:
    """Create a fresh, default-initialized instance of ``cls``.

    Pydantic models are built with ``model_construct()`` so declared defaults
    apply without validating required fields. Other classes are called with
    no arguments.
    """
    if _is_pydantic_model(cls):
        return cls.model_construct()  # type: ignore[attr-defined]
    try:
        return cls()
    except TypeError as e:
        raise TargetConstructionError(cls.__name__, str(e)) from e


def check_model_fields(cls: type, schema: Mapping[str, Any]) -> None:
    """Reject schema keys that a Pydantic target cannot hold.

    Only the first segment of each target path is checked. Models that allow
    extra attributes accept any key.

    Raises:
        SchemaCompilationError: If a key is not a field of the model.
    """
    if not _is_pydantic_model(cls) or cls.model_config.get("extra") == "allow":  # type: ignore[attr-defined]
        return
    fields = cls.model_fields  # type: ignore[attr-defined]
    unknown = sorted({key for key in schema if normalize_path(str(key))[0] not in fields})
    if unknown:
        raise SchemaCompilationError(f"{cls.__name__} has no fields {unknown}")


def get_field_names(cls: type) -> list[str]:
    """Field names of a class (Pydantic, dataclass, or plain)."""
    # Pydantic model
    if _is_pydantic_model(cls):
        return list(cls.model_fields.keys())  # type: ignore[attr-defined]

    # Dataclass
    if dataclasses.is_dataclass(cls):
        return [f.name for f in dataclasses.fields(cls)]

    # Plain class - use the attributes set by a default construction
    instance = new_instance(cls)
    return list(getattr(instance, "__dict__", {}).keys())
