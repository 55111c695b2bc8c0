"""Action classification and preparation.

Each schema leaf is classified once into a NodeKind, then turned into a
prepared action: a closure called with an ActionContext for every source
item, without inspecting the schema again.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from morphkit.core.enums import NodeKind
from morphkit.core.exceptions import (
    ActionExecutionError,
    PropertyValidationError,
    SchemaCompilationError,
    ValidatorError,
)
from morphkit.mapping.paths import MISSING, aggregate_paths, get_path
from morphkit.mapping.schema import Selector

logger = logging.getLogger(__name__)

PreparedAction = Callable[["ActionContext"], Any]

_SELECTOR_KEYS = frozenset({"path", "fn", "validation"})


@dataclass
class ActionContext:
    """Arguments of a prepared action call."""

    source: Any
    items: Sequence[Any]
    target: Any
    errors: list[PropertyValidationError] = field(default_factory=list)


def _is_path_list(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value)


def _is_selector_mapping(value: Any) -> bool:
    return isinstance(value, Mapping) and ("path" in value or "fn" in value)


def classify_action(action: Any, property_name: str) -> NodeKind:
    """Classify a schema leaf.

    Args:
        action: The schema leaf value.
        property_name: Target property the leaf belongs to (for errors).

    Returns:
        The node kind. ``NodeKind.PROPERTY`` means the leaf is a nested
        schema (mapping or positional list) to recurse into.

    Raises:
        SchemaCompilationError: For empty mappings and unsupported values.
    """
    if isinstance(action, str):
        return NodeKind.ACTION_STRING
    if isinstance(action, Selector):
        return NodeKind.ACTION_SELECTOR
    if callable(action):
        return NodeKind.ACTION_FUNCTION
    if _is_path_list(action):
        return NodeKind.ACTION_AGGREGATOR
    if _is_selector_mapping(action):
        return NodeKind.ACTION_SELECTOR
    if isinstance(action, Mapping):
        if not action:
            raise SchemaCompilationError(
                "A value of a schema property can't be an empty object. "
                f"Value {{}} found for property {property_name}"
            )
        return NodeKind.PROPERTY
    if isinstance(action, (list, tuple)):
        return NodeKind.PROPERTY
    raise SchemaCompilationError(f"The action specified for {property_name} is not supported.")


def _positional_arity(fn: Callable[..., Any]) -> int | None:
    """Number of positional arguments ``fn`` accepts, None for ``*args``."""
    try:
        sig = inspect.signature(fn)
    except (ValueError, TypeError):
        return 1
    count = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return count


def adapt_callable(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap ``fn`` so it receives only the leading arguments it declares.

    Lets ``lambda source: ...`` stand in for the full
    ``(source, items, target)`` signature.
    """
    arity = _positional_arity(fn)
    if arity is None:
        return fn

    def call(*args: Any) -> Any:
        return fn(*args[:arity])

    return call


def _function_name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None) or repr(fn)


def to_selector(action: Selector | Mapping[str, Any], property_name: str) -> Selector:
    """Normalize a selector leaf and check its parts.

    Keys other than ``path``, ``fn`` and ``validation`` are ignored.
    """
    if isinstance(action, Mapping):
        ignored = set(action) - _SELECTOR_KEYS
        if ignored:
            logger.debug("Ignoring selector keys %s for %s", sorted(ignored), property_name)
        action = Selector(
            path=action.get("path"),
            fn=action.get("fn"),
            validation=action.get("validation"),
        )

    if action.path is not None and not isinstance(action.path, str) and not _is_path_list(action.path):
        raise SchemaCompilationError(
            f"Selector path for property {property_name} must be a string or a list of strings"
        )
    if action.fn is not None and not callable(action.fn):
        raise SchemaCompilationError(f"Selector fn for property {property_name} must be callable")
    if action.validation is not None and not (
        callable(getattr(action.validation, "validate", None)) or callable(action.validation)
    ):
        raise SchemaCompilationError(
            f"Selector validation for property {property_name} "
            "must be callable or provide validate()"
        )
    return action


def _validation_outcome(outcome: Any, value: Any) -> tuple[Any, ValidatorError | None]:
    """Read ``(value, error)`` from a ValidationResult or a value/error mapping."""
    if isinstance(outcome, Mapping):
        checked, error = outcome.get("value", value), outcome.get("error")
    else:
        checked, error = outcome.value, outcome.error
    if error is not None and not isinstance(error, ValidatorError):
        error = ValidatorError(value, str(error))
    return checked, error


def _run_validation(validation: Any, value: Any) -> tuple[Any, ValidatorError | None]:
    validate = getattr(validation, "validate", None)
    outcome = validate(value) if callable(validate) else validation(value)
    return _validation_outcome(outcome, value)


def prepare_action(kind: NodeKind, action: Any, target_property: str) -> PreparedAction | None:
    """Build the prepared action for a classified leaf."""
    if kind is NodeKind.ACTION_STRING:
        return lambda ctx: get_path(ctx.source, action)

    if kind is NodeKind.ACTION_FUNCTION:
        fn = adapt_callable(action)
        name = _function_name(action)

        def run_function(ctx: ActionContext) -> Any:
            try:
                return fn(ctx.source, ctx.items, ctx.target)
            except Exception as e:
                raise ActionExecutionError(target_property, None, name, e) from e

        return run_function

    if kind is NodeKind.ACTION_AGGREGATOR:
        paths = tuple(action)
        return lambda ctx: aggregate_paths(paths, ctx.source)

    if kind is NodeKind.ACTION_SELECTOR:
        return _prepare_selector(to_selector(action, target_property), target_property)

    return None


def _prepare_selector(selector: Selector, target_property: str) -> PreparedAction:
    path = selector.path
    fn = adapt_callable(selector.fn) if selector.fn is not None else None
    name = _function_name(selector.fn) if selector.fn is not None else ""
    validation = selector.validation

    def run_selector(ctx: ActionContext) -> Any:
        if path is None:
            value = ctx.source
        elif isinstance(path, str):
            value = get_path(ctx.source, path)
        else:
            value = aggregate_paths(path, ctx.source)

        if fn is not None:
            try:
                value = fn(value, ctx.source, ctx.items, ctx.target)
            except Exception as e:
                raise ActionExecutionError(target_property, path, name, e) from e

        if validation is not None:
            # Validators see None for a missing value
            checked, error = _run_validation(validation, None if value is MISSING else value)
            if error is not None:
                logger.debug("Validation failed for %s: %s", target_property, error.expect)
                ctx.errors.append(PropertyValidationError(target_property, error))
                if value is MISSING:
                    return value
            value = checked

        return value

    return run_selector
