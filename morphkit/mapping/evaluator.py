"""Schema tree evaluation.

Runs every prepared action of a compiled tree against one source item, then
merges the results into the target in breadth-first order, so a parent
container is always written before its descendants.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from morphkit.core.exceptions import PropertyValidationError, ValidationFailedError
from morphkit.core.options import SchemaOptions
from morphkit.mapping.actions import ActionContext, adapt_callable
from morphkit.mapping.paths import MISSING, get_path, set_path
from morphkit.mapping.tree import SchemaTree
from morphkit.validation.reporter import default_formatter

T = TypeVar("T")


@dataclass
class MappingResult(Generic[T]):
    """A mapped target together with the validation errors found for it."""

    target: T
    errors: list[PropertyValidationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


def _resolve(existing: Any, value: Any) -> Any:
    """Computed value wins; a missing computed value keeps the existing one."""
    return existing if value is MISSING else value


def _raise_if_invalid(errors: list[PropertyValidationError], options: SchemaOptions) -> None:
    if not errors or not options.validation.throw:
        return
    formatter = options.validation.formatter or default_formatter
    raise ValidationFailedError(errors, [formatter(error) for error in errors])


def evaluate(
    tree: SchemaTree,
    source: Any,
    items: Sequence[Any],
    target: T,
    options: SchemaOptions | None = None,
) -> MappingResult[T]:
    """Populate ``target`` from ``source`` following ``tree``.

    Undefined-value precedence, for a property whose computed value is
    MISSING:

    1. the value already on the target (constructor default or earlier write);
    2. the ``undefined_values.default(target, path)`` callback, if set;
    3. ``undefined_values.strip`` leaves the property unset;
    4. otherwise None is written.

    Args:
        tree: Compiled schema.
        source: The item being mapped.
        items: The whole source collection (``[source]`` for a single item).
        target: Fresh dict or class instance, mutated in place.
        options: Schema options. Defaults apply when None.

    Returns:
        MappingResult holding ``target`` and accumulated validation errors.

    Raises:
        ActionExecutionError: If a schema callback raises.
        ValidationFailedError: If validation errors accumulate and
            ``validation.throw`` is set.
    """
    options = options or SchemaOptions()
    undefined = options.undefined_values
    default = adapt_callable(undefined.default) if undefined.default is not None else None

    ctx = ActionContext(source=source, items=items, target=target)
    computed: list[tuple[str, Any]] = []
    for node in tree.traverse_bfs():
        if node.prepared_action is None:
            continue
        computed.append((node.target_property_path, node.prepared_action(ctx)))

    for path, value in computed:
        final = _resolve(get_path(target, path), value)
        if final is MISSING and default is not None:
            final = default(target, path)
        if final is MISSING and undefined.strip:
            _raise_if_invalid(ctx.errors, options)
            continue
        set_path(target, path, None if final is MISSING else final)
        _raise_if_invalid(ctx.errors, options)

    return MappingResult(target=target, errors=ctx.errors)
