"""Decorators that pass a function's result through a mapper.

Coroutine functions stay coroutine functions. A plain function that returns
an awaitable gets an awaitable of the mapped value back.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from morphkit.mapping.mapper import SchemaMapper
from morphkit.mapping.protocol import Mapper


async def _map_awaitable(awaitable: Awaitable[Any], mapper: Mapper[Any]) -> Any:
    return mapper(await awaitable)


def map_result(mapper: Mapper[Any]) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator applying ``mapper`` to the decorated function's result.

    Usage:
        @map_result(SchemaMapper({"name": "full_name"}))
        def load_user(user_id): ...
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                return mapper(await func(*args, **kwargs))

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            output = func(*args, **kwargs)
            if inspect.isawaitable(output):
                return _map_awaitable(output, mapper)
            return mapper(output)

        return wrapper

    return decorator


def to_plain_object(schema: Mapping[str, Any]) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator mapping the result to plain dicts."""
    return map_result(SchemaMapper(schema))


def to_class_object(
    schema: Mapping[str, Any] | None,
    target_class: type,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator mapping the result to instances of ``target_class``."""
    return map_result(SchemaMapper(schema, target_class))
