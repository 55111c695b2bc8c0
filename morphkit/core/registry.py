"""Mapper Registry - caches one compiled mapper per target class.

Usage:
    register(User, {"name": "full_name"})
    users = map_to(User, rows)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from morphkit.core.exceptions import (
    DuplicateMapperError,
    MapperNotFoundError,
    RegistryError,
)
from morphkit.mapping.mapper import SchemaMapper
from morphkit.mapping.paths import MISSING

logger = logging.getLogger(__name__)


class MapperRegistry:
    """Maps target classes to compiled mappers.

    Keys are the target classes themselves. Schemas are compiled when a
    mapper is registered or replaced, never while mapping.
    """

    def __init__(self) -> None:
        self._mappers: dict[type, SchemaMapper[Any]] = {}

    def register(
        self,
        target_class: type | None,
        schema: Mapping[str, Any] | None = None,
    ) -> SchemaMapper[Any]:
        """Compile and store a mapper for ``target_class``.

        Args:
            target_class: The class to map to.
            schema: Optional schema. Without one, the class fields are mapped
                one-to-one.

        Returns:
            The new mapper.

        Raises:
            RegistryError: If no target class is given.
            DuplicateMapperError: If the class is already registered.
        """
        if target_class is None:
            raise RegistryError("A target class is required to register a mapper")
        if target_class in self._mappers:
            raise DuplicateMapperError(target_class)

        mapper: SchemaMapper[Any] = SchemaMapper(schema, target_class)
        self._mappers[target_class] = mapper
        logger.debug("Registered mapper for %s", target_class.__qualname__)
        return mapper

    def map(self, target_class: type, data: Any = MISSING) -> Any:
        """Map ``data`` with the mapper of ``target_class``.

        Unregistered classes are registered on the fly with the default
        schema. Without ``data`` the mapper itself is returned.
        """
        if target_class not in self._mappers:
            self.register(target_class)
        mapper = self._mappers[target_class]
        if data is MISSING:
            return mapper
        return mapper(data)

    def get_mapper(self, target_class: type) -> SchemaMapper[Any]:
        """Look up the mapper of a registered class.

        Raises:
            MapperNotFoundError: If the class is not registered.
        """
        try:
            return self._mappers[target_class]
        except KeyError:
            raise MapperNotFoundError(target_class) from None

    def set_mapper(self, target_class: type, schema: Mapping[str, Any] | None) -> SchemaMapper[Any]:
        """Replace the schema of a registered class.

        Raises:
            RegistryError: If ``schema`` is None.
            MapperNotFoundError: If the class is not registered.
        """
        if schema is None:
            raise RegistryError(f"The schema must be a mapping. Found {schema}")
        if target_class not in self._mappers:
            raise MapperNotFoundError(target_class)

        mapper: SchemaMapper[Any] = SchemaMapper(schema, target_class)
        self._mappers[target_class] = mapper
        logger.debug("Replaced mapper for %s", target_class.__qualname__)
        return mapper

    def delete_mapper(self, target_class: type) -> bool:
        """Remove a mapper. Returns False if the class was not registered."""
        removed = self._mappers.pop(target_class, None) is not None
        if removed:
            logger.debug("Deleted mapper for %s", target_class.__qualname__)
        return removed

    def exists(self, target_class: type) -> bool:
        """Check if a class has a registered mapper."""
        return target_class in self._mappers

    @property
    def mappers(self) -> Mapping[type, SchemaMapper[Any]]:
        """Read-only view of registered mappers."""
        return MappingProxyType(self._mappers)

    def __contains__(self, target_class: object) -> bool:
        return target_class in self._mappers

    def __len__(self) -> int:
        """Number of registered mappers."""
        return len(self._mappers)


default_registry = MapperRegistry()


def register(target_class: type, schema: Mapping[str, Any] | None = None) -> SchemaMapper[Any]:
    """Register a mapper on the default registry."""
    return default_registry.register(target_class, schema)


def map_to(target_class: type, data: Any = MISSING) -> Any:
    """Map data to ``target_class`` using the default registry."""
    return default_registry.map(target_class, data)


def get_mapper(target_class: type) -> SchemaMapper[Any]:
    """Get a mapper from the default registry."""
    return default_registry.get_mapper(target_class)


def set_mapper(target_class: type, schema: Mapping[str, Any] | None) -> SchemaMapper[Any]:
    """Replace a mapper on the default registry."""
    return default_registry.set_mapper(target_class, schema)


def delete_mapper(target_class: type) -> bool:
    """Delete a mapper from the default registry."""
    return default_registry.delete_mapper(target_class)
