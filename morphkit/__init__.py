"""morphkit - declarative object-to-object transformation."""

from __future__ import annotations

from morphkit.core.enums import NodeKind
from morphkit.core.exceptions import (
    ActionExecutionError,
    ConfigurationError,
    DuplicateMapperError,
    DuplicateRuleError,
    MapperNotFoundError,
    MappingError,
    MorphError,
    PropertyValidationError,
    RegistryError,
    SchemaCompilationError,
    TargetConstructionError,
    ValidationFailedError,
    ValidatorConfigurationError,
    ValidatorError,
)
from morphkit.core.options import SchemaOptions, UndefinedValuesOptions, ValidationOptions
from morphkit.core.registry import (
    MapperRegistry,
    default_registry,
    delete_mapper,
    get_mapper,
    map_to,
    register,
    set_mapper,
)
from morphkit.mapping.builder import SchemaBuilder, schema
from morphkit.mapping.decorator import map_result, to_class_object, to_plain_object
from morphkit.mapping.evaluator import MappingResult
from morphkit.mapping.mapper import SchemaMapper, morph
from morphkit.mapping.paths import MISSING, get_path, set_path
from morphkit.mapping.schema import Schema, Selector, create_schema
from morphkit.validation.reporter import Reporter, default_formatter, reporter
from morphkit.validation.validators import BaseValidator, Rule, Validation, ValidationResult

__all__ = [
    # Transform
    "morph",
    "SchemaMapper",
    "MappingResult",
    # Schema
    "Schema",
    "Selector",
    "create_schema",
    "SchemaBuilder",
    "schema",
    "SchemaOptions",
    "UndefinedValuesOptions",
    "ValidationOptions",
    "NodeKind",
    # Paths
    "MISSING",
    "get_path",
    "set_path",
    # Registry
    "MapperRegistry",
    "default_registry",
    "register",
    "map_to",
    "get_mapper",
    "set_mapper",
    "delete_mapper",
    # Decorators
    "map_result",
    "to_plain_object",
    "to_class_object",
    # Validation
    "Validation",
    "BaseValidator",
    "Rule",
    "ValidationResult",
    "Reporter",
    "default_formatter",
    "reporter",
    # Exceptions
    "MorphError",
    "ConfigurationError",
    "SchemaCompilationError",
    "RegistryError",
    "DuplicateMapperError",
    "MapperNotFoundError",
    "ValidatorConfigurationError",
    "DuplicateRuleError",
    "MappingError",
    "ActionExecutionError",
    "TargetConstructionError",
    "PropertyValidationError",
    "ValidationFailedError",
    "ValidatorError",
]
