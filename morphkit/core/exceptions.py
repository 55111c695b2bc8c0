"""morphkit exception hierarchy.

Configuration errors are raised synchronously while a schema is compiled or a
mapper is registered. Mapping errors are raised while data is transformed.
"""

from __future__ import annotations

from typing import Any


class MorphError(Exception):
    """Base exception for all morphkit errors."""


# --- Configuration ---


class ConfigurationError(MorphError):
    """Base for errors caused by an invalid schema or call pattern."""


class SchemaCompilationError(ConfigurationError):
    """Raised when a schema cannot be compiled into a schema tree."""


class RegistryError(ConfigurationError):
    """Base for mapper registry errors."""


class DuplicateMapperError(RegistryError):
    """Raised when a mapper is registered twice for the same target class."""

    def __init__(self, target_class: type) -> None:
        self.target_class = target_class
        super().__init__(f"A mapper for {target_class.__name__} has already been registered")


class MapperNotFoundError(RegistryError):
    """Raised when no mapper is registered for a target class."""

    def __init__(self, target_class: type) -> None:
        self.target_class = target_class
        name = target_class.__name__
        super().__init__(
            f"The type {name} is not registered. Register it using `register({name}, schema)`"
        )


class ValidatorConfigurationError(ConfigurationError):
    """Raised on invalid validator definitions."""


class DuplicateRuleError(ValidatorConfigurationError):
    """Raised when a validator rule name is used twice on the same chain."""

    def __init__(self, rule_name: str) -> None:
        self.rule_name = rule_name
        super().__init__(f"Rule {rule_name} has already been used")


# --- Mapping ---


class MappingError(MorphError):
    """Base for errors raised while mapping data."""


class ActionExecutionError(MappingError):
    """Raised when a user-supplied callback fails for a target property."""

    def __init__(
        self,
        target_property: str,
        path: Any,
        function_name: str,
        original: BaseException,
    ) -> None:
        self.target_property = target_property
        self.path = path
        self.function_name = function_name
        self.original = original
        super().__init__(
            f"Unable to set target property [{target_property}]. "
            f"An error occurred when applying [{function_name}] on property [{path}]. "
            f"Internal error: {original}"
        )


class TargetConstructionError(MappingError):
    """Raised when a fresh target instance cannot be created."""

    def __init__(self, target_class: str, detail: str) -> None:
        self.target_class = target_class
        super().__init__(f"Cannot construct {target_class}: {detail}")


class PropertyValidationError(MappingError):
    """A validation failure recorded for one target property.

    Accumulated on the mapping result rather than raised, unless the schema
    asks to raise.
    """

    def __init__(self, target_property: str, inner_error: ValidatorError) -> None:
        self.target_property = target_property
        self.inner_error = inner_error
        super().__init__(f"{target_property}: {inner_error.expect}")

    @property
    def value(self) -> Any:
        return self.inner_error.value

    @property
    def expect(self) -> str:
        return self.inner_error.expect


class ValidationFailedError(MappingError):
    """Raised when validation errors accumulate and the schema asks to raise."""

    def __init__(self, errors: list[PropertyValidationError], messages: list[str]) -> None:
        self.errors = list(errors)
        self.messages = list(messages)
        super().__init__("\n".join(messages))


class ValidatorError(MorphError):
    """Raised by a validator rule when a value does not satisfy it."""

    def __init__(self, value: Any, expect: str) -> None:
        self.value = value
        self.expect = expect
        super().__init__(expect)
