"""Validator rule chains.

A validator is an ordered set of named rules. Each rule checks (and may
coerce) a value, raising ValidatorError when the value does not satisfy it.
validate() never raises for invalid data: it returns a ValidationResult
carrying the error instead.

Type checks and coercions are delegated to Pydantic type adapters.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from morphkit.core.exceptions import (
    DuplicateRuleError,
    ValidatorConfigurationError,
    ValidatorError,
)

_STRING = TypeAdapter(str)
_NUMBER = TypeAdapter(int | float)
_BOOLEAN = TypeAdapter(bool)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of running a validator on a value."""

    value: Any
    error: ValidatorError | None = None


@dataclass(frozen=True)
class Rule:
    """A named check. ``test`` returns the (possibly coerced) value."""

    name: str
    expect: str
    test: Callable[[Any], Any]


def _expected(kind: str, value: Any) -> str:
    return f"Expected value to be a <{kind}> but received <{value}>"


class BaseValidator:
    """Ordered chain of uniquely named rules."""

    def __init__(self, rule: Rule | None = None) -> None:
        self._rules: dict[str, Rule] = {}
        if rule is not None:
            self.add_rule(rule)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules.values())

    def add_rule(self, rule: Rule) -> BaseValidator:
        """Append a rule to the chain.

        Raises:
            DuplicateRuleError: If a rule with the same name is already set.
        """
        if rule.name in self._rules:
            raise DuplicateRuleError(rule.name)
        self._rules[rule.name] = rule
        return self

    def validate(self, value: Any) -> ValidationResult:
        """Run every rule in order, stopping at the first failure."""
        current = value
        for rule in self._rules.values():
            try:
                current = rule.test(current)
            except ValidatorError as e:
                return ValidationResult(value=current, error=e)
        return ValidationResult(value=current)


def _adapt(adapter: TypeAdapter[Any], kind: str, *, strict: bool) -> Callable[[Any], Any]:
    def test(value: Any) -> Any:
        try:
            return adapter.validate_python(value, strict=strict)
        except PydanticValidationError as e:
            raise ValidatorError(value, _expected(kind, value)) from e

    return test


class StringValidator(BaseValidator):
    """Value must be a str. Supports length bounds."""

    def __init__(self) -> None:
        super().__init__(
            Rule("string", "value to be a <string>", _adapt(_STRING, "string", strict=True))
        )

    def min(self, length: int) -> StringValidator:
        expect = f"value to be greater or equal than {length}"

        def test(value: str) -> str:
            if len(value) < length:
                raise ValidatorError(value, expect)
            return value

        self.add_rule(Rule("min", expect, test))
        return self

    def max(self, length: int) -> StringValidator:
        expect = f"value to be less or equal than {length}"

        def test(value: str) -> str:
            if len(value) > length:
                raise ValidatorError(value, expect)
            return value

        self.add_rule(Rule("max", expect, test))
        return self


class NumberValidator(BaseValidator):
    """Value must be a number; numeric strings are converted."""

    def __init__(self) -> None:
        super().__init__(
            Rule("number", "value to be a <number>", _adapt(_NUMBER, "number", strict=False))
        )

    def min(self, bound: float) -> NumberValidator:
        expect = f"value to be greater or equal than {bound}"

        def test(value: float) -> float:
            if value < bound:
                raise ValidatorError(value, expect)
            return value

        self.add_rule(Rule("min", expect, test))
        return self

    def max(self, bound: float) -> NumberValidator:
        expect = f"value to be less or equal than {bound}"

        def test(value: float) -> float:
            if value > bound:
                raise ValidatorError(value, expect)
            return value

        self.add_rule(Rule("max", expect, test))
        return self


class BooleanValidator(BaseValidator):
    """Value must be a bool; "true"/"false" style strings are converted."""

    def __init__(self) -> None:
        super().__init__(
            Rule("boolean", "value to be a <boolean>", _adapt(_BOOLEAN, "boolean", strict=False))
        )


class ValidatorCatalog:
    """Named validator factories: ``Validation.string().max(3)``.

    Custom validators are added with add_validator() and then reached as
    attributes of the catalog.
    """

    def __init__(self) -> None:
        self._validators: dict[str, Callable[[], BaseValidator]] = {}

    def add_validator(self, name: str, factory: Callable[[], BaseValidator]) -> None:
        """Register a validator factory under ``name``.

        Raises:
            ValidatorConfigurationError: If the name is taken or not usable
                as an attribute.
        """
        if not name.isidentifier() or name.startswith("_"):
            raise ValidatorConfigurationError(f"Invalid validator name '{name}'")
        if name in self._validators or hasattr(type(self), name):
            raise ValidatorConfigurationError(f"Validator '{name}' has already been added")
        self._validators[name] = factory

    @property
    def names(self) -> list[str]:
        return sorted(self._validators)

    def __getattr__(self, name: str) -> Callable[[], BaseValidator]:
        validators = self.__dict__.get("_validators", {})
        try:
            return validators[name]
        except KeyError:
            raise AttributeError(f"No validator named '{name}'") from None


Validation = ValidatorCatalog()
Validation.add_validator("string", StringValidator)
Validation.add_validator("number", NumberValidator)
Validation.add_validator("boolean", BooleanValidator)
