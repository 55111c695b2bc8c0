"""Unit tests for schema tree evaluation."""

from __future__ import annotations

from typing import Any

import pytest

from morphkit.core.exceptions import (
    PropertyValidationError,
    ValidationFailedError,
    ValidatorError,
)
from morphkit.core.options import SchemaOptions
from morphkit.mapping.evaluator import MappingResult, evaluate
from morphkit.mapping.paths import MISSING
from morphkit.mapping.tree import parse_schema
from morphkit.validation.validators import Validation, ValidationResult


def _evaluate(schema: dict[str, Any], source: Any, target: Any = None, **options: Any) -> MappingResult:
    target = {} if target is None else target
    return evaluate(
        parse_schema(schema),
        source,
        [source],
        target,
        SchemaOptions.model_validate(options),
    )


class TestEvaluate:
    def test_populates_target_in_place(self) -> None:
        target: dict[str, Any] = {}
        result = _evaluate({"name": "firstName"}, {"firstName": "John"}, target)
        assert result.target is target
        assert target == {"name": "John"}
        assert not result.has_errors

    def test_nested_properties(self) -> None:
        result = _evaluate(
            {"contact": {"city": "address.city", "zip": "address.postalCode"}},
            {"address": {"city": "NY", "postalCode": "10021"}},
        )
        assert result.target == {"contact": {"city": "NY", "zip": "10021"}}

    def test_missing_value_written_as_none(self) -> None:
        result = _evaluate({"name": "unknown.path"}, {})
        assert result.target == {"name": None}

    def test_explicit_none_is_written(self) -> None:
        result = _evaluate({"name": "firstName"}, {"firstName": None})
        assert result.target == {"name": None}

    def test_existing_value_kept_when_missing(self) -> None:
        result = _evaluate({"kind": "type"}, {}, {"kind": "default"})
        assert result.target == {"kind": "default"}

    def test_computed_value_overwrites_existing(self) -> None:
        result = _evaluate({"kind": "type"}, {"type": "Admin"}, {"kind": "default"})
        assert result.target == {"kind": "Admin"}

    def test_actions_see_untouched_target(self) -> None:
        seen: list[dict[str, Any]] = []

        def snapshot(source: Any, items: Any, target: dict[str, Any]) -> int:
            seen.append(dict(target))
            return 2

        _evaluate({"a": "a", "b": snapshot}, {"a": 1})
        assert seen == [{}]

    def test_items_are_passed_to_functions(self) -> None:
        tree = parse_schema({"count": lambda source, items: len(items)})
        result = evaluate(tree, {"a": 1}, [{"a": 1}, {"a": 2}], {})
        assert result.target == {"count": 2}


class TestUndefinedValues:
    def test_strip_omits_missing(self) -> None:
        result = _evaluate(
            {"name": "firstName", "age": "age"},
            {"firstName": "John"},
            undefined_values={"strip": True},
        )
        assert result.target == {"name": "John"}

    def test_strip_keeps_explicit_none(self) -> None:
        result = _evaluate({"age": "age"}, {"age": None}, undefined_values={"strip": True})
        assert result.target == {"age": None}

    def test_default_callback(self) -> None:
        calls: list[tuple[Any, str]] = []

        def default(target: Any, path: str) -> str:
            calls.append((dict(target), path))
            return f"<{path}>"

        result = _evaluate(
            {"name": "firstName", "contact": {"city": "address.city"}},
            {"firstName": "John"},
            undefined_values={"strip": True, "default": default},
        )
        assert result.target == {"name": "John", "contact": {"city": "<contact.city>"}}
        assert calls == [({"name": "John"}, "contact.city")]

    def test_default_callback_missing_falls_through_to_strip(self) -> None:
        result = _evaluate(
            {"name": "firstName"},
            {},
            undefined_values={"strip": True, "default": lambda target, path: MISSING},
        )
        assert result.target == {}

    def test_existing_value_beats_default_callback(self) -> None:
        result = _evaluate(
            {"kind": "type"},
            {},
            {"kind": "preset"},
            undefined_values={"default": lambda target, path: "fallback"},
        )
        assert result.target == {"kind": "preset"}


class TestValidationErrors:
    def test_errors_accumulate(self) -> None:
        result = _evaluate(
            {
                "name": {"path": "name", "validation": Validation.string()},
                "age": {"path": "age", "validation": Validation.number()},
                "city": {"path": "address.city", "validation": Validation.string().max(10)},
            },
            {"name": 12, "age": "old", "address": {"city": "Paris"}},
        )
        assert result.has_errors
        assert [e.target_property for e in result.errors] == ["name", "age"]
        assert all(isinstance(e, PropertyValidationError) for e in result.errors)
        assert result.target["city"] == "Paris"

    def test_function_validator_result(self) -> None:
        def positive(value: Any) -> ValidationResult:
            if value > 0:
                return ValidationResult(value=value)
            return ValidationResult(value=value, error=ValidatorError(value, "value to be positive"))

        result = _evaluate(
            {
                "a": {"path": "a", "validation": positive},
                "b": {"path": "b", "validation": positive},
            },
            {"a": 2, "b": -1},
        )
        assert result.target == {"a": 2, "b": -1}
        assert [(e.target_property, e.expect) for e in result.errors] == [
            ("b", "value to be positive")
        ]

    def test_function_validator_mapping(self) -> None:
        def trimmed(value: Any) -> dict[str, Any]:
            if not isinstance(value, str):
                return {"value": value, "error": "value to be a string"}
            return {"value": value.strip()}

        result = _evaluate(
            {
                "name": {"path": "name", "validation": trimmed},
                "code": {"path": "code", "validation": trimmed},
            },
            {"name": "  Ada ", "code": 7},
        )
        assert result.target == {"name": "Ada", "code": 7}
        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.target_property == "code"
        assert error.value == 7
        assert error.expect == "value to be a string"

    def test_throw_raises_with_all_messages(self) -> None:
        with pytest.raises(ValidationFailedError) as exc_info:
            _evaluate(
                {
                    "name": {"path": "name", "validation": Validation.string()},
                    "age": {"path": "age", "validation": Validation.number()},
                },
                {"name": 12, "age": "old"},
                validation={"throw": True},
            )

        err = exc_info.value
        assert len(err.errors) == 2
        assert err.messages[0].startswith("Invalid value 12 supplied at property name.")
        assert str(err) == "\n".join(err.messages)

    def test_throw_uses_formatter(self) -> None:
        with pytest.raises(ValidationFailedError, match="^bad name$"):
            _evaluate(
                {"name": {"path": "name", "validation": Validation.string()}},
                {"name": 12},
                validation={"throw": True, "formatter": lambda e: f"bad {e.target_property}"},
            )

    def test_throw_without_errors_returns(self) -> None:
        result = _evaluate(
            {"name": {"path": "name", "validation": Validation.string()}},
            {"name": "John"},
            validation={"throw": True},
        )
        assert result.target == {"name": "John"}
