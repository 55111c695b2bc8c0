"""Unit tests for validation error reporting."""

from __future__ import annotations

from morphkit.core.exceptions import PropertyValidationError, ValidatorError
from morphkit.mapping.evaluator import MappingResult
from morphkit.mapping.mapper import SchemaMapper
from morphkit.validation.reporter import Reporter, default_formatter, reporter
from morphkit.validation.validators import Validation

SCHEMA = {
    "name": {"path": "name", "validation": Validation.string().max(3)},
    "age": {"path": "age", "validation": Validation.number()},
}


class TestDefaultFormatter:
    def test_message(self) -> None:
        error = PropertyValidationError("age", ValidatorError("old", "value to be a <number>"))
        assert default_formatter(error) == (
            "Invalid value old supplied at property age. Expecting: value to be a <number>"
        )


class TestReporter:
    def test_two_errors(self) -> None:
        result = SchemaMapper(SCHEMA).map_with_errors({"name": "Johnny", "age": "old"})
        messages = reporter.report(result)
        assert messages == [
            "Invalid value Johnny supplied at property name. "
            "Expecting: value to be less or equal than 3",
            "Invalid value old supplied at property age. "
            "Expecting: Expected value to be a <number> but received <old>",
        ]

    def test_no_errors(self) -> None:
        result = SchemaMapper(SCHEMA).map_with_errors({"name": "Jo", "age": 4})
        assert reporter.report(result) is None

    def test_collection_results(self) -> None:
        results = SchemaMapper(SCHEMA).map_with_errors([{"name": "Jo", "age": 1}, {"name": 1, "age": 2}])
        messages = reporter.report(results)
        assert messages is not None
        assert len(messages) == 1
        assert "property name" in messages[0]

    def test_missing_value_reported_as_none(self) -> None:
        result = SchemaMapper(SCHEMA).map_with_errors({"age": 1})
        assert reporter.report(result) == [
            "Invalid value None supplied at property name. "
            "Expecting: Expected value to be a <string> but received <None>"
        ]
        assert result.target == {"name": None, "age": 1}

    def test_custom_formatter(self) -> None:
        custom = Reporter(lambda e: e.target_property.upper())
        result = MappingResult(
            target={},
            errors=[PropertyValidationError("age", ValidatorError(1, "x"))],
        )
        assert custom.report(result) == ["AGE"]

    def test_plain_error_list(self) -> None:
        errors = [PropertyValidationError("a", ValidatorError(1, "x"))]
        assert reporter.report(errors) == ["Invalid value 1 supplied at property a. Expecting: x"]

    def test_none(self) -> None:
        assert reporter.report(None) is None
