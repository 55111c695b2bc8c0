"""
Example 04: Validation

This example demonstrates validators, error accumulation and reporting.
"""

from morphkit import SchemaMapper, ValidationFailedError, Validation, create_schema, reporter


def main():
    schema = create_schema(
        {
            "name": {"path": "name", "validation": Validation.string().min(2).max(20)},
            "age": {"path": "age", "validation": Validation.number().min(0)},
            "admin": {"path": "admin", "validation": Validation.boolean()},
        }
    )
    mapper = SchemaMapper(schema)

    print("=== Validation ===\n")

    result = mapper.map_with_errors({"name": "Al", "age": "42", "admin": "true"})
    print(f"1. Valid input: {result.target}")
    print(f"   Errors: {reporter.report(result)}\n")

    result = mapper.map_with_errors({"name": "A", "age": "old"})
    print(f"2. Invalid input: {result.target}")
    for message in reporter.report(result) or []:
        print(f"   - {message}")
    print()

    strict = SchemaMapper(create_schema(dict(schema), {"validation": {"throw": True}}))
    try:
        strict({"name": 42})
    except ValidationFailedError as e:
        print(f"3. Raised:\n{e}")


if __name__ == "__main__":
    main()
