"""
Example 02: Class Targets

This example demonstrates mapping to dataclasses and Pydantic models, with
automapping of the class fields and constructor defaults.
"""

from dataclasses import dataclass, field

from pydantic import BaseModel

from morphkit import create_schema, morph


@dataclass
class User:
    """User model using dataclass"""
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    type: str = "User"
    groups: list[str] = field(default_factory=list)


class Account(BaseModel):
    """Account model using Pydantic"""
    id: int
    owner: str
    active: bool = True


def main():
    rows = [
        {"first_name": "Alice", "last_name": "Smith", "phones": ["555-0100"]},
        {"first_name": "Bob", "phones": []},
    ]

    print("=== Class Targets ===\n")

    # first_name / last_name are automapped, phone is explicit,
    # type keeps its constructor default.
    users = morph({"phone": "phones[0]"}, rows, User)
    print("1. Dataclass Mapping:")
    for user in users:
        print(f"   {user}")
    print()

    print("2. Pydantic Model Mapping:")
    schema = create_schema({"owner": "user.name"}, {"automapping": True})
    accounts = morph(schema, None, Account)
    print(f"   {accounts({'id': 7, 'user': {'name': 'Alice'}})!r}")


if __name__ == "__main__":
    main()
