"""Shared test fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from morphkit.core.registry import MapperRegistry


@dataclass
class User:
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    type: str = "User"
    groups: list[str] = field(default_factory=list)

    def add_to_group(self, group: str) -> None:
        self.groups.append(group)


@pytest.fixture
def people() -> list[dict[str, Any]]:
    """Source records shaped like an API payload."""
    return [
        {
            "firstName": "John",
            "lastName": "Smith",
            "age": 25,
            "address": {
                "streetAddress": "21 2nd Street",
                "city": "New York",
                "state": "NY",
                "postalCode": "10021",
            },
            "phoneNumber": [
                {"type": "home", "number": "212 555-1234"},
                {"type": "fax", "number": "646 555-4567"},
            ],
        }
    ]


@pytest.fixture
def registry() -> MapperRegistry:
    """Fresh, empty mapper registry."""
    return MapperRegistry()


@pytest.fixture
def user_cls() -> type[User]:
    """Dataclass target with constructor defaults."""
    return User
