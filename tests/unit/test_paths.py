"""Unit tests for property path accessors."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from morphkit.mapping.paths import (
    MISSING,
    aggregate_paths,
    get_path,
    normalize_path,
    set_path,
)


@dataclass
class Address:
    city: str
    state: str | None = None


@dataclass
class Person:
    name: str
    address: Address | None = None


class TestNormalizePath:
    def test_dot_path(self) -> None:
        assert normalize_path("a.b.c") == ["a", "b", "c"]

    def test_bracket_index(self) -> None:
        assert normalize_path("a[0].b") == ["a", "0", "b"]

    def test_leading_dot_stripped(self) -> None:
        assert normalize_path(".a") == ["a"]

    def test_negative_index_is_not_an_index(self) -> None:
        assert normalize_path("a[-1].b") == ["a[-1]", "b"]


class TestGetPath:
    def test_nested_mapping(self) -> None:
        assert get_path({"a": {"b": 1}}, "a.b") == 1

    def test_list_index(self) -> None:
        data = {"phones": [{"number": "1"}, {"number": "2"}]}
        assert get_path(data, "phones[1].number") == "2"
        assert get_path(data, "phones.0.number") == "1"

    def test_missing_key_returns_missing(self) -> None:
        assert get_path({"a": {}}, "a.b") is MISSING

    def test_missing_intermediate_returns_missing(self) -> None:
        assert get_path({}, "a.b.c") is MISSING

    def test_none_intermediate_returns_missing(self) -> None:
        assert get_path({"a": None}, "a.b") is MISSING

    def test_scalar_intermediate_returns_missing(self) -> None:
        assert get_path({"a": "text"}, "a.b") is MISSING

    def test_index_out_of_range(self) -> None:
        assert get_path({"a": [1]}, "a[3]") is MISSING

    def test_negative_index_reads_missing(self) -> None:
        assert get_path({"a": [1, 2]}, "a[-1]") is MISSING

    def test_strings_are_not_indexed(self) -> None:
        assert get_path("abc", "0") is MISSING
        assert get_path({"name": "abc"}, "name[0]") is MISSING

    def test_explicit_none_is_returned(self) -> None:
        assert get_path({"a": None}, "a") is None

    def test_default(self) -> None:
        assert get_path({}, "a", None) is None

    def test_object_attributes(self) -> None:
        person = Person("Ada", Address("London"))
        assert get_path(person, "address.city") == "London"
        assert get_path(person, "address.zip") is MISSING

    def test_missing_is_falsy(self) -> None:
        assert not MISSING
        assert repr(MISSING) == "<MISSING>"


class TestSetPath:
    def test_creates_intermediate_dicts(self) -> None:
        assert set_path({}, "a.b.c", 1) == {"a": {"b": {"c": 1}}}

    def test_creates_list_for_numeric_segment(self) -> None:
        assert set_path({}, "a[1].b", "x") == {"a": [None, {"b": "x"}]}

    def test_preserves_siblings(self) -> None:
        data = {"a": {"c": 2}}
        set_path(data, "a.b", 1)
        assert data == {"a": {"b": 1, "c": 2}}

    def test_overwrites_final_segment(self) -> None:
        assert set_path({"a": 1}, "a", 2) == {"a": 2}

    def test_replaces_scalar_intermediate(self) -> None:
        assert set_path({"a": "text"}, "a.b", 1) == {"a": {"b": 1}}

    def test_none_root_creates_container(self) -> None:
        assert set_path(None, "a", 1) == {"a": 1}

    def test_returns_same_root(self) -> None:
        data: dict[str, object] = {}
        assert set_path(data, "a", 1) is data

    def test_sets_attributes_on_objects(self) -> None:
        person = Person("Ada", Address("London"))
        set_path(person, "address.state", "UK")
        assert person.address is not None
        assert person.address.state == "UK"
        assert person.address.city == "London"

    @pytest.mark.parametrize("path", ["a", "a.b", "a[0]", "a.b[2].c"])
    def test_round_trip(self, path: str) -> None:
        value = object()
        assert get_path(set_path({}, path, value), path) is value


class TestAggregatePaths:
    def test_preserves_shape(self) -> None:
        source = {"firstName": "John", "address": {"city": "NY", "state": "NY"}}
        assert aggregate_paths(["firstName", "address.city"], source) == {
            "firstName": "John",
            "address": {"city": "NY"},
        }

    def test_missing_paths_are_none(self) -> None:
        assert aggregate_paths(["a", "b.c"], {"a": 1}) == {"a": 1, "b": {"c": None}}
