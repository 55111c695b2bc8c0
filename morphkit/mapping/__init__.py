"""Mapping layer - compile schemas and transform data with them."""

from __future__ import annotations

from morphkit.mapping.builder import SchemaBuilder, schema
from morphkit.mapping.decorator import map_result, to_class_object, to_plain_object
from morphkit.mapping.evaluator import MappingResult, evaluate
from morphkit.mapping.mapper import SchemaMapper, morph
from morphkit.mapping.paths import MISSING, aggregate_paths, get_path, set_path
from morphkit.mapping.protocol import Mapper
from morphkit.mapping.schema import Schema, Selector, create_schema
from morphkit.mapping.tree import SchemaNode, SchemaTree, parse_schema

__all__ = [
    "SchemaMapper",
    "Mapper",
    "morph",
    "MappingResult",
    "evaluate",
    "SchemaBuilder",
    "schema",
    "Schema",
    "Selector",
    "create_schema",
    "SchemaTree",
    "SchemaNode",
    "parse_schema",
    "MISSING",
    "get_path",
    "set_path",
    "aggregate_paths",
    "map_result",
    "to_plain_object",
    "to_class_object",
]
