#!/usr/bin/env python3
"""
Test script for the Keycloak type resolver (Phase 1).
Validates the mapping from documentation type text to OpenAPI types.
"""

import sys

import pytest

from keycloak_openapi.schema_types import (
    ArrayType,
    BooleanType,
    IntegerType,
    NumberType,
    ObjectType,
    StringType,
)
from keycloak_openapi.section_extractor import PropertyRow, SchemaSection
from keycloak_openapi.type_resolver import (
    TypeResolver,
    build_schema,
    parse_enum_values,
    resolve_type,
)


def test_enum_values_split_on_comma_space():
    assert resolve_type("enum (A, B, C)") == StringType(enumeration=["A", "B", "C"])


def test_enum_values_are_taken_verbatim():
    # Only ", " separates values; other spacing stays inside the literal
    assert parse_enum_values("enum (A,B, C )") == ["A,B", "C "]


def test_empty_enum_has_single_empty_value():
    assert parse_enum_values("enum ()") == [""]


def test_enum_requires_exact_shape():
    assert parse_enum_values("enum(A, B)") is None
    assert parse_enum_values("enum (A, B") is None
    assert resolve_type("Enum (A, B)") == StringType()


@pytest.mark.parametrize("raw_type, expected", [
    ("integer(int32)", IntegerType(format="int32")),
    ("integer(int64)", IntegerType(format="int64")),
    ("number(float)", NumberType(format="float")),
    ("boolean", BooleanType()),
    ("< string > array", ArrayType(items=StringType())),
    ("Map", ObjectType()),
    ("Object", ObjectType()),
])
def test_known_type_tokens(raw_type, expected):
    assert resolve_type(raw_type) == expected


@pytest.mark.parametrize("raw_type", [
    "integer",
    "number",
    "number(double)",
    "integer(int16)",
    "integer (int32)",
    " boolean",
    "string",
    "< integer > array",
    "< ResourceRepresentation > array",
    "UserRepresentation",
    "map",
    "",
])
def test_unrecognized_text_falls_back_to_string(raw_type):
    assert resolve_type(raw_type) == StringType()


def test_enum_detection_runs_before_table_lookup():
    # Shape check comes first, so an enum of table tokens is still an enum
    assert resolve_type("enum (boolean, Map)") == StringType(enumeration=["boolean", "Map"])


def test_resolution_is_idempotent():
    for raw_type in ["enum (POSITIVE, NEGATIVE)", "< string > array", "Map", "whatever"]:
        assert TypeResolver.resolve(raw_type) == TypeResolver.resolve(raw_type)


def test_resolved_types_dump_as_openapi():
    assert resolve_type("enum (POSITIVE, NEGATIVE)").to_openapi() == {
        "type": "string",
        "enum": ["POSITIVE", "NEGATIVE"],
    }
    assert resolve_type("< string > array").to_openapi() == {
        "type": "array",
        "items": {"type": "string"},
    }
    assert resolve_type("integer(int64)").to_openapi() == {"type": "integer", "format": "int64"}
    assert resolve_type("Map").to_openapi() == {"type": "object"}
    assert resolve_type("string").to_openapi() == {"type": "string"}


def test_build_schema_keeps_row_order_and_last_duplicate():
    section = SchemaSection(name="Duplicated", rows=[
        PropertyRow("b", "boolean"),
        PropertyRow("a", "integer(int32)"),
        PropertyRow("b", "Map"),
    ])

    schema = build_schema(section)

    assert list(schema.properties) == ["b", "a"]
    assert schema.properties["b"] == ObjectType()
    assert schema.properties["a"] == IntegerType(format="int32")


def test_build_schema_without_rows():
    schema = build_schema(SchemaSection(name="Empty", rows=[]))
    assert schema == ObjectType(properties={})
    assert schema.to_openapi() == {"type": "object", "properties": {}}


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
