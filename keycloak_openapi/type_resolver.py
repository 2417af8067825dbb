#!/usr/bin/env python3
"""
Type resolution for Keycloak REST API documentation.

Maps the free-text type notation of a definitions table cell onto the
OpenAPI type model:
- Enums: enum (POSITIVE, NEGATIVE)
- Formatted numbers: integer(int32), integer(int64), number(float)
- Fixed tokens: boolean, < string > array, Map, Object
- Anything else (schema references, arrays of other items, ...) becomes a
  plain string
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from .schema_types import (
    ArrayType,
    BooleanType,
    IntegerType,
    NumberType,
    ObjectType,
    SchemaType,
    StringType,
)

logger = logging.getLogger(__name__)

ENUM_START = "enum ("
ENUM_END = ")"
ENUM_SEPARATOR = ", "


def parse_enum_values(raw_type: str) -> Optional[List[str]]:
    """
    Extract the literal values of an `enum (v1, v2, ...)` type.

    Values are split on ", " and kept verbatim.

    Returns:
        List of values, or None if the text is not an enum
    """
    if not (raw_type.startswith(ENUM_START) and raw_type.endswith(ENUM_END)):
        return None
    return raw_type[len(ENUM_START):len(raw_type) - len(ENUM_END)].split(ENUM_SEPARATOR)


class TypeResolver:
    """
    Ordered rule table from raw type text to schema type.
    First matching rule wins; unmatched text falls back to a plain string.
    """

    # Exact raw text -> type constructor
    KNOWN_TYPES: Dict[str, Callable[[], SchemaType]] = {
        "integer(int32)": lambda: IntegerType(format="int32"),
        "integer(int64)": lambda: IntegerType(format="int64"),
        "number(float)": lambda: NumberType(format="float"),
        "boolean": BooleanType,
        "< string > array": lambda: ArrayType(items=StringType()),
        "Map": ObjectType,
        "Object": ObjectType,
    }

    # (predicate, constructor) pairs, evaluated in order.
    # Enum detection must run before the table lookup.
    RULES: List[Tuple[Callable[[str], bool], Callable[[str], SchemaType]]] = [
        (
            lambda raw: parse_enum_values(raw) is not None,
            lambda raw: StringType(enumeration=parse_enum_values(raw)),
        ),
        (
            lambda raw: raw in TypeResolver.KNOWN_TYPES,
            lambda raw: TypeResolver.KNOWN_TYPES[raw](),
        ),
    ]

    @classmethod
    def resolve(cls, raw_type: str) -> SchemaType:
        """
        Resolve raw type text to a schema type. Never fails.

        Args:
            raw_type: Text content of the type cell

        Returns:
            Resolved schema type
        """
        for matches, build in cls.RULES:
            if matches(raw_type):
                return build(raw_type)

        logger.debug(f"Unrecognized type {raw_type!r}, using string")
        return StringType()


def resolve_type(raw_type: str) -> SchemaType:
    """Convenience function for TypeResolver.resolve."""
    return TypeResolver.resolve(raw_type)


def build_schema(section) -> ObjectType:
    """
    Fold all property rows of a section into one object schema.

    Row order is preserved; a repeated property name keeps the last value.
    """
    properties: Dict[str, SchemaType] = {}
    for row in section.rows:
        properties[row.property_name] = resolve_type(row.raw_type)

    logger.debug(f"Built schema {section.name} with {len(properties)} properties")
    return ObjectType(properties=properties)
