#!/usr/bin/env python3
"""
Schema Types - OpenAPI type model for Keycloak definitions

Closed set of schema types a documented property can resolve to.
Each variant dumps to the OpenAPI 3.0 Schema Object shape, e.g.
StringType(enumeration=["A"]) -> {"type": "string", "enum": ["A"]}.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# =========================
#  Type variants
# =========================
class _SchemaTypeBase(BaseModel):
    """Immutable OpenAPI schema node."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_openapi(self) -> Dict[str, Any]:
        """Dump as an OpenAPI Schema Object (absent fields omitted)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class StringType(_SchemaTypeBase):
    type: Literal["string"] = "string"
    enumeration: Optional[List[str]] = Field(default=None, alias="enum")


class IntegerType(_SchemaTypeBase):
    type: Literal["integer"] = "integer"
    format: Optional[Literal["int32", "int64"]] = None


class NumberType(_SchemaTypeBase):
    type: Literal["number"] = "number"
    format: Optional[Literal["float"]] = None


class BooleanType(_SchemaTypeBase):
    type: Literal["boolean"] = "boolean"


class ArrayType(_SchemaTypeBase):
    type: Literal["array"] = "array"
    items: SchemaType


class ObjectType(_SchemaTypeBase):
    """Object schema; unstructured when `properties` is None."""
    type: Literal["object"] = "object"
    properties: Optional[Dict[str, SchemaType]] = None


SchemaType = Annotated[
    Union[StringType, IntegerType, NumberType, BooleanType, ArrayType, ObjectType],
    Field(discriminator="type"),
]

ArrayType.model_rebuild()
ObjectType.model_rebuild()

# Schema name -> object schema, in document order
SchemaMap = Dict[str, ObjectType]
