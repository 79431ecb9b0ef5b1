"""
Schema AST module.

Contains the schema tree node definitions and the JSON document reader.
"""

from __future__ import annotations

from .nodes import (
    ArrayOf,
    FieldSpec,
    ObjectRef,
    Primitive,
    PrimitiveKind,
    SchemaNode,
    array_depth,
    describe_kind,
    object_element,
)
from .parser import SchemaParser, load_schema

__all__ = [
    "SchemaNode",
    "FieldSpec",
    "Primitive",
    "PrimitiveKind",
    "ObjectRef",
    "ArrayOf",
    "array_depth",
    "describe_kind",
    "object_element",
    "SchemaParser",
    "load_schema",
]
