"""
Java code generation backend.

Generates plain Java classes. Array elements use boxed types since
generics cannot hold primitives.
"""

from __future__ import annotations

from ..schema_ast.nodes import PrimitiveKind
from .base import CodeBackend, Feature


class JavaBackend(CodeBackend):
    """Java code generation backend."""

    BACKEND_ID = "java"
    TEMPLATE_LANG = "java"
    FILE_EXTENSION = "java"

    TYPE_MAP = {
        PrimitiveKind.STRING: "String",
        PrimitiveKind.INTEGER: "int",
        PrimitiveKind.NUMBER: "double",
        PrimitiveKind.DECIMAL: "double",
        PrimitiveKind.BOOLEAN: "boolean",
    }

    ELEMENT_TYPE_MAP = {
        PrimitiveKind.INTEGER: "Integer",
        PrimitiveKind.NUMBER: "Double",
        PrimitiveKind.DECIMAL: "Double",
        PrimitiveKind.BOOLEAN: "Boolean",
    }

    ARRAY_TEMPLATE = "List<{}>"

    PREAMBLE_BY_FEATURE = {
        Feature.ARRAY: ["import java.util.List;"],
    }

    SUPPORTS_VISIBILITY = True
    TYPE_MODIFIER = "public "
    FIELD_MODIFIER = "public "

    RESERVED_WORDS = frozenset(
        {
            "abstract", "assert", "boolean", "break", "byte", "case", "catch",
            "char", "class", "const", "continue", "default", "do", "double",
            "else", "enum", "extends", "final", "finally", "float", "for", "goto",
            "if", "implements", "import", "instanceof", "int", "interface", "long",
            "native", "new", "package", "private", "protected", "public", "return",
            "short", "static", "strictfp", "super", "switch", "synchronized",
            "this", "throw", "throws", "transient", "try", "void", "volatile",
            "while",
        }
    )
