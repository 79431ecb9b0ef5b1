"""
C# code generation backend.

Generates C# classes with auto-properties.
"""

from __future__ import annotations

from ..schema_ast.nodes import PrimitiveKind
from .base import CodeBackend, Feature

# C# reserved keywords that need escaping
CS_RESERVED_KEYWORDS = frozenset(
    {
        "abstract", "as", "base", "bool", "break", "byte", "case", "catch",
        "char", "checked", "class", "const", "continue", "decimal", "default",
        "delegate", "do", "double", "else", "enum", "event", "explicit",
        "extern", "false", "finally", "fixed", "float", "for", "foreach",
        "goto", "if", "implicit", "in", "int", "interface", "internal", "is",
        "lock", "long", "namespace", "new", "null", "object", "operator", "out",
        "override", "params", "private", "protected", "public", "readonly",
        "ref", "return", "sbyte", "sealed", "short", "sizeof", "stackalloc",
        "static", "string", "struct", "switch", "this", "throw", "true", "try",
        "typeof", "uint", "ulong", "unchecked", "unsafe", "ushort", "using",
        "virtual", "void", "volatile", "while",
    }
)


class CSharpBackend(CodeBackend):
    """C# code generation backend."""

    BACKEND_ID = "cs"
    TEMPLATE_LANG = "cs"
    FILE_EXTENSION = "cs"

    TYPE_MAP = {
        PrimitiveKind.STRING: "string",
        PrimitiveKind.INTEGER: "int",
        PrimitiveKind.NUMBER: "double",
        PrimitiveKind.DECIMAL: "float",
        PrimitiveKind.BOOLEAN: "bool",
    }

    ARRAY_TEMPLATE = "List<{}>"

    PREAMBLE = ["using System;"]
    PREAMBLE_BY_FEATURE = {
        Feature.ARRAY: ["using System.Collections.Generic;"],
    }

    SUPPORTS_VISIBILITY = True
    TYPE_MODIFIER = "public "
    FIELD_MODIFIER = "public "

    RESERVED_WORDS = CS_RESERVED_KEYWORDS

    def escape_reserved(self, name: str) -> str:
        """Escape a C# reserved keyword with @ prefix."""
        return f"@{name}"
