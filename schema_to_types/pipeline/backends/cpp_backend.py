"""
C++ code generation backend.

Generates C++ structs using standard library containers.
"""

from __future__ import annotations

from ..schema_ast.nodes import PrimitiveKind
from .base import CodeBackend, Feature


class CppBackend(CodeBackend):
    """C++ code generation backend."""

    BACKEND_ID = "cpp"
    TEMPLATE_LANG = "cpp"
    FILE_EXTENSION = "hpp"

    TYPE_MAP = {
        PrimitiveKind.STRING: "std::string",
        PrimitiveKind.INTEGER: "int",
        PrimitiveKind.NUMBER: "double",
        PrimitiveKind.DECIMAL: "float",
        PrimitiveKind.BOOLEAN: "bool",
    }

    ARRAY_TEMPLATE = "std::vector<{}>"

    PREAMBLE_BY_FEATURE = {
        Feature.STRING: ["#include <string>"],
        Feature.ARRAY: ["#include <vector>"],
    }

    # Emitted as a "public:" section at the top of each struct
    SUPPORTS_VISIBILITY = True

    RESERVED_WORDS = frozenset(
        {
            "auto", "bool", "break", "case", "catch", "char", "class", "const",
            "continue", "default", "delete", "do", "double", "else", "enum",
            "explicit", "extern", "false", "float", "for", "friend", "goto", "if",
            "inline", "int", "long", "namespace", "new", "operator", "private",
            "protected", "public", "return", "short", "signed", "sizeof", "static",
            "struct", "switch", "template", "this", "throw", "true", "try",
            "typedef", "typename", "union", "unsigned", "using", "virtual", "void",
            "volatile", "while",
        }
    )
