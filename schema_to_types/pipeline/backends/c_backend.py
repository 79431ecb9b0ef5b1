"""
C code generation backend.

Generates C structs. C has no growable container, so array fields are
declared with a fixed capacity taken from a generated size constant.
"""

from __future__ import annotations

from ..schema_ast.nodes import PrimitiveKind
from .base import CodeBackend, Feature


class CBackend(CodeBackend):
    """C code generation backend."""

    BACKEND_ID = "c"
    TEMPLATE_LANG = "c"
    FILE_EXTENSION = "h"

    TYPE_MAP = {
        PrimitiveKind.STRING: "char*",
        PrimitiveKind.INTEGER: "int",
        PrimitiveKind.NUMBER: "double",
        PrimitiveKind.DECIMAL: "float",
        PrimitiveKind.BOOLEAN: "bool",
    }

    FIXED_CAPACITY_ARRAYS = True

    PREAMBLE = ["#include <stdio.h>", "#include <stdlib.h>"]
    PREAMBLE_BY_FEATURE = {
        Feature.BOOLEAN: ["#include <stdbool.h>"],
    }

    RESERVED_WORDS = frozenset(
        {
            "auto", "break", "case", "char", "const", "continue", "default", "do",
            "double", "else", "enum", "extern", "float", "for", "goto", "if",
            "inline", "int", "long", "register", "restrict", "return", "short",
            "signed", "sizeof", "static", "struct", "switch", "typedef", "union",
            "unsigned", "void", "volatile", "while", "bool",
        }
    )
