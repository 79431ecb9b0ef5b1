"""
TypeScript code generation backend.

Generates interfaces.
"""

from __future__ import annotations

from ..schema_ast.nodes import PrimitiveKind
from .base import CodeBackend


class TypeScriptBackend(CodeBackend):
    """TypeScript code generation backend."""

    BACKEND_ID = "ts"
    TEMPLATE_LANG = "ts"
    FILE_EXTENSION = "ts"

    TYPE_MAP = {
        PrimitiveKind.STRING: "string",
        PrimitiveKind.INTEGER: "number",
        PrimitiveKind.NUMBER: "number",
        PrimitiveKind.DECIMAL: "number",
        PrimitiveKind.BOOLEAN: "boolean",
    }

    ARRAY_TEMPLATE = "{}[]"

    SUPPORTS_VISIBILITY = True
    TYPE_MODIFIER = "export "
