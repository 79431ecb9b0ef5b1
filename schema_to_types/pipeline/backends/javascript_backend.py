"""
JavaScript code generation backend.

Generates ES classes whose constructor initializes every field to a
default value matching its kind.
"""

from __future__ import annotations

from ..schema_ast.nodes import PrimitiveKind
from .base import CodeBackend


class JavaScriptBackend(CodeBackend):
    """JavaScript code generation backend."""

    BACKEND_ID = "js"
    TEMPLATE_LANG = "js"
    FILE_EXTENSION = "js"

    # Type names only appear in the per-field comment
    TYPE_MAP = {
        PrimitiveKind.STRING: "string",
        PrimitiveKind.INTEGER: "number",
        PrimitiveKind.NUMBER: "number",
        PrimitiveKind.DECIMAL: "number",
        PrimitiveKind.BOOLEAN: "boolean",
    }

    ARRAY_TEMPLATE = "{}[]"

    DEFAULT_VALUES = {
        PrimitiveKind.STRING: "''",
        PrimitiveKind.INTEGER: "0",
        PrimitiveKind.NUMBER: "0",
        PrimitiveKind.DECIMAL: "0",
        PrimitiveKind.BOOLEAN: "false",
    }

    SUPPORTS_VISIBILITY = True
    TYPE_MODIFIER = "export "

    def object_default(self, type_name: str) -> str:
        return f"new {type_name}()"

    def array_default(self) -> str:
        return "[]"
