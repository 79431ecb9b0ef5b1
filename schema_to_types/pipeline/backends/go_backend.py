"""
Go code generation backend.

Go has no visibility keywords: a name is exported when it starts with an
upper-case letter. With public visibility, type and field names are
capitalized and fields keep their JSON name through a struct tag.
"""

from __future__ import annotations

from typing import Any

from ..analyzer.ir_nodes import FieldRecord
from ..context import CompileContext
from ..schema_ast.nodes import PrimitiveKind
from .base import CodeBackend


def export_name(name: str) -> str:
    """Capitalize the first letter of a name."""
    return name[:1].upper() + name[1:]


class GoBackend(CodeBackend):
    """Go code generation backend."""

    BACKEND_ID = "go"
    TEMPLATE_LANG = "go"
    FILE_EXTENSION = "go"

    TYPE_MAP = {
        PrimitiveKind.STRING: "string",
        PrimitiveKind.INTEGER: "int64",
        PrimitiveKind.NUMBER: "float64",
        PrimitiveKind.DECIMAL: "float32",
        PrimitiveKind.BOOLEAN: "bool",
    }

    ARRAY_TEMPLATE = "[]{}"

    PREAMBLE = ["package main"]

    SUPPORTS_VISIBILITY = True

    RESERVED_WORDS = frozenset(
        {
            "break", "case", "chan", "const", "continue", "default", "defer",
            "else", "fallthrough", "for", "func", "go", "goto", "if", "import",
            "interface", "map", "package", "range", "return", "select", "struct",
            "switch", "type", "var",
        }
    )

    def declared_name(self, identifier: str) -> str:
        if self.public:
            return export_name(identifier)
        return super().declared_name(identifier)

    def field_name(self, name: str) -> str:
        if self.public:
            return export_name(name)
        return super().field_name(name)

    def prepare_field_context(self, field: FieldRecord, owner: str, context: CompileContext) -> dict[str, Any]:
        field_ctx = super().prepare_field_context(field, owner, context)
        if self.public:
            field_ctx["tag"] = f' `json:"{field.name}"`'
        return field_ctx
