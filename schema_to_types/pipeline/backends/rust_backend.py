"""
Rust code generation backend.

Generates serde-serializable structs. Every field carries a rename
attribute so that the serialized name is the schema name even when the
Rust identifier had to be escaped.
"""

from __future__ import annotations

from ..schema_ast.nodes import PrimitiveKind
from .base import CodeBackend


class RustBackend(CodeBackend):
    """Rust code generation backend."""

    BACKEND_ID = "rust"
    TEMPLATE_LANG = "rust"
    FILE_EXTENSION = "rs"

    TYPE_MAP = {
        PrimitiveKind.STRING: "String",
        PrimitiveKind.INTEGER: "i64",
        PrimitiveKind.NUMBER: "f64",
        PrimitiveKind.DECIMAL: "f32",
        PrimitiveKind.BOOLEAN: "bool",
    }

    ARRAY_TEMPLATE = "Vec<{}>"

    PREAMBLE = ["use serde::{Serialize, Deserialize};"]

    SUPPORTS_VISIBILITY = True
    TYPE_MODIFIER = "pub "
    FIELD_MODIFIER = "pub "

    RESERVED_WORDS = frozenset(
        {
            "as", "async", "await", "break", "const", "continue", "dyn", "else",
            "enum", "extern", "false", "fn", "for", "if", "impl", "in", "let",
            "loop", "match", "mod", "move", "mut", "pub", "ref", "return",
            "static", "struct", "trait", "true", "type", "unsafe", "use", "where",
            "while", "yield",
        }
    )

    def escape_reserved(self, name: str) -> str:
        """Use a raw identifier for keywords."""
        return f"r#{name}"
