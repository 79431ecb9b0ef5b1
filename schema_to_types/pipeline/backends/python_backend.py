"""
Python code generation backend.

Generates dataclasses serializable with dataclasses_json.
"""

from __future__ import annotations

import keyword

from ..schema_ast.nodes import PrimitiveKind
from .base import CodeBackend


class PythonBackend(CodeBackend):
    """Python code generation backend."""

    BACKEND_ID = "python"
    TEMPLATE_LANG = "python"
    FILE_EXTENSION = "py"
    COMMENT_PREFIX = "#"
    BLOCK_SEPARATOR = "\n\n\n"

    TYPE_MAP = {
        PrimitiveKind.STRING: "str",
        PrimitiveKind.INTEGER: "int",
        PrimitiveKind.NUMBER: "float",
        PrimitiveKind.DECIMAL: "float",
        PrimitiveKind.BOOLEAN: "bool",
    }

    ARRAY_TEMPLATE = "list[{}]"

    PREAMBLE = [
        "from __future__ import annotations",
        "",
        "from dataclasses import dataclass",
        "",
        "from dataclasses_json import dataclass_json",
    ]

    RESERVED_WORDS = frozenset(keyword.kwlist)
