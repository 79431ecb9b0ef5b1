"""
Compiler entry point.

Orchestrates the pipeline for one schema and one backend:

1. Phase 1 (Parser): Turn a JSON document into a schema tree (if needed)
2. Phase 2 (Analyzer): Name, deduplicate and order the nested types
3. Phase 3 (Renderer): Map fields through the backend and render the file

Each compilation gets its own CompileContext, so compiling the same schema
for several backends never shares registries or size constants.
"""

from __future__ import annotations

import logging
from typing import Any

from .analyzer import SchemaAnalyzer
from .backends import get_backend
from .config import CompileOptions
from .context import CompileContext
from .renderer import Renderer
from .schema_ast import SchemaNode, SchemaParser

logger = logging.getLogger(__name__)


class SchemaCompiler:
    """Compiles one schema with one backend."""

    def __init__(
        self,
        schema: SchemaNode | dict[str, Any],
        backend_id: str,
        options: CompileOptions | None = None,
        name: str | None = None,
    ):
        """
        Initialize the compiler.

        Args:
            schema: Schema tree, or a JSON schema document
            backend_id: Backend id or alias (e.g. "rust", "golang")
            options: Compilation options
            name: Root type name used when a schema document has no title

        Raises:
            UnknownBackendError: If the backend id is not registered
        """
        self.options = options or CompileOptions()
        self.backend = get_backend(backend_id, self.options)
        self.schema = schema
        self.name = name

    def generate(self) -> str:
        """
        Generate the source text.

        Returns:
            The generated file content

        Raises:
            SchemaReadError: If a schema document is malformed
            NamingError: If a type has no usable name
            NameCollisionError: If two shapes claim the same type name
            UnsupportedKindError: If the backend cannot map a field
        """
        root = self.schema
        if not isinstance(root, SchemaNode):
            root = SchemaParser().parse(root, root_name=self.name)

        context = CompileContext(options=self.options)
        logger.info("Compiling %s with the %s backend", root.title or self.name, self.backend.BACKEND_ID)

        features = self.backend.feature_probe(root)
        logger.debug("Detected features: %s", ", ".join(sorted(f.value for f in features)) or "none")

        records = SchemaAnalyzer(context.registry).collect_type_records(root)
        return Renderer(self.backend).render(records, context, features)


def compile_schema(
    schema: SchemaNode | dict[str, Any],
    backend_id: str,
    options: CompileOptions | None = None,
    name: str | None = None,
) -> str:
    """
    Compile a schema to type declarations for one backend.

    Args:
        schema: Schema tree, or a JSON schema document
        backend_id: Backend id or alias
        options: Compilation options (public visibility off by default)
        name: Root type name used when a schema document has no title

    Returns:
        The generated file content
    """
    return SchemaCompiler(schema, backend_id, options, name).generate()
