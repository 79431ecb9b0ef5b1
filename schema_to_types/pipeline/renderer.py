"""
Renderer producing the text of a generated file.

Phase 3 of the pipeline: map every record through the backend, then
render the preamble (which depends on the size constants collected while
mapping) followed by one declaration per record.
"""

from __future__ import annotations

import logging
from pathlib import Path

import jinja2

from .analyzer.ir_nodes import TypeRecord
from .backends.base import CodeBackend, Feature
from .context import CompileContext

logger = logging.getLogger(__name__)

TEMPLATE_ROOT = Path(__file__).parent.parent / "templates"


class Renderer:
    """Renders type records with the templates of one backend."""

    def __init__(self, backend: CodeBackend):
        """
        Initialize the renderer.

        Args:
            backend: The backend whose templates and type mapping are used
        """
        self.backend = backend
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = TEMPLATE_ROOT / self.backend.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            undefined=jinja2.StrictUndefined,
        )

        extension = self.backend.FILE_EXTENSION
        self.prefix_template = self.jinja_env.get_template(f"prefix.{extension}.jinja2")
        self.type_template = self.jinja_env.get_template(f"type.{extension}.jinja2")

    def render(self, records: list[TypeRecord], context: CompileContext, features: set[Feature]) -> str:
        """
        Render a complete file.

        Args:
            records: Type records in emission order
            context: Current compilation context
            features: Features detected by the backend's probe

        Returns:
            The generated source text, ending with a single newline

        Raises:
            NameCollisionError: If two types or two fields of a type declare the same name
            UnsupportedKindError: If a field cannot be mapped by the backend
        """
        self.backend.check_declared_names(records)

        # All records are mapped before the preamble so the size constants are known
        type_contexts = [self.backend.prepare_type_context(record, context) for record in records]

        prefix_ctx = self.backend.prepare_prefix_context(records, context, features)
        blocks = [self.prefix_template.render(prefix_ctx).strip("\n")]
        blocks.extend(self.type_template.render(type_ctx).strip("\n") for type_ctx in type_contexts)

        logger.debug("Rendered %d declarations with the %s backend", len(type_contexts), self.backend.BACKEND_ID)
        return self.backend.BLOCK_SEPARATOR.join(block for block in blocks if block) + "\n"
