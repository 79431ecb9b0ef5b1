"""
Schema analyzer that turns a schema tree into ordered type records.

Phase 2 of the pipeline: walk the tree depth-first, name every nested
object, deduplicate repeated definitions and emit records children-first
so that every referenced type is declared before the type that uses it.
"""

from __future__ import annotations

import logging

from ..errors import NameCollisionError
from ..schema_ast.nodes import SchemaNode, object_element
from .ir_nodes import FieldRecord, TypeRecord
from .name_resolver import NameRegistry, canonical_name, fingerprint, nested_title, node_fields

logger = logging.getLogger(__name__)


class SchemaAnalyzer:
    """Collects type records from a schema tree in dependency-first order."""

    def __init__(self, registry: NameRegistry | None = None):
        """
        Initialize the analyzer.

        Args:
            registry: Name registry of the current compilation (a fresh one if omitted)
        """
        self.registry = registry if registry is not None else NameRegistry()
        self._records: list[TypeRecord] = []
        self._in_progress: set[str] = set()
        self._checked: set[tuple[int, str]] = set()

    def collect_type_records(self, root: SchemaNode) -> list[TypeRecord]:
        """
        Collect the type records of a schema tree.

        Args:
            root: Root node of the schema

        Returns:
            Records in emission order: nested types before the types referencing them

        Raises:
            NamingError: If a node has no usable name
            NameCollisionError: If two shapes claim the same name, or a type contains itself
        """
        self._records = []
        self._in_progress = set()
        self._checked = set()

        self._visit(root, root.title, "")

        logger.debug("Collected %d type records: %s", len(self._records), ", ".join(r.identifier for r in self._records))
        return list(self._records)

    def _visit(self, node: SchemaNode, title: str | None, parent_path: str, field_name: str = "") -> str:
        """
        Visit a node, appending its record (and its children's) when first seen.

        Args:
            node: The node to visit
            title: Title to derive the identifier from
            parent_path: Path of the owning node ("" for the root)
            field_name: Name of the field holding this node

        Returns:
            The canonical identifier of the node
        """
        location = f"{parent_path}.{field_name}" if parent_path else field_name
        identifier = canonical_name(title, location or "<root>")
        path = location or identifier
        shape = fingerprint(node, path)

        if identifier in self._in_progress:
            raise NameCollisionError(
                identifier,
                self.registry.get(identifier) or (),
                shape,
                path=path,
                reason=f"Type '{identifier}' contains itself",
            )

        first_sighting = self.registry.register(identifier, shape, path)

        key = (id(node), identifier)
        if not first_sighting and key in self._checked:
            return identifier

        self._in_progress.add(identifier)
        fields = []
        for name, spec in sorted(node_fields(node).items()):
            nested = object_element(spec)
            object_name = None
            if nested is not None:
                object_name = self._visit(nested, nested_title(nested, name), path, name)
            fields.append(FieldRecord(name=name, spec=spec, object_name=object_name))
        self._in_progress.discard(identifier)
        self._checked.add(key)

        if first_sighting:
            self._records.append(TypeRecord(identifier=identifier, fields=tuple(fields), node=node))

        return identifier


def collect_type_records(root: SchemaNode, registry: NameRegistry | None = None) -> list[TypeRecord]:
    """Collect the type records of a schema tree (see SchemaAnalyzer)."""
    return SchemaAnalyzer(registry).collect_type_records(root)
