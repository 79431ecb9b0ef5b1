"""
Name resolver for canonical type names and deduplication.

Derives the single identifier used to declare a type from a (possibly
multi-word) title and keeps a per-compilation registry that detects two
different shapes claiming the same identifier.
"""

from __future__ import annotations

import logging

from ..errors import NameCollisionError, NamingError
from ..schema_ast.nodes import ArrayOf, FieldSpec, SchemaNode, describe_kind, object_element

logger = logging.getLogger(__name__)

# Ordered (field name, kind descriptor) pairs
Fingerprint = tuple[tuple[str, str], ...]


def canonical_name(title: str | None, path: str = "") -> str:
    """Return the canonical identifier for a title.

    The identifier is the first whitespace-delimited word of the title, so
    "Customer Record v2" becomes "Customer".

    Args:
        title: Human readable title
        path: Schema path, for error messages

    Returns:
        The identifier

    Raises:
        NamingError: If the title is missing, empty or whitespace only
    """
    words = (title or "").split()
    if not words:
        raise NamingError("Schema node has no usable title", identifier=title, path=path)
    return words[0]


def nested_title(node: SchemaNode, field_name: str) -> str:
    """Title of a nested node, falling back to the owning field name."""
    return node.title or field_name


def node_fields(node: SchemaNode) -> dict[str, FieldSpec]:
    """Fields of a node; an array root is a single synthetic ``items`` field."""
    if node.fields is not None:
        return dict(node.fields)
    if node.item_spec is not None:
        return {"items": ArrayOf(node.item_spec)}
    return {}


def fingerprint(node: SchemaNode, path: str = "") -> Fingerprint:
    """
    Build the field-shape fingerprint of a node.

    Args:
        node: The schema node
        path: Schema path of the node, for error messages

    Returns:
        Tuple of (field name, kind descriptor) pairs in field-name order
    """
    pairs = []
    for name, spec in sorted(node_fields(node).items()):
        nested = object_element(spec)
        object_name = canonical_name(nested_title(nested, name), f"{path}.{name}") if nested is not None else None
        pairs.append((name, describe_kind(spec, object_name)))
    return tuple(pairs)


class NameRegistry:
    """Per-compilation registry of declared type names."""

    def __init__(self):
        self._fingerprints: dict[str, Fingerprint] = {}
        self._paths: dict[str, str] = {}

    def register(self, identifier: str, shape: Fingerprint, path: str = "") -> bool:
        """
        Record a sighting of a named type.

        Args:
            identifier: Canonical identifier
            shape: Fingerprint of the node
            path: Schema path of the node

        Returns:
            True on the first sighting, False when an identical shape was already registered

        Raises:
            NameCollisionError: If the identifier is registered with a different shape
        """
        existing = self._fingerprints.get(identifier)
        if existing is None:
            self._fingerprints[identifier] = shape
            self._paths[identifier] = path
            return True

        if existing != shape:
            raise NameCollisionError(identifier, existing, shape, path=path)

        logger.debug("Type %s at %s already declared at %s", identifier, path, self._paths[identifier])
        return False

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._fingerprints

    def __len__(self) -> int:
        return len(self._fingerprints)

    def get(self, identifier: str) -> Fingerprint | None:
        return self._fingerprints.get(identifier)
