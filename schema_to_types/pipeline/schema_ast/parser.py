"""
JSON schema document reader that builds the schema tree.

Reads the small schema dialect used by the tool (``title``, ``type``,
``properties``, ``items``) into immutable SchemaNode trees. No validation
against any external schema standard is attempted.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..errors import SchemaReadError
from .nodes import ArrayOf, FieldSpec, ObjectRef, Primitive, PrimitiveKind, SchemaNode


class SchemaParser:
    """Parses a decoded JSON schema document into a SchemaNode tree."""

    # Type names that map straight onto a primitive kind
    PRIMITIVE_TYPES = {kind.value: kind for kind in PrimitiveKind}

    def parse(self, schema: dict[str, Any], root_name: str | None = None) -> SchemaNode:
        """
        Parse a schema document.

        Args:
            schema: The decoded JSON document
            root_name: Title to use when the document has none

        Returns:
            The root SchemaNode

        Raises:
            SchemaReadError: If the document does not describe an object or an array
        """
        if not isinstance(schema, dict):
            raise SchemaReadError(f"Schema must be a JSON object, got {type(schema).__name__}")

        title = schema.get("title") or root_name

        if "properties" in schema:
            return self._parse_object(schema, "#", title)

        if "items" in schema:
            item_spec = self._parse_field(schema["items"], "#/items")
            return SchemaNode(title=title, item_spec=item_spec)

        raise SchemaReadError("Schema has neither 'properties' nor 'items'")

    def _parse_object(self, schema: dict[str, Any], path: str, title: str | None) -> SchemaNode:
        """Parse an object-shaped node."""
        properties = schema.get("properties") or {}
        if not isinstance(properties, dict):
            raise SchemaReadError("'properties' must be a JSON object", f"{path}/properties")

        fields: dict[str, FieldSpec] = {}
        for name, prop_schema in properties.items():
            # Skip comment fields (strings) and _comment prefixed keys
            if not isinstance(prop_schema, dict) or name.startswith("_comment"):
                continue
            fields[name] = self._parse_field(prop_schema, f"{path}/properties/{name}")

        return SchemaNode(title=title, fields=fields)

    def _parse_field(self, schema: Any, path: str) -> FieldSpec:
        """
        Parse a property or array item schema into a field shape.

        Args:
            schema: The property schema dictionary
            path: Current path in the document (for error messages)

        Returns:
            Primitive, ObjectRef or ArrayOf
        """
        if not isinstance(schema, dict):
            raise SchemaReadError("Field schema must be a JSON object", path)

        type_name = schema.get("type")

        # An object may omit "type" when it has properties
        if type_name is None and "properties" in schema:
            type_name = "object"

        if type_name in self.PRIMITIVE_TYPES:
            return Primitive(self.PRIMITIVE_TYPES[type_name])

        if type_name == "object":
            return ObjectRef(self._parse_object(schema, path, schema.get("title")))

        if type_name == "array":
            if "items" not in schema:
                raise SchemaReadError("Array field has no 'items'", path)
            return ArrayOf(self._parse_field(schema["items"], f"{path}/items"))

        if type_name is None:
            raise SchemaReadError("Field has no 'type'", path)
        raise SchemaReadError(f"Unknown field type '{type_name}'", path)


def load_schema(path: str | Path, root_name: str | None = None) -> SchemaNode:
    """
    Read and parse a schema file.

    Args:
        path: Path to a JSON schema document
        root_name: Title to use when the document has none

    Returns:
        The root SchemaNode
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            document = json.load(f)
        except json.JSONDecodeError as e:
            raise SchemaReadError(f"Invalid JSON in {path.name}: {e}") from e
    return SchemaParser().parse(document, root_name)
