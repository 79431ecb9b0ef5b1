"""
Schema tree node definitions.

These nodes are the canonical, immutable representation of a schema:
object-shaped nodes carry named fields, array-root nodes carry a single
item shape. Field shapes form a closed union of three variants.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class PrimitiveKind(str, Enum):
    """Primitive field kinds understood by every backend."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class Primitive:
    """A scalar field."""

    kind: PrimitiveKind


@dataclass(frozen=True)
class ObjectRef:
    """An inline nested object.

    The nested node owns its title; when it has none, the owning field
    name is used as the title.
    """

    nested: SchemaNode


@dataclass(frozen=True)
class ArrayOf:
    """A homogeneous sequence of elements."""

    element: FieldSpec


FieldSpec = Primitive | ObjectRef | ArrayOf


@dataclass(frozen=True, eq=False)
class SchemaNode:
    """A named node of the schema tree.

    Exactly one of ``fields`` (object-shaped node) or ``item_spec``
    (array-root node) is expected to be set.
    """

    title: str | None = None
    fields: Mapping[str, FieldSpec] | None = None
    item_spec: FieldSpec | None = None

    def __post_init__(self):
        # Freeze the field mapping so the tree cannot change after construction
        if self.fields is not None and not isinstance(self.fields, MappingProxyType):
            object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @property
    def is_array_root(self) -> bool:
        return self.fields is None and self.item_spec is not None

    @property
    def is_object(self) -> bool:
        return self.fields is not None


def object_element(spec: FieldSpec) -> SchemaNode | None:
    """Return the nested node of an ObjectRef, looking through any array depth."""
    while isinstance(spec, ArrayOf):
        spec = spec.element
    if isinstance(spec, ObjectRef):
        return spec.nested
    return None


def array_depth(spec: FieldSpec) -> int:
    """Number of ArrayOf wrappers around the innermost element."""
    depth = 0
    while isinstance(spec, ArrayOf):
        depth += 1
        spec = spec.element
    return depth


def describe_kind(spec: FieldSpec, object_name: str | None = None) -> str:
    """Return a stable text descriptor for a field shape.

    Examples:
        Primitive(STRING) -> "string"
        ObjectRef(...) -> "object:Customer"
        ArrayOf(Primitive(INTEGER)) -> "array<integer>"

    Args:
        spec: The field shape
        object_name: Canonical name of the nested object, if already known

    Returns:
        Descriptor string
    """
    if isinstance(spec, Primitive):
        return getattr(spec.kind, "value", str(spec.kind))
    if isinstance(spec, ObjectRef):
        return f"object:{object_name}" if object_name else "object"
    if isinstance(spec, ArrayOf):
        return f"array<{describe_kind(spec.element, object_name)}>"
    return type(spec).__name__
