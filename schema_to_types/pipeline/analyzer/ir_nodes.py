"""
IR (Intermediate Representation) node definitions.

A type record is a named declaration ready for rendering: its fields are
already in emission order and every nested type it references has been
recorded earlier in the sequence.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..schema_ast.nodes import FieldSpec, SchemaNode


@dataclass(frozen=True)
class FieldRecord:
    """A field of a type record."""

    name: str
    spec: FieldSpec

    # Canonical identifier of the nested object type, for ObjectRef or array-of-object fields
    object_name: str | None = None


@dataclass(frozen=True)
class TypeRecord:
    """A type declaration: identifier plus fields sorted by name."""

    identifier: str
    fields: tuple[FieldRecord, ...] = ()

    # The schema node this record was built from
    node: SchemaNode | None = field(default=None, compare=False, repr=False)

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]
