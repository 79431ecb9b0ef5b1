"""
Base class for code generation backends.

A backend maps schema field shapes to the tokens of one target language,
decides the preamble the generated file needs, and provides the template
context the renderer turns into declarations.
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..analyzer.ir_nodes import FieldRecord, TypeRecord
from ..analyzer.name_resolver import canonical_name, nested_title, node_fields
from ..config import CompileOptions
from ..context import CompileContext
from ..errors import NameCollisionError, UnsupportedKindError
from ..schema_ast.nodes import ArrayOf, FieldSpec, ObjectRef, Primitive, PrimitiveKind, SchemaNode, array_depth, describe_kind


class Feature(Enum):
    """Cross-cutting properties of a schema tree that can require preamble lines."""

    BOOLEAN = "boolean"
    STRING = "string"
    DECIMAL = "decimal"
    ARRAY = "array"
    OBJECT = "object"


_PRIMITIVE_FEATURES = {
    PrimitiveKind.BOOLEAN: Feature.BOOLEAN,
    PrimitiveKind.STRING: Feature.STRING,
    PrimitiveKind.DECIMAL: Feature.DECIMAL,
}


@dataclass(frozen=True)
class MappedType:
    """Target-language expression of a field's type.

    Attributes:
        type_name: The type token (e.g. "std::vector<int>")
        suffix: Declarator suffix written after the field name (e.g. "[ORDER_ITEMS_SIZE]")
        default: Initial value expression, for backends that initialize fields
    """

    type_name: str
    suffix: str = ""
    default: str | None = None


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Primary backend id (e.g. "rust")
    BACKEND_ID: str = ""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    # Line comment marker
    COMMENT_PREFIX: str = "//"

    # Blank lines between two declarations
    BLOCK_SEPARATOR: str = "\n\n"

    # Type mapping from primitive kinds to language types
    TYPE_MAP: dict[PrimitiveKind, str] = {}

    # Overrides of TYPE_MAP for array elements (e.g. boxed types)
    ELEMENT_TYPE_MAP: dict[PrimitiveKind, str] = {}

    # Container around an array element type; "{}" is replaced by the element token
    ARRAY_TEMPLATE: str = ""

    # Backends without dynamic containers declare fixed-capacity arrays instead
    FIXED_CAPACITY_ARRAYS: bool = False

    # Initial values per primitive kind, for backends that initialize fields
    DEFAULT_VALUES: dict[PrimitiveKind, str] = {}

    # Preamble lines always emitted, then lines required by detected features
    PREAMBLE: list[str] = []
    PREAMBLE_BY_FEATURE: dict[Feature, list[str]] = {}

    # Visibility support: modifiers put in front of type and field declarations
    SUPPORTS_VISIBILITY: bool = False
    TYPE_MODIFIER: str = ""
    FIELD_MODIFIER: str = ""

    # Words that cannot be used as type or field names as-is
    RESERVED_WORDS: frozenset[str] = frozenset()

    def __init__(self, options: CompileOptions | None = None):
        """
        Initialize the backend.

        Args:
            options: Options of the current compilation
        """
        self.options = options or CompileOptions()

    @property
    def public(self) -> bool:
        """Whether visibility modifiers are emitted (silently off if unsupported)."""
        return self.options.public_visibility and self.SUPPORTS_VISIBILITY

    # Type mapping

    def map_field(
        self,
        spec: FieldSpec,
        owner: str,
        field_name: str,
        context: CompileContext,
        object_name: str | None = None,
    ) -> MappedType:
        """
        Map a field shape to the target type.

        Args:
            spec: The field shape
            owner: Identifier of the type declaring the field
            field_name: Name of the field
            context: Current compilation context (size-constant table)
            object_name: Canonical name of the nested object, if already resolved

        Returns:
            The mapped type

        Raises:
            UnsupportedKindError: If the shape or primitive kind is unknown to this backend
        """
        if isinstance(spec, ArrayOf) and self.FIXED_CAPACITY_ARRAYS:
            return self._map_fixed_array(spec, owner, field_name, context, object_name)
        return self._map_spec(spec, owner, field_name, object_name, as_element=False)

    def _map_spec(self, spec: FieldSpec, owner: str, field_name: str, object_name: str | None, as_element: bool) -> MappedType:
        path = f"{owner}.{field_name}"

        if isinstance(spec, Primitive):
            return MappedType(
                type_name=self.map_primitive(spec.kind, path, as_element),
                default=self.DEFAULT_VALUES.get(spec.kind),
            )

        if isinstance(spec, ObjectRef):
            identifier = object_name or canonical_name(nested_title(spec.nested, field_name), path)
            type_name = self.declared_name(identifier)
            return MappedType(type_name=type_name, default=self.object_default(type_name))

        if isinstance(spec, ArrayOf):
            element = self._map_spec(spec.element, owner, field_name, object_name, as_element=True)
            if not self.ARRAY_TEMPLATE:
                raise UnsupportedKindError(f"{self.BACKEND_ID} backend has no array container", path=path)
            return MappedType(type_name=self.ARRAY_TEMPLATE.format(element.type_name), default=self.array_default())

        raise UnsupportedKindError(f"Unsupported field shape {type(spec).__name__}", path=path)

    def _map_fixed_array(self, spec: ArrayOf, owner: str, field_name: str, context: CompileContext, object_name: str | None) -> MappedType:
        """Map an array to its element type plus one capacity dimension per array level."""
        element: FieldSpec = spec
        while isinstance(element, ArrayOf):
            element = element.element

        mapped = self._map_spec(element, owner, field_name, object_name, as_element=True)
        constant = context.add_size_constant(owner, field_name)
        return MappedType(type_name=mapped.type_name, suffix=f"[{constant}]" * array_depth(spec))

    def map_primitive(self, kind: PrimitiveKind, path: str = "", as_element: bool = False) -> str:
        """Look up the token of a primitive kind."""
        if as_element and kind in self.ELEMENT_TYPE_MAP:
            return self.ELEMENT_TYPE_MAP[kind]
        if kind not in self.TYPE_MAP:
            raise UnsupportedKindError(f"Primitive kind '{getattr(kind, 'value', kind)}' is not supported by the {self.BACKEND_ID} backend", path=path)
        return self.TYPE_MAP[kind]

    def object_default(self, type_name: str) -> str | None:
        """Initial value of an object field."""
        return None

    def array_default(self) -> str | None:
        """Initial value of an array field."""
        return None

    # Naming

    def declared_name(self, identifier: str) -> str:
        """Name under which a type is declared and referenced."""
        if identifier in self.RESERVED_WORDS:
            return self.escape_reserved(identifier)
        return identifier

    def field_name(self, name: str) -> str:
        """Name under which a field is declared."""
        if name in self.RESERVED_WORDS:
            return self.escape_reserved(name)
        return name

    def escape_reserved(self, name: str) -> str:
        return f"{name}_"

    def check_declared_names(self, records: list[TypeRecord]) -> None:
        """
        Check that no two records end up with the same declared name.

        Distinct identifiers can still clash once the backend rewrites them
        (Go export capitalization, reserved-word escaping).

        Raises:
            NameCollisionError: If two identifiers declare the same name
        """
        declared: dict[str, TypeRecord] = {}
        for record in records:
            name = self.declared_name(record.identifier)
            other = declared.setdefault(name, record)
            if other is not record:
                raise NameCollisionError(
                    record.identifier,
                    _record_shape(other),
                    _record_shape(record),
                    reason=f"'{other.identifier}' and '{record.identifier}' both declare as '{name}' in {self.BACKEND_ID}",
                )

    # Feature probe

    def feature_probe(self, root: SchemaNode) -> set[Feature]:
        """
        Scan the whole tree once for cross-cutting requirements.

        Every field of every node is inspected, including repeated
        definitions that deduplication will later drop.

        Args:
            root: Root node of the schema

        Returns:
            The set of detected features
        """
        features: set[Feature] = set()
        seen: set[int] = set()
        pending = [root]

        while pending:
            node = pending.pop()
            if id(node) in seen:
                continue
            seen.add(id(node))

            for spec in node_fields(node).values():
                self._probe_spec(spec, features, pending)

        return features

    def _probe_spec(self, spec: FieldSpec, features: set[Feature], pending: list[SchemaNode]) -> None:
        if isinstance(spec, Primitive):
            feature = _PRIMITIVE_FEATURES.get(spec.kind)
            if feature is not None:
                features.add(feature)
        elif isinstance(spec, ObjectRef):
            features.add(Feature.OBJECT)
            pending.append(spec.nested)
        elif isinstance(spec, ArrayOf):
            features.add(Feature.ARRAY)
            self._probe_spec(spec.element, features, pending)

    # Template contexts

    def preamble_lines(self, features: set[Feature]) -> list[str]:
        """Import/include lines for the detected features, in declaration order."""
        lines = list(self.PREAMBLE)
        for feature, feature_lines in self.PREAMBLE_BY_FEATURE.items():
            if feature in features:
                lines.extend(line for line in feature_lines if line not in lines)
        return lines

    def prepare_prefix_context(self, records: list[TypeRecord], context: CompileContext, features: set[Feature]) -> dict[str, Any]:
        """
        Prepare the template context for the file preamble.

        Must be called after every record has been mapped, so that the
        size-constant table is complete.
        """
        comment = self.options.generation_comment
        return {
            "generation_comment": f"{self.COMMENT_PREFIX} {comment}" if comment else "",
            "preamble": self.preamble_lines(features),
            "size_constants": dict(context.size_constants),
            "type_names": [self.declared_name(r.identifier) for r in records],
            "public": self.public,
        }

    def prepare_type_context(self, record: TypeRecord, context: CompileContext) -> dict[str, Any]:
        """
        Prepare the template context for one type declaration.

        Args:
            record: The type record
            context: Current compilation context

        Returns:
            Dictionary of template variables
        """
        fields = []
        declared: dict[str, FieldRecord] = {}
        for field in record.fields:
            field_ctx = self.prepare_field_context(field, record.identifier, context)
            other = declared.setdefault(field_ctx["name"], field)
            if other is not field:
                raise NameCollisionError(
                    record.identifier,
                    ((other.name, describe_kind(other.spec, other.object_name)),),
                    ((field.name, describe_kind(field.spec, field.object_name)),),
                    path=f"{record.identifier}.{field.name}",
                    reason=f"Fields '{other.name}' and '{field.name}' both declare as '{field_ctx['name']}'",
                )
            fields.append(field_ctx)

        return {
            "name": self.declared_name(record.identifier),
            "fields": fields,
            "type_modifier": self.TYPE_MODIFIER if self.public else "",
            "field_modifier": self.FIELD_MODIFIER if self.public else "",
            "public": self.public,
        }

    def prepare_field_context(self, field: FieldRecord, owner: str, context: CompileContext) -> dict[str, Any]:
        """Prepare the template context for one field."""
        mapped = self.map_field(field.spec, owner, field.name, context, field.object_name)
        return {
            "name": self.field_name(field.name),
            "original_name": field.name,
            "type": mapped.type_name,
            "suffix": mapped.suffix,
            "default": mapped.default,
            "tag": "",
        }


def _record_shape(record: TypeRecord) -> tuple[tuple[str, str], ...]:
    return tuple((f.name, describe_kind(f.spec, f.object_name)) for f in record.fields)
