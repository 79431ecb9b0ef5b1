"""
End-to-end compilation of the Order example with every backend.
"""

from __future__ import annotations

import pytest

from conftest import build_order_schema
from schema_to_types import compile_schema
from schema_to_types.pipeline import BACKENDS, CompileOptions, SchemaCompiler
from schema_to_types.pipeline.errors import NameCollisionError, UnknownBackendError, UnsupportedKindError
from schema_to_types.pipeline.schema_ast import ArrayOf, ObjectRef, Primitive, PrimitiveKind, SchemaNode

ORDER_DECLARATIONS = {
    "c": "struct Order {\n    Customer customer;\n    int id;\n    Item items[ORDER_ITEMS_SIZE];\n    double total;\n};",
    "cpp": "struct Order {\n    Customer customer;\n    int id;\n    std::vector<Item> items;\n    double total;\n};",
    "cs": "class Order\n{\n    Customer customer { get; set; }\n    int id { get; set; }\n    List<Item> items { get; set; }\n    double total { get; set; }\n}",
    "go": "type Order struct {\n\tcustomer Customer\n\tid int64\n\titems []Item\n\ttotal float64\n}",
    "java": "class Order {\n    Customer customer;\n    int id;\n    List<Item> items;\n    double total;\n}",
    "js": (
        "class Order {\n  constructor() {\n"
        "    this.customer = new Customer(); // Customer property\n"
        "    this.id = 0; // number property\n"
        "    this.items = []; // Item[] property\n"
        "    this.total = 0; // number property\n"
        "  }\n}"
    ),
    "python": "@dataclass_json\n@dataclass\nclass Order:\n    customer: Customer\n    id: int\n    items: list[Item]\n    total: float",
    "rust": (
        "#[derive(Debug, Serialize, Deserialize)]\nstruct Order {\n"
        '    #[serde(rename = "customer")]\n    customer: Customer,\n'
        '    #[serde(rename = "id")]\n    id: i64,\n'
        '    #[serde(rename = "items")]\n    items: Vec<Item>,\n'
        '    #[serde(rename = "total")]\n    total: f64,\n}'
    ),
    "ts": "interface Order {\n    customer: Customer;\n    id: number;\n    items: Item[];\n    total: number;\n}",
}

DECLARATION_KEYWORDS = {
    "c": "struct %s {",
    "cpp": "struct %s {",
    "cs": "class %s\n",
    "go": "type %s struct",
    "java": "class %s {",
    "js": "class %s {",
    "python": "class %s:",
    "rust": "struct %s {",
    "ts": "interface %s {",
}


@pytest.mark.parametrize("backend_id", sorted(ORDER_DECLARATIONS))
def test_order_declaration(order_schema, backend_id):
    out = compile_schema(order_schema, backend_id)
    assert ORDER_DECLARATIONS[backend_id] in out


@pytest.mark.parametrize("backend_id", sorted(DECLARATION_KEYWORDS))
def test_declarations_in_dependency_order(order_schema, backend_id):
    out = compile_schema(order_schema, backend_id)
    keyword = DECLARATION_KEYWORDS[backend_id]

    positions = [out.index(keyword % name) for name in ("Customer", "Item", "Order")]
    assert positions == sorted(positions)
    assert out.count(keyword % "Customer") == 1


@pytest.mark.parametrize("backend_id", sorted(BACKENDS))
def test_deterministic_output(backend_id):
    assert compile_schema(build_order_schema(), backend_id) == compile_schema(build_order_schema(), backend_id)


@pytest.mark.parametrize("backend_id", sorted(BACKENDS))
def test_output_ends_with_single_newline(order_schema, backend_id):
    out = compile_schema(order_schema, backend_id)
    assert out.endswith("\n")
    assert not out.endswith("\n\n")


def test_field_order_ignores_input_order():
    forward = SchemaNode(title="Point", fields={"x": Primitive(PrimitiveKind.INTEGER), "y": Primitive(PrimitiveKind.INTEGER)})
    backward = SchemaNode(title="Point", fields={"y": Primitive(PrimitiveKind.INTEGER), "x": Primitive(PrimitiveKind.INTEGER)})
    assert compile_schema(forward, "ts") == compile_schema(backward, "ts")


class TestCOutput:
    """Preamble, size constants and forward typedefs of C output"""

    def test_full_file(self, order_schema):
        out = compile_schema(order_schema, "c")
        assert out == (
            "#include <stdio.h>\n"
            "#include <stdlib.h>\n"
            "#include <stdbool.h>\n"
            "\n"
            "#define ORDER_ITEMS_SIZE 50\n"
            "\n"
            "typedef struct Customer Customer;\n"
            "typedef struct Item Item;\n"
            "typedef struct Order Order;\n"
            "\n"
            "struct Customer {\n"
            "    char* name;\n"
            "    bool vip;\n"
            "};\n"
            "\n"
            "struct Item {\n"
            "    float price;\n"
            "    char* sku;\n"
            "};\n"
            "\n"
            "struct Order {\n"
            "    Customer customer;\n"
            "    int id;\n"
            "    Item items[ORDER_ITEMS_SIZE];\n"
            "    double total;\n"
            "};\n"
        )

    def test_no_stdbool_without_booleans(self):
        root = SchemaNode(title="Point", fields={"x": Primitive(PrimitiveKind.INTEGER)})
        out = compile_schema(root, "c")
        assert "#include <stdio.h>" in out
        assert "stdbool" not in out
        assert "#define" not in out

    def test_size_constants_do_not_leak_between_compilations(self, order_schema):
        compile_schema(order_schema, "c")
        out = compile_schema(order_schema, "c")
        assert out.count("#define ORDER_ITEMS_SIZE 50") == 1

    def test_array_capacity_option(self, order_schema):
        out = compile_schema(order_schema, "c", CompileOptions(array_capacity=16))
        assert "#define ORDER_ITEMS_SIZE 16" in out

    def test_array_root(self):
        root = SchemaNode(title="Scores", item_spec=Primitive(PrimitiveKind.DECIMAL))
        out = compile_schema(root, "c")
        assert "#define SCORES_ITEMS_SIZE 50" in out
        assert "    float items[SCORES_ITEMS_SIZE];" in out


class TestPreambles:
    """Imports and includes depend on what the schema uses"""

    def test_rust(self, order_schema):
        assert compile_schema(order_schema, "rust").startswith("use serde::{Serialize, Deserialize};\n\n#[derive(")

    def test_go(self, order_schema):
        assert compile_schema(order_schema, "go").startswith("package main\n\ntype Customer struct {")

    def test_java_list_import_only_with_arrays(self, order_schema):
        assert compile_schema(order_schema, "java").startswith("import java.util.List;\n\nclass Customer {")

        flat = SchemaNode(title="Point", fields={"x": Primitive(PrimitiveKind.INTEGER)})
        assert compile_schema(flat, "java") == "class Point {\n    int x;\n}\n"

    def test_cpp_includes(self, order_schema):
        out = compile_schema(order_schema, "cpp")
        assert out.startswith("#include <string>\n#include <vector>\n\nstruct Customer {")

    def test_cs_usings(self, order_schema):
        assert compile_schema(order_schema, "cs").startswith("using System;\nusing System.Collections.Generic;\n\nclass Customer\n{")

    def test_python(self, order_schema):
        out = compile_schema(order_schema, "python")
        assert out.startswith("from __future__ import annotations\n\nfrom dataclasses import dataclass\n\nfrom dataclasses_json import dataclass_json\n")
        assert "\n\n\n@dataclass_json\n@dataclass\nclass Item:\n" in out

    def test_ts_has_no_preamble(self, order_schema):
        assert compile_schema(order_schema, "ts").startswith("interface Customer {")

    def test_generation_comment(self, order_schema):
        options = CompileOptions(generation_comment="Generated by schema_to_types v1.0.0 : schema_to_types order.json")
        assert compile_schema(order_schema, "rust", options).startswith("// Generated by schema_to_types v1.0.0 : schema_to_types order.json\n\nuse serde")
        assert compile_schema(order_schema, "python", options).startswith("# Generated by schema_to_types")


class TestPublicVisibility:
    """Output with public visibility enabled"""

    @pytest.fixture
    def options(self):
        return CompileOptions(public_visibility=True)

    def test_rust(self, order_schema, options):
        out = compile_schema(order_schema, "rust", options)
        assert "pub struct Order {" in out
        assert '    #[serde(rename = "items")]\n    pub items: Vec<Item>,' in out

    def test_java(self, order_schema, options):
        out = compile_schema(order_schema, "java", options)
        assert "public class Customer {\n    public String name;\n    public boolean vip;\n}" in out

    def test_cs(self, order_schema, options):
        out = compile_schema(order_schema, "cs", options)
        assert "public class Item\n{\n    public float price { get; set; }\n    public string sku { get; set; }\n}" in out

    def test_cpp(self, order_schema, options):
        out = compile_schema(order_schema, "cpp", options)
        assert "struct Customer {\npublic:\n    std::string name;\n    bool vip;\n};" in out

    def test_go(self, order_schema, options):
        out = compile_schema(order_schema, "go", options)
        assert (
            "type Order struct {\n"
            '\tCustomer Customer `json:"customer"`\n'
            '\tId int64 `json:"id"`\n'
            '\tItems []Item `json:"items"`\n'
            '\tTotal float64 `json:"total"`\n'
            "}"
        ) in out

    def test_ts(self, order_schema, options):
        out = compile_schema(order_schema, "ts", options)
        assert "export interface Order {\n    customer: Customer;" in out

    def test_js(self, order_schema, options):
        assert "export class Order {\n  constructor() {" in compile_schema(order_schema, "js", options)

    @pytest.mark.parametrize("backend_id", ["c", "python"])
    def test_no_op_backends(self, order_schema, options, backend_id):
        assert compile_schema(order_schema, backend_id, options) == compile_schema(order_schema, backend_id)


def test_reserved_field_name_in_rust_keeps_serialized_name():
    root = SchemaNode(title="Token", fields={"type": Primitive(PrimitiveKind.STRING)})
    out = compile_schema(root, "rust")
    assert '    #[serde(rename = "type")]\n    r#type: String,' in out


def test_compile_from_document():
    document = {
        "title": "Order",
        "properties": {
            "customer": {"type": "object", "title": "Customer", "properties": {"name": {"type": "string"}}},
            "id": {"type": "integer"},
        },
    }
    out = compile_schema(document, "ts")
    assert "interface Customer {\n    name: string;\n}" in out
    assert "interface Order {\n    customer: Customer;\n    id: number;\n}" in out


def test_document_without_title_uses_name():
    out = SchemaCompiler({"properties": {"id": {"type": "integer"}}}, "go", name="invoice").generate()
    assert "type invoice struct {" in out


def test_unknown_backend(order_schema):
    with pytest.raises(UnknownBackendError):
        compile_schema(order_schema, "cobol")


def test_collision_aborts_without_output():
    root = SchemaNode(
        title="Order",
        fields={
            "billing": ObjectRef(SchemaNode(title="Address", fields={"city": Primitive(PrimitiveKind.STRING)})),
            "shipping": ObjectRef(SchemaNode(title="Address", fields={"zip": Primitive(PrimitiveKind.INTEGER)})),
        },
    )
    with pytest.raises(NameCollisionError):
        compile_schema(root, "rust")


def test_unsupported_kind_aborts():
    root = SchemaNode(title="Bad", fields={"x": ArrayOf(Primitive("uuid"))})
    with pytest.raises(UnsupportedKindError) as exc_info:
        compile_schema(root, "cpp")
    assert "(at Bad.x)" in str(exc_info.value)


class TestBackendNameClashes:
    """Names rewritten by a backend must stay unique"""

    def test_go_export_merges_type_names(self):
        root = SchemaNode(
            title="Order",
            fields={"order": ObjectRef(SchemaNode(fields={"note": Primitive(PrimitiveKind.STRING)}))},
        )
        # Private names differ, so the private output is fine
        assert compile_schema(root, "go").count("type order struct") == 1

        with pytest.raises(NameCollisionError, match="'order' and 'Order' both declare as 'Order'") as exc_info:
            compile_schema(root, "go", CompileOptions(public_visibility=True))
        assert exc_info.value.identifier == "Order"

    def test_go_export_merges_field_names(self):
        root = SchemaNode(title="Order", fields={"id": Primitive(PrimitiveKind.STRING), "Id": Primitive(PrimitiveKind.STRING)})
        assert "\tId string\n\tid string\n" in compile_schema(root, "go")

        with pytest.raises(NameCollisionError) as exc_info:
            compile_schema(root, "go", CompileOptions(public_visibility=True))
        assert exc_info.value.path == "Order.id"
        assert "Fields 'Id' and 'id' both declare as 'Id'" in str(exc_info.value)

    def test_escaped_field_name_clashes_with_existing_field(self):
        root = SchemaNode(title="Reg", fields={"int": Primitive(PrimitiveKind.INTEGER), "int_": Primitive(PrimitiveKind.INTEGER)})
        with pytest.raises(NameCollisionError) as exc_info:
            compile_schema(root, "c")
        assert exc_info.value.path == "Reg.int_"

    def test_escaped_type_name_clashes_with_existing_type(self):
        root = SchemaNode(
            title="Reg",
            fields={
                "int": ObjectRef(SchemaNode(fields={"a": Primitive(PrimitiveKind.INTEGER)})),
                "other": ObjectRef(SchemaNode(title="int_", fields={"b": Primitive(PrimitiveKind.INTEGER)})),
            },
        )
        with pytest.raises(NameCollisionError, match="'int' and 'int_' both declare as 'int_'"):
            compile_schema(root, "c")


@pytest.mark.parametrize(
    "backend_id, field_name, expected",
    [
        ("rust", "type", ["struct r#type {", "    r#type: r#type,"]),
        ("java", "class", ["class class_ {", "    class_ class_;"]),
        ("cs", "class", ["class @class\n{", "    @class @class { get; set; }"]),
        ("c", "int", ["typedef struct int_ int_;", "struct int_ {", "    int_ int_;"]),
        ("cpp", "class", ["struct class_ {", "    class_ class_;"]),
        ("python", "from", ["class from_:", "    from_: from_"]),
        ("go", "type", ["type type_ struct {", "\ttype_ type_\n"]),
    ],
)
def test_reserved_type_names_are_escaped(backend_id, field_name, expected):
    root = SchemaNode(title="Token", fields={field_name: ObjectRef(SchemaNode(fields={"v": Primitive(PrimitiveKind.STRING)}))})
    out = compile_schema(root, backend_id)
    for pattern in expected:
        assert pattern in out
