from __future__ import annotations

import pytest

from schema_to_types.pipeline.schema_ast import ArrayOf, ObjectRef, Primitive, PrimitiveKind, SchemaNode


def build_order_schema() -> SchemaNode:
    """Order with a nested customer, an array of items and a few scalars."""
    customer = SchemaNode(
        title="Customer Record v2",
        fields={"vip": Primitive(PrimitiveKind.BOOLEAN), "name": Primitive(PrimitiveKind.STRING)},
    )
    item = SchemaNode(
        title="Item",
        fields={"sku": Primitive(PrimitiveKind.STRING), "price": Primitive(PrimitiveKind.DECIMAL)},
    )
    return SchemaNode(
        title="Order",
        fields={
            "total": Primitive(PrimitiveKind.NUMBER),
            "items": ArrayOf(ObjectRef(item)),
            "id": Primitive(PrimitiveKind.INTEGER),
            "customer": ObjectRef(customer),
        },
    )


@pytest.fixture
def order_schema() -> SchemaNode:
    return build_order_schema()
