"""
Analyzer module.

Contains name resolution, deduplication and the dependency-first traversal.
"""

from __future__ import annotations

from .analyzer import SchemaAnalyzer, collect_type_records
from .ir_nodes import FieldRecord, TypeRecord
from .name_resolver import NameRegistry, canonical_name, fingerprint

__all__ = [
    "FieldRecord",
    "TypeRecord",
    "NameRegistry",
    "SchemaAnalyzer",
    "canonical_name",
    "collect_type_records",
    "fingerprint",
]
