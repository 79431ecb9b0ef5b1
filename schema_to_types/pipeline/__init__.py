"""
Pipeline - schema to type declarations compiler.

This module provides a multi-phase architecture for generating type
declarations from a nested object schema:

1. Phase 1 (Parser): Parse a JSON schema document into a schema tree
2. Phase 2 (Analyzer): Resolve names, deduplicate and order nested types
3. Phase 3 (Backend + Renderer): Map fields to target types and render the file
4. Phase 4 (Writer): Optionally validate and atomically write the output
"""

from __future__ import annotations

from .backends import BACKENDS, CodeBackend, get_backend
from .config import CompileOptions, OutputConfig, OutputMode
from .errors import (
    CompileError,
    NameCollisionError,
    NamingError,
    OutputWriteError,
    SchemaReadError,
    UnknownBackendError,
    UnsupportedKindError,
)
from .generator import SchemaCompiler, compile_schema
from .writer import AtomicWriter

__all__ = [
    "BACKENDS",
    "CodeBackend",
    "get_backend",
    "SchemaCompiler",
    "compile_schema",
    "CompileOptions",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "CompileError",
    "NamingError",
    "NameCollisionError",
    "UnsupportedKindError",
    "UnknownBackendError",
    "SchemaReadError",
    "OutputWriteError",
]
