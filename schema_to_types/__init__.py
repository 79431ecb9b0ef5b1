"""Schema to Types

A Python package for compiling a nested object schema into type
declarations for C, C++, C#, Go, Java, JavaScript, Python, Rust and
TypeScript.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    CompileOptions,
    NameCollisionError,
    NamingError,
    OutputConfig,
    OutputMode,
    SchemaCompiler,
    UnknownBackendError,
    UnsupportedKindError,
    compile_schema,
)

__all__ = [
    "compile_schema",
    "SchemaCompiler",
    "CompileOptions",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "NamingError",
    "NameCollisionError",
    "UnsupportedKindError",
    "UnknownBackendError",
]
