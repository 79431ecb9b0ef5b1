"""
Code generation backends.

Contains language-specific type mappers and the registry used to look
them up by backend id.
"""

from __future__ import annotations

from ..config import CompileOptions
from ..errors import UnknownBackendError
from .base import CodeBackend, Feature, MappedType
from .c_backend import CBackend
from .cpp_backend import CppBackend
from .csharp_backend import CSharpBackend
from .go_backend import GoBackend
from .java_backend import JavaBackend
from .javascript_backend import JavaScriptBackend
from .python_backend import PythonBackend
from .rust_backend import RustBackend
from .typescript_backend import TypeScriptBackend

BACKENDS: dict[str, type[CodeBackend]] = {
    backend.BACKEND_ID: backend
    for backend in (
        CBackend,
        CppBackend,
        CSharpBackend,
        GoBackend,
        JavaBackend,
        JavaScriptBackend,
        PythonBackend,
        RustBackend,
        TypeScriptBackend,
    )
}

BACKEND_ALIASES = {
    "c++": "cpp",
    "csharp": "cs",
    "golang": "go",
    "javascript": "js",
    "py": "python",
    "rs": "rust",
    "typescript": "ts",
}


def resolve_backend_id(backend_id: str) -> str:
    """
    Normalize a backend id or alias.

    Raises:
        UnknownBackendError: If no backend is registered under that name
    """
    key = backend_id.strip().lower()
    key = BACKEND_ALIASES.get(key, key)
    if key not in BACKENDS:
        raise UnknownBackendError(backend_id, sorted(BACKENDS))
    return key


def get_backend(backend_id: str, options: CompileOptions | None = None) -> CodeBackend:
    """Instantiate the backend registered under a backend id or alias."""
    return BACKENDS[resolve_backend_id(backend_id)](options)


__all__ = [
    "BACKENDS",
    "BACKEND_ALIASES",
    "CodeBackend",
    "Feature",
    "MappedType",
    "CBackend",
    "CppBackend",
    "CSharpBackend",
    "GoBackend",
    "JavaBackend",
    "JavaScriptBackend",
    "PythonBackend",
    "RustBackend",
    "TypeScriptBackend",
    "get_backend",
    "resolve_backend_id",
]
