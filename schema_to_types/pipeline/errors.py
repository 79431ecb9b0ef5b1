"""
Exceptions raised by the schema-to-type compiler.

Every compile error is fatal for the backend being compiled: the compiler
never returns partial output and never substitutes a placeholder type.
"""

from __future__ import annotations


class CompileError(Exception):
    """Base class for errors that abort a compilation.

    Attributes:
        identifier: The canonical identifier (or raw title) involved, if any
        path: Dotted schema path where the error was detected (e.g. "Order.customer")
    """

    def __init__(self, message: str, identifier: str | None = None, path: str = ""):
        self.identifier = identifier
        self.path = path
        if path:
            message = f"{message} (at {path})"
        super().__init__(message)


class NamingError(CompileError):
    """A node needs a type name but has neither a usable title nor a fallback."""


class NameCollisionError(CompileError):
    """Two different field shapes claim the same canonical identifier."""

    def __init__(
        self,
        identifier: str,
        existing: tuple[tuple[str, str], ...],
        incoming: tuple[tuple[str, str], ...],
        path: str = "",
        reason: str = "",
    ):
        self.existing = existing
        self.incoming = incoming
        message = reason or f"Type name '{identifier}' is already declared with different fields: {_format_fingerprint(existing)} != {_format_fingerprint(incoming)}"
        super().__init__(message, identifier=identifier, path=path)


class UnsupportedKindError(CompileError):
    """A field kind or shape is not recognized by the active backend."""


class UnknownBackendError(ValueError):
    """The requested backend id is not registered."""

    def __init__(self, backend_id: str, available: list[str] | None = None):
        self.backend_id = backend_id
        self.available = available or []
        message = f"Unknown backend '{backend_id}'"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class SchemaReadError(ValueError):
    """The schema document cannot be turned into a schema tree."""

    def __init__(self, message: str, pointer: str = "#"):
        self.pointer = pointer
        super().__init__(f"{message} (at {pointer})")


class OutputWriteError(Exception):
    """Generated code could not be written to its destination."""


def _format_fingerprint(fingerprint: tuple[tuple[str, str], ...]) -> str:
    return "{" + ", ".join(f"{name}: {kind}" for name, kind in fingerprint) + "}"
