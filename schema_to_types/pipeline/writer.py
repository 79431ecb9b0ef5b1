"""
Atomic file writer for generated code.

Ensures that file writes are atomic so an interrupted run never leaves a
half-written output file behind.
"""

from __future__ import annotations

import ast
import logging
import tempfile
from collections.abc import Callable
from pathlib import Path

from .config import OutputConfig, OutputMode
from .errors import OutputWriteError

logger = logging.getLogger(__name__)


def validate_python(content: str) -> None:
    """Check that generated Python code parses."""
    try:
        ast.parse(content)
    except SyntaxError as e:
        raise OutputWriteError(f"Generated Python code is not valid: {e}") from e


def validate_braces(content: str) -> None:
    """Check that a brace-delimited language has balanced braces."""
    open_braces = content.count("{")
    close_braces = content.count("}")
    if open_braces != close_braces:
        raise OutputWriteError(f"Generated code has unbalanced braces: {open_braces} open, {close_braces} close")


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, config: OutputConfig | None = None, validators: dict[str, Callable[[str], None]] | None = None):
        """Initialize the atomic writer.

        Args:
            config: Output configuration (existing-file mode, validation switch)
            validators: Validation function per backend id; backends not listed get a brace check
        """
        self.config = config or OutputConfig()
        self._validators = {"python": validate_python}
        if validators:
            self._validators.update(validators)

    def write(self, path: Path, content: str, backend_id: str) -> None:
        """Write content to file atomically, honoring the output mode.

        Args:
            path: Target file path
            content: Content to write
            backend_id: Backend that produced the content, selects the validator

        Raises:
            OutputWriteError: If the file exists in error mode, or validation fails
            OSError: If file operations fail
        """
        path = Path(path)
        if path.exists() and self.config.mode == OutputMode.ERROR_IF_EXISTS:
            raise OutputWriteError(f"Output file already exists: {path}. Use force mode to overwrite.")

        if self.config.validate_before_write:
            self._validators.get(backend_id, validate_braces)(content)

        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
            temp_path.replace(path)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

        logger.info("Wrote %s", path)
