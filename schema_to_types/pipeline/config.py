"""
Configuration for the schema-to-type compiler.

Options are plain dataclasses so they can be built in code or loaded from
a JSON configuration file through ``from_dict``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Capacity given to every array field by backends without dynamic containers
DEFAULT_ARRAY_CAPACITY = 50


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite the existing file


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to check generated code before writing
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True


@dataclass
class CompileOptions:
    """Options for one compilation."""

    # Emit the backend's visibility/export modifier on types and fields
    public_visibility: bool = False

    # Capacity of fixed-size arrays (backends without dynamic containers)
    array_capacity: int = DEFAULT_ARRAY_CAPACITY

    # Comment text placed at the top of the generated file (without comment markers)
    generation_comment: str = ""

    # Output configuration, used by the writer
    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CompileOptions:
        """Create options from a dictionary."""
        options = CompileOptions()
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.ERROR_IF_EXISTS)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                options.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                )
            elif hasattr(options, k):
                setattr(options, k, v)
        return options

    def to_dict(self) -> dict:
        """Convert options to a dictionary."""
        return {
            "public_visibility": self.public_visibility,
            "array_capacity": self.array_capacity,
            "generation_comment": self.generation_comment,
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
            },
        }
