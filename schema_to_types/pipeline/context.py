"""
Per-compilation state.

A CompileContext is created for each compilation and dropped when it
returns; nothing in it is shared between compilations or backends.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .analyzer.name_resolver import NameRegistry
from .config import CompileOptions

logger = logging.getLogger(__name__)


@dataclass
class CompileContext:
    """Registry, size-constant table and options of one compilation."""

    options: CompileOptions = field(default_factory=CompileOptions)
    registry: NameRegistry = field(default_factory=NameRegistry)

    # Capacity constant name -> value, in registration order
    size_constants: dict[str, int] = field(default_factory=dict)

    def add_size_constant(self, owner: str, field_name: str) -> str:
        """
        Register the capacity constant of an array field.

        Args:
            owner: Identifier of the type owning the field
            field_name: Name of the array field

        Returns:
            The constant name, e.g. ORDER_ITEMS_SIZE
        """
        name = f"{owner.upper()}_{field_name.upper()}_SIZE"
        if name not in self.size_constants:
            self.size_constants[name] = self.options.array_capacity
            logger.debug("Registered size constant %s = %d", name, self.options.array_capacity)
        return name
