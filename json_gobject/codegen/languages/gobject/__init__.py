"""
GObject code generator module.

Generates final GObject classes with typed properties, accessors,
constructors and finalizers from a JSON Schema.
"""

from .generator import GObjectGenerator, create_gobject_generator
from .types import (
    GObjectProperty,
    GObjectTypeMapper,
    PARAM_FLAGS,
    c_declaration,
    canonical_property_name,
)

__all__ = [
    "GObjectGenerator",
    "GObjectProperty",
    "GObjectTypeMapper",
    "PARAM_FLAGS",
    "c_declaration",
    "canonical_property_name",
    "create_gobject_generator",
]
