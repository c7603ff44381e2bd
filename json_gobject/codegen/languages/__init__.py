"""
Variant-specific code generators.

Every variant consumes the same class descriptors and differs only in
what it emits.
"""

from .gobject import GObjectGenerator, create_gobject_generator
from .json_glib import JsonGlibGenerator, create_json_glib_generator
from .json_builder import JsonBuilderGenerator, create_json_builder_generator

__all__ = [
    "GObjectGenerator",
    "JsonGlibGenerator",
    "JsonBuilderGenerator",
    "create_gobject_generator",
    "create_json_glib_generator",
    "create_json_builder_generator",
]
