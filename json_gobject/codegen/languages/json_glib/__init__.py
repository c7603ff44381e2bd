"""
json-glib serializer generator module.

Generates one JsonObject-building function per schema object.
"""

from .generator import JsonGlibGenerator, create_json_glib_generator
from .types import JsonGlibTypeMapper, JsonMember

__all__ = [
    "JsonGlibGenerator",
    "JsonGlibTypeMapper",
    "JsonMember",
    "create_json_glib_generator",
]
