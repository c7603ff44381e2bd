"""
JsonBuilder serializer generator module.

Generates one JsonBuilder-driven function per schema object.
"""

from .generator import (
    JsonBuilderGenerator,
    JsonBuilderTypeMapper,
    create_json_builder_generator,
)

__all__ = [
    "JsonBuilderGenerator",
    "JsonBuilderTypeMapper",
    "create_json_builder_generator",
]
