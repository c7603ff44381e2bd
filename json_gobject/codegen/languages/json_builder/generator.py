"""
JsonBuilder serializer generator implementation.

Same function layout as the json-glib variant, but each function drives
a JsonBuilder and returns the resulting JsonNode.
"""

from pathlib import Path
from typing import Dict, List, Optional

from ...core.descriptors import StorageKind
from ...core.templates import c_string_literal
from ..json_glib.generator import JsonGlibGenerator
from ..json_glib.types import JsonGlibTypeMapper


class JsonBuilderTypeMapper(JsonGlibTypeMapper):
    """Map property descriptors to JsonBuilder calls."""

    PARAM_TYPES: Dict[StorageKind, str] = {
        **JsonGlibTypeMapper.PARAM_TYPES,
        StorageKind.OBJECT: "JsonNode *",
    }

    SETTERS: Dict[StorageKind, str] = {
        StorageKind.OBJECT: "json_builder_add_value",
        StorageKind.BOOLEAN: "json_builder_add_boolean_value",
        StorageKind.INTEGER: "json_builder_add_int_value",
        StorageKind.NUMBER: "json_builder_add_double_value",
        StorageKind.STRING: "json_builder_add_string_value",
    }

    def set_statements(self, key: str, value: str, kind: StorageKind) -> List[str]:
        return [
            f"json_builder_set_member_name(builder, {c_string_literal(key)});",
            f"{self.SETTERS[kind]}(builder, {value});",
        ]


class JsonBuilderGenerator(JsonGlibGenerator):
    """Code generator for JsonBuilder-based serializer functions."""

    type_mapper_class = JsonBuilderTypeMapper

    @property
    def language_name(self) -> str:
        return "json-builder"

    def get_template_directory(self) -> Optional[Path]:
        return Path(__file__).parent / "templates"


def create_json_builder_generator(config=None) -> JsonBuilderGenerator:
    """Create a JsonBuilder generator with default configuration."""
    return JsonBuilderGenerator(config)
