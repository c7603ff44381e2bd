"""
json-glib type mapping.

Maps translated property descriptors to the parameter declarations and
statements that write one member of a JsonObject.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ...core.descriptors import PropertyDescriptor, StorageKind
from ...core.templates import c_string_literal
from ..gobject.types import c_declaration


@dataclass(frozen=True)
class JsonMember:
    """C fragments for writing one property into a JSON document."""

    name: str  # parameter name
    key: str  # JSON member name
    parameter: str
    required: bool
    pointer: bool
    statements: List[str] = field(default_factory=list)
    locals: List[str] = field(default_factory=list)
    frees: List[str] = field(default_factory=list)
    description: str = ""

    @property
    def assertion(self) -> Optional[str]:
        """Non-null check, only meaningful for required pointer parameters."""
        if self.required and self.pointer:
            return f"g_assert({self.name});"
        return None

    @property
    def guarded(self) -> bool:
        """Optional pointers are only written when set."""
        return self.pointer and not self.required


class JsonGlibTypeMapper:
    """Map property descriptors to JsonObject member setters."""

    PARAM_TYPES: Dict[StorageKind, str] = {
        StorageKind.OBJECT: "JsonObject *",
        StorageKind.BOOLEAN: "gboolean",
        StorageKind.INTEGER: "gint64",
        StorageKind.NUMBER: "gdouble",
        StorageKind.STRING: "const gchar *",
    }

    SETTERS: Dict[StorageKind, str] = {
        StorageKind.OBJECT: "json_object_set_object_member",
        StorageKind.BOOLEAN: "json_object_set_boolean_member",
        StorageKind.INTEGER: "json_object_set_int_member",
        StorageKind.NUMBER: "json_object_set_double_member",
        StorageKind.STRING: "json_object_set_string_member",
    }

    DATE_TIME_TYPE = "GDateTime *"

    def __init__(self, datetime_formatter: str = "g_date_time_format_iso8601"):
        self.datetime_formatter = datetime_formatter

    def set_statements(self, key: str, value: str, kind: StorageKind) -> List[str]:
        """Statements that store `value` under `key`."""
        return [f"{self.SETTERS[kind]}(obj, {c_string_literal(key)}, {value});"]

    def map_property(self, prop: PropertyDescriptor) -> JsonMember:
        """
        Build the parameter and conversion code for one property.

        Date-time strings take a GDateTime, are formatted into a temporary
        buffer before insertion, and the buffer is freed afterwards.
        """
        name = prop.member_name
        kind = prop.storage_kind

        if prop.is_date_time:
            buffer = f"{name}_str"
            return JsonMember(
                name=name,
                key=prop.source_name,
                parameter=c_declaration(self.DATE_TIME_TYPE, name),
                required=prop.required,
                pointer=True,
                statements=[f"{buffer} = {self.datetime_formatter}({name});"]
                + self.set_statements(prop.source_name, buffer, StorageKind.STRING),
                locals=[f"gchar *{buffer} = NULL;"],
                frees=[f"g_free({buffer});"],
                description=prop.description,
            )

        return JsonMember(
            name=name,
            key=prop.source_name,
            parameter=c_declaration(self.PARAM_TYPES[kind], name),
            required=prop.required,
            pointer=kind.is_reference_counted,
            statements=self.set_statements(prop.source_name, name, kind),
            description=prop.description,
        )
