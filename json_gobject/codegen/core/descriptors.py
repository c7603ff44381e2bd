"""
Language-neutral class and property descriptors.

The translator builds these once per run; emitters only read them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class StorageKind(Enum):
    """Category a schema property is stored as in the generated class."""

    OBJECT = "object"  # owned reference to a nested generated class
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"

    @property
    def is_reference_counted(self) -> bool:
        """Whether the stored value must be released when the owner goes away."""
        return self in (StorageKind.OBJECT, StorageKind.STRING)


DATE_TIME_FORMAT = "date-time"


@dataclass(frozen=True)
class PropertyDescriptor:
    """One property of a generated class."""

    source_name: str  # key as written in the schema
    member_name: str
    enum_tag: str
    storage_kind: StorageKind
    required: bool
    description: str = ""
    format: Optional[str] = None
    nested_class: Optional[str] = None  # class name when storage_kind is OBJECT

    @property
    def has_release(self) -> bool:
        return self.storage_kind.is_reference_counted

    @property
    def is_date_time(self) -> bool:
        return self.storage_kind == StorageKind.STRING and self.format == DATE_TIME_FORMAT


@dataclass(frozen=True)
class ClassDescriptor:
    """One generated class, discovered from the root or a nested object."""

    namespace: str
    name: str
    properties: Tuple[PropertyDescriptor, ...] = ()
    description: str = ""

    @property
    def required_properties(self) -> Tuple[PropertyDescriptor, ...]:
        return tuple(p for p in self.properties if p.required)

    @property
    def optional_properties(self) -> Tuple[PropertyDescriptor, ...]:
        return tuple(p for p in self.properties if not p.required)

    def get_property(self, source_name: str) -> Optional[PropertyDescriptor]:
        """Get a property by its schema key."""
        for prop in self.properties:
            if prop.source_name == source_name:
                return prop
        return None
