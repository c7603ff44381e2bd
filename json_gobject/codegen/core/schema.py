"""
Core schema representation for code generation.

Decodes a parsed JSON Schema document into the small normalized model
the translator walks. Only the fields the generators consume are kept;
everything else in the document is ignored.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

from ...logging_config import get_logger

logger = get_logger(__name__)


class SchemaDecodeError(Exception):
    """Raised when a document does not have the expected schema shape."""

    def __init__(self, source: str, location: str, message: str):
        self.source = source
        self.location = location or "/"
        super().__init__(f"{source}: {self.location}: {message}")


@dataclass
class SchemaProperty:
    """A single property definition inside a schema object."""

    type: str
    format: Optional[str] = None
    description: str = ""
    examples: List[Any] = field(default_factory=list)

    # Only populated when type == "object"
    properties: Dict[str, "SchemaProperty"] = field(default_factory=dict)
    required: Set[str] = field(default_factory=set)

    @property
    def is_object(self) -> bool:
        return self.type == "object"


@dataclass
class SchemaDocument:
    """Root of a JSON Schema document."""

    title: str = ""
    description: str = ""
    type: str = "object"
    properties: Dict[str, SchemaProperty] = field(default_factory=dict)
    required: Set[str] = field(default_factory=set)
    schema_uri: Optional[str] = None
    id: Optional[str] = None


def parse_schema_document(data: Any, source: str = "<schema>") -> SchemaDocument:
    """
    Decode a parsed JSON value into a SchemaDocument.

    Args:
        data: Value returned by json.load()
        source: File path or URL, used in error messages

    Returns:
        SchemaDocument

    Raises:
        SchemaDecodeError: If the value does not have the shape of a schema
    """
    if not isinstance(data, dict):
        raise SchemaDecodeError(
            source, "", f"expected a JSON object, got {_json_type_name(data)}"
        )

    document = SchemaDocument(
        title=_optional_string(data, "title", source, "") or "",
        description=_optional_string(data, "description", source, "") or "",
        type=_optional_string(data, "type", source, "") or "object",
        properties=_decode_properties(data.get("properties"), source, ""),
        required=_decode_required(data.get("required"), source, ""),
        schema_uri=_optional_string(data, "$schema", source, ""),
        id=_optional_string(data, "$id", source, ""),
    )

    logger.debug(
        "Decoded schema %r from %s with %d top-level properties",
        document.title,
        source,
        len(document.properties),
    )
    return document


def _decode_properties(
    value: Any, source: str, location: str
) -> Dict[str, SchemaProperty]:
    """Decode a "properties" mapping, keeping document order."""
    if value is None:
        return {}

    here = f"{location}/properties"
    if not isinstance(value, dict):
        raise SchemaDecodeError(
            source, here, f"expected an object, got {_json_type_name(value)}"
        )

    properties = {}
    for name, prop_data in value.items():
        properties[name] = _decode_property(prop_data, source, f"{here}/{name}")
    return properties


def _decode_property(data: Any, source: str, location: str) -> SchemaProperty:
    """Decode one property definition."""
    if not isinstance(data, dict):
        raise SchemaDecodeError(
            source, location, f"expected an object, got {_json_type_name(data)}"
        )

    examples = data.get("examples")

    # A missing type is not a decode error: the translator reports it as
    # an unsupported type with the offending key.
    prop = SchemaProperty(
        type=_optional_string(data, "type", source, location) or "",
        format=_optional_string(data, "format", source, location),
        description=_optional_string(data, "description", source, location) or "",
        examples=list(examples) if isinstance(examples, list) else [],
    )

    if prop.is_object:
        prop.properties = _decode_properties(data.get("properties"), source, location)
        prop.required = _decode_required(data.get("required"), source, location)
    elif "properties" in data or "required" in data:
        logger.debug(
            "Ignoring nested properties on non-object %s%s (type %r)",
            source,
            location,
            prop.type,
        )

    return prop


def _decode_required(value: Any, source: str, location: str) -> Set[str]:
    """Decode a "required" list into a set of names."""
    if value is None:
        return set()

    here = f"{location}/required"
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise SchemaDecodeError(source, here, "expected a list of strings")

    return set(value)


def _optional_string(
    data: Dict[str, Any], key: str, source: str, location: str
) -> Optional[str]:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise SchemaDecodeError(
        source,
        f"{location}/{key}",
        f"expected a string, got {_json_type_name(value)}",
    )


def _json_type_name(value: Any) -> str:
    """Name a decoded JSON value the way JSON Schema does."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def iter_properties(
    properties: Dict[str, SchemaProperty], sort: bool = False
) -> Iterator[Tuple[str, SchemaProperty]]:
    """
    Iterate over a property map.

    Document order is kept unless sort is set, in which case keys are
    visited alphabetically so that generated property ids do not depend
    on how the schema file happens to be written.
    """
    if sort:
        for name in sorted(properties):
            yield name, properties[name]
    else:
        yield from properties.items()
