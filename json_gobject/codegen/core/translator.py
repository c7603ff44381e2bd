"""
Schema to class translation.

Walks a schema's property tree and decomposes every nested object into
its own ClassDescriptor. The result is post-ordered: classes found inside
nested properties come before the class that references them, and the
class for the walked map itself is always last.
"""

from typing import Dict, Iterable, List, Optional

from ...logging_config import get_logger
from .descriptors import ClassDescriptor, PropertyDescriptor, StorageKind
from .naming import enum_tag, function_name, member_name
from .schema import SchemaDocument, SchemaProperty, iter_properties

logger = get_logger(__name__)


class TranslationError(Exception):
    """Raised when a schema cannot be translated into classes."""

    pass


class UnsupportedTypeError(TranslationError):
    """Raised for a property type the generated C code cannot represent."""

    def __init__(self, class_name: str, key: str, type_name: str):
        self.class_name = class_name
        self.key = key
        self.type_name = type_name
        shown = repr(type_name) if type_name else "<missing>"
        supported = ", ".join(kind.value for kind in StorageKind)
        super().__init__(
            f"Unsupported type {shown} for property '{key}' of '{class_name}' "
            f"(supported: {supported})"
        )


def translate(
    namespace: str,
    name: str,
    properties: Dict[str, SchemaProperty],
    required: Iterable[str] = (),
    description: str = "",
    sort_properties: bool = False,
) -> List[ClassDescriptor]:
    """
    Translate one schema object, and every object nested in it, into classes.

    Args:
        namespace: Namespace of the generated classes
        name: Name of the class for this property map
        properties: Property map of the object
        required: Names of the required properties
        description: Description of the object
        sort_properties: Visit properties by key instead of document order

    Returns:
        Classes in post-order, the class for `properties` last

    Raises:
        UnsupportedTypeError: On the first property with an unknown type
    """
    required = set(required)
    classes: List[ClassDescriptor] = []
    props: List[PropertyDescriptor] = []

    for key, prop in iter_properties(properties, sort_properties):
        storage_kind = _storage_kind(name, key, prop)
        nested_class = None

        if storage_kind == StorageKind.OBJECT:
            classes.extend(
                translate(
                    namespace,
                    key,
                    prop.properties,
                    prop.required,
                    prop.description,
                    sort_properties,
                )
            )
            nested_class = key

        props.append(
            PropertyDescriptor(
                source_name=key,
                member_name=member_name(key),
                enum_tag=enum_tag(name, key),
                storage_kind=storage_kind,
                required=key in required,
                description=prop.description,
                format=prop.format,
                nested_class=nested_class,
            )
        )

    unknown_required = required.difference(properties)
    if unknown_required:
        logger.debug(
            "Class %s lists undeclared required properties: %s",
            name,
            ", ".join(sorted(unknown_required)),
        )

    classes.append(
        ClassDescriptor(
            namespace=namespace,
            name=name,
            properties=tuple(props),
            description=description,
        )
    )
    logger.debug("Translated class %s with %d properties", name, len(props))
    return classes


def translate_document(
    document: SchemaDocument,
    namespace: str,
    class_name: Optional[str] = None,
    sort_properties: bool = False,
) -> List[ClassDescriptor]:
    """
    Translate a whole schema document.

    The root class is named after the document title; class_name is only
    used when the document has no title.
    """
    title = document.title or class_name or ""
    root_name = function_name(title)
    if not root_name:
        raise TranslationError(
            "Schema has no title and no class name was given for the root class"
        )

    return translate(
        namespace,
        root_name,
        document.properties,
        document.required,
        document.description,
        sort_properties,
    )


def _storage_kind(class_name: str, key: str, prop: SchemaProperty) -> StorageKind:
    try:
        return StorageKind(prop.type)
    except ValueError:
        raise UnsupportedTypeError(class_name, key, prop.type) from None
