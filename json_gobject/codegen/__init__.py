"""
json-gobject Code Generation Module

Generates GObject classes and json-glib serializers from JSON Schema documents.
"""

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_registry,
    list_supported_languages,
)
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.schema import SchemaDocument, SchemaProperty, parse_schema_document
from .core.translator import translate, translate_document
from .core.config import GeneratorConfig, ConfigManager, load_config


def generate_from_schema(
    document, language="gobject", config=None, namespace=None, class_name=None
):
    """
    Generate code from a decoded schema document.

    Args:
        document: SchemaDocument, or a parsed JSON value to decode first
        language: Generator variant name or alias
        config: Generator configuration (GeneratorConfig, dict or path)
        namespace: Namespace of the generated classes
        class_name: Name of the root class when the schema has no title

    Returns:
        GenerationResult with generated code
    """
    if not isinstance(document, SchemaDocument):
        document = parse_schema_document(document)

    generator = get_generator(language, config)

    return generate_code(generator, document, namespace, class_name)


# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "SchemaDocument",
    "SchemaProperty",
    "GeneratorConfig",
    "ConfigManager",
    "generate_code",
    "generate_from_schema",
    "get_generator",
    "get_registry",
    "list_supported_languages",
    "load_config",
    "parse_schema_document",
    "translate",
    "translate_document",
]
