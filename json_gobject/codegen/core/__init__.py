"""
Core code generation components.

Provides the schema model, naming rules, translator and base classes
used by every generator variant.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .schema import (
    SchemaDecodeError,
    SchemaDocument,
    SchemaProperty,
    iter_properties,
    parse_schema_document,
)
from .descriptors import ClassDescriptor, PropertyDescriptor, StorageKind
from .translator import (
    TranslationError,
    UnsupportedTypeError,
    translate,
    translate_document,
)
from .naming import (
    NamingCase,
    camel_class_identifier,
    class_identifier,
    function_name,
    member_name,
)
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Schema model
    "SchemaDecodeError",
    "SchemaDocument",
    "SchemaProperty",
    "iter_properties",
    "parse_schema_document",
    # Translation
    "ClassDescriptor",
    "PropertyDescriptor",
    "StorageKind",
    "TranslationError",
    "UnsupportedTypeError",
    "translate",
    "translate_document",
    # Naming utilities
    "NamingCase",
    "camel_class_identifier",
    "class_identifier",
    "function_name",
    "member_name",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
