"""
json-glib serializer generator implementation.

Emits one static C function per translated class that builds a
JsonObject from its arguments. Nested classes come first so every
function is defined before the function that takes its result.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ...core.descriptors import ClassDescriptor
from ...core.generator import CodeGenerator, GeneratorError
from ...core.naming import function_name
from ...core.templates import c_comment_text
from .types import JsonGlibTypeMapper


class JsonGlibGenerator(CodeGenerator):
    """Code generator for json-glib JsonObject builder functions."""

    template_name = "function.c.j2"
    type_mapper_class = JsonGlibTypeMapper

    def __init__(self, config=None):
        """Initialize the serializer generator with configuration."""
        super().__init__(config)
        self.type_mapper = self.type_mapper_class(self.config.datetime_formatter)

    @property
    def language_name(self) -> str:
        return "json-glib"

    @property
    def file_extensions(self) -> Tuple[str, ...]:
        return (".c",)

    def get_template_directory(self) -> Optional[Path]:
        """Return the templates directory of the concrete generator."""
        return Path(__file__).parent / "templates"

    def function_name(self, cls: ClassDescriptor) -> str:
        return function_name(cls.name, self.config.function_prefix)

    def generate(self, classes: List[ClassDescriptor], root_name: str) -> Dict[str, str]:
        """Generate one function per class, nested classes first."""
        if not classes:
            raise GeneratorError("Nothing to generate: no classes were translated")

        functions = [self.generate_single_class(cls) for cls in classes]
        return {".c": "\n".join(functions)}

    def generate_single_class(self, cls: ClassDescriptor) -> str:
        """Generate the function for one class."""
        return self.render_template(self.template_name, self._function_context(cls))

    def _function_context(self, cls: ClassDescriptor) -> Dict[str, Any]:
        members = [self.type_mapper.map_property(prop) for prop in cls.properties]

        # Required parameters first, optional ones trailing
        signature = [
            self.type_mapper.map_property(prop)
            for prop in cls.required_properties + cls.optional_properties
        ]

        return {
            "add_comments": self.config.add_comments,
            "indent": self.config.indent,
            "function": self.function_name(cls),
            "description": c_comment_text(cls.description),
            "parameters": [m.parameter for m in signature],
            "members": members,
            "docs": [
                {"name": m.name, "text": c_comment_text(m.description) or m.key}
                for m in signature
            ],
            "locals": [local for m in members for local in m.locals],
            "assertions": [m.assertion for m in members if m.assertion],
            "frees": [free for m in members for free in m.frees],
        }


def create_json_glib_generator(config: Optional[Dict[str, Any]] = None) -> JsonGlibGenerator:
    """Create a json-glib generator with default configuration."""
    return JsonGlibGenerator(config)
