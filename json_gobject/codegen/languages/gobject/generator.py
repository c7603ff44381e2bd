"""
GObject code generator implementation.

Emits a declarations unit (.h) and a definitions unit (.c) holding a
final GObject class for every translated class.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ...core.descriptors import ClassDescriptor
from ...core.generator import CodeGenerator, GeneratorError
from ...core.naming import cast_macro, member_name, symbol_prefix, type_macro
from ...core.templates import c_comment_text
from .types import GObjectProperty, GObjectTypeMapper, c_declaration


class GObjectGenerator(CodeGenerator):
    """Code generator for GObject property-binding classes."""

    def __init__(self, config=None):
        """Initialize GObject generator with configuration."""
        super().__init__(config)
        self.type_mapper = GObjectTypeMapper(self.config.naming_case)

    @property
    def language_name(self) -> str:
        return "gobject"

    @property
    def file_extensions(self) -> Tuple[str, ...]:
        return (".h", ".c")

    @property
    def writes_files(self) -> bool:
        return True

    def get_template_directory(self) -> Optional[Path]:
        """Return the GObject templates directory."""
        return Path(__file__).parent / "templates"

    def output_basename(self, namespace: str, class_name: str) -> str:
        """Base name shared by the .h and .c files (namespace_classname)."""
        return f"{namespace}_{class_name}"

    def generate(self, classes: List[ClassDescriptor], root_name: str) -> Dict[str, str]:
        """Generate the header and source units for all classes."""
        if not classes:
            raise GeneratorError("Nothing to generate: no classes were translated")

        namespace = classes[-1].namespace
        if not namespace:
            raise GeneratorError("A namespace is required for GObject generation")

        basename = self.output_basename(namespace, root_name)
        contexts = [self._class_context(cls) for cls in classes]

        header = self.render_template(
            "header.h.j2",
            {
                "guard": self._include_guard(basename),
                "extra_includes": self.config.extra_includes,
                "declarations": [
                    self.render_template("class_declaration.h.j2", context)
                    for context in contexts
                ],
            },
        )

        # All structs, types and enums come before any function body so a
        # parent can use the type macro of a nested class.
        source = self.render_template(
            "source.c.j2",
            {
                "header_name": f"{basename}.h",
                "extra_includes": self.config.extra_includes,
                "preambles": [
                    self.render_template("class_preamble.c.j2", context)
                    for context in contexts
                ],
                "bodies": [
                    self.render_template("class_body.c.j2", context)
                    for context in contexts
                ],
            },
        )

        return {".h": header, ".c": source}

    def generate_single_class(self, cls: ClassDescriptor) -> str:
        """Generate declarations and definitions for one class."""
        context = self._class_context(cls)
        parts = [
            self.render_template("class_declaration.h.j2", context),
            self.render_template("class_preamble.c.j2", context),
            self.render_template("class_body.c.j2", context),
        ]
        return "\n".join(parts)

    def validate_classes(self, classes: List[ClassDescriptor]) -> List[str]:
        """Add GObject-specific checks to the base validation."""
        warnings = super().validate_classes(classes)

        for cls in classes:
            for prop in cls.properties:
                # The getter would collide with the G_DECLARE_FINAL_TYPE function
                if prop.member_name == "type":
                    warnings.append(
                        f"Property {cls.name}.{prop.source_name} generates "
                        f"{symbol_prefix(cls.namespace, cls.name)}_get_type, which "
                        "clashes with the GType getter"
                    )
                if prop.member_name == "self":
                    warnings.append(
                        f"Property {cls.name}.{prop.source_name} shadows the 'self' "
                        "parameter of its accessors"
                    )

        return warnings

    def _class_context(self, cls: ClassDescriptor) -> Dict[str, Any]:
        """Build the template context for one class."""
        class_name = self.type_mapper.class_name(cls.namespace, cls.name)
        prefix = symbol_prefix(cls.namespace, cls.name)
        properties = [self.type_mapper.map_property(cls, prop) for prop in cls.properties]

        return {
            "add_comments": self.config.add_comments,
            "indent": self.config.indent,
            "description": c_comment_text(cls.description),
            "class_name": class_name,
            "prefix": prefix,
            "type_macro": type_macro(cls.namespace, cls.name),
            "cast_macro": cast_macro(cls.namespace, cls.name),
            "is_macro": f"{cls.namespace.upper()}_IS_{cls.name.upper()}",
            "module_upper": cls.namespace.upper(),
            "object_upper": cls.name.upper(),
            "enum_type": f"{class_name}Property",
            "reserved_enum": f"PROP_{member_name(cls.name).upper()}_0",
            "constructor_params": [p.constructor for p in properties if p.constructor],
            "required": [p for p in properties if p.constructor],
            "properties": [self._property_context(prefix, class_name, p) for p in properties],
            "releasable": [p for p in properties if p.free],
        }

    def _property_context(
        self, prefix: str, class_name: str, prop: GObjectProperty
    ) -> Dict[str, Any]:
        """Add the per-property prototypes to the mapped fragments."""
        field = f"{prop.declaration};"
        if self.config.add_comments and prop.comment:
            field += f" /**< {c_comment_text(prop.comment)} */"

        return {
            "mapped": prop,
            "name": prop.name,
            "enum": prop.enum,
            "field": field,
            "parameter": prop.parameter,
            "setter_name": f"{prefix}_set_{prop.name}",
            "getter_name": f"{prefix}_get_{prop.name}",
            "getter_type": prop.param_type,
            "getter_prototype": c_declaration(
                prop.param_type, f"{prefix}_get_{prop.name}({class_name} *self)"
            ),
        }

    @staticmethod
    def _include_guard(basename: str) -> str:
        return "".join(c if c.isalnum() else "_" for c in basename).upper() + "_H"


def create_gobject_generator(config: Optional[Dict[str, Any]] = None) -> GObjectGenerator:
    """Create a GObject generator with default configuration."""
    return GObjectGenerator(config)
