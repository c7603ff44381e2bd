"""
Base generator interface for all code generation variants.

Defines the contract that every emitter implements and the driver
function that runs translation and emission for one schema.
"""

from abc import ABC, abstractmethod
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ...logging_config import get_logger, log_timing
from .config import GeneratorConfig, load_config
from .descriptors import ClassDescriptor
from .naming import PARENT_INSTANCE_MEMBER, is_c_reserved
from .schema import SchemaDocument
from .templates import TemplateEngine, TemplateError, create_template_engine
from .translator import TranslationError, translate_document

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None):
        """Initialize generator with optional configuration."""
        if isinstance(config, GeneratorConfig):
            self.config = config
        else:
            self.config = load_config(self.language_name, custom_config=config)
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the registry name of this variant (e.g. 'gobject')."""
        pass

    @property
    @abstractmethod
    def file_extensions(self) -> Tuple[str, ...]:
        """Return the extensions of the artifacts this variant produces."""
        pass

    @property
    def writes_files(self) -> bool:
        """Whether the CLI writes the artifacts to files instead of stdout."""
        return False

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses override this to provide their template directory.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, classes: List[ClassDescriptor], root_name: str) -> Dict[str, str]:
        """
        Generate code for all classes.

        Args:
            classes: Class descriptors in post-order (root class last)
            root_name: Name used for output artifacts

        Returns:
            Mapping of file extension to generated text
        """
        pass

    @abstractmethod
    def generate_single_class(self, cls: ClassDescriptor) -> str:
        """Generate code for a single class."""
        pass

    def validate_classes(self, classes: List[ClassDescriptor]) -> List[str]:
        """
        Check translated classes for problems that would break the C output.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        counts = Counter(cls.name for cls in classes)
        for name, count in sorted(counts.items()):
            if count > 1:
                warnings.append(
                    f"Class name '{name}' is generated {count} times; "
                    "nested objects with the same key collide"
                )

        for cls in classes:
            if not cls.properties:
                warnings.append(f"Class '{cls.name}' has no properties")

            for prop in cls.properties:
                if is_c_reserved(prop.member_name):
                    warnings.append(
                        f"Property {cls.name}.{prop.source_name} maps to C keyword "
                        f"'{prop.member_name}'"
                    )
                if prop.member_name == PARENT_INSTANCE_MEMBER:
                    warnings.append(
                        f"Property {cls.name}.{prop.source_name} shadows the "
                        f"'{PARENT_INSTANCE_MEMBER}' struct member"
                    )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply basic formatting to generated code.

        Strips trailing whitespace, allows at most two consecutive blank
        lines and ends the text with exactly one newline.
        """
        formatted_lines = []
        blank_count = 0

        for line in code.split("\n"):
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        files: Dict[str, str],
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            files: Generated text keyed by file extension
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.files = files
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @property
    def code(self) -> str:
        """All generated artifacts concatenated in production order."""
        return "\n".join(self.files.values())

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(files={})
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator,
    document: SchemaDocument,
    namespace: Optional[str] = None,
    class_name: Optional[str] = None,
) -> GenerationResult:
    """
    Translate a schema and generate code for it.

    Translation completes before anything is emitted, so a failure never
    leaves partial output behind: the result is either complete or an
    error result with no files.

    Args:
        generator: Code generator instance
        document: Decoded schema document
        namespace: Namespace of the generated classes (defaults to config)
        class_name: Name used for artifacts and for an untitled root class

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    namespace = namespace if namespace is not None else generator.config.namespace

    try:
        with log_timing("Schema translation", logger):
            classes = translate_document(
                document,
                namespace,
                class_name,
                sort_properties=generator.config.sort_properties,
            )
    except TranslationError as e:
        logger.debug("Translation failed: %s", e)
        return GenerationResult.error(f"Translation failed: {e}", exception=e)

    root_name = class_name or classes[-1].name

    try:
        warnings = generator.validate_classes(classes)

        with log_timing(f"{generator.language_name} emission", logger):
            files = generator.generate(classes, root_name)

        formatted = {ext: generator.format_code(code) for ext, code in files.items()}
    except (GeneratorError, TemplateError) as e:
        logger.debug("Emission failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    metadata = {
        "language": generator.language_name,
        "file_extensions": ", ".join(formatted),
        "class_count": len(classes),
        "property_count": sum(len(cls.properties) for cls in classes),
        "property_counts": [len(cls.properties) for cls in classes],
        "root_class": classes[-1].name,
        "classes": [cls.name for cls in classes],
    }

    return GenerationResult(formatted, warnings, metadata)
