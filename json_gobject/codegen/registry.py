"""
Generator registry system for managing available code generators.

Provides dynamic registration and instantiation of generator variants.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from .core.config import ConfigError, GeneratorConfig, load_config
from .core.generator import CodeGenerator


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class GeneratorRegistry:
    """Registry for managing available code generators."""

    def __init__(self):
        """Initialize empty registry."""
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}
        self._descriptions: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        description: str = "",
        replace: bool = False,
    ):
        """
        Register a generator for a variant.

        Args:
            language: Primary variant name (e.g., 'gobject')
            generator_class: Generator class implementing CodeGenerator
            aliases: Alternative names for this variant
            description: One-line summary shown by the CLI
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If generator class is invalid or conflicts exist
        """
        if not issubclass(generator_class, CodeGenerator):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        language_key = language.lower()

        if language_key in self._generators and not replace:
            return

        self._generators[language_key] = generator_class
        self._descriptions[language_key] = description

        for alias in aliases or []:
            alias_key = alias.lower()

            if alias_key == language_key:
                continue

            if not replace:
                if alias_key in self._generators:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing primary variant"
                    )
                if (
                    alias_key in self._aliases
                    and self._aliases[alias_key] != language_key
                ):
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                    )

            self._aliases[alias_key] = language_key

    def unregister(self, language: str):
        """Unregister a generator and its aliases."""
        language_key = language.lower()

        self._generators.pop(language_key, None)
        self._descriptions.pop(language_key, None)

        aliases_to_remove = [
            alias for alias, target in self._aliases.items() if target == language_key
        ]
        for alias in aliases_to_remove:
            del self._aliases[alias]

    def resolve(self, language: str) -> str:
        """
        Resolve a variant name or alias to its primary name.

        Raises:
            RegistryError: If the name is unknown
        """
        language_key = language.lower()

        if language_key in self._generators:
            return language_key

        if language_key in self._aliases:
            return self._aliases[language_key]

        available = self.list_languages()
        raise RegistryError(
            f"No generator registered for variant: {language}. "
            f"Available: {', '.join(available)}"
        )

    def get_generator_class(self, language: str) -> Type[CodeGenerator]:
        """Get generator class for a variant name or alias."""
        return self._generators[self.resolve(language)]

    def create_generator(
        self,
        language: str,
        config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
    ) -> CodeGenerator:
        """
        Create generator instance for a variant.

        Args:
            language: Variant name
            config: Configuration as GeneratorConfig, dict, or file path

        Returns:
            Configured generator instance

        Raises:
            RegistryError: If generator creation fails
        """
        primary = self.resolve(language)
        generator_class = self._generators[primary]

        try:
            if isinstance(config, GeneratorConfig):
                final_config = config
            elif isinstance(config, (str, Path)):
                final_config = load_config(primary, config_file=config)
            elif isinstance(config, dict):
                final_config = load_config(primary, custom_config=config)
            elif config is None:
                final_config = load_config(primary)
            else:
                raise RegistryError(f"Invalid config type: {type(config)}")
        except ConfigError as e:
            raise RegistryError(f"Failed to create {language} generator: {e}") from e

        return generator_class(final_config)

    def list_languages(self) -> List[str]:
        """Get list of registered primary variant names."""
        return sorted(self._generators.keys())

    def get_aliases_for_language(self, language: str) -> List[str]:
        """Get all aliases for a specific variant."""
        language_key = language.lower()
        return sorted(
            alias for alias, target in self._aliases.items() if target == language_key
        )

    def is_supported(self, language: str) -> bool:
        """Check if a variant name or alias is registered."""
        language_key = language.lower()
        return language_key in self._generators or language_key in self._aliases

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Get information about a registered variant.

        Raises:
            RegistryError: If variant not found
        """
        language_key = self.resolve(language)
        generator = self.create_generator(language_key)

        return {
            "name": generator.language_name,
            "class": type(generator).__name__,
            "file_extensions": list(generator.file_extensions),
            "writes_files": generator.writes_files,
            "aliases": self.get_aliases_for_language(language_key),
            "description": self._descriptions.get(language_key, ""),
            "module": type(generator).__module__,
            "config": generator.config,
        }


# Global registry instance - created once
_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _auto_register_generators(_global_registry)
    return _global_registry


def _auto_register_generators(registry: GeneratorRegistry):
    """Register the built-in generator variants with their aliases."""
    from .languages.gobject import GObjectGenerator
    from .languages.json_glib import JsonGlibGenerator
    from .languages.json_builder import JsonBuilderGenerator

    registry.register(
        "gobject",
        GObjectGenerator,
        aliases=["gobj", "property-binding"],
        description="Final GObject classes with typed properties (.h + .c)",
    )
    registry.register(
        "json-glib",
        JsonGlibGenerator,
        aliases=["json", "json-object"],
        description="One JsonObject-building function per class",
    )
    registry.register(
        "json-builder",
        JsonBuilderGenerator,
        aliases=["builder"],
        description="One JsonBuilder-driven function per class",
    )


# Public API functions using the global registry


def register_generator(
    language: str,
    generator_class: Type[CodeGenerator],
    aliases: Optional[List[str]] = None,
    description: str = "",
):
    """Register a generator in the global registry."""
    get_registry().register(language, generator_class, aliases, description)


def get_generator(
    language: str,
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> CodeGenerator:
    """Get generator instance from global registry."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    """List all supported variants from global registry."""
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    """Check if variant is supported by global registry."""
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    """Get information about a supported variant."""
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Get information about all supported variants."""
    return {language: get_language_info(language) for language in list_supported_languages()}
