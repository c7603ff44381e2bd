"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing per-variant defaults and validation for generator settings.
"""

import dataclasses
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .naming import NamingCase, is_c_identifier


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    # Output settings
    namespace: str = ""
    output_dir: Optional[str] = None

    # Code style settings
    indent_size: int = 2
    add_comments: bool = True
    class_case: str = NamingCase.CAPITALIZE.value

    # Property ids follow property order, so sorting makes them stable
    sort_properties: bool = False

    # Serialization settings
    function_prefix: str = ""
    datetime_formatter: str = "g_date_time_format_iso8601"

    extra_includes: List[str] = field(default_factory=list)

    # Custom settings (variant-specific)
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def naming_case(self) -> NamingCase:
        try:
            return NamingCase(self.class_case)
        except ValueError:
            return NamingCase.CAPITALIZE

    @property
    def indent(self) -> str:
        return " " * max(self.indent_size, 0)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for the supported variants."""
        self._configs["gobject"] = {
            "function_prefix": "",
            "indent_size": 2,
            "add_comments": True,
        }

        self._configs["json-glib"] = {
            "function_prefix": "create_",
            "indent_size": 2,
            "add_comments": True,
        }

        self._configs["json-builder"] = {
            "function_prefix": "create_",
            "indent_size": 2,
            "add_comments": True,
        }

    def get_config(
        self,
        language: Optional[str] = None,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration for a variant.

        Args:
            language: Generator variant name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the variant
        """
        # Start with defaults
        base_config = dict(self._configs.get((language or "").lower(), {}))

        # Load from file if provided
        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(file_config)

        # Apply custom overrides
        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in dataclasses.fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys end up in the custom dict
        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = dataclasses.asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def list_languages(self) -> List[str]:
        """Get list of variants with default configurations."""
        return list(self._configs.keys())

    def validate_config(self, config: GeneratorConfig, language: str) -> List[str]:
        """
        Validate configuration for a variant.

        Returns:
            List of validation warnings
        """
        warnings = []

        valid_cases = {case.value for case in NamingCase}
        if config.class_case not in valid_cases:
            warnings.append(
                f"Invalid class_case: {config.class_case} "
                f"(expected one of {', '.join(sorted(valid_cases))})"
            )

        if config.indent_size <= 0:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        if language == "gobject":
            if not config.namespace:
                warnings.append("A namespace is required for GObject generation")
            elif not is_c_identifier(config.namespace):
                warnings.append(f"Invalid C namespace: {config.namespace}")

        if config.function_prefix and not is_c_identifier(config.function_prefix):
            warnings.append(f"Invalid function_prefix: {config.function_prefix}")

        if not is_c_identifier(config.datetime_formatter):
            warnings.append(f"Invalid datetime_formatter: {config.datetime_formatter}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: Optional[str] = None,
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Generator variant name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the variant
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)


# Example configuration files for reference
EXAMPLE_GOBJECT_CONFIG = {
    "sort_properties": True,
    "class_case": "camel",
    "extra_includes": ["<gio/gio.h>"],
}

EXAMPLE_JSON_GLIB_CONFIG = {
    "function_prefix": "build_",
    "datetime_formatter": "bwc_utils_dt_fmt_to_rfc3339",
    "add_comments": False,
}
