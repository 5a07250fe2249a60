"""
Generator options and where they come from.

GeneratorConfig lists every option with its default. ConfigManager layers
built-in defaults, an optional JSON file and explicit overrides, and reports
suspicious values as warnings instead of failing.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ..logging_config import get_logger
from .naming import NamingCase

logger = get_logger(__name__)


class ConfigError(Exception):
    """Raised when configuration cannot be loaded or holds an unusable value."""

    pass


@dataclass
class GeneratorConfig:
    """Configuration for the PHP generator."""

    # Output settings
    output_file: Optional[str] = None
    namespace: Optional[str] = None
    imports: List[str] = field(default_factory=list)
    open_tag: bool = True

    # Code style settings
    indent_size: int = 4
    use_tabs: bool = False
    add_comments: bool = True

    # Naming settings
    naming_convention: str = "pascal"  # pascal, camel, snake, keep
    types_prefix: str = ""

    # Type handling
    scalars: Dict[str, str] = field(default_factory=dict)
    list_type: str = "Iterable"
    enum_values: Dict[str, Dict[str, str]] = field(default_factory=dict)
    class_members_prefix: str = ""

    # Custom settings (unknown keys)
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def indent(self) -> str:
        """One indentation level."""
        return "\t" if self.use_tabs else " " * self.indent_size

    @property
    def naming_case(self) -> NamingCase:
        """The naming convention as a NamingCase."""
        try:
            return NamingCase(self.naming_convention)
        except ValueError as e:
            raise ConfigError(
                f"Invalid naming_convention: {self.naming_convention}"
            ) from e


DEFAULT_CONFIG: Dict[str, Any] = {
    "open_tag": True,
    "indent_size": 4,
    "use_tabs": False,
    "add_comments": True,
    "naming_convention": "pascal",
    "list_type": "Iterable",
    "class_members_prefix": "",
}

# Accepted value types per option, with the wording used in error messages
OPTION_TYPES: Dict[str, Tuple[Tuple[type, ...], str]] = {
    "output_file": ((str, type(None)), "a string or null"),
    "namespace": ((str, type(None)), "a string or null"),
    "imports": ((list,), "a list of strings"),
    "open_tag": ((bool,), "a boolean"),
    "indent_size": ((int,), "an integer"),
    "use_tabs": ((bool,), "a boolean"),
    "add_comments": ((bool,), "a boolean"),
    "naming_convention": ((str,), "a string"),
    "types_prefix": ((str,), "a string"),
    "scalars": ((dict,), "an object mapping scalar names to PHP types"),
    "list_type": ((str,), "a string"),
    "enum_values": ((dict,), "an object mapping enum names to value overrides"),
    "class_members_prefix": ((str,), "a string"),
    "custom": ((dict,), "an object"),
}


def _is_str_mapping(value: Any) -> bool:
    return isinstance(value, dict) and all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    )


def _check_option(key: str, value: Any) -> None:
    """
    Reject an option value that does not fit GeneratorConfig.

    Raises:
        ConfigError: Naming the option and the expected shape
    """
    expected, description = OPTION_TYPES[key]

    # bool is a subclass of int
    valid = isinstance(value, expected) and (
        bool in expected or not isinstance(value, bool)
    )

    if valid and key == "imports":
        valid = all(isinstance(item, str) for item in value)
    elif valid and key == "scalars":
        valid = _is_str_mapping(value)
    elif valid and key == "enum_values":
        valid = all(
            isinstance(name, str) and _is_str_mapping(overrides)
            for name, overrides in value.items()
        )

    if not valid:
        raise ConfigError(
            f"Option '{key}' must be {description}, got {type(value).__name__}: {value!r}"
        )


class ConfigManager:
    """Layers defaults, a JSON file and overrides into a GeneratorConfig."""

    def __init__(self, defaults: Optional[Dict[str, Any]] = None):
        """Defaults replace DEFAULT_CONFIG when given."""
        self._defaults = dict(DEFAULT_CONFIG if defaults is None else defaults)

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Build a configuration.

        Args:
            custom_config: Option overrides, applied last
            config_file: JSON file applied over the defaults

        Returns:
            Merged configuration: defaults, then file, then overrides
        """
        base_config = dict(self._defaults)

        if config_file:
            base_config.update(self._load_config_file(config_file))

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Read a JSON object of options."""
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

        logger.info("Loaded configuration from %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Build a GeneratorConfig; unknown keys go to `custom`."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                _check_option(key, value)
                config_args[key] = value
            else:
                custom_args[key] = value

        if custom_args:
            logger.debug("Unknown configuration keys kept as custom: %s", custom_args)
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Write options as one flat JSON object (custom keys inlined)."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def validate_config(self, config: GeneratorConfig) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        valid_cases = {case.value for case in NamingCase}
        if config.naming_convention not in valid_cases:
            warnings.append(f"Invalid naming_convention: {config.naming_convention}")

        if config.namespace:
            for segment in config.namespace.split("\\"):
                if not segment.isidentifier():
                    warnings.append(f"Invalid namespace segment: '{segment}'")

        prefix = config.class_members_prefix
        if prefix and not prefix.isidentifier():
            warnings.append(f"Invalid class_members_prefix: '{prefix}'")

        if not config.list_type:
            warnings.append("list_type must not be empty")

        for enum_name, overrides in config.enum_values.items():
            if not isinstance(overrides, dict):
                warnings.append(
                    f"enum_values.{enum_name} must map value names to literals"
                )

        return warnings


_config_manager = None


def get_config_manager() -> ConfigManager:
    """Shared ConfigManager with the built-in defaults."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """Build a configuration with the shared manager."""
    return get_config_manager().get_config(custom_config, config_file)

