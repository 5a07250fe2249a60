"""
PHP-specific configuration and type mappings.

Holds the built-in scalar table, the naming constants shared by the type
mapper and the visitor, and namespace derivation from output paths.
"""

from pathlib import PurePath
from typing import Dict, Optional

from ...core.config import GeneratorConfig
from ...core.naming import to_pascal_case

# GraphQL built-in scalars that have a native PHP counterpart.
# ID and custom scalars fall back to DEFAULT_SCALAR_TYPE unless configured.
PHP_SCALARS: Dict[str, str] = {
    "String": "string",
    "Int": "int",
    "Float": "float",
    "Boolean": "bool",
}

DEFAULT_SCALAR_TYPE = "object"
DEFAULT_NAMESPACE = "App\\Generated"

INPUT_SUFFIX = "Input"
ARGS_SUFFIX = "Args"

# Constructor property promotion used by transfer-object classes
PROMOTED_PROPERTY_ACCESS = "public readonly"


def build_scalar_map(config: GeneratorConfig) -> Dict[str, str]:
    """Built-in scalar table with the configured overrides applied."""
    scalars = dict(PHP_SCALARS)
    scalars.update(config.scalars)
    return scalars


def build_namespace_from_path(path: Optional[str]) -> str:
    """
    Derive a PHP namespace from a directory path.

    ``php/generated`` becomes ``Php\\Generated``. Empty or relative-only
    paths yield DEFAULT_NAMESPACE.
    """
    if not path:
        return DEFAULT_NAMESPACE

    segments = [
        to_pascal_case(part)
        for part in PurePath(path).parts
        if part not in ("/", ".", "..") and not part.endswith(":\\")
    ]
    segments = [segment for segment in segments if segment]

    return "\\".join(segments) if segments else DEFAULT_NAMESPACE


def resolve_namespace(config: GeneratorConfig) -> str:
    """Explicit namespace, else one derived from the output file directory."""
    if config.namespace:
        return config.namespace
    if config.output_file:
        return build_namespace_from_path(str(PurePath(config.output_file).parent))
    return DEFAULT_NAMESPACE
