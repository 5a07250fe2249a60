"""
GraphQL to PHP code generation.

Generates PHP enums, input classes and field-argument classes from a
GraphQL schema.
"""

from typing import Any, Dict, Optional, Union

from .core.config import ConfigManager, GeneratorConfig, load_config
from .core.generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    UnknownTypeError,
    generate_code,
)
from .core.schema import Schema, SchemaLoadError, TypeRegistry, parse_schema
from .languages.php import PhpGenerator, create_php_generator
from .utils import load_schema

__version__ = "0.1.0"


def generate_from_sdl(
    sdl: str, config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None
) -> GenerationResult:
    """
    Generate PHP code from SDL text.

    Args:
        sdl: GraphQL schema definition language text
        config: GeneratorConfig, or a dict of overrides merged over defaults

    Returns:
        GenerationResult with generated code

    Raises:
        SchemaLoadError: If the SDL cannot be parsed
    """
    schema = parse_schema(sdl)

    if isinstance(config, GeneratorConfig):
        generator = PhpGenerator(config)
    else:
        generator = create_php_generator(config)

    return generate_code(generator, schema)


def quick_generate(sdl: str, **options) -> str:
    """
    Quick code generation from SDL text.

    Args:
        sdl: GraphQL schema definition language text
        **options: Configuration overrides

    Returns:
        Generated code string
    """
    result = generate_from_sdl(sdl, options)

    if result.success:
        return result.code
    raise GeneratorError(result.error_message) from result.exception


__all__ = [
    "CodeGenerator",
    "ConfigManager",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "PhpGenerator",
    "Schema",
    "SchemaLoadError",
    "TypeRegistry",
    "UnknownTypeError",
    "create_php_generator",
    "generate_code",
    "generate_from_sdl",
    "load_config",
    "load_schema",
    "parse_schema",
    "quick_generate",
]
