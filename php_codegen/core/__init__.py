"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    UnknownTypeError,
    generate_code,
)
from .schema import (
    Definition,
    EnumDefinition,
    EnumValue,
    FieldDefinition,
    InputObjectDefinition,
    InputValue,
    ListTypeRef,
    NamedTypeRef,
    NonNullTypeRef,
    ObjectDefinition,
    Schema,
    SchemaLoadError,
    TypeKind,
    TypeRef,
    TypeRegistry,
    parse_schema,
    parse_type_ref,
    unwrap_type,
)
from .naming import NameSanitizer, NamingCase, convert_case, with_suffix
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "UnknownTypeError",
    "GenerationResult",
    "generate_code",
    # Schema system - core data structures
    "Definition",
    "EnumDefinition",
    "EnumValue",
    "FieldDefinition",
    "InputObjectDefinition",
    "InputValue",
    "ListTypeRef",
    "NamedTypeRef",
    "NonNullTypeRef",
    "ObjectDefinition",
    "Schema",
    "SchemaLoadError",
    "TypeKind",
    "TypeRef",
    "TypeRegistry",
    "parse_schema",
    "parse_type_ref",
    "unwrap_type",
    # Naming utilities - language-agnostic
    "NameSanitizer",
    "NamingCase",
    "convert_case",
    "with_suffix",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
