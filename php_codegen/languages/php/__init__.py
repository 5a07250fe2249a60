"""
PHP code generator module.

Generates PHP enums and constructor-promoted transfer classes from a
GraphQL schema.
"""

from .config import (
    DEFAULT_NAMESPACE,
    DEFAULT_SCALAR_TYPE,
    PHP_SCALARS,
    build_namespace_from_path,
)
from .declaration_block import (
    Access,
    ClassMember,
    ClassMethod,
    Kind,
    MemberFlags,
    PhpDeclarationBlock,
    transform_comment,
)
from .generator import PhpGenerator, create_php_generator
from .naming import PHP_RESERVED_CASE_NAMES, create_enum_case_sanitizer
from .types import PhpType, PhpTypeMapper
from .visitor import PhpSchemaVisitor

__all__ = [
    # Generator
    "PhpGenerator",
    "create_php_generator",
    # Declaration builder
    "Access",
    "ClassMember",
    "ClassMethod",
    "Kind",
    "MemberFlags",
    "PhpDeclarationBlock",
    "transform_comment",
    # Type system
    "PhpType",
    "PhpTypeMapper",
    "PhpSchemaVisitor",
    # Configuration and naming
    "DEFAULT_NAMESPACE",
    "DEFAULT_SCALAR_TYPE",
    "PHP_SCALARS",
    "PHP_RESERVED_CASE_NAMES",
    "build_namespace_from_path",
    "create_enum_case_sanitizer",
]
