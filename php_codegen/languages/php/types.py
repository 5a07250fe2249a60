"""
PHP-specific type system for code generation.

Maps GraphQL type references to PHP type names with configuration-driven
behavior: scalar table, input-object suffix rule and list container type.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from ...core.config import GeneratorConfig
from ...core.generator import UnknownTypeError
from ...core.naming import convert_case, with_suffix
from ...core.schema import TypeKind, TypeRef, TypeRegistry, unwrap_type
from ...logging_config import get_logger
from .config import DEFAULT_SCALAR_TYPE, INPUT_SUFFIX, build_scalar_map

logger = get_logger(__name__)


@dataclass(frozen=True)
class PhpType:
    """
    Immutable result of resolving one type reference.

    base_type is the PHP name of the innermost named type, type_name the
    name to emit after list wrapping.
    """

    base_type: str
    type_name: str
    is_scalar: bool = False
    is_array: bool = False
    is_enum: bool = False


class PhpTypeMapper:
    """
    Central engine for mapping schema type references to PHP types.

    Required/optional modifiers never affect the result; any list layer
    turns the emitted name into the configured list type.
    """

    def __init__(
        self,
        registry: TypeRegistry,
        config: Optional[GeneratorConfig] = None,
        convert_name: Optional[Callable[[str], str]] = None,
    ):
        """
        Initialize with the type registry and configuration.

        Args:
            registry: Immutable lookup of every named type in the schema
            config: Generator configuration
            convert_name: Type name conversion; defaults to the configured
                naming convention plus types prefix
        """
        self.registry = registry
        self.config = config or GeneratorConfig()
        self.scalars = build_scalar_map(self.config)
        self.convert_name = convert_name or self._default_convert_name

    def _default_convert_name(self, name: str) -> str:
        converted = convert_case(name, self.config.naming_case)
        return f"{self.config.types_prefix}{converted}"

    def input_type_name(self, name: str) -> str:
        """PHP class name of an input object: converted name with `Input` suffix."""
        return with_suffix(self.convert_name(name), INPUT_SUFFIX)

    def resolve(self, type_ref: TypeRef) -> PhpType:
        """
        Resolve a type reference.

        Args:
            type_ref: Field or argument type, possibly wrapped

        Returns:
            PhpType describing the PHP type to emit

        Raises:
            UnknownTypeError: If the named type is not in the registry
        """
        named, is_array = unwrap_type(type_ref)
        kind = self.registry.get_kind(named.name)

        if kind is None:
            raise UnknownTypeError(named.name)

        if kind == TypeKind.SCALAR:
            result = self._map_scalar(named.name)
        elif kind == TypeKind.INPUT_OBJECT:
            type_name = self.input_type_name(named.name)
            result = PhpType(base_type=type_name, type_name=type_name)
        elif kind == TypeKind.ENUM:
            type_name = self.convert_name(named.name)
            result = PhpType(base_type=type_name, type_name=type_name, is_enum=True)
        else:
            result = self._get_fallback_type()

        if is_array:
            return PhpType(
                base_type=result.base_type,
                type_name=self.config.list_type,
                is_scalar=result.is_scalar,
                is_array=True,
                is_enum=result.is_enum,
            )

        return result

    def _map_scalar(self, name: str) -> PhpType:
        mapped = self.scalars.get(name)
        if mapped is None:
            logger.debug("Scalar '%s' has no mapping, using %s", name, DEFAULT_SCALAR_TYPE)
            return self._get_fallback_type()
        return PhpType(base_type=mapped, type_name=mapped, is_scalar=True)

    def _get_fallback_type(self) -> PhpType:
        return PhpType(
            base_type=DEFAULT_SCALAR_TYPE,
            type_name=DEFAULT_SCALAR_TYPE,
            is_scalar=True,
        )

    def unmapped_scalars(self) -> List[str]:
        """Registered scalars that will fall back to the generic object type."""
        return [
            name
            for name in self.registry.names()
            if self.registry.get_kind(name) == TypeKind.SCALAR
            and name not in self.scalars
        ]

    def scalar_table(self) -> Dict[str, str]:
        """Effective scalar mapping for every registered scalar."""
        return {
            name: self.scalars.get(name, DEFAULT_SCALAR_TYPE)
            for name in self.registry.names()
            if self.registry.get_kind(name) == TypeKind.SCALAR
        }
