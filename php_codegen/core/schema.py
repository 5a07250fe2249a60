"""
Core schema representation for code generation.

Converts a GraphQL SDL document into a normalized, immutable internal
format that generators can work with consistently: an ordered list of
definitions plus a type registry used for name lookups.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple, Union

from graphql import (
    GraphQLError,
    GraphQLSchema,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    TypeDefinitionNode,
    TypeExtensionNode,
    build_ast_schema,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
    is_scalar_type,
    is_union_type,
    parse,
    parse_type,
)

from ..logging_config import get_logger

logger = get_logger(__name__)


class SchemaLoadError(Exception):
    """Exception raised when a schema cannot be parsed or built."""

    pass


class TypeKind(Enum):
    """Classification of a named schema type."""

    SCALAR = "scalar"
    INPUT_OBJECT = "input_object"
    ENUM = "enum"
    OBJECT = "object"
    INTERFACE = "interface"
    UNION = "union"


@dataclass(frozen=True)
class NamedTypeRef:
    """Reference to a named type, e.g. ``String``."""

    name: str


@dataclass(frozen=True)
class ListTypeRef:
    """List modifier, e.g. ``[String]``."""

    of_type: "TypeRef"


@dataclass(frozen=True)
class NonNullTypeRef:
    """Required modifier, e.g. ``String!``."""

    of_type: "TypeRef"


TypeRef = Union[NamedTypeRef, ListTypeRef, NonNullTypeRef]


def unwrap_type(type_ref: TypeRef) -> Tuple[NamedTypeRef, bool]:
    """
    Strip list and non-null modifiers from a type reference.

    Args:
        type_ref: Possibly wrapped type reference

    Returns:
        Tuple of (innermost named type, whether any layer was a list)
    """
    is_list = False
    current = type_ref

    while not isinstance(current, NamedTypeRef):
        if isinstance(current, ListTypeRef):
            is_list = True
        current = current.of_type

    return current, is_list


def type_ref_to_string(type_ref: TypeRef) -> str:
    """Print a type reference in SDL notation."""
    if isinstance(type_ref, ListTypeRef):
        return f"[{type_ref_to_string(type_ref.of_type)}]"
    if isinstance(type_ref, NonNullTypeRef):
        return f"{type_ref_to_string(type_ref.of_type)}!"
    return type_ref.name


@dataclass(frozen=True)
class InputValue:
    """An input object field or a field argument."""

    name: str
    type: TypeRef
    description: Optional[str] = None


@dataclass(frozen=True)
class FieldDefinition:
    """A field of an object type, possibly declaring arguments."""

    name: str
    type: TypeRef
    arguments: Tuple[InputValue, ...] = ()
    description: Optional[str] = None


@dataclass(frozen=True)
class EnumValue:
    """A single declared enum value."""

    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class EnumDefinition:
    """An enum type definition."""

    name: str
    values: Tuple[EnumValue, ...] = ()
    description: Optional[str] = None


@dataclass(frozen=True)
class InputObjectDefinition:
    """An input object type definition."""

    name: str
    fields: Tuple[InputValue, ...] = ()
    description: Optional[str] = None


@dataclass(frozen=True)
class ObjectDefinition:
    """An object type definition whose fields may carry arguments."""

    name: str
    fields: Tuple[FieldDefinition, ...] = ()
    description: Optional[str] = None


Definition = Union[EnumDefinition, InputObjectDefinition, ObjectDefinition]


class TypeRegistry:
    """Immutable lookup of named types and their kinds."""

    def __init__(self, kinds: Mapping[str, TypeKind]):
        self._kinds = MappingProxyType(dict(kinds))

    def get_kind(self, name: str) -> Optional[TypeKind]:
        """Return the kind of a named type, or None if it is not registered."""
        return self._kinds.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._kinds

    def __len__(self) -> int:
        return len(self._kinds)

    def names(self) -> List[str]:
        """Get all registered type names."""
        return list(self._kinds)

    @classmethod
    def from_graphql_schema(cls, schema: GraphQLSchema) -> "TypeRegistry":
        """Build a registry from a graphql-core schema."""
        kinds: Dict[str, TypeKind] = {}

        for name, graphql_type in schema.type_map.items():
            if is_scalar_type(graphql_type):
                kinds[name] = TypeKind.SCALAR
            elif is_input_object_type(graphql_type):
                kinds[name] = TypeKind.INPUT_OBJECT
            elif is_enum_type(graphql_type):
                kinds[name] = TypeKind.ENUM
            elif is_object_type(graphql_type):
                kinds[name] = TypeKind.OBJECT
            elif is_interface_type(graphql_type):
                kinds[name] = TypeKind.INTERFACE
            elif is_union_type(graphql_type):
                kinds[name] = TypeKind.UNION

        return cls(kinds)


@dataclass(frozen=True)
class Schema:
    """A parsed schema: definitions in source order plus the type registry."""

    definitions: Tuple[Definition, ...]
    registry: TypeRegistry = field(compare=False)

    def get_definition(self, name: str) -> Optional[Definition]:
        """Get a definition by type name."""
        for definition in self.definitions:
            if definition.name == name:
                return definition
        return None


def _convert_type_node(node) -> TypeRef:
    """Convert a graphql-core AST type node."""
    if isinstance(node, NonNullTypeNode):
        return NonNullTypeRef(_convert_type_node(node.type))
    if isinstance(node, ListTypeNode):
        return ListTypeRef(_convert_type_node(node.type))
    if isinstance(node, NamedTypeNode):
        return NamedTypeRef(node.name.value)
    raise SchemaLoadError(f"Unsupported type node: {node!r}")


def _convert_graphql_type(graphql_type) -> TypeRef:
    """Convert a graphql-core (possibly wrapped) type."""
    if is_non_null_type(graphql_type):
        return NonNullTypeRef(_convert_graphql_type(graphql_type.of_type))
    if is_list_type(graphql_type):
        return ListTypeRef(_convert_graphql_type(graphql_type.of_type))
    return NamedTypeRef(graphql_type.name)


def parse_type_ref(source: str) -> TypeRef:
    """
    Parse a type reference written in SDL notation.

    Args:
        source: Type text such as ``[String!]!``

    Returns:
        Equivalent TypeRef
    """
    try:
        return _convert_type_node(parse_type(source))
    except GraphQLError as e:
        raise SchemaLoadError(f"Invalid type reference '{source}': {e.message}") from e


def _input_values(values) -> Tuple[InputValue, ...]:
    return tuple(
        InputValue(
            name=name,
            type=_convert_graphql_type(value.type),
            description=value.description,
        )
        for name, value in values.items()
    )


def convert_graphql_type(graphql_type) -> Optional[Definition]:
    """
    Convert a named graphql-core type into an internal definition.

    Scalars, unions and interfaces produce no definition.
    """
    if is_enum_type(graphql_type):
        return EnumDefinition(
            name=graphql_type.name,
            values=tuple(
                EnumValue(name=name, description=value.description)
                for name, value in graphql_type.values.items()
            ),
            description=graphql_type.description,
        )

    if is_input_object_type(graphql_type):
        return InputObjectDefinition(
            name=graphql_type.name,
            fields=_input_values(graphql_type.fields),
            description=graphql_type.description,
        )

    if is_object_type(graphql_type):
        return ObjectDefinition(
            name=graphql_type.name,
            fields=tuple(
                FieldDefinition(
                    name=name,
                    type=_convert_graphql_type(graphql_field.type),
                    arguments=_input_values(graphql_field.args),
                    description=graphql_field.description,
                )
                for name, graphql_field in graphql_type.fields.items()
            ),
            description=graphql_type.description,
        )

    return None


def parse_schema(sdl: str) -> Schema:
    """
    Parse SDL text into the internal schema representation.

    Definitions keep the order in which their names first appear in the
    document; type extensions are merged into their base type.

    Args:
        sdl: GraphQL schema definition language text

    Returns:
        Schema with ordered definitions and a type registry

    Raises:
        SchemaLoadError: If the SDL is syntactically or semantically invalid
    """
    try:
        document = parse(sdl)
        graphql_schema = build_ast_schema(document)
    except GraphQLError as e:
        raise SchemaLoadError(f"Invalid schema: {e.message}") from e
    except TypeError as e:
        # SDL validation errors are reported as TypeError by graphql-core
        raise SchemaLoadError(f"Invalid schema: {e}") from e

    ordered_names: List[str] = []
    for node in document.definitions:
        if isinstance(node, (TypeDefinitionNode, TypeExtensionNode)):
            name = node.name.value
            if name not in ordered_names:
                ordered_names.append(name)

    definitions = []
    for name in ordered_names:
        definition = convert_graphql_type(graphql_schema.get_type(name))
        if definition is not None:
            definitions.append(definition)

    registry = TypeRegistry.from_graphql_schema(graphql_schema)
    logger.debug(
        "Parsed schema: %d definitions, %d registered types",
        len(definitions),
        len(registry),
    )

    return Schema(definitions=tuple(definitions), registry=registry)
