"""
Schema-to-declaration mapping for PHP.

PhpSchemaVisitor turns each schema definition into PHP text:

* enums become ``enum`` declarations with one ``case`` line per value,
* input objects become constructor-promoted data holder classes,
* object type fields that take arguments become ``<Type><Field>Args``
  classes of the same shape.
"""

from typing import Callable, List, Optional, Sequence

from ...core.config import GeneratorConfig
from ...core.naming import convert_case
from ...core.schema import (
    Definition,
    EnumDefinition,
    FieldDefinition,
    InputObjectDefinition,
    InputValue,
    ObjectDefinition,
    TypeRegistry,
)
from ...logging_config import get_logger
from .config import ARGS_SUFFIX, PROMOTED_PROPERTY_ACCESS
from .declaration_block import Kind, PhpDeclarationBlock, indent_multiline
from .naming import create_enum_case_sanitizer
from .types import PhpTypeMapper

logger = get_logger(__name__)


class PhpSchemaVisitor:
    """Produces one PHP text fragment per schema definition."""

    def __init__(
        self,
        registry: TypeRegistry,
        config: Optional[GeneratorConfig] = None,
        convert_name: Optional[Callable[[str], str]] = None,
    ):
        self.config = config or GeneratorConfig()
        self.type_mapper = PhpTypeMapper(registry, self.config, convert_name)
        self.case_sanitizer = create_enum_case_sanitizer()

    def convert_name(self, name: str) -> str:
        """Convert a type name (naming convention and types prefix)."""
        return self.type_mapper.convert_name(name)

    def convert_field_name(self, name: str) -> str:
        """Convert a field name (naming convention only)."""
        return convert_case(name, self.config.naming_case)

    def visit(self, definition: Definition) -> Optional[str]:
        """
        Emit the text for one definition.

        Returns:
            PHP text, or None when the definition produces no declaration
        """
        if isinstance(definition, EnumDefinition):
            return self.enum_type_definition(definition)
        if isinstance(definition, InputObjectDefinition):
            return self.input_object_type_definition(definition)
        if isinstance(definition, ObjectDefinition):
            return self.object_type_definition(definition)
        raise TypeError(f"Unsupported definition: {type(definition).__name__}")

    def get_enum_value(self, enum_name: str, value_name: str) -> str:
        """Configured literal for an enum value, else the value name itself."""
        overrides = self.config.enum_values.get(enum_name)
        if isinstance(overrides, dict) and overrides.get(value_name):
            return overrides[value_name]
        return value_name

    def enum_type_definition(self, node: EnumDefinition) -> str:
        lines = []
        for value in node.values:
            literal = self.get_enum_value(node.name, value.name)
            escaped = self.case_sanitizer.escape_reserved(literal)
            if escaped != literal:
                logger.debug("Enum case %s.%s escaped as %s", node.name, literal, escaped)
            lines.append(f"case {escaped};")

        block = indent_multiline("\n".join(lines), self.config.indent)
        description = node.description if self.config.add_comments else None

        return (
            PhpDeclarationBlock(self.config.indent)
            .as_kind(Kind.ENUM)
            .with_comment(description)
            .with_name(self.convert_name(node.name))
            .with_block(block)
            .render()
        )

    def build_input_transformer(self, name: str, fields: Sequence[InputValue]) -> str:
        """
        Render a data holder class whose constructor promotes every field.

        The layout is fixed: brace on its own line, a tab before the
        constructor, parameters joined by a bare comma, empty body.
        """
        prefix = self.config.class_members_prefix
        params = ",".join(
            f"{PROMOTED_PROPERTY_ACCESS} {self.type_mapper.resolve(f.type).type_name} "
            f"${prefix}{f.name}"
            for f in fields
        )

        return f"class {name}\n{{\n\tpublic function __construct({params}) {{}}\n}}"

    def input_object_type_definition(self, node: InputObjectDefinition) -> str:
        name = self.type_mapper.input_type_name(node.name)
        logger.debug("Emitting input class %s", name)
        return self.build_input_transformer(name, node.fields)

    def field_definition(self, node: FieldDefinition, type_name: str) -> Optional[str]:
        """Arguments class for a field, or None when it takes no arguments."""
        if not node.arguments:
            return None

        name = (
            f"{self.convert_name(type_name)}"
            f"{self.convert_field_name(node.name)}{ARGS_SUFFIX}"
        )
        logger.debug("Emitting arguments class %s", name)
        return self.build_input_transformer(name, node.arguments)

    def object_type_definition(self, node: ObjectDefinition) -> Optional[str]:
        fragments: List[str] = []
        for field in node.fields:
            fragment = self.field_definition(field, node.name)
            if fragment:
                fragments.append(fragment)

        return "\n".join(fragments) if fragments else None
