"""
PHP code generator implementation.

Runs the schema visitor over every definition in source order and renders
the complete file (open tag, namespace, imports, declarations) from the
``file.php.j2`` template.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from ...core.config import GeneratorConfig, get_config_manager
from ...core.generator import CodeGenerator
from ...core.schema import Definition, Schema
from ...logging_config import get_logger
from .config import DEFAULT_SCALAR_TYPE, resolve_namespace
from .types import PhpTypeMapper
from .visitor import PhpSchemaVisitor

logger = get_logger(__name__)

FILE_TEMPLATE = "file.php.j2"


class PhpGenerator(CodeGenerator):
    """Code generator for PHP enums and argument/input transfer classes."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize PHP generator with configuration."""
        super().__init__(config)
        self.namespace = resolve_namespace(self.config)

    @property
    def language_name(self) -> str:
        return "php"

    @property
    def file_extension(self) -> str:
        return ".php"

    def get_template_directory(self) -> Optional[Path]:
        """Return the PHP templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    def create_visitor(self, schema: Schema) -> PhpSchemaVisitor:
        return PhpSchemaVisitor(schema.registry, self.config)

    def generate(self, schema: Schema) -> str:
        """Generate the complete PHP file for a schema."""
        visitor = self.create_visitor(schema)

        fragments = []
        for definition in schema.definitions:
            fragment = visitor.visit(definition)
            if fragment:
                fragments.append(fragment)

        logger.info(
            "Emitted %d fragments from %d definitions",
            len(fragments),
            len(schema.definitions),
        )
        return self.render_file("\n".join(fragments))

    def generate_single_definition(
        self, definition: Definition, schema: Schema
    ) -> Optional[str]:
        return self.create_visitor(schema).visit(definition)

    def render_file(self, body: str) -> str:
        """Wrap declarations with open tag, namespace and `use` lines."""
        context: Dict[str, Any] = {
            "open_tag": self.config.open_tag,
            "namespace": self.namespace,
            "imports": list(self.config.imports),
            "body": body.rstrip("\n"),
        }

        if self.template_exists(FILE_TEMPLATE):
            return self.render_template(FILE_TEMPLATE, context)

        # Fallback
        parts = []
        if context["open_tag"]:
            parts.append("<?php\n")
        parts.append(f"namespace {context['namespace']};\n")
        if context["imports"]:
            parts.append("\n".join(f"use {i};" for i in context["imports"]) + "\n")
        parts.append(context["body"] + "\n")
        return "\n".join(parts)

    def get_namespace_declaration(self) -> str:
        return f"namespace {self.namespace};"

    def get_import_statements(self) -> List[str]:
        return [f"use {i};" for i in self.config.imports]

    def validate_schema(self, schema: Schema) -> List[str]:
        """Validate schema and configuration for PHP generation."""
        warnings = super().validate_schema(schema)
        warnings.extend(get_config_manager().validate_config(self.config))

        type_mapper = PhpTypeMapper(schema.registry, self.config)
        for scalar in type_mapper.unmapped_scalars():
            warnings.append(
                f"Scalar '{scalar}' has no PHP mapping - using {DEFAULT_SCALAR_TYPE}"
            )

        for enum_name in self.config.enum_values:
            if enum_name not in schema.registry:
                warnings.append(
                    f"enum_values configured for unknown enum '{enum_name}'"
                )

        for warning in warnings:
            logger.debug("Validation: %s", warning)

        return warnings


def create_php_generator(config: Optional[Dict[str, Any]] = None) -> PhpGenerator:
    """Create a PHP generator from a configuration dict merged over defaults."""
    return PhpGenerator(get_config_manager().get_config(custom_config=config))
