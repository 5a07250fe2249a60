"""
Generator contract and the run wrapper.

A run either yields the whole file or fails as a unit; generate_code turns
generator errors into a failed GenerationResult.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..logging_config import get_logger
from .config import ConfigError, GeneratorConfig
from .schema import Definition, Schema
from .templates import TemplateEngine, TemplateError, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class UnknownTypeError(GeneratorError):
    """Raised when a referenced type is missing from the type registry."""

    def __init__(self, type_name: str):
        super().__init__(f"Type '{type_name}' is not defined in the schema")
        self.type_name = type_name


class CodeGenerator(ABC):
    """A target language: turns a Schema into one source file."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'php')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.php')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None when the generator has no templates.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        return self._template_engine

    @abstractmethod
    def generate(self, schema: Schema) -> str:
        """
        Generate code for a whole schema.

        Args:
            schema: Parsed schema

        Returns:
            Generated code as a string
        """
        pass

    @abstractmethod
    def generate_single_definition(
        self, definition: Definition, schema: Schema
    ) -> Optional[str]:
        """
        Generate code for a single definition.

        Returns:
            Generated code, or None when the definition emits nothing
        """
        pass

    def validate_schema(self, schema: Schema) -> List[str]:
        """
        Validate a schema for structural issues worth reporting.

        Language generators extend this with their own checks.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for definition in schema.definitions:
            fields = getattr(definition, "fields", None)
            values = getattr(definition, "values", None)
            if fields is not None and not fields:
                warnings.append(f"Type '{definition.name}' has no fields")
            if values is not None and not values:
                warnings.append(f"Enum '{definition.name}' has no values")

        return warnings

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Outcome of one run: code plus warnings, or an error with no code."""

    def __init__(
        self,
        code: str,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(
        cls, message: str, exception: Optional[Exception] = None
    ) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, schema: Schema) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Any failure aborts the whole run: the result then carries no code.

    Args:
        generator: Code generator instance
        schema: Schema to generate code for

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_schema(schema)
        code = generator.generate(schema)
    except (GeneratorError, TemplateError, ConfigError) as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "definition_count": len(schema.definitions),
        "warning_count": len(warnings),
    }
    logger.info(
        "Generated %s code for %d definitions",
        generator.language_name,
        len(schema.definitions),
    )

    return GenerationResult(code, warnings, metadata)
