"""
Command-line interface for PHP code generation.

Reads one or more GraphQL schema sources, builds the generator
configuration from a JSON file and command-line flags, and writes or
prints the generated PHP file.
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Dict, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .core.config import ConfigError, GeneratorConfig, get_config_manager
from .core.generator import GenerationResult, generate_code
from .core.naming import NamingCase
from .core.schema import SchemaLoadError
from .languages.php import PhpGenerator, PhpTypeMapper
from .logging_config import configure_logging, get_logger
from .utils import load_schema

logger = get_logger(__name__)

# Status and warnings go to stderr, generated code to stdout
console = Console(stderr=True)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="php-codegen",
        description="Generate PHP enums and transfer classes from a GraphQL schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  php-codegen schema.graphql
  php-codegen schema/ -o src/Generated/Types.php
  php-codegen schema.graphql --namespace App\\\\Types --scalar DateTime=\\\\DateTimeImmutable
  php-codegen https://example.com/schema.graphql --config codegen.json
        """.strip(),
    )

    parser.add_argument(
        "sources",
        nargs="+",
        metavar="SCHEMA",
        help="Schema file, directory of schema files, or URL",
    )
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument(
        "--timeout", type=int, default=30, help="Timeout for URL sources in seconds"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show debug logs and generation metadata"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    php_group = parser.add_argument_group("PHP options")
    php_group.add_argument("--namespace", help="PHP namespace of the generated file")
    php_group.add_argument(
        "--import",
        dest="imports",
        action="append",
        metavar="FQCN",
        help="Add a `use` statement (repeatable)",
    )
    php_group.add_argument("--list-type", help="Type name used for lists")
    php_group.add_argument(
        "--members-prefix", help="Prefix of every constructor parameter name"
    )
    php_group.add_argument("--types-prefix", help="Prefix of every generated type name")
    php_group.add_argument(
        "--naming-convention",
        choices=[case.value for case in NamingCase],
        help="Case style for generated names",
    )
    php_group.add_argument(
        "--scalar",
        action="append",
        metavar="NAME=TYPE",
        help="Map a GraphQL scalar to a PHP type (repeatable)",
    )
    php_group.add_argument(
        "--enum-value",
        action="append",
        metavar="ENUM.VALUE=LITERAL",
        help="Override the case name of an enum value (repeatable)",
    )
    php_group.add_argument(
        "--no-comments", action="store_true", help="Don't emit doc comments"
    )
    php_group.add_argument(
        "--no-open-tag", action="store_true", help="Don't emit the <?php open tag"
    )
    php_group.add_argument(
        "--use-tabs", action="store_true", help="Indent declarations with tabs"
    )
    php_group.add_argument("--indent-size", type=int, help="Spaces per indent level")

    return parser


def _parse_assignments(values: List[str], option: str) -> Dict[str, str]:
    """Parse repeated KEY=VALUE options."""
    result = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key.strip() or not value.strip():
            raise CLIError(f"{option} expects KEY=VALUE, got '{item}'")
        result[key.strip()] = value.strip()
    return result


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration: defaults, then config file, then CLI flags."""
    try:
        base = get_config_manager().get_config(config_file=args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e

    overrides = {}

    if args.output:
        overrides["output_file"] = args.output
    if args.namespace:
        overrides["namespace"] = args.namespace
    if args.imports:
        overrides["imports"] = [*base.imports, *args.imports]
    if args.list_type:
        overrides["list_type"] = args.list_type
    if args.members_prefix is not None:
        overrides["class_members_prefix"] = args.members_prefix
    if args.types_prefix is not None:
        overrides["types_prefix"] = args.types_prefix
    if args.naming_convention:
        overrides["naming_convention"] = args.naming_convention
    if args.no_comments:
        overrides["add_comments"] = False
    if args.no_open_tag:
        overrides["open_tag"] = False
    if args.use_tabs:
        overrides["use_tabs"] = True
    if args.indent_size is not None:
        overrides["indent_size"] = args.indent_size

    if args.scalar:
        overrides["scalars"] = {
            **base.scalars,
            **_parse_assignments(args.scalar, "--scalar"),
        }

    if args.enum_value:
        enum_values = {name: dict(values) for name, values in base.enum_values.items()}
        for key, literal in _parse_assignments(args.enum_value, "--enum-value").items():
            enum_name, sep, value_name = key.partition(".")
            if not sep or not value_name:
                raise CLIError(f"--enum-value expects ENUM.VALUE=LITERAL, got '{key}'")
            enum_values.setdefault(enum_name, {})[value_name] = literal
        overrides["enum_values"] = enum_values

    return replace(base, **overrides)


def _generate(args: argparse.Namespace, config: GeneratorConfig) -> GenerationResult:
    """Load the schema and run the generator with a progress spinner."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        load_task = progress.add_task("[cyan]Loading schema...", total=None)
        try:
            schema = load_schema(args.sources, timeout=args.timeout)
        except SchemaLoadError as e:
            raise CLIError(str(e)) from e
        progress.remove_task(load_task)

        progress.add_task("[green]Generating PHP code...", total=None)
        generator = PhpGenerator(config)
        result = generate_code(generator, schema)

    if args.verbose and result.success:
        _print_scalar_table(PhpTypeMapper(schema.registry, config))

    return result


def _print_scalar_table(type_mapper: PhpTypeMapper) -> None:
    table = Table(
        title="Scalar Mapping",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("GraphQL", style="bold")
    table.add_column("PHP", style="green")

    for name, php_type in sorted(type_mapper.scalar_table().items()):
        table.add_row(name, php_type)

    console.print(table)


def _print_metadata(result: GenerationResult) -> None:
    table = Table(
        title="Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Property", style="bold")
    table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        table.add_row(key.replace("_", " ").title(), str(value))

    console.print(table)


def _output(result: GenerationResult, output_file: Optional[str]) -> None:
    if output_file:
        output_path = Path(output_file)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            raise CLIError(f"Failed to write to {output_path}: {e}") from e
        console.print(f"[green]✓[/green] PHP code saved to [cyan]{output_path}[/cyan]")
        return

    if sys.stdout.isatty():
        Console().print(Syntax(result.code, "php", theme="monokai"))
    else:
        sys.stdout.write(result.code)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line interface.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = build_config(args)
        result = _generate(args, config)

        if not result.success:
            console.print(f"[red]✗ {escape(result.error_message)}[/red]")
            return 1

        _output(result, args.output)

        if args.verbose:
            _print_metadata(result)

        if result.warnings:
            console.print("[yellow]⚠️  Warnings:[/yellow]")
            for warning in result.warnings:
                console.print(f"  [yellow]•[/yellow] {escape(warning)}")

        return 0

    except CLIError as e:
        logger.debug("CLI error", exc_info=True)
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1
