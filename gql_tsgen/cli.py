"""Command-line interface for gql-tsgen."""

import logging
from pathlib import Path

import click
from graphql import GraphQLError
from pydantic import ValidationError
from rich.logging import RichHandler

from .config import CompileOptions
from .core.compiler import Compiler
from .core.errors import CompilationError
from .core.generator import CodeGenerator
from .core.parser import DisplayType
from .sources import SourceError, load_sources


def configure_logging(verbose: bool):
    """Route library logging through rich."""
    logging.basicConfig(
        level="DEBUG" if verbose else "INFO",
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
        force=True,
    )


@click.group()
@click.version_option(package_name="gql-tsgen")
def main():
    """GraphQL to TypeScript compiler.

    Generate TypeScript declarations from GraphQL schemas and operations.
    """
    pass


@main.command("compile")
@click.option(
    "--schema",
    "-s",
    "schema",
    required=True,
    multiple=True,
    help="Schema source: glob pattern(s) separated by commas, URL, or archive "
    "(.zip, .tar.gz, .tgz). May be repeated.",
)
@click.option(
    "--operations",
    "-q",
    "operations",
    multiple=True,
    help="Operations source: glob pattern(s) separated by commas, or URL. May be repeated.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(file_okay=False),
    help="Output directory for generated code.",
)
@click.option(
    "--display",
    type=click.Choice([d.value for d in DisplayType]),
    default=DisplayType.DEFAULT.value,
    show_default=True,
    help="Declaration order: source order (as-is) or grouped by kind (default).",
)
@click.option(
    "--base-path",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory relative patterns are resolved against (default: current directory).",
)
@click.option("--schema-file-name", default="schema.ts", show_default=True)
@click.option("--operations-file-name", default="operations.ts", show_default=True)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory with Jinja2 templates overriding the built-in ones.",
)
@click.option("--header", default=None, help="Banner put at the top of every generated file.")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def compile_command(
    schema: tuple[str, ...],
    operations: tuple[str, ...],
    output: str,
    display: str,
    base_path: str | None,
    schema_file_name: str,
    operations_file_name: str,
    template_dir: str | None,
    header: str | None,
    verbose: bool,
):
    """Compile a GraphQL schema and its operations to TypeScript.

    Examples:

        gql-tsgen compile --schema ./schema.graphql --output ./generated

        gql-tsgen compile -s "schema/*.graphql" -q "src/**/*.graphql" -o ./src/gql

        gql-tsgen compile -s https://example.com/schema.graphql -o ./generated --display as-is
    """
    configure_logging(verbose)

    try:
        options = CompileOptions(
            schema=list(schema),
            operations=list(operations),
            output_path=Path(output).resolve(),
            base_path=Path(base_path or Path.cwd()).resolve(),
            display=display,
            schema_file_name=schema_file_name,
            operations_file_name=operations_file_name,
            template_dir=template_dir,
            header=header,
        )
    except ValidationError as e:
        raise click.ClickException(str(e)) from e

    written = run_compile(options, verbose)
    click.echo(f"Done! Generated {len(written)} file(s) in {options.output_path}")


def run_compile(options: CompileOptions, verbose: bool = False) -> list[str]:
    """Load sources, compile them and write the generated files."""
    try:
        if verbose:
            click.echo(f"Base path: {options.base_path}")
            click.echo(f"Output: {options.output_path}")

        click.echo("Loading sources...")
        schema_text = load_sources(options.schema_sources, options.base_path)
        operations_text = ""
        if options.operations:
            operations_text = load_sources(options.operations, options.base_path)

        click.echo("Compiling...")
        try:
            compiler = Compiler(schema_text, display=options.display)
        except TypeError as e:
            # graphql-core reports SDL validation errors as TypeError
            raise click.ClickException(f"Invalid schema: {e}") from e
        compilation = compiler.compile(operations_text)

        if verbose:
            click.echo(f"  Scalars: {len(compilation.scalars)}")
            click.echo(f"  Enums: {len(compilation.enums)}")
            click.echo(f"  Unions: {len(compilation.unions)}")
            click.echo(f"  Entities: {len(compilation.entities)}")
            click.echo(f"  Operations: {len(compilation.operations)}")

        click.echo("Generating code...")
        generator = CodeGenerator(
            compilation,
            str(options.output_path),
            schema_file_name=options.schema_file_name,
            operations_file_name=options.operations_file_name,
            template_dir=str(options.template_dir) if options.template_dir else None,
            header=options.header,
        )
        return generator.generate()
    except (CompilationError, SourceError, GraphQLError) as e:
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    main()
