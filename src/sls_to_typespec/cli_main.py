"""Command-line interface for the serverless to TypeSpec generator."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from sls_to_typespec import __version__
from sls_to_typespec.cli.exception_handler import handle_exceptions
from sls_to_typespec.models import ArrayResponseMode, GeneratorOptions, load_serverless_config

# Create Typer app
app = typer.Typer(
    name="sls-to-typespec",
    help="Generate a TypeSpec HTTP API description from a serverless.yml.",
    add_completion=True,
    no_args_is_help=True,
)

# Rich consoles for output
console = Console()
error_console = Console(stderr=True, style="bold red")
log_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"sls-to-typespec version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route package log records through Rich."""
    logger = logging.getLogger("sls_to_typespec")
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=log_console, show_time=False, show_path=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate TypeSpec from a serverless framework configuration.

    Reads the API Gateway request/response schemas and documentation of
    every http function and writes an equivalent main.tsp plus a
    tspconfig.yaml that emits OpenAPI 3.
    """


@app.command()
def generate(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="serverless.yml (or .json) to read.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    output_dir: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Directory for main.tsp and tspconfig.yaml.",
            file_okay=False,
            resolve_path=True,
        ),
    ] = Path("typespec"),
    title: Annotated[
        str | None,
        typer.Option("--title", help="Service title. Overrides custom.typespecGenerator.title."),
    ] = None,
    namespace: Annotated[
        str | None,
        typer.Option(
            "--namespace",
            help="Service namespace. Overrides custom.typespecGenerator.namespace.",
        ),
    ] = None,
    array_mode: Annotated[
        ArrayResponseMode | None,
        typer.Option(
            "--array-mode",
            help="Declare titled array items as an alias of the array or as a model.",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite main.tsp if it exists.",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Print the TypeSpec to stdout instead of writing files.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Show debug logging and full tracebacks.",
        ),
    ] = False,
) -> None:
    """Generate main.tsp and tspconfig.yaml from a serverless configuration.

    Examples
    --------
        sls-to-typespec generate serverless.yml
        sls-to-typespec generate serverless.yml -o api --title "Users API"
        sls-to-typespec generate serverless.yml --array-mode element --force
        sls-to-typespec generate serverless.yml --dry-run

    """
    _configure_logging(verbose)
    handle_exceptions(verbose)(_generate)(
        input_file,
        output_dir,
        title=title,
        namespace=namespace,
        array_mode=array_mode,
        force=force,
        dry_run=dry_run,
    )


def _generate(
    input_file: Path,
    output_dir: Path,
    *,
    title: str | None,
    namespace: str | None,
    array_mode: ArrayResponseMode | None,
    force: bool,
    dry_run: bool,
) -> None:
    from sls_to_typespec.emitters import MAIN_FILE, TypeSpecWriter
    from sls_to_typespec.generator import build_ir

    main_file = output_dir / MAIN_FILE
    if main_file.exists() and not force and not dry_run:
        error_console.print(
            f"\n[bold red]✗ Output file already exists: {main_file}[/bold red]\n"
            "Use --force to overwrite."
        )
        raise typer.Exit(code=1)

    config = load_serverless_config(input_file)
    options = GeneratorOptions.from_config(
        config,
        title=title,
        namespace=namespace,
        array_response_mode=array_mode,
    )
    ir_list = build_ir(config, options)
    writer = TypeSpecWriter(options)

    if dry_run:
        typer.echo(writer.render(ir_list)[MAIN_FILE], nl=False)
        return

    written = writer.write(ir_list, output_dir)
    console.print(
        f"\n[bold green]✓ Wrote {len(ir_list)} declarations to {output_dir}[/bold green]"
    )
    for path in written:
        console.print(f"  [dim]{path.name}[/dim]")
    console.print(
        f"  [dim]{options.title} v{options.version} (OpenAPI {options.openapi_version})[/dim]\n"
    )


@app.command()
def inspect(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="serverless.yml (or .json) to inspect.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Show debug logging and full tracebacks.",
        ),
    ] = False,
) -> None:
    """Show the operations and models found in a serverless configuration.

    Examples
    --------
        sls-to-typespec inspect serverless.yml

    """
    _configure_logging(verbose)
    handle_exceptions(verbose)(_inspect)(input_file)


def _inspect(input_file: Path) -> None:
    from sls_to_typespec.ir.serverless import ServerlessFunctionIR
    from sls_to_typespec.transform.normalizer import build_serverless_ir

    config = load_serverless_config(input_file)
    options = GeneratorOptions.from_config(config)
    declarations = build_serverless_ir(config, options.array_response_mode)

    console.print(
        Panel.fit(
            f"[bold]{config.service or 'serverless'}[/bold]\nFile: {input_file}",
            title="Serverless Config",
        )
    )

    table = Table(title="Declarations", show_header=True)
    table.add_column("#", style="dim", width=4)
    table.add_column("Kind", style="cyan")
    table.add_column("Name")
    table.add_column("Details", style="white")

    for i, declaration in enumerate(declarations, 1):
        if isinstance(declaration, ServerlessFunctionIR):
            event = declaration.event
            table.add_row(
                str(i),
                "operation",
                declaration.name,
                f"{event.method.value.upper()} {event.path}",
            )
        else:
            table.add_row(
                str(i),
                "model",
                declaration.name,
                f"key={declaration.key} source={declaration.source.value}",
            )

    console.print(table)


if __name__ == "__main__":
    app()
