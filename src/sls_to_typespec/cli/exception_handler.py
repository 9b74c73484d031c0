"""Map generator failures to Rich output and exit code 1."""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from typing import TypeVar

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from sls_to_typespec.cli.pydantic_errors import (
    format_pydantic_location,
    get_suggestion_for_error,
    translate_pydantic_error,
)
from sls_to_typespec.errors import TypeSpecGeneratorError
from sls_to_typespec.models.loader import LoaderError

T = TypeVar("T")

console = Console(stderr=True)


def handle_exceptions(
    verbose: bool = False,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Turn errors raised by a command into a report on stderr and exit code 1.

    Loader errors and invalid configurations are reported without a
    traceback; generation and write failures add one with ``verbose``.

    Args:
    ----
        verbose: Whether to show full tracebacks.

    Returns:
    -------
        Decorator function.

    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: object, **kwargs: object) -> T:
            try:
                return func(*args, **kwargs)
            except typer.Exit:
                raise
            except LoaderError as e:
                _print_panel(str(e), "Could Not Load Configuration")
            except PydanticValidationError as e:
                _print_validation_errors(e, verbose)
            except TypeSpecGeneratorError as e:
                _print_panel(f"{type(e).__name__}: {e}", "Generation Failed")
                _print_traceback(verbose)
            except OSError as e:
                message = f"{e.strerror or e}: {e.filename or 'unknown'}"
                _print_panel(message, "Could Not Write Output")
                _print_traceback(verbose)
            raise typer.Exit(1)

        return wrapper

    return decorator


def _print_panel(message: str, title: str) -> None:
    console.print(Panel(f"[red]{escape(message)}[/red]", title=title, border_style="red"))


def _print_traceback(verbose: bool) -> None:
    if verbose:
        console.print(traceback.format_exc())


def _print_validation_errors(error: PydanticValidationError, verbose: bool) -> None:
    """Print one entry per error: location, message, error type and suggestion."""
    console.print("[red bold]Configuration Validation Failed[/red bold]")
    console.print()

    for err in error.errors():
        console.print(f"[red]✗[/red] {escape(format_pydantic_location(err['loc']))}")
        console.print(f"  {escape(translate_pydantic_error(err))}")
        console.print(f"  [dim]({err['type']})[/dim]")

        suggestion = get_suggestion_for_error(err)
        if suggestion:
            console.print(f"  [green]💡 {suggestion}[/green]")

        console.print()

    if verbose:
        console.print("[dim]Full error:[/dim]")
        console.print(escape(str(error)))
