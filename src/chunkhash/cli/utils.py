"""Shared utilities for CLI commands."""

import functools
import io
from collections.abc import Callable
from typing import Any, TypeVar

import typer
from rich.console import Console

from chunkhash.exceptions import ChunkHashError

# Type variable for decorators
F = TypeVar("F", bound=Callable[..., Any])

# Context storage for flags
_context: dict[str, Any] = {"verbose": False, "quiet": 0}


def set_context(verbose: bool = False, quiet: int = 0) -> None:
    """Set global context values."""
    _context["verbose"] = verbose
    _context["quiet"] = quiet


def get_context_value(key: str, default: Any = None) -> Any:
    """Get a value from the context."""
    return _context.get(key, default)


def get_console() -> Console:
    """Get a stderr Console, or a null console in silent mode."""
    if is_silent():
        return Console(file=io.StringIO(), stderr=True)
    return Console(stderr=True)


def is_quiet() -> bool:
    """Check if quiet mode is enabled (-q or --silent)."""
    return bool(get_context_value("quiet", 0) >= 1)


def is_silent() -> bool:
    """Check if silent mode is enabled (exit code only)."""
    return bool(get_context_value("quiet", 0) >= 2)


def is_verbose() -> bool:
    """Check if verbose mode is enabled (-v)."""
    return bool(get_context_value("verbose", False))


def handle_errors(func: F) -> F:
    """Decorator for consistent CLI error handling.

    Catches chunkhash exceptions and displays user-friendly error messages
    instead of raw Python tracebacks. Respects --verbose and --silent flags.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        err_console = get_console()
        verbose = is_verbose()

        try:
            return func(*args, **kwargs)
        except ChunkHashError as e:
            if verbose:
                err_console.print_exception()
            else:
                err_console.print(f"[red]Error:[/red] {e.message}")
                if e.details:
                    err_console.print(f"[dim]{e.details}[/dim]")
                if e.hint:
                    err_console.print(f"[dim]Hint: {e.hint}[/dim]")
            raise typer.Exit(e.exit_code)
        except KeyboardInterrupt:
            err_console.print("\n[yellow]Interrupted[/yellow]")
            raise typer.Exit(130)
        except typer.Exit:
            raise
        except typer.BadParameter:
            raise
        except Exception as e:
            if verbose:
                err_console.print_exception()
            else:
                err_console.print(f"[red]Unexpected error:[/red] {type(e).__name__}: {e}")
            raise typer.Exit(1)

    return wrapper  # type: ignore[return-value]
