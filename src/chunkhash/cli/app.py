"""Main Typer application for the chunkhash CLI."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from chunkhash import __version__
from chunkhash.cli.utils import handle_errors, set_context

# Default console for output
console = Console(stderr=True)

app = typer.Typer(
    name="chunkhash",
    help="""chunkhash: Chunked XXH3 digests for files.

    [bold]Commands:[/bold]
    hash    One digest per file
    smash   One combined digest for files hashed as a single stream
    """,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"chunkhash version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("chunkhash")
    if verbose and not logger.handlers:
        logger.addHandler(RichHandler(console=console, show_path=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback()
def main(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log each source and show full tracebacks on errors.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress digest output; still shows errors.",
    ),
    silent: bool = typer.Option(
        False,
        "--silent",
        help="Completely silent (exit code only).",
    ),
):
    """chunkhash: Chunked XXH3 digests for files."""
    ctx.ensure_object(dict)
    quiet_level = 2 if silent else 1 if quiet else 0
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet_level

    # Also set global context for modules that can't access typer context
    set_context(verbose=verbose, quiet=quiet_level)
    _configure_logging(verbose)


def _setup_commands():
    """Set up all commands after imports are resolved."""
    from chunkhash.cli import hash_cmd

    app.command("hash")(handle_errors(hash_cmd.hash_files))
    app.command("smash")(handle_errors(hash_cmd.smash_files))


_setup_commands()


if __name__ == "__main__":
    app()
