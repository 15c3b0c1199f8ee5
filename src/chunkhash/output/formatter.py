"""Output formatter with JSON/pretty modes and TTY detection."""

import io
import json
import sys
from dataclasses import dataclass, field
from typing import Any

from rich.console import Console
from rich.table import Table


@dataclass
class OutputFormatter:
    """Handles output formatting with JSON/pretty modes.

    Auto-detects TTY for default mode:
    - TTY (terminal): Pretty table of digests
    - Non-TTY (pipe/redirect): JSON output for machine consumption

    Supports quiet mode to suppress all output.
    """

    force_json: bool = False
    quiet: bool = False
    _console: Console | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self._console is None:
            if self.quiet:
                self._console = Console(file=io.StringIO())
            else:
                self._console = Console()

    @property
    def console(self) -> Console:
        """Get the console instance (guaranteed non-None after init)."""
        assert self._console is not None
        return self._console

    @property
    def use_json(self) -> bool:
        """Determine if JSON output should be used."""
        if self.force_json:
            return True
        return not sys.stdout.isatty()

    def output(self, data: dict[str, Any]) -> None:
        """Output a digest report.

        Args:
            data: Report with ``digests`` (list of ``{"name", "digest"}``)
                  and the options used.
        """
        if self.quiet:
            return

        if self.use_json:
            self._output_json(data)
        else:
            self._output_digests(data)

    def _output_json(self, data: dict[str, Any]) -> None:
        """Output as JSON."""
        print(json.dumps(data, indent=2))

    def _output_digests(self, data: dict[str, Any]) -> None:
        """Output digests as a table, one row per digest."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("Digest", style="cyan", no_wrap=True)
        table.add_column("Source")
        for entry in data.get("digests", []):
            table.add_row(entry["digest"], entry["name"])
        self.console.print(table)
        self.console.print(
            f"[dim]chunk size {data.get('chunk_size')}, seed {data.get('seed')}"
            f"{', secret' if data.get('secret') else ''}[/dim]"
        )


def get_formatter(json_flag: bool = False, quiet: bool = False) -> OutputFormatter:
    """Get an output formatter with the specified flags.

    Args:
        json_flag: Force JSON output.
        quiet: Suppress all output.

    Returns:
        Configured OutputFormatter instance.
    """
    return OutputFormatter(force_json=json_flag, quiet=quiet)
