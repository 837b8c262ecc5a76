"""User-facing output for the CLI."""

from __future__ import annotations

import logging

import click
from rich.console import Console

from content_cli.config import CliConfig

logger = logging.getLogger(__name__)


class Reporter:
    """Prints messages to stderr, honouring --verbose and --no-color."""

    def __init__(self, config: CliConfig | None = None, console: Console | None = None) -> None:
        self.config = config or CliConfig()
        self.console = console or Console(stderr=True, no_color=self.config.no_color)

    @property
    def is_verbose(self) -> bool:
        return self.config.verbose

    def _print(self, message: str, style: str | None = None) -> None:
        self.console.print(message, style=style, markup=False, highlight=False, soft_wrap=True)

    def log(self, message: str) -> None:
        """Print a message as-is. Empty messages print nothing."""
        if not message:
            return
        self._print(message)

    def verbose(self, message: str) -> None:
        """Print a message only in verbose mode."""
        if self.is_verbose:
            self._print(f"verbose {message}", style="dim")

    def panic(self, message: str, err: BaseException | None = None) -> None:
        """Report a fatal error and stop the CLI with exit code 1."""
        self._print(message, style="red")
        if err is not None:
            logger.debug(f"{type(err).__name__}: {err}", exc_info=err)
        raise click.exceptions.Exit(1)
