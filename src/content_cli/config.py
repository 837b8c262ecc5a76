"""Runtime configuration threaded through command dispatch."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "content_cli"


@dataclass(frozen=True)
class CliConfig:
    """Global flags for a single CLI invocation."""

    verbose: bool = False
    no_color: bool = False
    executing_command: str | None = None

    @property
    def log_level(self) -> str:
        """Log level name handed to toolset commands."""
        return "verbose" if self.verbose else "normal"

    @classmethod
    def from_params(cls, params: dict[str, Any]) -> CliConfig:
        """Build a config from the root group's parsed options."""
        return cls(
            verbose=bool(params.get("verbose")),
            no_color=bool(params.get("no_color")),
        )

    def with_command(self, name: str) -> CliConfig:
        """Return a copy bound to the command being executed."""
        return replace(self, executing_command=name)


def configure_logging(config: CliConfig) -> None:
    """Route package log records to stderr through rich."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if config.verbose else logging.WARNING)

    for handler in logger.handlers:
        if isinstance(handler, RichHandler):
            handler.console.no_color = config.no_color
            return

    handler = RichHandler(
        console=Console(stderr=True, no_color=config.no_color),
        show_path=False,
        show_time=False,
    )
    logger.addHandler(handler)
