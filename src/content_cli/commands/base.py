"""Command declarations and the context handed to implementations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    import click

    from content_cli.config import CliConfig
    from content_cli.reporter import Reporter
    from content_cli.site import SiteInfo


@dataclass
class CommandContext:
    """Everything a command implementation receives."""

    args: dict[str, Any]
    site: SiteInfo
    config: CliConfig
    reporter: Reporter

    @property
    def use_yarn(self) -> bool:
        return self.site.use_yarn

    def as_dict(self) -> dict[str, Any]:
        """Flatten parsed options and site info into one mapping."""
        return {
            **self.args,
            **self.site.to_dict(),
            "use_yarn": self.use_yarn,
            "verbose": self.config.verbose,
            "no_color": self.config.no_color,
        }


@dataclass
class CommandSpec:
    """A command the CLI exposes.

    ``handler`` wraps the implementation when set; otherwise the
    implementation is called directly with the CommandContext.
    """

    name: str
    description: str
    params: list[click.Parameter] = field(default_factory=list)
    handler: Callable[[CommandContext, Callable[[CommandContext], Any]], Any] | None = None
    local: bool = True
    implementation: Callable[[CommandContext], Any] | None = None
