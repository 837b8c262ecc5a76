"""Registry mapping command names to their implementations."""

from __future__ import annotations

import importlib.metadata as metadata
import logging
from typing import TYPE_CHECKING, Any

from content_cli.errors import CommandLoadError, DuplicateCommandError, NotASiteError

from .base import CommandSpec

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from content_cli.site import SiteInfo

    from .base import CommandContext

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Declared commands, in registration order, and their implementations."""

    ENTRY_POINT_GROUP = "content_cli.commands"

    def __init__(self, toolset: str = "gatsby") -> None:
        """Initialize an empty registry.

        Args:
            toolset: Package a site must depend on to run local commands
        """
        self.toolset = toolset
        self._commands: dict[str, CommandSpec] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[CommandSpec]:
        return iter(list(self._commands.values()))

    def __len__(self) -> int:
        return len(self._commands)

    def register(self, spec: CommandSpec) -> CommandSpec:
        """Declare a command."""
        if spec.name in self._commands:
            raise DuplicateCommandError(f"Command already registered: {spec.name}")
        self._commands[spec.name] = spec
        logger.debug(f"Registered command: {spec.name}")
        return spec

    def get(self, name: str) -> CommandSpec | None:
        return self._commands.get(name)

    def names(self) -> list[str]:
        """Registered command names in registration order."""
        return list(self._commands)

    def implement(self, name: str, fn: Callable[[CommandContext], Any]) -> None:
        """Attach an implementation to a declared command.

        Raises:
            KeyError: If the command was never declared
        """
        if name not in self._commands:
            raise KeyError(f"Unknown command: {name}")
        self._commands[name].implementation = fn

    def load_entry_points(self, group: str | None = None) -> list[str]:
        """Attach implementations advertised by installed toolset packages.

        Entry points whose name is not a declared command, or which fail to
        load, are skipped.

        Returns:
            Names of the commands that received an implementation
        """
        loaded = []
        for ep in metadata.entry_points(group=group or self.ENTRY_POINT_GROUP):
            if ep.name not in self._commands:
                logger.debug(f"Ignoring entry point for undeclared command: {ep.name}")
                continue
            try:
                fn = ep.load()
            except Exception as e:
                logger.warning(f"Failed to load command {ep.name} from {ep.value}: {e}")
                continue
            self.implement(ep.name, fn)
            loaded.append(ep.name)
            logger.debug(f"Loaded local command {ep.name} from {ep.value}")
        return loaded

    def resolve(self, name: str, site: SiteInfo) -> Callable[[CommandContext], Any]:
        """Return the implementation to run for a command.

        Raises:
            KeyError: If the command was never declared
            NotASiteError: If a local command runs outside a site
            CommandLoadError: If no implementation is attached
        """
        spec = self._commands.get(name)
        if spec is None:
            raise KeyError(f"Unknown command: {name}")

        if spec.local and not site.is_site:
            raise NotASiteError(name, self.toolset)

        if spec.implementation is None:
            raise CommandLoadError(name)

        return spec.implementation
