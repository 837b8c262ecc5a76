"""Exceptions raised while resolving and dispatching commands."""

from __future__ import annotations


class ContentCliError(Exception):
    pass


class DuplicateCommandError(ContentCliError):
    pass


class NotASiteError(ContentCliError):
    """A site command was run outside a site directory."""

    def __init__(self, command: str, toolset: str = "gatsby") -> None:
        self.command = command
        super().__init__(
            f"content-cli <{command}> can only be run for a site.\n"
            "Either the current working directory does not contain a valid "
            f"package.json or '{toolset}' is not specified as a dependency"
        )


class CommandLoadError(ContentCliError):
    """The site's toolset does not provide an implementation."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(
            f"There was a problem loading the local {command} command. "
            "The toolset may not be installed in your site's \"node_modules\" "
            "directory. Perhaps you need to run \"npm install\"?"
        )
