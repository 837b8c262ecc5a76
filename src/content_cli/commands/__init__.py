"""Command registry and built-in command declarations."""

from .base import CommandContext, CommandSpec
from .builtin import default_registry
from .registry import CommandRegistry

__all__ = ["CommandContext", "CommandSpec", "CommandRegistry", "default_registry"]
