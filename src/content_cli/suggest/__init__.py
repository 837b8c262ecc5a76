"""Command-name suggestions for mistyped subcommands."""

from .engine import Match, SuggestionEngine, find_matches, suggest

__all__ = ["Match", "SuggestionEngine", "find_matches", "suggest"]
