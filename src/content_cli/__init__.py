"""content-cli - command dispatcher for content sites."""

__version__ = "0.1.0"

# Lazy imports keep the suggestion engine importable without loading click
def __getattr__(name: str):
    """Lazy import of the public API."""
    if name == "SuggestionEngine":
        from content_cli.suggest import SuggestionEngine
        return SuggestionEngine
    elif name == "CommandRegistry":
        from content_cli.commands.registry import CommandRegistry
        return CommandRegistry
    elif name == "build_cli":
        from content_cli.cli import build_cli
        return build_cli
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "SuggestionEngine",
    "CommandRegistry",
    "build_cli",
]
