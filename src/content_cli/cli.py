"""Command-line interface for content-cli."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

import click

from content_cli import __version__
from content_cli.commands import CommandContext, CommandRegistry, CommandSpec, default_registry
from content_cli.config import CliConfig, configure_logging
from content_cli.errors import CommandLoadError, NotASiteError
from content_cli.reporter import Reporter
from content_cli.site import SiteInfo
from content_cli.suggest import suggest
from content_cli.telemetry import TelemetrySettings

logger = logging.getLogger(__name__)

MISSING_COMMAND = "Pass --help to see all available commands and options."


class SuggestingGroup(click.Group):
    """Click group that suggests close command names on typos."""

    def list_commands(self, ctx: click.Context) -> list[str]:
        # Registration order, so suggestion ties are stable
        return list(self.commands)

    def resolve_command(
        self,
        ctx: click.Context,
        args: list[str],
    ) -> tuple[str | None, click.Command | None, list[str]]:
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            attempted = args[0] if args else ""
            suggestion = suggest(attempted, self.list_commands(ctx)) if attempted else ""

            reporter = Reporter(CliConfig.from_params(ctx.params))
            click.echo(ctx.get_help(), err=True)
            reporter.log(suggestion)
            reporter.log(e.format_message())
            ctx.exit(1)


def _verbose_option() -> click.Option:
    """--verbose accepted after the command name as well as before it."""
    return click.Option(["--verbose"], is_flag=True, default=False, help="Turn on verbose output")


def _build_command(spec: CommandSpec, registry: CommandRegistry) -> click.Command:
    """Wrap a registry entry in a click command."""

    @click.pass_context
    def callback(ctx: click.Context, **kwargs: Any) -> Any:
        state = ctx.find_object(dict)
        config: CliConfig = state["config"].with_command(spec.name)
        if kwargs.pop("verbose", False) and not config.verbose:
            config = replace(config, verbose=True)
            configure_logging(config)
        site: SiteInfo = state["site"]
        reporter = Reporter(config)

        reporter.verbose(f"set log level: \"{config.log_level}\"")
        reporter.verbose(f"set executing command: \"{spec.name}\"")

        try:
            impl = registry.resolve(spec.name, site)
        except NotASiteError as e:
            click.echo(ctx.parent.get_help(), err=True)
            reporter.verbose(f"current directory: {site.directory}")
            reporter.panic(str(e))
        except CommandLoadError as e:
            reporter.panic(str(e), e)

        command_ctx = CommandContext(args=kwargs, site=site, config=config, reporter=reporter)

        reporter.verbose(f"running command: {spec.name}")
        if spec.handler is not None:
            return spec.handler(command_ctx, impl)
        return impl(command_ctx)

    return click.Command(
        spec.name,
        callback=callback,
        params=[*spec.params, _verbose_option()],
        help=spec.description,
    )


def _telemetry_command(telemetry: TelemetrySettings) -> click.Command:
    @click.command("telemetry")
    @click.option("--enable", is_flag=True, help="Enable telemetry (default)")
    @click.option("--disable", is_flag=True, help="Disable telemetry")
    @click.pass_context
    def telemetry_cmd(ctx: click.Context, enable: bool, disable: bool) -> None:
        """Enable or disable anonymous analytics collection."""
        enabled = enable or not disable
        telemetry.set_enabled(enabled)
        Reporter(ctx.find_object(dict)["config"]).log(
            f"Telemetry collection {'enabled' if enabled else 'disabled'}"
        )

    return telemetry_cmd


def build_cli(
    registry: CommandRegistry | None = None,
    telemetry: TelemetrySettings | None = None,
    directory: str | Path | None = None,
) -> click.Group:
    """Assemble the root command group.

    Args:
        registry: Declared commands (defaults to the built-in ones)
        telemetry: Telemetry settings store
        directory: Site directory (defaults to the working directory)
    """
    registry = registry if registry is not None else default_registry()
    telemetry = telemetry if telemetry is not None else TelemetrySettings()
    site = SiteInfo.detect(directory, toolset=registry.toolset)
    telemetry.set_default_tags(installed_toolset_version=site.toolset_version)

    @click.group(
        cls=SuggestingGroup,
        invoke_without_command=True,
        context_settings={"help_option_names": ["-h", "--help"]},
    )
    @click.option("--verbose", is_flag=True, default=False, help="Turn on verbose output")
    @click.option("--no-color", is_flag=True, default=False, help="Turn off the color in output")
    @click.version_option(__version__, "-v", "--version")
    @click.pass_context
    def cli(ctx: click.Context, verbose: bool, no_color: bool) -> None:
        """Content site command-line tool."""
        config = CliConfig(verbose=verbose, no_color=no_color)
        configure_logging(config)

        ctx.ensure_object(dict)
        ctx.obj["config"] = config
        ctx.obj["site"] = site

        if ctx.invoked_subcommand is None:
            click.echo(ctx.get_help(), err=True)
            Reporter(config).log(MISSING_COMMAND)
            ctx.exit(1)

    for spec in registry:
        cli.add_command(_build_command(spec, registry))
    cli.add_command(_telemetry_command(telemetry))

    return cli


def main(argv: list[str] | None = None) -> None:
    """Entry point."""
    args = list(sys.argv[1:] if argv is None else argv)

    registry = default_registry()
    loaded = registry.load_entry_points()
    logger.debug(f"Toolset commands loaded: {loaded}")

    telemetry = TelemetrySettings()
    telemetry.set_default_tags(cli_version=__version__)

    # build_cli tags the installed toolset version, so track afterwards
    cli = build_cli(registry=registry, telemetry=telemetry)
    telemetry.track_cli(args)

    cli.main(args=args, prog_name="content-cli")


if __name__ == "__main__":
    main()
