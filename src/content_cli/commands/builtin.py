"""Commands declared by the CLI itself."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import click

from .base import CommandSpec
from .registry import CommandRegistry

if TYPE_CHECKING:
    from collections.abc import Callable

    from .base import CommandContext

logger = logging.getLogger(__name__)

DEFAULT_HOST = "localhost"


def omit_and_delete(ctx: CommandContext, impl: Callable[[CommandContext], Any]) -> None:
    """Run the toolset's omit-and-delete, reporting failures instead of crashing."""
    field_id = ctx.args["field_id"]
    ctx.reporter.verbose(f"omitting and deleting field {field_id} on {ctx.args['host']}")
    try:
        impl(ctx)
    except Exception as e:
        logger.debug("omit-and-delete failed", exc_info=e)
        ctx.reporter.log(f"Error: unable to omit and delete field {field_id}")
        ctx.reporter.log(str(e))
        return
    ctx.reporter.log(f"Field {field_id} omitted and deleted")


OMIT_AND_DELETE = CommandSpec(
    name="omit-and-delete",
    description=(
        "Omit and delete a field from the content model. Useful when the "
        "field was deleted in the web app but never omitted."
    ),
    params=[
        click.Option(
            ["-H", "--host"],
            type=str,
            default=DEFAULT_HOST,
            show_default=True,
            help="Set host.",
        ),
        click.Argument(["field_id"]),
    ],
    handler=omit_and_delete,
)


def default_registry(toolset: str = "gatsby") -> CommandRegistry:
    """Registry holding the CLI's own declared commands."""
    registry = CommandRegistry(toolset=toolset)
    registry.register(
        CommandSpec(
            name=OMIT_AND_DELETE.name,
            description=OMIT_AND_DELETE.description,
            params=list(OMIT_AND_DELETE.params),
            handler=OMIT_AND_DELETE.handler,
        )
    )
    return registry
