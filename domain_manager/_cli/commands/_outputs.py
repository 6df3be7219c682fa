"""``domain-manager outputs`` command."""

from __future__ import annotations

import json
from typing import Any, cast

import click

from .. import options
from ..utils import CliContext, call_manager, run_operation


@click.command("outputs", short_help="print custom domain outputs")
@options.config
@options.debug
@options.no_color
@options.verbose
@click.pass_context
def outputs(ctx: click.Context, **_: Any) -> None:
    """Print the outputs of each custom domain as JSON.

    Output keys of HTTP and WebSocket APIs are suffixed with the API type.

    """
    run_operation(ctx, call_manager("update_cloudformation_outputs"))
    click.echo(json.dumps(cast(CliContext, ctx.obj).context.outputs, indent=4, sort_keys=True))
