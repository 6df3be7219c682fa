"""``domain-manager hook`` command."""

from __future__ import annotations

from typing import Any

import click

from ...hooks import HOOKS, run_hook
from .. import options
from ..utils import run_operation


@click.command("hook", short_help="run a lifecycle event")
@click.argument("event", metavar="<event>", type=click.Choice(sorted(HOOKS)))
@options.config
@options.debug
@options.no_color
@options.verbose
@click.pass_context
def hook(ctx: click.Context, event: str, **_: Any) -> None:
    """Run the operation bound to a lifecycle event of the host deployment tool.

    \b
    create_domain:create    create custom domains
    delete_domain:delete    delete custom domains
    before:deploy:deploy    report outputs
    after:deploy:deploy     create or update API mappings
    after:info:info         show summaries
    before:remove:remove    remove API mappings

    """
    run_operation(ctx, lambda context: run_hook(event, context))
