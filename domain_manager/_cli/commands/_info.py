"""``domain-manager info`` command."""

from __future__ import annotations

from typing import Any

import click

from .. import options
from ..utils import call_manager, run_operation


@click.command("info", short_help="show custom domain summaries")
@options.config
@options.debug
@options.no_color
@options.verbose
@click.pass_context
def info(ctx: click.Context, **_: Any) -> None:
    """Show a summary of each custom domain."""
    run_operation(ctx, call_manager("domain_summaries"))
