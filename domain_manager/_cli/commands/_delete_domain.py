"""``domain-manager delete-domain`` command."""

from __future__ import annotations

from typing import Any

import click

from .. import options
from ..utils import call_manager, run_operation


@click.command("delete-domain", short_help="delete custom domains")
@options.config
@options.debug
@options.no_color
@options.verbose
@click.pass_context
def delete_domain(ctx: click.Context, **_: Any) -> None:
    """Delete custom domains and their Route 53 alias records."""
    run_operation(ctx, call_manager("delete_domains"))
