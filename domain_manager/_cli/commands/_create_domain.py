"""``domain-manager create-domain`` command."""

from __future__ import annotations

from typing import Any

import click

from .. import options
from ..utils import call_manager, run_operation


@click.command("create-domain", short_help="create custom domains")
@options.config
@options.debug
@options.no_color
@options.verbose
@click.pass_context
def create_domain(ctx: click.Context, **_: Any) -> None:
    """Create custom domains and their Route 53 alias records.

    Domains that already exist are skipped.

    """
    run_operation(ctx, call_manager("create_domains"))
