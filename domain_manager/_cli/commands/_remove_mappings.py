"""``domain-manager remove-mappings`` command."""

from __future__ import annotations

from typing import Any

import click

from .. import options
from ..utils import call_manager, run_operation


@click.command("remove-mappings", short_help="unmap APIs from custom domains")
@options.config
@options.debug
@options.no_color
@options.verbose
@click.pass_context
def remove_mappings(ctx: click.Context, **_: Any) -> None:
    """Remove the API mapping of each custom domain."""
    run_operation(ctx, call_manager("remove_base_path_mappings"))
