"""``domain-manager setup-mappings`` command."""

from __future__ import annotations

from typing import Any

import click

from .. import options
from ..utils import call_manager, run_operation


@click.command("setup-mappings", short_help="map APIs to custom domains")
@options.config
@options.debug
@options.no_color
@options.verbose
@click.pass_context
def setup_mappings(ctx: click.Context, **_: Any) -> None:
    """Create or update the API mapping of each custom domain.

    The API is looked up in the CloudFormation stack of the service unless
    ``provider.apiGateway.restApiId`` is set.

    """
    run_operation(ctx, call_manager("setup_base_path_mappings"))
