"""Click options."""

from pathlib import Path

import click

from ..constants import DEFAULT_CONFIG_FILE

config = click.option(
    "-c",
    "--config",
    "config",
    default=DEFAULT_CONFIG_FILE,
    envvar="DOMAIN_MANAGER_CONFIG",
    metavar="<path>",
    show_default=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the domain manager config file.",
)

debug = click.option(
    "--debug",
    count=True,
    envvar="DEBUG",
    help="Supply once to display domain manager debug logs. "
    "Supply twice to display all debug logs.",
)

no_color = click.option(
    "--no-color",
    default=False,
    envvar="DOMAIN_MANAGER_NO_COLOR",
    is_flag=True,
    help="Disable color in the domain manager's logs.",
)

verbose = click.option(
    "--verbose",
    default=False,
    envvar="VERBOSE",
    is_flag=True,
    help="Display domain manager verbose logs.",
)
