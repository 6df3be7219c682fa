"""Domain manager CLI entrypoint."""

from __future__ import annotations

import argparse
import logging
from typing import Any

import click

from .. import __version__
from . import commands, options
from .logs import setup_logging
from .utils import CliContext

LOGGER = logging.getLogger("domain_manager.cli")

CLICK_CONTEXT_SETTINGS: dict[str, Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 999,
}


class _CliGroup(click.Group):
    """Extends the use of click.Group.

    This should only be used for the main application group.

    """

    def invoke(self, ctx: click.Context) -> Any:
        """Replace invoke command to pass along args."""
        ctx.meta["global.options"] = self.__parse_global_options(ctx)
        return super().invoke(ctx)

    @staticmethod
    def __parse_global_options(ctx: click.Context) -> dict[str, Any]:
        """Parse global options.

        These options are passed to subcommands but, should be parsed by the
        main application group. The value of these options are used for global
        configuration such as logging or context object setup. Values given to
        the group itself are used as defaults.

        """
        parser = argparse.ArgumentParser(add_help=False)
        parser.add_argument("-c", "--config", default=ctx.params.get("config"))
        parser.add_argument("--debug", default=ctx.params.get("debug") or 0, action="count")
        parser.add_argument(
            "--no-color", action="store_true", default=ctx.params.get("no_color", False)
        )
        parser.add_argument(
            "--verbose", action="store_true", default=ctx.params.get("verbose", False)
        )
        args, _ = parser.parse_known_args(list(ctx.args))
        return vars(args)


@click.group(context_settings=CLICK_CONTEXT_SETTINGS, cls=_CliGroup)
@click.version_option(__version__, message="%(version)s")
@options.config
@options.debug
@options.no_color
@options.verbose
@click.pass_context
def cli(ctx: click.Context, **_: Any) -> None:
    """Manage API Gateway custom domains, API mappings and Route 53 records."""
    opts = ctx.meta["global.options"]
    setup_logging(debug=opts["debug"], no_color=opts["no_color"], verbose=opts["verbose"])
    ctx.obj = CliContext(**opts)


for cmd in commands.__all__:
    cli.add_command(getattr(commands, cmd))
