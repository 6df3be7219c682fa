"""CLI utils."""

from __future__ import annotations

import logging
import os
from functools import cached_property
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

from ..config import DomainManagerConfig
from ..constants import DEFAULT_CONFIG_FILE
from ..context import DeployEnvironment, DomainManagerContext
from ..exceptions import ConfigurationError, DomainOperationFailedError
from ..manager import DomainManager

if TYPE_CHECKING:
    from collections.abc import Callable

    import click

    from .._logging import DomainManagerLogger

LOGGER = cast("DomainManagerLogger", logging.getLogger(__name__.replace("._", ".")))


class CliContext:
    """CLI context object."""

    def __init__(
        self,
        *,
        config: Path | str | None = None,
        debug: int = 0,
        verbose: bool = False,
        **_: Any,
    ) -> None:
        """Instantiate class.

        Args:
            config: Path to the config file.
            debug: Debug level.
            verbose: Whether to display verbose logs.

        """
        self.config_path = Path(config or DEFAULT_CONFIG_FILE)
        self.debug = debug
        self.verbose = verbose

    @cached_property
    def config(self) -> DomainManagerConfig:
        """Domain manager config."""
        return DomainManagerConfig.parse_file(path=self.config_path)

    @cached_property
    def context(self) -> DomainManagerContext:
        """Domain manager context."""
        return DomainManagerContext(config=self.config, deploy_environment=self.env)

    @cached_property
    def env(self) -> DeployEnvironment:
        """Environment being deployed to."""
        environ = os.environ.copy()
        # carefully update environ with values passed from the cli
        if self.debug and "DEBUG" not in environ:
            environ["DEBUG"] = str(self.debug)
        if self.verbose and "VERBOSE" not in environ:
            environ["VERBOSE"] = "1"
        return DeployEnvironment(environ=environ)


def run_operation(
    ctx: click.Context, func: Callable[[DomainManagerContext], dict[str, str]]
) -> dict[str, str]:
    """Run an operation, exiting with a non-zero status if it fails.

    Args:
        ctx: Click context. ``ctx.obj`` must be a :class:`CliContext`.
        func: Function that runs the operation with the domain manager context.

    """
    obj = cast(CliContext, ctx.obj)
    try:
        results = func(obj.context)
    except (ConfigurationError, DomainOperationFailedError) as err:
        LOGGER.error(err.message, exc_info=bool(obj.debug))
        ctx.exit(1)
    for domain_name, outcome in results.items():
        LOGGER.debug("%s: %s", domain_name, outcome)
    return results


def call_manager(operation: str) -> Callable[[DomainManagerContext], dict[str, str]]:
    """Create a function that runs a :class:`DomainManager` operation."""

    def _call(context: DomainManagerContext) -> dict[str, str]:
        return getattr(DomainManager(context), operation)()

    return _call
