"""Log output of the ``domain-manager`` CLI."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, TextIO

import coloredlogs
from humanfriendly.terminal import terminal_supports_colors  # type: ignore

from .._logging import LogLevels

LOGGER = logging.getLogger("domain_manager")

LOG_FORMAT = "[domain-manager] %(message)s"
LOG_FORMAT_VERBOSE = "[domain-manager] %(levelname)s %(name)s: %(message)s"
LOG_FIELD_STYLES: dict[str, dict[str, Any]] = {
    "levelname": {"bold": True},
    "name": {"color": "blue"},
}
LOG_LEVEL_STYLES: dict[str, dict[str, Any]] = {
    "debug": {"color": "green"},
    "error": {"color": "red"},
    "notice": {"color": "yellow"},
    "success": {"color": "green", "bold": True},
    "verbose": {"color": "cyan"},
    "warning": {"color": 214},
}


def get_log_level(*, debug: int = 0, verbose: bool = False) -> LogLevels:
    """Get the log level of the domain manager loggers."""
    if debug:
        return LogLevels.DEBUG
    if verbose:
        return LogLevels.VERBOSE
    return LogLevels.INFO


def _styles(defaults: dict[str, dict[str, Any]], env_var: str) -> dict[str, dict[str, Any]]:
    """Merge encoded styles from an environment variable into the defaults."""
    result = dict(defaults)
    encoded = os.getenv(env_var)
    if encoded:
        result.update(coloredlogs.parse_encoded_styles(encoded))  # type: ignore
    return result


def coloredlogs_settings(
    *, debug: int = 0, no_color: bool = False, verbose: bool = False, stream: TextIO | None = None
) -> dict[str, Any]:
    """Keyword arguments passed to ``coloredlogs.install``.

    ``DOMAIN_MANAGER_LOG_FORMAT``, ``DOMAIN_MANAGER_LOG_FIELD_STYLES`` and
    ``DOMAIN_MANAGER_LOG_LEVEL_STYLES`` override the defaults.

    Keyword Args:
        debug: Debug level.
        no_color: Disable color in logs.
        verbose: Whether to display verbose logs.
        stream: Stream that will be logged to. Defaults to stdout.

    """
    stream = stream or sys.stdout
    fmt = os.getenv("DOMAIN_MANAGER_LOG_FORMAT") or (
        LOG_FORMAT_VERBOSE if debug or verbose else LOG_FORMAT
    )
    if no_color:
        return {
            "field_styles": {},
            "fmt": fmt,
            "isatty": False,
            "level_styles": {},
            "stream": stream,
        }
    return {
        "field_styles": _styles(LOG_FIELD_STYLES, "DOMAIN_MANAGER_LOG_FIELD_STYLES"),
        "fmt": fmt,
        "isatty": terminal_supports_colors(stream),
        "level_styles": _styles(LOG_LEVEL_STYLES, "DOMAIN_MANAGER_LOG_LEVEL_STYLES"),
        "stream": stream,
    }


def setup_logging(*, debug: int = 0, no_color: bool = False, verbose: bool = False) -> None:
    """Configure log settings for the CLI.

    Keyword Args:
        debug: Debug level (0-2). ``2`` also shows botocore debug logs.
        no_color: Whether to use colorized logs.
        verbose: Use verbose logging.

    """
    level = get_log_level(debug=debug, verbose=verbose)
    settings = coloredlogs_settings(debug=debug, no_color=no_color, verbose=verbose)
    coloredlogs.install(level, logger=LOGGER, **settings)
    if debug >= 2:
        coloredlogs.install(level, logger=logging.getLogger("botocore"), **settings)
    LOGGER.debug("initialized logging for the domain manager at level %s", level.name)
