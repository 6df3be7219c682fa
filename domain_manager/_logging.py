"""Domain manager logging."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from enum import IntEnum
from typing import Any


class LogLevels(IntEnum):
    """Log levels used by the domain manager, including the custom ones."""

    DEBUG = logging.DEBUG
    VERBOSE = 15
    INFO = logging.INFO
    NOTICE = 25
    WARNING = logging.WARNING
    SUCCESS = 35
    ERROR = logging.ERROR


CUSTOM_LEVELS = (LogLevels.VERBOSE, LogLevels.NOTICE, LogLevels.SUCCESS)

for _level in CUSTOM_LEVELS:
    logging.addLevelName(_level, _level.name)


class DomainManagerLogger(logging.Logger):
    """Logger with the ``verbose``, ``notice`` and ``success`` levels."""

    def verbose(self, msg: Exception | str, *args: Any, **kwargs: Any) -> None:
        """Log progress detail that is only shown with ``--verbose``."""
        if self.isEnabledFor(LogLevels.VERBOSE):
            self._log(LogLevels.VERBOSE, msg, args, **kwargs)

    def notice(self, msg: Exception | str, *args: Any, **kwargs: Any) -> None:
        """Log output meant for the user, like a domain summary."""
        if self.isEnabledFor(LogLevels.NOTICE):
            self._log(LogLevels.NOTICE, msg, args, **kwargs)

    def success(self, msg: Exception | str, *args: Any, **kwargs: Any) -> None:
        """Log a change to a custom domain that completed."""
        if self.isEnabledFor(LogLevels.SUCCESS):
            self._log(LogLevels.SUCCESS, msg, args, **kwargs)


class DomainLogAdapter(logging.LoggerAdapter):  # type: ignore[type-arg]
    """Tag every message logged while processing one custom domain.

    Domains are processed concurrently and share their loggers. The domain
    name is put in front of each message and stored on the record as
    ``domain``.

    Example:
        >>> logger = DomainLogAdapter("api.example.com", logging.getLogger(__name__))
        ... logger.info("custom domain was created")

    """

    def __init__(self, domain_name: str, logger: logging.Logger) -> None:
        """Instantiate class.

        Args:
            domain_name: Custom domain being processed.
            logger: Logger where the tagged messages will be sent.

        """
        super().__init__(logger, {"domain": domain_name})
        self.domain_name = domain_name

    def process(
        self, msg: Exception | str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        """Prefix the message with the domain name."""
        kwargs["extra"] = {**(self.extra or {}), **kwargs.get("extra", {})}
        return f"{self.domain_name}: {msg}", kwargs

    def verbose(self, msg: Exception | str, *args: Any, **kwargs: Any) -> None:
        """Delegate a verbose call to the underlying logger."""
        self.log(LogLevels.VERBOSE, msg, *args, **kwargs)

    def notice(self, msg: Exception | str, *args: Any, **kwargs: Any) -> None:
        """Delegate a notice call to the underlying logger."""
        self.log(LogLevels.NOTICE, msg, *args, **kwargs)

    def success(self, msg: Exception | str, *args: Any, **kwargs: Any) -> None:
        """Delegate a success call to the underlying logger."""
        self.log(LogLevels.SUCCESS, msg, *args, **kwargs)
