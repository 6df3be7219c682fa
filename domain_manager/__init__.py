"""Set package version."""

from __future__ import annotations

import logging

from ._logging import DomainManagerLogger, LogLevels  # noqa: F401

logging.setLoggerClass(DomainManagerLogger)

__version__: str = "1.0.0"
"""Version of the Python package presented as a :class:`string`."""

__version_tuple__: tuple[int, int, int] | tuple[int, int, int, str] = (1, 0, 0)
"""Version of the Python package presented as a :class:`tuple`."""
