"""Lifecycle events of the host deployment tool."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from .exceptions import ConfigurationError
from .manager import DomainManager

if TYPE_CHECKING:
    from ._logging import DomainManagerLogger
    from .context import DomainManagerContext

LOGGER = cast("DomainManagerLogger", logging.getLogger(__name__))

HOOKS: dict[str, str] = {
    "after:deploy:deploy": "setup_base_path_mappings",
    "after:info:info": "domain_summaries",
    "before:deploy:deploy": "update_cloudformation_outputs",
    "before:remove:remove": "remove_base_path_mappings",
    "create_domain:create": "create_domains",
    "delete_domain:delete": "delete_domains",
}
"""Lifecycle event mapped to the name of the :class:`DomainManager` operation it runs."""


def run_hook(event: str, context: DomainManagerContext) -> dict[str, str]:
    """Run the operation bound to a lifecycle event.

    Args:
        event: Lifecycle event (e.g. ``after:deploy:deploy``).
        context: Domain manager context.

    Returns:
        Outcome of the operation for each domain.

    Raises:
        ConfigurationError: The event is not supported or the config is invalid.
        DomainOperationFailedError: One or more domains failed.

    """
    operation = HOOKS.get(event)
    if not operation:
        raise ConfigurationError(
            f'unsupported lifecycle event "{event}"; must be one of: {", ".join(sorted(HOOKS))}'
        )
    LOGGER.verbose("running %s for lifecycle event %s", operation, event)
    return getattr(DomainManager(context), operation)()
