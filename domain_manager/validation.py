"""Validate custom domain configurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from ._logging import DomainLogAdapter
from .constants import ApiType, EndpointType
from .exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._logging import DomainManagerLogger
    from .config import DomainConfig

LOGGER = cast("DomainManagerLogger", logging.getLogger(__name__))

EDGE_SUPPORTED_API_TYPES = (ApiType.REST,)


def validate_domain_configs(domains: Iterable[DomainConfig]) -> None:
    """Validate combinations of settings that can not be checked per field.

    Args:
        domains: Custom domains to validate.

    Raises:
        ConfigurationError: A domain uses an unsupported combination.

    """
    for domain in domains:
        if (
            domain.endpoint_type is EndpointType.EDGE
            and domain.api_type not in EDGE_SUPPORTED_API_TYPES
        ):
            raise ConfigurationError(
                f"{domain.given_domain_name}: {domain.api_type.value} APIs do not support "
                f"{EndpointType.EDGE.value} endpoints; use {EndpointType.REGIONAL.value}"
            )
        if domain.allow_path_matching:
            DomainLogAdapter(domain.given_domain_name, LOGGER).warning(
                "allowPathMatching is set; an existing mapping using the same base "
                "path will be replaced by this API"
            )
