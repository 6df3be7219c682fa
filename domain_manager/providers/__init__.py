"""API Gateway providers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from typing_extensions import assert_never

from ..constants import EndpointType
from .gateway import EdgeGateway, GatewayShape, RegionalGateway

if TYPE_CHECKING:
    from ..config import DomainConfig
    from ..context import DomainManagerContext

__all__ = ["EdgeGateway", "GatewayShape", "RegionalGateway", "get_gateway"]


def get_gateway(context: DomainManagerContext, domain: DomainConfig) -> GatewayShape:
    """Get the gateway shape matching the endpoint type of a domain."""
    if domain.endpoint_type is EndpointType.EDGE:
        return EdgeGateway(context, domain)
    if domain.endpoint_type is EndpointType.REGIONAL:
        return RegionalGateway(context, domain)
    assert_never(domain.endpoint_type)
