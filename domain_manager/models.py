"""Models of remote API Gateway resources."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import ConfigDict, Field

from .constants import DomainStatus
from .utils import BaseModel


class DomainInfo(BaseModel):
    """Snapshot of a remote custom domain.

    ``domain_name`` and ``hosted_zone_id`` describe the alias target of the
    custom domain, not the custom domain itself.

    """

    model_config = ConfigDict(frozen=True)

    domain_name: str
    """Target domain name (CloudFront distribution or regional endpoint)."""

    hosted_zone_id: str | None = None
    """Hosted zone of the target domain name."""

    security_policy: str | None = None
    status: str | None = None
    """Status reported by API Gateway (e.g. ``AVAILABLE``)."""

    @property
    def domain_status(self) -> DomainStatus:
        """Lifecycle state of the domain."""
        if not self.status or self.status == "AVAILABLE":
            return DomainStatus.ACTIVE
        return DomainStatus.PROVISIONING

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> DomainInfo:
        """Create an object from an API Gateway v1 or v2 domain name response.

        Args:
            data: Response of ``GetDomainName``/``CreateDomainName``.

        """
        if data.get("DomainNameConfigurations"):
            config = data["DomainNameConfigurations"][0]
            return cls(
                domain_name=config["ApiGatewayDomainName"],
                hosted_zone_id=config.get("HostedZoneId"),
                security_policy=config.get("SecurityPolicy"),
                status=config.get("DomainNameStatus"),
            )
        return cls(
            domain_name=data.get("distributionDomainName") or data["regionalDomainName"],
            hosted_zone_id=data.get("distributionHostedZoneId") or data.get("regionalHostedZoneId"),
            security_policy=data.get("securityPolicy"),
            status=data.get("domainNameStatus"),
        )


def domain_status(info: DomainInfo | None) -> DomainStatus:
    """Get the lifecycle state of a domain from an optional snapshot."""
    if info is None:
        return DomainStatus.ABSENT
    return info.domain_status


class ApiMapping(BaseModel):
    """Existing API mapping of a custom domain."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    api_id: Annotated[str, Field(alias="ApiId")]
    api_mapping_id: Annotated[str | None, Field(alias="ApiMappingId")] = None
    api_mapping_key: Annotated[str, Field(alias="ApiMappingKey")] = ""
    stage: Annotated[str | None, Field(alias="Stage")] = None
