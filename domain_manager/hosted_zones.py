"""Select the Route 53 hosted zone of a custom domain."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from botocore.exceptions import BotoCoreError, ClientError

from ._logging import DomainLogAdapter
from .exceptions import HostedZoneListingError, HostedZoneNotFoundError
from .utils import format_detail

if TYPE_CHECKING:
    from mypy_boto3_route53.client import Route53Client
    from mypy_boto3_route53.type_defs import HostedZoneTypeDef

    from ._logging import DomainManagerLogger
    from .config import DomainConfig
    from .context import DomainManagerContext

LOGGER = cast("DomainManagerLogger", logging.getLogger(__name__))


def parse_zone_id(full_zone_id: str) -> str:
    """Parse the returned hosted zone id and return only the ID itself.

    >>> parse_zone_id("/hostedzone/Z1234567890")
    'Z1234567890'

    """
    return full_zone_id[full_zone_id.find("e/") + 2 :]


def zone_matches(zone_name: str, domain_name: str) -> bool:
    """Check if a hosted zone can hold records for a domain name.

    The zone name must be a label-aligned suffix of the domain name. A
    single-label domain name matches any zone.

    """
    domain_labels = domain_name.split(".")[::-1]
    if len(domain_labels) == 1:
        return True
    zone_labels = zone_name.removesuffix(".").split(".")[::-1]
    if len(domain_labels) < len(zone_labels):
        return False
    return domain_labels[: len(zone_labels)] == zone_labels


def select_hosted_zone(
    zones: list[HostedZoneTypeDef], domain_name: str, *, private: bool | None = None
) -> HostedZoneTypeDef | None:
    """Select the most specific hosted zone of a domain name.

    Args:
        zones: Candidate hosted zones.
        domain_name: Requested domain name.
        private: Only consider private (``True``) or public (``False``) zones.

    Returns:
        The matching zone with the longest name. Ties keep list order.

    """
    matches = [
        zone
        for zone in zones
        if (private is None or zone.get("Config", {}).get("PrivateZone", False) is private)
        and zone_matches(zone["Name"], domain_name)
    ]
    if not matches:
        return None
    return sorted(matches, key=lambda zone: len(zone["Name"]), reverse=True)[0]


class HostedZoneResolver:
    """Resolve the hosted zone id of a custom domain."""

    def __init__(self, context: DomainManagerContext) -> None:
        """Instantiate class."""
        self.ctx = context

    def list_hosted_zones(self, domain: DomainConfig) -> list[HostedZoneTypeDef]:
        """List every hosted zone, following pagination."""
        client: Route53Client = self.ctx.get_client("route53")
        zones: list[HostedZoneTypeDef] = []
        try:
            for page in client.get_paginator("list_hosted_zones").paginate():
                zones.extend(page["HostedZones"])
        except (BotoCoreError, ClientError) as exc:
            raise HostedZoneListingError(
                domain.given_domain_name, format_detail(exc, debug=self.ctx.env.debug)
            ) from exc
        return zones

    def resolve(self, domain: DomainConfig) -> str:
        """Get the ID of the hosted zone to use for a custom domain.

        Args:
            domain: Custom domain being processed.

        Raises:
            HostedZoneListingError: Hosted zones could not be listed.
            HostedZoneNotFoundError: No hosted zone matched.

        """
        logger = DomainLogAdapter(domain.given_domain_name, LOGGER)
        if domain.hosted_zone_id:
            logger.verbose("selected specific hosted zone %s", domain.hosted_zone_id)
            return domain.hosted_zone_id

        if domain.hosted_zone_private is True:
            logger.verbose("filtering to only private zones")
        elif domain.hosted_zone_private is False:
            logger.verbose("filtering to only public zones")

        zone = select_hosted_zone(
            self.list_hosted_zones(domain),
            domain.given_domain_name,
            private=domain.hosted_zone_private,
        )
        if not zone:
            raise HostedZoneNotFoundError(domain.given_domain_name)
        zone_id = parse_zone_id(zone["Id"])
        logger.verbose("found hosted zone %s (%s)", zone["Name"], zone_id)
        return zone_id
