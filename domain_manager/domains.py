"""Manage the lifecycle of API Gateway custom domains."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from botocore.exceptions import BotoCoreError, ClientError

from ._logging import DomainLogAdapter
from .certificates import CertificateResolver
from .constants import RECORD_SET_COMMENT, RecordAction
from .exceptions import RemoteCallError
from .hosted_zones import HostedZoneResolver
from .providers import get_gateway
from .utils import format_detail

if TYPE_CHECKING:
    from mypy_boto3_route53.client import Route53Client
    from mypy_boto3_route53.type_defs import ChangeTypeDef

    from ._logging import DomainManagerLogger
    from .config import DomainConfig
    from .context import DomainManagerContext
    from .models import DomainInfo

LOGGER = cast("DomainManagerLogger", logging.getLogger(__name__))


class DomainLifecycleManager:
    """Create and delete custom domains and their DNS alias records."""

    def __init__(
        self,
        context: DomainManagerContext,
        *,
        certificates: CertificateResolver | None = None,
        hosted_zones: HostedZoneResolver | None = None,
    ) -> None:
        """Instantiate class.

        Args:
            context: Domain manager context.
            certificates: Resolver used to select certificates.
            hosted_zones: Resolver used to select hosted zones.

        """
        self.ctx = context
        self.certificates = certificates or CertificateResolver(context)
        self.hosted_zones = hosted_zones or HostedZoneResolver(context)

    def change_record_set(self, domain: DomainConfig, info: DomainInfo, action: RecordAction) -> None:
        """Create, update or delete the A and AAAA alias records of a domain.

        Args:
            domain: Custom domain being processed.
            info: Remote domain the records point to.
            action: Change action.

        Raises:
            RemoteCallError: The change batch was rejected.

        """
        logger = DomainLogAdapter(domain.given_domain_name, LOGGER)
        if not domain.create_route53_record:
            logger.info("createRoute53Record is false; skipped %s of alias records", action.value)
            return

        hosted_zone_id = self.hosted_zones.resolve(domain)
        changes: list[ChangeTypeDef] = [
            {
                "Action": action.value,
                "ResourceRecordSet": {
                    "AliasTarget": {
                        "DNSName": info.domain_name,
                        "EvaluateTargetHealth": False,
                        "HostedZoneId": cast(str, info.hosted_zone_id),
                    },
                    "Name": domain.given_domain_name,
                    "Type": record_type,
                },
            }
            for record_type in ("A", "AAAA")
        ]
        logger.debug('making the following changes to hosted zone "%s":\n%s', hosted_zone_id, changes)
        client: Route53Client = self.ctx.get_client("route53")
        try:
            client.change_resource_record_sets(
                HostedZoneId=hosted_zone_id,
                ChangeBatch={"Comment": RECORD_SET_COMMENT, "Changes": changes},
            )
        except (BotoCoreError, ClientError) as exc:
            raise RemoteCallError(
                domain.given_domain_name,
                f"{action.value} A Alias",
                format_detail(exc, debug=self.ctx.env.debug),
            ) from exc
        logger.verbose("%s of alias records submitted", action.value)

    def create(self, domain: DomainConfig) -> DomainInfo:
        """Create a custom domain.

        Args:
            domain: Custom domain being processed.

        Returns:
            The newly created domain. It is provisioning until API Gateway
            reports it as available.

        Raises:
            RemoteCallError: The domain could not be created.

        """
        certificate_arn = self.certificates.resolve(domain)
        try:
            info = get_gateway(self.ctx, domain).create_domain(certificate_arn)
        except (BotoCoreError, ClientError) as exc:
            raise RemoteCallError(
                domain.given_domain_name,
                "create custom domain",
                format_detail(exc, debug=self.ctx.env.debug),
            ) from exc
        DomainLogAdapter(domain.given_domain_name, LOGGER).verbose(
            "created custom domain with target %s", info.domain_name
        )
        return info

    def delete(self, domain: DomainConfig, info: DomainInfo | None) -> None:
        """Delete a custom domain and its alias records.

        Args:
            domain: Custom domain being processed.
            info: Current state of the domain.

        Raises:
            RemoteCallError: The domain could not be deleted.

        """
        logger = DomainLogAdapter(domain.given_domain_name, LOGGER)
        if info is None:
            logger.info("already absent")
            return
        try:
            get_gateway(self.ctx, domain).delete_domain()
        except (BotoCoreError, ClientError) as exc:
            raise RemoteCallError(
                domain.given_domain_name,
                "delete custom domain",
                format_detail(exc, debug=self.ctx.env.debug),
            ) from exc
        logger.verbose("deleted custom domain")
        self.change_record_set(domain, info, RecordAction.DELETE)

    def fetch_status(self, domain: DomainConfig) -> DomainInfo | None:
        """Get the current state of a custom domain.

        Returns:
            ``None`` if the domain does not exist.

        Raises:
            RemoteCallError: The domain could not be fetched.

        """
        try:
            return get_gateway(self.ctx, domain).get_domain()
        except (BotoCoreError, ClientError) as exc:
            raise RemoteCallError(
                domain.given_domain_name,
                "fetch information about the domain",
                format_detail(exc, debug=self.ctx.env.debug),
            ) from exc

    def report_outputs(self, domain: DomainConfig, info: DomainInfo) -> None:
        """Report the outputs of a custom domain to the context.

        Output keys are suffixed with the API type for HTTP and WebSocket
        APIs.

        """
        suffix = domain.api_type.output_suffix
        self.ctx.add_output(f"DistributionDomainName{suffix}", info.domain_name)
        self.ctx.add_output(f"DomainName{suffix}", domain.given_domain_name)
        if info.hosted_zone_id:
            self.ctx.add_output(f"HostedZoneId{suffix}", info.hosted_zone_id)
