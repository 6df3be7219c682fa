"""Select the ACM certificate of a custom domain."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, cast

from botocore.exceptions import BotoCoreError, ClientError

from ._logging import DomainLogAdapter
from .constants import ACM_GLOBAL_REGION, CERTIFICATE_STATUSES, EndpointType
from .exceptions import CertificateListingError, CertificateNotFoundError
from .utils import format_detail

if TYPE_CHECKING:
    from mypy_boto3_acm.client import ACMClient
    from mypy_boto3_acm.type_defs import CertificateSummaryTypeDef

    from ._logging import DomainManagerLogger
    from .config import DomainConfig
    from .context import DomainManagerContext

LOGGER = cast("DomainManagerLogger", logging.getLogger(__name__))


def strip_wildcard(name: str) -> str:
    """Remove the leading wildcard character of a certificate domain name.

    The dot is kept so that a wildcard never matches the apex domain.

    >>> strip_wildcard("*.example.com")
    '.example.com'

    """
    if name.startswith("*"):
        return name[1:]
    return name


def select_certificate(
    certificates: list[CertificateSummaryTypeDef], domain_name: str
) -> str | None:
    """Select the certificate that most closely matches a domain name.

    A certificate matches when its name, without a leading wildcard, is
    contained in the domain name. The longest match wins and ties keep the
    first certificate seen.

    Returns:
        The ARN of the selected certificate.

    """
    best_arn: str | None = None
    best_length = 0
    for certificate in certificates:
        name = strip_wildcard(certificate.get("DomainName", ""))
        if name and name in domain_name and len(name) > best_length:
            best_arn = certificate.get("CertificateArn")
            best_length = len(name)
    return best_arn


class CertificateResolver:
    """Resolve the certificate ARN of a custom domain."""

    def __init__(self, context: DomainManagerContext) -> None:
        """Instantiate class."""
        self.ctx = context

    def get_client(self, domain: DomainConfig) -> ACMClient:
        """ACM client in the region used by the endpoint type of the domain.

        Edge-optimized domains require certificates from ``us-east-1``.

        """
        if domain.endpoint_type is EndpointType.EDGE:
            return self.ctx.get_client("acm", region=ACM_GLOBAL_REGION)
        return self.ctx.get_client("acm")

    def list_certificates(self, domain: DomainConfig) -> list[CertificateSummaryTypeDef]:
        """List every candidate certificate, following pagination."""
        client = self.get_client(domain)
        kwargs: dict[str, Any] = {"CertificateStatuses": CERTIFICATE_STATUSES}
        certificates: list[CertificateSummaryTypeDef] = []
        try:
            while True:
                response = client.list_certificates(**kwargs)
                certificates.extend(response.get("CertificateSummaryList", []))
                if not response.get("NextToken"):
                    break
                kwargs["NextToken"] = response["NextToken"]
        except (BotoCoreError, ClientError) as exc:
            raise CertificateListingError(
                domain.given_domain_name, format_detail(exc, debug=self.ctx.env.debug)
            ) from exc
        return certificates

    def resolve(self, domain: DomainConfig) -> str:
        """Get the ARN of the certificate to use for a custom domain.

        Args:
            domain: Custom domain being processed.

        Raises:
            CertificateListingError: Certificates could not be listed.
            CertificateNotFoundError: No certificate matched.

        """
        logger = DomainLogAdapter(domain.given_domain_name, LOGGER)
        if domain.certificate_arn:
            logger.verbose("using explicit certificate ARN %s", domain.certificate_arn)
            return domain.certificate_arn

        certificates = self.list_certificates(domain)
        if domain.certificate_name:
            arn = next(
                (
                    i.get("CertificateArn")
                    for i in certificates
                    if i.get("DomainName") == domain.certificate_name
                ),
                None,
            )
        else:
            arn = select_certificate(certificates, domain.given_domain_name)
        if not arn:
            raise CertificateNotFoundError(
                domain.given_domain_name, domain.certificate_name or domain.given_domain_name
            )
        logger.verbose("found certificate %s", arn)
        return arn
