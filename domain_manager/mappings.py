"""Manage the API mappings of custom domains."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from botocore.exceptions import BotoCoreError, ClientError

from ._logging import DomainLogAdapter
from .exceptions import RemoteCallError, ResolutionError, StackResourceNotFoundError
from .providers import get_gateway
from .utils import error_code, format_detail

if TYPE_CHECKING:
    from mypy_boto3_cloudformation.client import CloudFormationClient

    from ._logging import DomainManagerLogger
    from .config import DomainConfig
    from .context import DomainManagerContext
    from .models import ApiMapping

LOGGER = cast("DomainManagerLogger", logging.getLogger(__name__))


class BasePathMappingManager:
    """Create, update and delete the API mapping of a custom domain."""

    def __init__(self, context: DomainManagerContext) -> None:
        """Instantiate class."""
        self.ctx = context

    def create(self, domain: DomainConfig, api_id: str) -> None:
        """Map an API to the base path of a custom domain.

        Raises:
            RemoteCallError: The mapping could not be created.

        """
        try:
            get_gateway(self.ctx, domain).create_mapping(api_id)
        except (BotoCoreError, ClientError) as exc:
            raise RemoteCallError(
                domain.given_domain_name,
                "create API mapping",
                format_detail(exc, debug=self.ctx.env.debug),
            ) from exc
        DomainLogAdapter(domain.given_domain_name, LOGGER).info(
            'created API mapping "%s" for API %s', domain.base_path, api_id
        )

    def delete(self, domain: DomainConfig, mapping: ApiMapping) -> None:
        """Delete an API mapping.

        Failures are logged and never raised.

        """
        logger = DomainLogAdapter(domain.given_domain_name, LOGGER)
        try:
            get_gateway(self.ctx, domain).delete_api_mapping(mapping)
        except (BotoCoreError, ClientError) as exc:
            logger.warning("unable to remove API mapping %s", mapping.api_mapping_id)
            if self.ctx.env.debug:
                logger.warning(format_detail(exc, debug=True))
            return
        logger.info('removed API mapping "%s"', mapping.api_mapping_key)

    def find(self, domain: DomainConfig, api_id: str) -> ApiMapping | None:
        """Find the existing API mapping of an API.

        A mapping matches when it maps the API or, when ``allowPathMatching``
        is set, when it uses the configured base path.

        Raises:
            RemoteCallError: The mappings could not be listed.

        """
        try:
            mappings = get_gateway(self.ctx, domain).get_api_mappings()
        except (BotoCoreError, ClientError) as exc:
            raise RemoteCallError(
                domain.given_domain_name,
                "get API mappings",
                format_detail(exc, debug=self.ctx.env.debug),
            ) from exc
        for mapping in mappings:
            if mapping.api_id == api_id or (
                domain.allow_path_matching and mapping.api_mapping_key == domain.base_path
            ):
                return mapping
        return None

    def resolve_api_id(self, domain: DomainConfig) -> str:
        """Get the ID of the API to map to a custom domain.

        Raises:
            ResolutionError: The stack resource has no physical ID.
            StackResourceNotFoundError: The stack or API resource does not exist.
            RemoteCallError: The stack resource could not be described.

        """
        logger = DomainLogAdapter(domain.given_domain_name, LOGGER)
        provider = self.ctx.config.provider
        if provider.api_gateway.rest_api_id:
            logger.info("mapping custom domain to existing API %s", provider.api_gateway.rest_api_id)
            return provider.api_gateway.rest_api_id

        stack_name = provider.resolved_stack_name
        logical_resource_id = domain.api_type.logical_resource_id
        client: CloudFormationClient = self.ctx.get_client("cloudformation")
        try:
            response = client.describe_stack_resource(
                LogicalResourceId=logical_resource_id, StackName=stack_name
            )
        except (BotoCoreError, ClientError) as exc:
            if error_code(exc) == "ValidationError":
                raise StackResourceNotFoundError(
                    domain.given_domain_name, stack_name, logical_resource_id
                ) from exc
            raise RemoteCallError(
                domain.given_domain_name,
                f"describe {logical_resource_id} in stack {stack_name}",
                format_detail(exc, debug=self.ctx.env.debug),
            ) from exc
        api_id = response["StackResourceDetail"].get("PhysicalResourceId")
        if not api_id:
            raise ResolutionError(
                domain.given_domain_name,
                f"no API id for {logical_resource_id} in stack {stack_name}",
            )
        logger.verbose("found API %s in stack %s", api_id, stack_name)
        return api_id

    def update(self, domain: DomainConfig, api_id: str, mapping: ApiMapping) -> None:
        """Update an existing API mapping.

        Raises:
            RemoteCallError: The mapping could not be updated.

        """
        try:
            get_gateway(self.ctx, domain).update_mapping(api_id, mapping)
        except (BotoCoreError, ClientError) as exc:
            raise RemoteCallError(
                domain.given_domain_name,
                "update API mapping",
                format_detail(exc, debug=self.ctx.env.debug),
            ) from exc
        DomainLogAdapter(domain.given_domain_name, LOGGER).info(
            'updated API mapping from "%s" to "%s"', mapping.api_mapping_key, domain.base_path
        )
