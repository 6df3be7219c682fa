"""API Gateway custom domain shapes."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from functools import cached_property
from typing import TYPE_CHECKING, Any, ClassVar, cast

from .._logging import DomainLogAdapter
from ..constants import EDGE_EMPTY_BASE_PATH, HTTP_API_STAGE, ApiType, EndpointType
from ..models import ApiMapping, DomainInfo

if TYPE_CHECKING:
    from mypy_boto3_apigateway.client import APIGatewayClient
    from mypy_boto3_apigatewayv2.client import ApiGatewayV2Client

    from .._logging import DomainManagerLogger
    from ..config import DomainConfig
    from ..context import DomainManagerContext

LOGGER = cast("DomainManagerLogger", logging.getLogger(__name__))


class GatewayShape(ABC):
    """Operations of a custom domain that depend on its endpoint type.

    Lookups that work for every endpoint type use API Gateway v2 and are
    implemented here.

    """

    ENDPOINT_TYPE: ClassVar[EndpointType]

    def __init__(self, context: DomainManagerContext, domain: DomainConfig) -> None:
        """Instantiate class.

        Args:
            context: Domain manager context.
            domain: Custom domain being processed.

        """
        self.ctx = context
        self.domain = domain
        self.logger = DomainLogAdapter(domain.given_domain_name, LOGGER)

    @cached_property
    def apigateway(self) -> APIGatewayClient:
        """API Gateway (v1) client."""
        return self.ctx.get_client("apigateway")

    @cached_property
    def apigatewayv2(self) -> ApiGatewayV2Client:
        """API Gateway v2 client."""
        return self.ctx.get_client("apigatewayv2")

    @property
    def stage(self) -> str:
        """Stage used when mapping the API."""
        if self.domain.api_type is ApiType.HTTP:
            return HTTP_API_STAGE
        return self.domain.stage

    def delete_api_mapping(self, mapping: ApiMapping) -> None:
        """Delete an API mapping."""
        self.apigatewayv2.delete_api_mapping(
            ApiMappingId=cast(str, mapping.api_mapping_id),
            DomainName=self.domain.given_domain_name,
        )

    def get_api_mappings(self) -> list[ApiMapping]:
        """Get every API mapping of the domain."""
        kwargs: dict[str, Any] = {"DomainName": self.domain.given_domain_name}
        mappings: list[ApiMapping] = []
        while True:
            response = self.apigatewayv2.get_api_mappings(**kwargs)
            mappings.extend(ApiMapping.model_validate(i) for i in response.get("Items", []))
            if not response.get("NextToken"):
                break
            kwargs["NextToken"] = response["NextToken"]
        return mappings

    def get_domain(self) -> DomainInfo | None:
        """Get the remote domain.

        Returns:
            ``None`` if the domain does not exist.

        """
        try:
            response = self.apigatewayv2.get_domain_name(DomainName=self.domain.given_domain_name)
        except self.apigatewayv2.exceptions.NotFoundException:
            self.logger.verbose("domain does not exist")
            return None
        return DomainInfo.from_response(cast("dict[str, Any]", response))

    @abstractmethod
    def create_domain(self, certificate_arn: str) -> DomainInfo:
        """Create the custom domain."""
        raise NotImplementedError

    @abstractmethod
    def create_mapping(self, api_id: str) -> None:
        """Create an API mapping."""
        raise NotImplementedError

    @abstractmethod
    def delete_domain(self) -> None:
        """Delete the custom domain."""
        raise NotImplementedError

    @abstractmethod
    def update_mapping(self, api_id: str, mapping: ApiMapping) -> None:
        """Update an existing API mapping."""
        raise NotImplementedError


class EdgeGateway(GatewayShape):
    """Edge-optimized custom domain, managed through API Gateway v1."""

    ENDPOINT_TYPE = EndpointType.EDGE

    @property
    def base_path(self) -> str:
        """Base path as API Gateway v1 expects it."""
        return self.domain.base_path or EDGE_EMPTY_BASE_PATH

    def create_domain(self, certificate_arn: str) -> DomainInfo:
        """Create the custom domain."""
        response = self.apigateway.create_domain_name(
            certificateArn=certificate_arn,
            domainName=self.domain.given_domain_name,
            endpointConfiguration={"types": [self.ENDPOINT_TYPE.value]},
            securityPolicy=self.domain.security_policy.value,
        )
        return DomainInfo.from_response(cast("dict[str, Any]", response))

    def create_mapping(self, api_id: str) -> None:
        """Create a base path mapping."""
        self.apigateway.create_base_path_mapping(
            basePath=self.base_path,
            domainName=self.domain.given_domain_name,
            restApiId=api_id,
            stage=self.stage,
        )

    def delete_domain(self) -> None:
        """Delete the custom domain."""
        self.apigateway.delete_domain_name(domainName=self.domain.given_domain_name)

    def update_mapping(self, api_id: str, mapping: ApiMapping) -> None:
        """Update the base path of an existing mapping.

        API Gateway v1 addresses the mapping by its current base path.

        """
        self.apigateway.update_base_path_mapping(
            basePath=mapping.api_mapping_key or EDGE_EMPTY_BASE_PATH,
            domainName=self.domain.given_domain_name,
            patchOperations=[{"op": "replace", "path": "/basePath", "value": self.base_path}],
        )


class RegionalGateway(GatewayShape):
    """Regional custom domain, managed through API Gateway v2."""

    ENDPOINT_TYPE = EndpointType.REGIONAL

    def create_domain(self, certificate_arn: str) -> DomainInfo:
        """Create the custom domain."""
        response = self.apigatewayv2.create_domain_name(
            DomainName=self.domain.given_domain_name,
            DomainNameConfigurations=[
                {
                    "CertificateArn": certificate_arn,
                    "EndpointType": self.ENDPOINT_TYPE.value,
                    "SecurityPolicy": self.domain.security_policy.value,
                }
            ],
        )
        return DomainInfo.from_response(cast("dict[str, Any]", response))

    def create_mapping(self, api_id: str) -> None:
        """Create an API mapping."""
        self.apigatewayv2.create_api_mapping(
            ApiId=api_id,
            ApiMappingKey=self.domain.base_path,
            DomainName=self.domain.given_domain_name,
            Stage=self.stage,
        )

    def delete_domain(self) -> None:
        """Delete the custom domain."""
        self.apigatewayv2.delete_domain_name(DomainName=self.domain.given_domain_name)

    def update_mapping(self, api_id: str, mapping: ApiMapping) -> None:
        """Update an existing API mapping."""
        self.apigatewayv2.update_api_mapping(
            ApiId=api_id,
            ApiMappingId=cast(str, mapping.api_mapping_id),
            ApiMappingKey=self.domain.base_path,
            DomainName=self.domain.given_domain_name,
            Stage=self.stage,
        )
