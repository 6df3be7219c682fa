"""Domain manager configuration models."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import ConfigDict, Field, field_validator

from ..constants import DEFAULT_STAGE, ApiType, EndpointType, SecurityPolicy
from ..utils import BaseModel


class ConfigProperty(BaseModel):
    """Base class for domain manager configuration properties."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        validate_default=True,
        validate_assignment=True,
    )


class ProviderApiGatewayConfig(ConfigProperty):
    """Existing API Gateway resources shared with the service."""

    rest_api_id: Annotated[str | None, Field(alias="restApiId")] = None
    """ID of an existing API to map instead of looking it up in CloudFormation."""


class ProviderConfig(ConfigProperty):
    """Deployment provider settings."""

    api_gateway: Annotated[ProviderApiGatewayConfig, Field(alias="apiGateway")] = (
        ProviderApiGatewayConfig()
    )
    region: str | None = None
    """Deployment region. Falls back to the environment when not provided."""

    service: str = ""
    """Name of the service. Used to derive the CloudFormation stack name."""

    stack_name: Annotated[str | None, Field(alias="stackName")] = None
    """Explicit CloudFormation stack name."""

    stage: str = DEFAULT_STAGE

    @property
    def resolved_stack_name(self) -> str:
        """Name of the CloudFormation stack that contains the API."""
        return self.stack_name or f"{self.service}-{self.stage}"


class DomainConfig(ConfigProperty):
    """One requested custom domain.

    Instances are immutable once loaded. Values discovered at runtime are
    returned by each phase instead of being stored here.

    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        validate_default=True,
    )

    allow_path_matching: Annotated[bool, Field(alias="allowPathMatching")] = False
    """Match an existing API mapping by base path when the API id differs."""

    api_type: Annotated[ApiType, Field(alias="apiType")] = ApiType.REST
    base_path: Annotated[str, Field(alias="basePath")] = ""
    certificate_arn: Annotated[str | None, Field(alias="certificateArn")] = None
    certificate_name: Annotated[str | None, Field(alias="certificateName")] = None
    create_route53_record: Annotated[bool, Field(alias="createRoute53Record")] = True
    enabled: bool = True
    endpoint_type: Annotated[EndpointType, Field(alias="endpointType")] = EndpointType.REGIONAL
    given_domain_name: Annotated[str, Field(alias="domainName", min_length=1)]
    hosted_zone_id: Annotated[str | None, Field(alias="hostedZoneId")] = None
    hosted_zone_private: Annotated[bool | None, Field(alias="hostedZonePrivate")] = None
    security_policy: Annotated[SecurityPolicy, Field(alias="securityPolicy")] = (
        SecurityPolicy.TLS_1_2
    )
    stage: str = DEFAULT_STAGE

    @field_validator("api_type", "endpoint_type", "security_policy", mode="before")
    @classmethod
    def _upper_enum_value(cls, v: Any) -> Any:
        """Enum values are matched regardless of case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("base_path", mode="before")
    @classmethod
    def _convert_null_base_path(cls, v: Any) -> Any:
        """Convert ``None`` into an empty string."""
        if v is None:
            return ""
        return v

    @field_validator("enabled", mode="before")
    @classmethod
    def _validate_enabled(cls, v: Any) -> Any:
        """Only booleans or their string representation are accepted."""
        if isinstance(v, str):
            if v.lower() == "true":
                return True
            if v.lower() == "false":
                return False
            raise ValueError(f'"{v}" is not a valid boolean')
        return v


class DomainManagerConfigDefinitionModel(ConfigProperty):
    """Root of a domain manager config file, after normalization."""

    custom_domains: Annotated[list[DomainConfig], Field(alias="customDomains")] = []
    provider: ProviderConfig = ProviderConfig()
