"""Domain manager constants."""

from __future__ import annotations

from enum import Enum

from typing_extensions import assert_never


class ApiType(str, Enum):
    """API Gateway API protocol."""

    HTTP = "HTTP"
    REST = "REST"
    WEBSOCKET = "WEBSOCKET"

    @property
    def logical_resource_id(self) -> str:
        """Logical ID of the API resource in the CloudFormation stack."""
        if self is ApiType.REST:
            return "ApiGatewayRestApi"
        if self is ApiType.HTTP:
            return "HttpApi"
        if self is ApiType.WEBSOCKET:
            return "WebsocketsApi"
        assert_never(self)

    @property
    def output_suffix(self) -> str:
        """Suffix appended to CloudFormation output keys.

        REST keeps the unsuffixed keys for backward compatibility.

        """
        if self is ApiType.REST:
            return ""
        if self is ApiType.HTTP:
            return "Http"
        if self is ApiType.WEBSOCKET:
            return "Websocket"
        assert_never(self)


class EndpointType(str, Enum):
    """API Gateway custom domain endpoint type."""

    EDGE = "EDGE"
    REGIONAL = "REGIONAL"


class SecurityPolicy(str, Enum):
    """TLS version of a custom domain."""

    TLS_1_0 = "TLS_1_0"
    TLS_1_2 = "TLS_1_2"


class RecordAction(str, Enum):
    """Route 53 change action used for alias records."""

    DELETE = "DELETE"
    UPSERT = "UPSERT"


class DomainStatus(str, Enum):
    """Lifecycle state of a custom domain."""

    ABSENT = "ABSENT"
    ACTIVE = "ACTIVE"
    PROVISIONING = "PROVISIONING"


ACM_GLOBAL_REGION = "us-east-1"
"""Region of the certificate store used by edge-optimized custom domains."""

CERTIFICATE_STATUSES = ["PENDING_VALIDATION", "ISSUED", "INACTIVE"]
"""Certificate statuses considered when resolving a certificate."""

DEFAULT_CONFIG_FILE = "domain-manager.yml"

DEFAULT_STAGE = "dev"

EDGE_EMPTY_BASE_PATH = "(none)"
"""How API Gateway v1 represents an empty base path."""

HTTP_API_STAGE = "$default"
"""Stage always used when mapping an HTTP API."""

MAX_RETRY_ATTEMPTS = 20
"""botocore retry attempts; generous to ride out API Gateway throttling."""

RECORD_SET_COMMENT = "Record created by gateway-domain-manager"
