"""Test domain_manager.exceptions."""

from __future__ import annotations

import pickle

import pytest

from domain_manager.exceptions import (
    CertificateListingError,
    CertificateNotFoundError,
    ConfigurationError,
    DomainActionFailedError,
    DomainManagerError,
    DomainOperationFailedError,
    HostedZoneListingError,
    HostedZoneNotFoundError,
    RemoteCallError,
    ResolutionError,
    StackResourceNotFoundError,
)


@pytest.mark.parametrize(
    "exc",
    [
        CertificateListingError("api.example.com", "detail"),
        CertificateNotFoundError("api.example.com", "*.example.com"),
        ConfigurationError("message"),
        DomainActionFailedError("create", "api.example.com"),
        DomainOperationFailedError("create_domains", {"api.example.com": ValueError("x")}),
        HostedZoneListingError("api.example.com"),
        HostedZoneNotFoundError("api.example.com"),
        RemoteCallError("api.example.com", "create custom domain"),
        StackResourceNotFoundError("api.example.com", "svc-dev", "ApiGatewayRestApi"),
    ],
)
def test_pickle(exc: DomainManagerError) -> None:
    """Test exceptions can be pickled."""
    new_exc = pickle.loads(pickle.dumps(exc))  # noqa: S301
    assert isinstance(new_exc, exc.__class__)
    assert str(new_exc) == str(exc)


class TestRemoteCallError:
    """Test RemoteCallError."""

    def test_detail(self) -> None:
        """Test message with detail."""
        exc = RemoteCallError("api.example.com", "create custom domain", "ClientError: nope")
        assert exc.message == "api.example.com: failed to create custom domain\nClientError: nope"

    def test_no_detail(self) -> None:
        """Test message without detail."""
        exc = CertificateListingError("api.example.com")
        assert isinstance(exc, RemoteCallError)
        assert exc.domain_name == "api.example.com"
        assert str(exc) == "api.example.com: failed to list certificates in Certificate Manager"


class TestResolutionError:
    """Test ResolutionError subclasses."""

    def test_certificate_not_found(self) -> None:
        """Test CertificateNotFoundError."""
        exc = CertificateNotFoundError("api.example.com", "*.example.com")
        assert isinstance(exc, ResolutionError)
        assert exc.message == "could not find the certificate *.example.com"

    def test_default_message(self) -> None:
        """Test default message."""
        assert "api.example.com" in ResolutionError("api.example.com").message

    def test_stack_resource_not_found(self) -> None:
        """Test StackResourceNotFoundError."""
        exc = StackResourceNotFoundError("api.example.com", "svc-dev", "HttpApi")
        assert exc.message == "failed to find CloudFormation resource HttpApi in stack svc-dev"


def test_domain_operation_failed_error() -> None:
    """Test DomainOperationFailedError."""
    errors: dict[str, Exception] = {
        "a.example.com": DomainActionFailedError("create", "a.example.com"),
        "b.example.com": DomainActionFailedError("create", "b.example.com"),
    }
    exc = DomainOperationFailedError("create_domains", errors)
    assert exc.errors == errors
    assert exc.message == "create_domains failed for domain(s): a.example.com, b.example.com"
