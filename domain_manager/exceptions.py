"""Domain manager exceptions."""

from __future__ import annotations

from typing import Any


class DomainManagerError(Exception):
    """Base class for custom exceptions raised by the domain manager."""

    message: str
    """Error message."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Instantiate class."""
        if getattr(self, "message", None):
            super().__init__(self.message, *args, **kwargs)
        else:
            super().__init__(*args, **kwargs)


class ConfigurationError(DomainManagerError):
    """Configuration is missing or invalid.

    Raised before any remote call is made and aborts the whole operation.

    """

    def __init__(self, message: str) -> None:
        """Instantiate class.

        Args:
            message: Description of the problem.

        """
        self.message = message
        super().__init__()

    def __reduce__(self) -> tuple[type[Exception], tuple[Any, ...]]:
        """Support for pickling."""
        return self.__class__, (self.message,)


class ResolutionError(DomainManagerError):
    """A required resource could not be resolved for a domain."""

    domain_name: str

    def __init__(self, domain_name: str, message: str | None = None) -> None:
        """Instantiate class.

        Args:
            domain_name: Custom domain being processed.
            message: Description of what could not be resolved.

        """
        self.domain_name = domain_name
        if message:
            self.message = message
        elif not getattr(self, "message", None):
            self.message = f"unable to resolve a required resource for {domain_name}"
        super().__init__()


class CertificateNotFoundError(ResolutionError):
    """No certificate matched the requested domain."""

    certificate_name: str

    def __init__(self, domain_name: str, certificate_name: str) -> None:
        """Instantiate class.

        Args:
            domain_name: Custom domain being processed.
            certificate_name: Name that was being matched against.

        """
        self.certificate_name = certificate_name
        super().__init__(domain_name, f"could not find the certificate {certificate_name}")

    def __reduce__(self) -> tuple[type[Exception], tuple[Any, ...]]:
        """Support for pickling."""
        return self.__class__, (self.domain_name, self.certificate_name)


class HostedZoneNotFoundError(ResolutionError):
    """No Route 53 hosted zone matched the requested domain."""

    def __init__(self, domain_name: str) -> None:
        """Instantiate class.

        Args:
            domain_name: Custom domain being processed.

        """
        super().__init__(domain_name, f'could not find hosted zone "{domain_name}"')

    def __reduce__(self) -> tuple[type[Exception], tuple[Any, ...]]:
        """Support for pickling."""
        return self.__class__, (self.domain_name,)


class StackResourceNotFoundError(ResolutionError):
    """The CloudFormation stack or the API resource in it does not exist."""

    logical_resource_id: str
    stack_name: str

    def __init__(self, domain_name: str, stack_name: str, logical_resource_id: str) -> None:
        """Instantiate class.

        Args:
            domain_name: Custom domain being processed.
            stack_name: Name of the CloudFormation stack.
            logical_resource_id: Logical ID of the API resource.

        """
        self.logical_resource_id = logical_resource_id
        self.stack_name = stack_name
        super().__init__(
            domain_name,
            f"failed to find CloudFormation resource {logical_resource_id} "
            f"in stack {stack_name}",
        )

    def __reduce__(self) -> tuple[type[Exception], tuple[Any, ...]]:
        """Support for pickling."""
        return self.__class__, (self.domain_name, self.stack_name, self.logical_resource_id)


class RemoteCallError(DomainManagerError):
    """A provider call failed or returned an unexpected shape.

    The provider's own error detail is only included when debug logging is
    enabled.

    """

    action: str
    detail: str | None
    domain_name: str

    def __init__(self, domain_name: str, action: str, detail: str | None = None) -> None:
        """Instantiate class.

        Args:
            domain_name: Custom domain being processed.
            action: Description of the call that failed.
            detail: Error detail from the provider.

        """
        self.action = action
        self.detail = detail
        self.domain_name = domain_name
        self.message = f"{domain_name}: failed to {action}"
        if detail:
            self.message += f"\n{detail}"
        super().__init__()

    def __reduce__(self) -> tuple[type[Exception], tuple[Any, ...]]:
        """Support for pickling."""
        return self.__class__, (self.domain_name, self.action, self.detail)


class CertificateListingError(RemoteCallError):
    """Certificates could not be listed from ACM."""

    def __init__(self, domain_name: str, detail: str | None = None) -> None:
        """Instantiate class.

        Args:
            domain_name: Custom domain being processed.
            detail: Error detail from the provider.

        """
        super().__init__(domain_name, "list certificates in Certificate Manager", detail)

    def __reduce__(self) -> tuple[type[Exception], tuple[Any, ...]]:
        """Support for pickling."""
        return self.__class__, (self.domain_name, self.detail)


class HostedZoneListingError(RemoteCallError):
    """Hosted zones could not be listed from Route 53."""

    def __init__(self, domain_name: str, detail: str | None = None) -> None:
        """Instantiate class.

        Args:
            domain_name: Custom domain being processed.
            detail: Error detail from the provider.

        """
        super().__init__(domain_name, "list hosted zones in Route 53", detail)

    def __reduce__(self) -> tuple[type[Exception], tuple[Any, ...]]:
        """Support for pickling."""
        return self.__class__, (self.domain_name, self.detail)


class DomainActionFailedError(DomainManagerError):
    """Processing of a single domain failed."""

    action: str
    domain_name: str

    def __init__(self, action: str, domain_name: str) -> None:
        """Instantiate class.

        Args:
            action: Action being performed (e.g. ``create``).
            domain_name: Custom domain that failed.

        """
        self.action = action
        self.domain_name = domain_name
        self.message = f"unable to {action} domain {domain_name}"
        super().__init__()

    def __reduce__(self) -> tuple[type[Exception], tuple[Any, ...]]:
        """Support for pickling."""
        return self.__class__, (self.action, self.domain_name)


class DomainOperationFailedError(DomainManagerError):
    """One or more domains failed during a fanned out operation."""

    errors: dict[str, Exception]
    """Mapping of domain name to the error raised while processing it."""

    operation: str

    def __init__(self, operation: str, errors: dict[str, Exception]) -> None:
        """Instantiate class.

        Args:
            operation: Name of the operation.
            errors: Mapping of domain name to the error raised while processing it.

        """
        self.errors = errors
        self.operation = operation
        self.message = f"{operation} failed for domain(s): {', '.join(errors)}"
        super().__init__()

    def __reduce__(self) -> tuple[type[Exception], tuple[Any, ...]]:
        """Support for pickling."""
        return self.__class__, (self.operation, self.errors)
