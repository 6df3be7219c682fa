"""Domain manager operations."""

from __future__ import annotations

import concurrent.futures
import logging
from typing import TYPE_CHECKING, cast

from ._logging import DomainLogAdapter
from .constants import DomainStatus, RecordAction
from .domains import DomainLifecycleManager
from .exceptions import DomainActionFailedError, DomainOperationFailedError, StackResourceNotFoundError
from .mappings import BasePathMappingManager
from .models import domain_status
from .validation import validate_domain_configs

if TYPE_CHECKING:
    from collections.abc import Callable

    from ._logging import DomainManagerLogger
    from .config import DomainConfig
    from .context import DomainManagerContext
    from .models import DomainInfo

LOGGER = cast("DomainManagerLogger", logging.getLogger(__name__))


def format_summary(domain: DomainConfig, info: DomainInfo) -> str:
    """Format the summary of a custom domain for output."""
    lines = ["Domain Manager Summary"]
    if domain.create_route53_record:
        lines.extend(["Domain Name", f"  {domain.given_domain_name}"])
    lines.extend(
        [
            "Distribution Domain Name",
            f"  Target Domain: {info.domain_name}",
            f"  Hosted Zone Id: {info.hosted_zone_id}",
        ]
    )
    return "\n".join(lines)


class DomainManager:
    """Entry point of every domain manager operation.

    Configs are validated when the object is created so that an invalid
    config aborts before any remote call is made. Each operation then
    processes every enabled domain concurrently. A failure on one domain does
    not stop the others; once all domains have been processed a
    :class:`~domain_manager.exceptions.DomainOperationFailedError` listing the
    failed domains is raised.

    """

    def __init__(
        self,
        context: DomainManagerContext,
        *,
        lifecycle: DomainLifecycleManager | None = None,
        mappings: BasePathMappingManager | None = None,
    ) -> None:
        """Instantiate class.

        Args:
            context: Domain manager context.
            lifecycle: Manager of custom domains and their DNS records.
            mappings: Manager of API mappings.

        Raises:
            ConfigurationError: A domain config is invalid.

        """
        self.ctx = context
        self.domains = list(context.config.domains)
        validate_domain_configs(self.domains)
        self.lifecycle = lifecycle or DomainLifecycleManager(context)
        self.mappings = mappings or BasePathMappingManager(context)

    def create_domains(self) -> dict[str, str]:
        """Create every domain that does not exist yet, with its DNS records."""
        return self._fan_out("create_domains", "create", self._create_domain)

    def delete_domains(self) -> dict[str, str]:
        """Delete every domain that exists, with its DNS records."""
        return self._fan_out("delete_domains", "delete", self._delete_domain)

    def domain_summaries(self) -> dict[str, str]:
        """Print a summary of every domain."""
        return self._fan_out("domain_summaries", "summarize", self._summarize_domain)

    def remove_base_path_mappings(self) -> dict[str, str]:
        """Remove the API mapping of every domain."""
        return self._fan_out("remove_base_path_mappings", "remove mapping of", self._remove_mapping)

    def setup_base_path_mappings(self) -> dict[str, str]:
        """Create or update the API mapping of every domain.

        Outputs of each domain that exists are reported to the context.
        A summary is printed for every domain that succeeded, even when
        others failed.

        """
        summaries: dict[str, str] = {}

        def _task(domain: DomainConfig) -> str:
            outcome, info = self._setup_mapping(domain)
            if info:
                summaries[domain.given_domain_name] = format_summary(domain, info)
            return outcome

        try:
            return self._fan_out("setup_base_path_mappings", "set up mapping of", _task)
        finally:
            for domain in self.domains:
                if domain.given_domain_name in summaries:
                    LOGGER.notice(summaries[domain.given_domain_name])

    def update_cloudformation_outputs(self) -> dict[str, str]:
        """Report the outputs of every domain that exists."""
        return self._fan_out(
            "update_cloudformation_outputs", "report outputs of", self._report_outputs
        )

    def _create_domain(self, domain: DomainConfig) -> str:
        logger = DomainLogAdapter(domain.given_domain_name, LOGGER)
        info = self.lifecycle.fetch_status(domain)
        if domain_status(info) is not DomainStatus.ABSENT:
            logger.info("custom domain already exists")
            return "already exists"
        info = self.lifecycle.create(domain)
        self.lifecycle.change_record_set(domain, info, RecordAction.UPSERT)
        logger.success(
            "custom domain was created; new domains may take up to 40 minutes to be initialized"
        )
        return "created"

    def _delete_domain(self, domain: DomainConfig) -> str:
        logger = DomainLogAdapter(domain.given_domain_name, LOGGER)
        info = self.lifecycle.fetch_status(domain)
        if info is None:
            logger.info("custom domain does not exist")
            return "already absent"
        self.lifecycle.delete(domain, info)
        logger.success("custom domain was deleted")
        return "deleted"

    def _remove_mapping(self, domain: DomainConfig) -> str:
        logger = DomainLogAdapter(domain.given_domain_name, LOGGER)
        try:
            api_id = self.mappings.resolve_api_id(domain)
        except StackResourceNotFoundError as exc:
            logger.warning("%s; skipped removal of API mapping", exc.message)
            return "stack not found"
        mapping = self.mappings.find(domain, api_id)
        if not mapping:
            logger.warning("no API mapping found for API %s", api_id)
            return "not mapped"
        self.mappings.delete(domain, mapping)
        return "removed"

    def _report_outputs(self, domain: DomainConfig) -> str:
        info = self.lifecycle.fetch_status(domain)
        if info is None:
            DomainLogAdapter(domain.given_domain_name, LOGGER).info(
                "custom domain does not exist; outputs not reported"
            )
            return "absent"
        self.lifecycle.report_outputs(domain, info)
        return "reported"

    def _setup_mapping(self, domain: DomainConfig) -> tuple[str, DomainInfo | None]:
        api_id = self.mappings.resolve_api_id(domain)
        mapping = self.mappings.find(domain, api_id)
        if mapping:
            self.mappings.update(domain, api_id, mapping)
            outcome = "updated"
        else:
            self.mappings.create(domain, api_id)
            outcome = "created"
        info = self.lifecycle.fetch_status(domain)
        if info:
            self.lifecycle.report_outputs(domain, info)
        return outcome, info

    def _summarize_domain(self, domain: DomainConfig) -> str:
        info = self.lifecycle.fetch_status(domain)
        if info is None:
            DomainLogAdapter(domain.given_domain_name, LOGGER).notice(
                "unable to print summary; custom domain does not exist"
            )
            return "absent"
        LOGGER.notice(format_summary(domain, info))
        return "summarized"

    def _fan_out(
        self, operation: str, action: str, func: Callable[[DomainConfig], str]
    ) -> dict[str, str]:
        """Run a function for every domain concurrently.

        Args:
            operation: Name of the operation.
            action: Action used in per-domain error messages.
            func: Function that processes one domain and returns its outcome.

        Raises:
            DomainOperationFailedError: One or more domains failed.

        """
        if not self.domains:
            LOGGER.warning("no enabled custom domains; nothing to do")
            return {}
        LOGGER.verbose("%s: processing %i domain(s)...", operation, len(self.domains))
        with concurrent.futures.ThreadPoolExecutor(
            max_workers=self.ctx.env.max_concurrent_domains
        ) as executor:
            futures = {
                domain.given_domain_name: executor.submit(self._run_task, action, func, domain)
                for domain in self.domains
            }
        errors: dict[str, Exception] = {}
        results: dict[str, str] = {}
        for domain_name, job in futures.items():
            try:
                results[domain_name] = job.result()
            except DomainActionFailedError as exc:
                errors[domain_name] = exc
        if errors:
            raise DomainOperationFailedError(operation, errors)
        return results

    def _run_task(
        self, action: str, func: Callable[[DomainConfig], str], domain: DomainConfig
    ) -> str:
        """Process one domain, converting any failure into a domain-scoped error."""
        logger = DomainLogAdapter(domain.given_domain_name, LOGGER)
        try:
            return func(domain)
        except Exception as exc:
            message = str(getattr(exc, "message", exc))
            logger.error(message.removeprefix(f"{domain.given_domain_name}: "))
            if self.ctx.env.debug:
                logger.debug("traceback of the failure:", exc_info=True)
            raise DomainActionFailedError(action, domain.given_domain_name) from exc
