"""Domain manager context."""

from __future__ import annotations

import logging
import os
import threading
from typing import TYPE_CHECKING, Any, cast

import boto3
from botocore.config import Config

from .constants import MAX_RETRY_ATTEMPTS

if TYPE_CHECKING:
    from ._logging import DomainManagerLogger, DomainLogAdapter
    from .config import DomainManagerConfig

LOGGER = cast("DomainManagerLogger", logging.getLogger(__name__))

AWS_ENV_VARS = ("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "AWS_SESSION_TOKEN")


class DeployEnvironment:
    """Environment being deployed to."""

    def __init__(self, *, environ: dict[str, str] | None = None) -> None:
        """Instantiate class.

        Args:
            environ: Environment variables.

        """
        self.vars = environ if environ is not None else os.environ.copy()

    @property
    def aws_profile(self) -> str | None:
        """Get AWS profile from environment variables."""
        return self.vars.get("AWS_PROFILE")

    @property
    def aws_region(self) -> str:
        """Get AWS region from environment variables."""
        return self.vars.get("AWS_REGION", self.vars.get("AWS_DEFAULT_REGION", "us-east-1"))

    @aws_region.setter
    def aws_region(self, region: str) -> None:
        """Set AWS region environment variables."""
        self.vars.update({"AWS_DEFAULT_REGION": region, "AWS_REGION": region})

    @property
    def debug(self) -> bool:
        """Get debug setting from the environment."""
        return "DEBUG" in self.vars

    @debug.setter
    def debug(self, value: Any) -> None:
        """Set the value of DEBUG."""
        if value:
            self.vars["DEBUG"] = "1"
        else:
            self.vars.pop("DEBUG", None)

    @property
    def max_concurrent_domains(self) -> int:
        """Max number of domains that can be processed concurrently.

        This property can be set by exporting
        ``DOMAIN_MANAGER_MAX_CONCURRENT_DOMAINS``. If no value is specified,
        ``min(32, os.cpu_count() + 4)`` is used.

        """
        value = self.vars.get("DOMAIN_MANAGER_MAX_CONCURRENT_DOMAINS")
        if value:
            return int(value)
        return min(32, (os.cpu_count() or 1) + 4)

    @property
    def verbose(self) -> bool:
        """Get verbose setting from the environment."""
        return "VERBOSE" in self.vars

    @verbose.setter
    def verbose(self, value: Any) -> None:
        """Set the value of VERBOSE."""
        if value:
            self.vars["VERBOSE"] = "1"
        else:
            self.vars.pop("VERBOSE", None)


class DomainManagerContext:
    """Shared state of a domain manager run.

    Holds the loaded config, builds boto3 clients and collects the outputs that
    are reported for each domain.

    """

    config: DomainManagerConfig
    env: DeployEnvironment
    logger: DomainLogAdapter | DomainManagerLogger

    def __init__(
        self,
        *,
        config: DomainManagerConfig,
        deploy_environment: DeployEnvironment | None = None,
        logger: DomainLogAdapter | DomainManagerLogger = LOGGER,
    ) -> None:
        """Instantiate class.

        Args:
            config: Loaded domain manager config.
            deploy_environment: The current deploy environment.
            logger: Custom logger.

        """
        self.config = config
        self.env = deploy_environment or DeployEnvironment()
        self.logger = logger
        self._outputs: dict[str, str] = {}
        self._outputs_lock = threading.Lock()
        if config.provider.region:
            self.env.aws_region = config.provider.region

    @property
    def outputs(self) -> dict[str, str]:
        """Copy of the outputs reported so far."""
        with self._outputs_lock:
            return dict(self._outputs)

    def add_output(self, key: str, value: str) -> None:
        """Report an output value.

        Args:
            key: Output key (e.g. ``DomainName``).
            value: Output value.

        """
        with self._outputs_lock:
            self._outputs[key] = value

    def get_client(self, service: str, *, region: str | None = None) -> Any:
        """Create a boto3 client with the retry config applied.

        A new session is created for every client so that each domain task
        works with its own objects.

        Args:
            service: Name of the AWS service.
            region: Region of the client. Defaults to the deploy region.

        """
        return self.get_session(region=region).client(
            service,
            config=Config(retries={"max_attempts": MAX_RETRY_ATTEMPTS, "mode": "standard"}),
        )

    def get_session(self, *, profile: str | None = None, region: str | None = None) -> boto3.Session:
        """Create a boto3 session.

        If ``profile`` is provided, it will take priority. Otherwise credentials
        are taken from environment variables when present.

        Args:
            profile: The profile for the session.
            region: The region for the session.

        """
        profile = profile or self.env.aws_profile
        if profile:
            self.logger.debug(
                'building session using profile "%s" in region "%s"',
                profile,
                region or "default",
            )
            return boto3.Session(profile_name=profile, region_name=region or self.env.aws_region)
        credentials = {
            name.lower(): self.env.vars[name] for name in AWS_ENV_VARS if self.env.vars.get(name)
        }
        if credentials.get("aws_access_key_id"):
            self.logger.debug(
                'building session with Access Key "%s" in region "%s"',
                credentials["aws_access_key_id"],
                region or "default",
            )
        return boto3.Session(region_name=region or self.env.aws_region, **credentials)
