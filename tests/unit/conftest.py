"""Pytest fixtures and plugins."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any, cast

import pytest

from domain_manager.config import DomainManagerConfig
from domain_manager.context import DeployEnvironment

from .factories import MockDomainManagerContext

if TYPE_CHECKING:
    from collections.abc import Iterator

    from _pytest.python import Module

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "provider": {"service": "test-service", "stage": "test"},
    "customDomain": {"domainName": "api.example.com"},
}


@pytest.fixture(scope="session", autouse=True)
def aws_credentials() -> Iterator[None]:
    """Ensure the AWS SDK finds some (bogus) credentials in the environment.

    Keeps botocore from trying to use other providers.

    """
    overrides = {
        "AWS_ACCESS_KEY_ID": "testing",
        "AWS_SECRET_ACCESS_KEY": "testing",
        "AWS_DEFAULT_REGION": "us-east-1",
    }
    saved_env: dict[str, str | None] = {}
    for key, value in overrides.items():
        LOGGER.info("Overriding env var: %s=%s", key, value)
        saved_env[key] = os.environ.get(key, None)
        os.environ[key] = value

    yield

    for key, value in saved_env.items():
        LOGGER.info("Restoring saved env var: %s=%s", key, value)
        if value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = value

    saved_env.clear()


@pytest.fixture
def deploy_environment(request: pytest.FixtureRequest) -> DeployEnvironment:
    """Create a deploy environment that can be used for testing.

    Uses the ``AWS_REGION`` and ``ENV_VARS`` variables of the module when
    present.

    """
    region = getattr(cast("Module", request.module), "AWS_REGION", "us-east-1")
    env_vars = {
        "AWS_ACCESS_KEY_ID": "test_access_key",
        "AWS_DEFAULT_REGION": region,
        "AWS_REGION": region,
        "AWS_SECRET_ACCESS_KEY": "test_secret_key",
    }
    env_vars.update(getattr(cast("Module", request.module), "ENV_VARS", {}))
    return DeployEnvironment(environ=env_vars)


@pytest.fixture
def domain_manager_config(request: pytest.FixtureRequest) -> DomainManagerConfig:
    """Create a config from the ``CONFIG`` variable of the module."""
    return DomainManagerConfig.parse_obj(
        getattr(cast("Module", request.module), "CONFIG", DEFAULT_CONFIG)
    )


@pytest.fixture
def domain_manager_context(
    deploy_environment: DeployEnvironment, domain_manager_config: DomainManagerConfig
) -> MockDomainManagerContext:
    """Create a mock domain manager context object."""
    return MockDomainManagerContext(
        config=domain_manager_config, deploy_environment=deploy_environment
    )
