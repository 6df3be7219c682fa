"""Domain manager config."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import yaml
from pydantic import ValidationError

from ..constants import ApiType
from ..exceptions import ConfigurationError
from ..utils import is_api_type_key
from .models import DomainConfig, DomainManagerConfigDefinitionModel, ProviderConfig

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .._logging import DomainManagerLogger

LOGGER = cast("DomainManagerLogger", logging.getLogger(__name__))

__all__ = [
    "DomainConfig",
    "DomainManagerConfig",
    "ProviderConfig",
]


class DomainManagerConfig:
    """Python representation of a domain manager config file.

    Only enabled domains are kept. Use one of the ``parse_*`` classmethods to
    create an instance.

    """

    domains: list[DomainConfig]
    """Enabled custom domains."""

    file_path: Path
    provider: ProviderConfig

    def __init__(self, data: DomainManagerConfigDefinitionModel, *, path: Path | None = None) -> None:
        """Instantiate class.

        Args:
            data: The data model of the config file.
            path: Path to the config file.

        """
        self._data = data.model_copy()
        self.file_path = path.resolve() if path else Path.cwd()
        self.provider = self._data.provider
        self.domains = [domain for domain in self._data.custom_domains if domain.enabled]
        for domain in self._data.custom_domains:
            if not domain.enabled:
                LOGGER.verbose("%s: domain is disabled; skipped", domain.given_domain_name)

    def dump(self, *, by_alias: bool = True, exclude_unset: bool = True) -> str:
        """Dump the normalized config to a YAML string.

        Args:
            by_alias: Use the camelCase keys of the config file.
            exclude_unset: Exclude fields that were not explicitly set.

        """
        return yaml.dump(
            self._data.model_dump(by_alias=by_alias, exclude_unset=exclude_unset, mode="json"),
            default_flow_style=False,
        )

    @staticmethod
    def normalize_custom_domains(
        custom_domain: Any, *, default_stage: str | None = None
    ) -> list[dict[str, Any]]:
        """Convert the ``customDomain`` section into a list of domain definitions.

        The section either defines a single domain or, when its first key is an
        API type, one domain per API type.

        Args:
            custom_domain: Value of the ``customDomain`` section.
            default_stage: Stage used by domains that do not define one.

        Raises:
            ConfigurationError: The section is missing or uses an unknown key.

        """
        if not custom_domain or not isinstance(custom_domain, dict):
            raise ConfigurationError("plugin configuration is missing")
        api_types = [i.value for i in ApiType]
        custom_domain = cast("dict[str, Any]", custom_domain)
        if is_api_type_key(next(iter(custom_domain)), api_types):
            definitions: list[dict[str, Any]] = []
            for key, value in custom_domain.items():
                if not is_api_type_key(key, api_types):
                    raise ConfigurationError(
                        f'unsupported apiType "{key}"; must be one of: '
                        f"{', '.join(i.lower() for i in api_types)}"
                    )
                if not isinstance(value, dict):
                    raise ConfigurationError(f"customDomain.{key} must be a mapping")
                definitions.append({**value, "apiType": key.upper()})
        else:
            definitions = [dict(custom_domain)]
        if default_stage:
            for definition in definitions:
                if not definition.get("stage"):
                    definition["stage"] = default_stage
        return definitions

    @classmethod
    def parse_file(cls, *, path: Path) -> DomainManagerConfig:
        """Parse a YAML file to create a config object.

        Args:
            path: The path to the config file.

        Raises:
            ConfigurationError: The file does not exist or is invalid.

        """
        if not path.is_file():
            raise ConfigurationError(f"config file not found: {path}")
        return cls.parse_raw(path.read_text(), path=path)

    @classmethod
    def parse_obj(cls, obj: Mapping[str, Any], *, path: Path | None = None) -> DomainManagerConfig:
        """Parse a python object into a config object.

        Args:
            obj: The object to parse.
            path: The path to the config file.

        Raises:
            ConfigurationError: The object is not a valid config.

        """
        if not isinstance(obj, dict):
            raise ConfigurationError("plugin configuration is missing")
        provider = obj.get("provider") or {}
        if not isinstance(provider, dict):
            raise ConfigurationError("provider must be a mapping")
        definitions = cls.normalize_custom_domains(
            obj.get("customDomain"), default_stage=provider.get("stage")
        )
        try:
            data = DomainManagerConfigDefinitionModel.model_validate(
                {"provider": provider, "customDomains": definitions}
            )
        except ValidationError as exc:
            raise ConfigurationError(f"invalid configuration\n{exc}") from exc
        return cls(data, path=path)

    @classmethod
    def parse_raw(cls, data: str, *, path: Path | None = None) -> DomainManagerConfig:
        """Parse raw YAML data.

        Args:
            data: The raw data to parse.
            path: The path to the config file.

        """
        try:
            obj = yaml.safe_load(data) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"unable to parse config\n{exc}") from exc
        return cls.parse_obj(obj, path=path)
