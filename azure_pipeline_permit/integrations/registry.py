"""Lookup of integration configuration by host."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, TypeAlias

from azure_pipeline_permit.integrations.config import (
    AZURE_DEFAULT_HOST,
    AzureIntegrationConfig,
    IntegrationsConfig,
)

log = logging.getLogger(__name__)

IntegrationType: TypeAlias = Literal["azure"]


@dataclass(frozen=True, kw_only=True)
class Integration:
    """An integration configured for a single host."""

    type: IntegrationType
    config: AzureIntegrationConfig

    @property
    def host(self) -> str:
        """Configured hostname, lowercased as DNS names compare."""
        return self.config.host.lower()


class IntegrationRegistry(ABC):
    """Maps a hostname to the integration configured for it."""

    @abstractmethod
    def by_host(self, host: str) -> Integration | None:
        """Return the integration for the host, or None if not configured."""


@dataclass(frozen=True, kw_only=True)
class ScmIntegrations(IntegrationRegistry):
    """Static registry built from the integrations config."""

    integrations: Mapping[str, Integration]

    @classmethod
    def from_config(cls, config: IntegrationsConfig) -> "ScmIntegrations":
        """Build registry from config.

        The public Azure DevOps host is always registered, without
        credentials when the config does not mention it.
        """
        integrations: dict[str, Integration] = {}
        for azure_config in config.azure:
            integration = Integration(type="azure", config=azure_config)
            if integration.host in integrations:
                log.warning(
                    "Duplicate Azure integration for host %s, using the first one",
                    integration.host,
                )
                continue
            integrations[integration.host] = integration

        if AZURE_DEFAULT_HOST not in integrations:
            integrations[AZURE_DEFAULT_HOST] = Integration(
                type="azure", config=AzureIntegrationConfig()
            )

        return cls(integrations=integrations)

    def by_host(self, host: str) -> Integration | None:
        """Return the integration for the host, or None if not configured."""
        return self.integrations.get(host.lower())
