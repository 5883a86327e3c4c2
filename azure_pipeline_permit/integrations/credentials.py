"""Resolution of Azure DevOps credentials from configured integrations."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Literal

from pydantic import SecretStr
from yarl import URL

from azure_pipeline_permit.integrations.config import AzureIntegrationConfig
from azure_pipeline_permit.integrations.registry import IntegrationRegistry

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class Credentials:
    """A resolved credential for an Azure DevOps organization."""

    token: SecretStr
    type: Literal["pat"] = "pat"


class CredentialsProvider(ABC):
    """Resolves credentials for a URL."""

    @abstractmethod
    async def get_credentials(self, url: str) -> Credentials | None:
        """Return credentials usable for the URL, or None if none apply.

        Args:
            url: Base URL of the organization (e.g., "https://dev.azure.com/org")

        """


@dataclass(frozen=True, kw_only=True)
class AzureDevOpsCredentialsProvider(CredentialsProvider):
    """Personal access token provider backed by the integration registry."""

    integrations: IntegrationRegistry

    @classmethod
    def from_integrations(
        cls, integrations: IntegrationRegistry
    ) -> "AzureDevOpsCredentialsProvider":
        """Create provider for the given registry."""
        return cls(integrations=integrations)

    async def get_credentials(self, url: str) -> Credentials | None:
        """Return the most specific token configured for the URL.

        A token scoped to the URL's organization wins over an unscoped one,
        which wins over the integration's single ``token``.
        """
        parsed = URL(url)
        if parsed.host is None:
            return None

        integration = self.integrations.by_host(parsed.host)
        if integration is None:
            log.debug("No integration configured for host %s", parsed.host)
            return None

        organization = parsed.parts[1] if len(parsed.parts) > 1 else None
        token = select_token(integration.config, organization)
        if token is None:
            return None

        return Credentials(token=token)


def select_token(
    config: AzureIntegrationConfig, organization: str | None
) -> SecretStr | None:
    """Pick the token for an organization from an integration config."""
    if organization:
        for credential in config.credentials:
            if credential.organizations and organization in credential.organizations:
                return credential.personal_access_token

    for credential in config.credentials:
        if not credential.organizations:
            return credential.personal_access_token

    return config.token
