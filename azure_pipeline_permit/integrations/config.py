"""Configuration for SCM integrations."""

from collections.abc import Sequence
from pathlib import Path

import yaml
from pydantic import Field, SecretStr, ValidationError

from azure_pipeline_permit.errors import InputConfigurationError
from azure_pipeline_permit.models.base import Model

AZURE_DEFAULT_HOST = "dev.azure.com"


class AzureCredentialConfig(Model):
    """Personal access token, optionally scoped to a set of organizations."""

    personal_access_token: SecretStr
    organizations: Sequence[str] | None = Field(
        default=None,
        description="Organizations the token applies to (None means all)",
    )


class AzureIntegrationConfig(Model):
    """Configuration for a single Azure DevOps host."""

    host: str = AZURE_DEFAULT_HOST
    # Single token form kept by older configs, used when no credential matches
    token: SecretStr | None = None
    credentials: Sequence[AzureCredentialConfig] = Field(default_factory=list)


class IntegrationsConfig(Model):
    """All configured integrations, keyed by integration type."""

    azure: Sequence[AzureIntegrationConfig] = Field(default_factory=list)


def load_integrations_config(path: Path) -> IntegrationsConfig:
    """Load integrations from a YAML file.

    The file may either hold the integrations mapping at its root or nest it
    under an ``integrations`` key, as in an ``app-config.yaml``.

    Raises:
        InputConfigurationError: If the file content is not a valid config

    """
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except OSError as e:
        raise InputConfigurationError(
            f"Cannot read integrations config {path}: {e}"
        ) from e
    except yaml.YAMLError as e:
        raise InputConfigurationError(
            f"Integrations config {path} is not valid YAML: {e}"
        ) from e

    if not isinstance(data, dict):
        raise InputConfigurationError(
            f"Integrations config {path} must contain a mapping"
        )

    if "integrations" in data:
        data = data["integrations"] or {}

    try:
        return IntegrationsConfig.model_validate(data)
    except ValidationError as e:
        raise InputConfigurationError(
            f"Invalid integrations config {path}: {e}"
        ) from e
