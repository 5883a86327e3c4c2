"""SCM integrations and credential resolution."""

from azure_pipeline_permit.integrations.config import (
    AzureCredentialConfig,
    AzureIntegrationConfig,
    IntegrationsConfig,
    load_integrations_config,
)
from azure_pipeline_permit.integrations.credentials import (
    AzureDevOpsCredentialsProvider,
    Credentials,
    CredentialsProvider,
)
from azure_pipeline_permit.integrations.registry import (
    Integration,
    IntegrationRegistry,
    ScmIntegrations,
)

__all__ = [
    "AzureCredentialConfig",
    "AzureDevOpsCredentialsProvider",
    "AzureIntegrationConfig",
    "Credentials",
    "CredentialsProvider",
    "Integration",
    "IntegrationRegistry",
    "IntegrationsConfig",
    "ScmIntegrations",
    "load_integrations_config",
]
