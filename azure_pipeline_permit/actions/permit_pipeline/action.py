"""Azure DevOps pipeline permission action."""

import base64
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp

from azure_pipeline_permit.actions.base import TemplateAction
from azure_pipeline_permit.actions.permit_pipeline.config import PermitPipelineInput
from azure_pipeline_permit.actions.permit_pipeline.models import (
    PipelinePermission,
    ResourcePipelinePermissions,
)
from azure_pipeline_permit.errors import (
    InputConfigurationError,
    PipelinePermissionError,
)
from azure_pipeline_permit.integrations.credentials import (
    AzureDevOpsCredentialsProvider,
    CredentialsProvider,
)
from azure_pipeline_permit.integrations.registry import IntegrationRegistry

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class PipelinePermissionSetter(TemplateAction[PermitPipelineInput]):
    """Authorizes or unauthorizes a pipeline for a protected resource.

    Non-success responses are logged and not raised, unless ``fail_on_error``
    is set. Transport errors always propagate.
    """

    integrations: IntegrationRegistry
    credentials_provider: CredentialsProvider
    session: aiohttp.ClientSession = field(repr=False)
    fail_on_error: bool = False

    @classmethod
    @asynccontextmanager
    async def from_integrations(
        cls,
        integrations: IntegrationRegistry,
        *,
        fail_on_error: bool = False,
    ) -> AsyncGenerator["PipelinePermissionSetter", None]:
        """Create action with managed session lifecycle."""
        async with aiohttp.ClientSession() as session:
            yield cls(
                integrations=integrations,
                credentials_provider=AzureDevOpsCredentialsProvider.from_integrations(
                    integrations
                ),
                session=session,
                fail_on_error=fail_on_error,
            )

    async def execute(self, action_input: PermitPipelineInput) -> None:
        """Send the permission change and log its outcome."""
        host = action_input.server
        integration = self.integrations.by_host(host)
        if integration is None:
            raise InputConfigurationError(
                f"No matching integration configuration for host {host}, "
                "please check your integrations config"
            )

        url = f"https://{host}/{action_input.organization}"
        credentials = await self.credentials_provider.get_credentials(url)

        if action_input.token is not None:
            token = action_input.token.get_secret_value()
        elif credentials is not None:
            token = credentials.token.get_secret_value()
        else:
            raise InputConfigurationError(
                f"No credentials provided {url}, please check your integrations config"
            )

        log.info(
            "%s Azure pipeline with ID %s for %s with ID %s.",
            "Authorizing" if action_input.authorized else "Unauthorizing",
            action_input.pipeline_id,
            action_input.resource_type,
            action_input.resource_id,
        )

        # https://learn.microsoft.com/en-us/rest/api/azure/devops/approvalsandchecks/pipeline-permissions/update-pipeline-permisions-for-resource
        permits_url = (
            f"{url}/{action_input.project}/_apis/pipelines/pipelinepermissions"
            f"/{action_input.resource_type}/{action_input.resource_id}"
            f"?api-version={action_input.permits_api_version}"
        )
        payload = ResourcePipelinePermissions(
            pipelines=[
                PipelinePermission(
                    authorized=action_input.authorized,
                    id=action_input.pipeline_number,
                )
            ]
        )

        async with self.session.patch(
            permits_url,
            json=payload.model_dump(mode="json"),
            headers=build_headers(token),
        ) as response:
            status = response.status

        if 200 <= status < 300:
            log.info("Successfully changed the Azure pipeline permissions.")
            return

        log.error(
            "Failed to change the Azure pipeline permissions. Status code %s.",
            status,
        )
        if self.fail_on_error:
            raise PipelinePermissionError(status)


def build_headers(token: str) -> dict[str, str]:
    """Build request headers for a personal access token."""
    # The username part of the Basic credentials is ignored by Azure DevOps
    auth_string = f"PAT:{token}"
    auth_bytes = base64.b64encode(auth_string.encode("utf-8")).decode("ascii")
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "Authorization": f"Basic {auth_bytes}",
        "X-TFS-FedAuthRedirect": "Suppress",
    }
