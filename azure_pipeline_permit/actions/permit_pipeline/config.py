"""Input schema for the pipeline permission action."""

import re

from pydantic import Field, SecretStr, StrictBool, field_validator

from azure_pipeline_permit.models.base import Model

PIPELINE_ID_PATTERN = re.compile(r"\s*[+-]?\d+\s*")


class PermitPipelineInput(Model):
    """Input for the ``azure:pipeline:permit`` action."""

    permits_api_version: str = Field(
        default="7.1-preview.1",
        title="Permits API version",
        description="The Azure Permits Pipeline API version to use.",
    )
    server: str = Field(
        default="dev.azure.com",
        title="Server hostname",
        description="The hostname of the Azure DevOps service.",
    )
    organization: str = Field(..., description="The Azure DevOps organization")
    project: str = Field(..., description="The Azure DevOps project")
    resource_id: str = Field(..., description="The resource ID")
    resource_type: str = Field(
        ..., description="The type of the resource (e.g. endpoint)"
    )
    authorized: StrictBool = Field(
        ..., description="A true or false authorization indicator"
    )
    pipeline_id: str = Field(..., description="The pipeline ID")
    token: SecretStr | None = Field(
        default=None,
        description="Token to use instead of the integration credentials",
    )

    @field_validator("pipeline_id")
    @classmethod
    def _check_pipeline_id(cls, value: str) -> str:
        if not PIPELINE_ID_PATTERN.fullmatch(value):
            raise ValueError(f"pipelineId must be an integer, got {value!r}")
        return value

    @property
    def pipeline_number(self) -> int:
        """Pipeline ID as sent to Azure DevOps."""
        return int(self.pipeline_id)
