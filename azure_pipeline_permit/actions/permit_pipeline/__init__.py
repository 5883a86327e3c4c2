"""Azure DevOps pipeline permission action module."""

from azure_pipeline_permit.actions.permit_pipeline.action import (
    PipelinePermissionSetter,
)
from azure_pipeline_permit.actions.permit_pipeline.config import PermitPipelineInput
from azure_pipeline_permit.actions.permit_pipeline.manifest import (
    permit_pipeline_manifest,
)

__all__ = ["PermitPipelineInput", "PipelinePermissionSetter", "permit_pipeline_manifest"]
