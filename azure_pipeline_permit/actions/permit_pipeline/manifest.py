"""Pipeline permission action manifest."""

from azure_pipeline_permit.actions.manifest import ActionManifest
from azure_pipeline_permit.actions.permit_pipeline.action import (
    PipelinePermissionSetter,
)
from azure_pipeline_permit.actions.permit_pipeline.config import PermitPipelineInput

permit_pipeline_manifest = ActionManifest(
    input_cls=PermitPipelineInput,
    action_factory=PipelinePermissionSetter.from_integrations,
)
