"""Pydantic models for the Azure DevOps pipeline permissions API."""

from collections.abc import Sequence

from pydantic import BaseModel


class PipelinePermission(BaseModel):
    """Authorization of a single pipeline."""

    authorized: bool
    id: int


class ResourcePipelinePermissions(BaseModel):
    """Request body of the pipeline permissions update."""

    pipelines: Sequence[PipelinePermission]
