"""Action manifest definition for the plugin system."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

from azure_pipeline_permit.actions.base import TemplateAction
from azure_pipeline_permit.integrations.registry import IntegrationRegistry

InputT = TypeVar("InputT", bound=BaseModel)


@dataclass(frozen=True, kw_only=True)
class ActionManifest(Generic[InputT]):
    """Manifest describing an action plugin.

    The manifest contains references to the input schema and the action
    factory for lazy loading of actions based on their id. The factory
    receives the integration registry and keyword options such as
    ``fail_on_error``.
    """

    input_cls: type[InputT]
    action_factory: Callable[
        ..., AbstractAsyncContextManager[TemplateAction[InputT]]
    ]

    def create(
        self, integrations: IntegrationRegistry, *, fail_on_error: bool = False
    ) -> AbstractAsyncContextManager[TemplateAction[InputT]]:
        """Create the action with a managed lifecycle."""
        return self.action_factory(integrations, fail_on_error=fail_on_error)
