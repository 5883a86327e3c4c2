"""Lookup of template actions registered as entry points."""

from collections.abc import Mapping
from importlib.metadata import EntryPoint, entry_points
from typing import Any

from azure_pipeline_permit.actions.manifest import ActionManifest
from azure_pipeline_permit.errors import ActionError

ENTRY_POINT_GROUP = "azure_pipeline_permit.actions"


class ActionNotFoundError(ActionError):
    """Raised when no action is registered under the requested id."""


def registered_actions() -> Mapping[str, EntryPoint]:
    """Return the installed action entry points keyed by action id."""
    return {entry.name: entry for entry in entry_points(group=ENTRY_POINT_GROUP)}


def load_action_manifest(action_id: str) -> ActionManifest[Any]:
    """Import the manifest of the action registered as ``action_id``.

    Ids are declared in pyproject.toml under the ``azure_pipeline_permit.actions``
    entry-point group, e.g. ``azure:pipeline:permit``.

    Raises:
        ActionNotFoundError: If the id is not registered

    """
    actions = registered_actions()
    entry = actions.get(action_id)
    if entry is None:
        raise ActionNotFoundError(
            f"Action '{action_id}' not found. Available actions: {sorted(actions)}"
        )

    manifest: ActionManifest[Any] = entry.load()
    return manifest
