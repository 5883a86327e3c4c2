"""Errors raised by template actions."""


class ActionError(Exception):
    """Base class for errors surfaced to the caller of an action."""


class InputConfigurationError(ActionError):
    """Raised when action input or integrations config cannot be used.

    Always raised before any request is sent.
    """


class PipelinePermissionError(ActionError):
    """Raised when Azure DevOps rejects a pipeline permission change."""

    def __init__(self, status: int) -> None:
        super().__init__(
            f"Failed to change the Azure pipeline permissions. Status code {status}."
        )
        self.status = status
