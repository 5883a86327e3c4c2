"""Abstract base class for template actions."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from azure_pipeline_permit.errors import InputConfigurationError

InputT = TypeVar("InputT", bound=BaseModel)


class TemplateAction(ABC, Generic[InputT]):
    """A single workflow step executed with validated input.

    Generic type InputT is the pydantic model describing the action's input
    schema, as registered in the action's manifest.
    """

    @abstractmethod
    async def execute(self, action_input: InputT) -> None:
        """Run the action.

        Args:
            action_input: Input validated against the action's schema

        Raises:
            InputConfigurationError: If the input cannot be acted upon

        """


def parse_input(
    input_cls: type[InputT], data: Mapping[str, Any]
) -> InputT:
    """Validate raw step input against an action's input schema.

    Raises:
        InputConfigurationError: If the input does not match the schema

    """
    try:
        return input_cls.model_validate(data)
    except ValidationError as e:
        raise InputConfigurationError(
            f"Invalid input for {input_cls.__name__}: {e}"
        ) from e
