"""Base model configuration for action inputs and integration config."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Model(BaseModel):
    """Frozen model accepting both camelCase keys and snake_case field names.

    Action inputs and integration config are written in camelCase by the
    workflow templates, while Python callers use the field names.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
