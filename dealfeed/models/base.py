"""Base class for entity models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Entity(BaseModel):
    """Base class for stored entities.

    Entities are frozen: the store replaces a record with a copy on update
    instead of mutating the instance callers may still hold. JSON uses
    camelCase aliases (``createdAt``), Python code uses field names.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )
