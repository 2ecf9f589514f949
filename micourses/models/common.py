"""
Common response models and utilities.

Base schema with camelCase JSON aliases plus shared envelopes.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema serialized with camelCase keys, accepting either form on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CamelModel):
    """Plain acknowledgement envelope."""

    message: str


class MediaFailure(CamelModel):
    """One asset the media host could not delete."""

    public_id: str
    error: str


class MediaReport(CamelModel):
    """Per-asset outcome of a media deletion batch."""

    deleted: list[str] = Field(default_factory=list)
    failed: list[MediaFailure] = Field(default_factory=list)
