"""
Base schemas and common response models.

JSON field names are camelCase on the wire; snake_case is accepted on
input as well.
"""
from datetime import datetime
from typing import Any, Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class TimestampSchema(BaseSchema):
    """Schema mixin for timestamps."""

    created_at: datetime
    updated_at: datetime


class IDSchema(BaseSchema):
    """Schema mixin for UUID ID."""

    id: UUID


class MessageResponse(BaseSchema):
    """Simple message response."""

    success: bool = True
    message: str


class ErrorResponse(BaseSchema):
    """Error response format."""

    success: bool = False
    error: str
    message: str
    details: Optional[Any] = None
