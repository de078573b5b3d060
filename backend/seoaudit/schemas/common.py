"""
Common Pydantic schemas used across the API.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class CamelSchema(BaseSchema):
    """Schema exchanged with camelCase JSON keys."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class HealthResponse(BaseSchema):
    """Health check response."""

    status: str
    version: str


class ErrorResponse(BaseSchema):
    """Error response."""

    detail: str
    code: str | None = None
