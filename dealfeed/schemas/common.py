"""Common schemas used across the API."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Request/response schema with camelCase JSON aliases."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class ErrorDetail(BaseModel):
    """Structured error detail."""

    code: str
    message: str
    detail: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Standard error response format.

    Format: { "error": { "code": str, "message": str, "detail": object } }
    """

    error: ErrorDetail


class MessageResponse(BaseModel):
    """Plain acknowledgement (e.g. after a delete)."""

    message: str


def error_body(code: str, message: str, detail: dict[str, Any] | None = None) -> dict[str, Any]:
    """Build the ``{"error": {...}}`` payload used in HTTPException details."""
    return ErrorResponse(error=ErrorDetail(code=code, message=message, detail=detail)).model_dump()
