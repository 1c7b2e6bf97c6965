"""HTTP error helpers shared by the routers."""

from typing import Any

from fastapi import HTTPException
from pydantic.alias_generators import to_camel

from dealfeed.schemas import error_body


def not_found(code: str, message: str, **detail: Any) -> HTTPException:
    """404 with the structured ``{"error": {...}}`` body.

    Detail keys are camelCased to match the rest of the API.
    """
    detail = {to_camel(key): value for key, value in detail.items()}
    return HTTPException(status_code=404, detail=error_body(code, message, detail or None))
