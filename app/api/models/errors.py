"""API error models."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ErrorCodes:
    """Machine-readable codes returned in ``error.code``."""

    INVALID_URL = "INVALID_URL"  # 400
    ANALYSIS_FAILED = "ANALYSIS_FAILED"  # 500


class ErrorDetail(BaseModel):
    """What went wrong, and for which URL."""

    code: str = Field(..., description="One of the ErrorCodes values")
    message: str = Field(..., description="Human-readable reason")
    details: dict[str, Any] | None = Field(default=None, description="Request context, e.g. the URL")


class ErrorResponse(BaseModel):
    """Body of a failed analysis request, nested under FastAPI's ``detail`` key."""

    error: ErrorDetail

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": {
                    "code": ErrorCodes.INVALID_URL,
                    "message": "Valid URL required",
                    "details": {"url": "ftp://example.com"},
                }
            }
        }
    }


def error_body(code: str, message: str, url: str | None) -> dict[str, Any]:
    """Build the ``HTTPException.detail`` payload for an analysis error."""
    return ErrorResponse(
        error=ErrorDetail(code=code, message=message, details={"url": url})
    ).model_dump()
