"""API request models."""
from __future__ import annotations

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    """Request body for URL analysis.

    The URL is validated by the endpoint rather than by pydantic so that a
    missing or non-http(s) URL is answered with 400 instead of 422.
    """

    url: str | None = Field(
        default=None,
        description="Absolute http(s) URL of the page to analyze",
        examples=["https://example.com/blog/what-is-aeo"],
    )
