"""API response models."""
from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PageTypeName = Literal["homepage", "article", "recipe", "product", "faq", "content"]


class CheckResultModel(BaseModel):
    """One rule check in the score breakdown."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    points: int = Field(..., ge=0)
    max_points: int = Field(..., gt=0, alias="maxPoints")
    passed: bool = Field(..., alias="pass")
    details: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    is_optional: bool = Field(default=False, alias="isOptional")


class AnalysisResponse(BaseModel):
    """Complete AEO analysis result."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "score": 72,
                "checks": [
                    {
                        "title": "Answer Extraction",
                        "points": 30,
                        "maxPoints": 30,
                        "pass": True,
                        "details": ['H1 found: "What is AEO?"'],
                        "recommendations": [],
                        "isOptional": False,
                    }
                ],
                "recommendations": ["Add at least 3 internal links to related content"],
                "pageType": "article",
            }
        },
    )

    score: int = Field(..., ge=0, le=100, description="Normalized AEO score (0-100)")
    checks: list[CheckResultModel]
    recommendations: list[str]
    page_type: PageTypeName = Field(..., alias="pageType")


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    timestamp: datetime
    profile: str = Field(..., description="Active scoring profile")
