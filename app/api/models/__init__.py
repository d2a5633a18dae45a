"""API Pydantic models."""
from app.api.models.errors import ErrorCodes, ErrorDetail, ErrorResponse
from app.api.models.requests import AnalyzeRequest
from app.api.models.responses import AnalysisResponse, CheckResultModel, HealthResponse

__all__ = [
    "AnalyzeRequest",
    "AnalysisResponse",
    "CheckResultModel",
    "HealthResponse",
    "ErrorResponse",
    "ErrorDetail",
    "ErrorCodes",
]
