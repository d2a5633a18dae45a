"""Analysis endpoint."""
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from starlette.concurrency import run_in_threadpool

from aeo_scanner.engine.aggregator import AnalysisResult
from aeo_scanner.engine.analyzer import analyze_page
from aeo_scanner.fetcher.html_fetcher import FetchError, fetch_page
from app.api.models.errors import ErrorCodes, ErrorResponse, error_body
from app.api.models.requests import AnalyzeRequest
from app.api.models.responses import AnalysisResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Analysis"])


def _fetch_and_analyze(url: str) -> AnalysisResult:
    page = fetch_page(url)
    return analyze_page(
        page.html,
        url,
        page.status_code,
        page.headers,
        page.final_url,
    )


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid URL"},
        500: {"model": ErrorResponse, "description": "Page could not be fetched or analyzed"},
    },
    summary="Analyze a URL for AEO",
    description="""
Fetch a single page and score how well AI answer engines can extract and cite it.

**Checks (in order):**
- **Answer Extraction** (30): question-style H1 and a concise definition paragraph
- **Content Structure** (25): H2/H3 sections and lists
- **Schema Markup** (25): JSON-LD types suited to the page type
- **Internal Linking** (10): links to the same host
- **Crawlability** (10-20): status 200, no noindex, canonical tag, title

The response carries the normalized score, every check result, the
recommendations of failing checks and the detected page type.
""",
)
async def analyze(body: AnalyzeRequest) -> AnalysisResponse:
    """Fetch and analyze the requested URL."""
    url = (body.url or "").strip()
    if not url.startswith(("http://", "https://")):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error_body(ErrorCodes.INVALID_URL, "Valid URL required", body.url),
        )

    logger.info("Analyzing %s", url)
    try:
        result = await run_in_threadpool(_fetch_and_analyze, url)
    except (ValueError, FetchError) as e:
        logger.warning("Analysis of %s failed: %s", url, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error_body(ErrorCodes.ANALYSIS_FAILED, str(e) or "Failed to analyze URL", url),
        ) from e
    except Exception as e:
        logger.exception("Unexpected error analyzing %s", url)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error_body(ErrorCodes.ANALYSIS_FAILED, "Failed to analyze URL", url),
        ) from e

    return AnalysisResponse.model_validate(result.to_dict())
