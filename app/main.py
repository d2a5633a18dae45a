"""FastAPI entry point."""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from aeo_scanner import __version__
from aeo_scanner.config.settings import settings
from app.api.router import router as api_router

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response


app = FastAPI(
    title="AEO Scanner API",
    description="""
API for scoring web pages for Answer Engine Optimization (AEO).

## Features

- **AEO Score**: 0-100 score normalized over five rule checks
- **Page Type**: homepage, article, recipe, product, faq or content
- **Recommendations**: actionable fixes from every failing check

`POST /api/analyze` with `{"url": "https://..."}` returns the analysis.
""",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api.cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)
app.add_middleware(SecurityHeadersMiddleware)

app.include_router(api_router, prefix="/api")
