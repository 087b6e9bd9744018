"""
AI Content Detection Layer - FastAPI Application
=================================================

Run with: uvicorn detection.api:app --reload --port 8000

Thin caller of the detection core: validates the request, runs the ensemble
and returns the fused result. Authentication, storage and rate limiting live
in front of this service.
"""

import logging
from contextlib import asynccontextmanager
from typing import Dict

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import SERVICE_VERSION
from .orchestrator import DetectionOrchestrator
from .schemas import (
    AnalysisRequest,
    AnalysisResult,
    HealthResponse,
    ProviderStatus,
)
from .settings import load_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the orchestrator once, unless one was injected (tests)."""
    logger.info("AI Content Detection Layer v%s starting...", SERVICE_VERSION)
    if getattr(app.state, "orchestrator", None) is None:
        app.state.orchestrator = DetectionOrchestrator.from_settings(load_settings())
    logger.info(
        "DetectionOrchestrator initialized with providers: %s",
        ", ".join(f"{p.name}={p.status.value}" for p in app.state.orchestrator.providers),
    )
    yield
    logger.info("AI Content Detection Layer shutting down...")


app = FastAPI(
    title="AI Content Detection Layer",
    description="Provider ensemble for AI-generated text detection",
    version=SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    return JSONResponse(
        status_code=400,
        content={"error": "validation_error", "message": str(exc)}
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"error": "internal_error", "message": "An unexpected error occurred."}
    )


def _orchestrator() -> DetectionOrchestrator:
    return app.state.orchestrator


@app.post("/api/v1/detection/analyze", response_model=AnalysisResult, tags=["Detection"])
async def analyze(request: AnalysisRequest) -> AnalysisResult:
    """Estimate how likely a text is to be AI-generated."""
    try:
        return await _orchestrator().analyze_request(request)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/api/v1/detection/health", response_model=HealthResponse, tags=["System"])
async def health_check() -> HealthResponse:
    """Healthy when at least one provider can reach its remote service."""
    providers = _orchestrator().describe_providers()
    remote = any(p.status == ProviderStatus.ENABLED for p in providers)

    return HealthResponse(
        status="healthy" if remote else "degraded",
        version=SERVICE_VERSION,
        providers=providers,
    )


@app.get("/api/v1/detection/providers", tags=["System"])
async def provider_status() -> Dict:
    """Configured providers in ensemble order."""
    return {
        "providers": [p.model_dump(mode="json") for p in _orchestrator().describe_providers()],
    }


@app.get("/", tags=["System"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "AI Content Detection Layer",
        "version": SERVICE_VERSION,
        "documentation": "/docs",
        "health": "/api/v1/detection/health",
        "analyze": "/api/v1/detection/analyze",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("detection.api:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
