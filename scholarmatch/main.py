"""
ScholarMatch - FastAPI Application

Main entry point for the scoring API.
Provides endpoints that score scholarships against a student profile.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from scholarmatch.config.settings import settings
from scholarmatch.infrastructure.exceptions import (
    ScholarMatchError,
    ValidationError,
    ConfigurationError,
)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    logger.info(f"ScholarMatch starting in {settings.environment} mode...")

    # Fail fast on bad weight configuration
    weights = settings.scoring_weights()
    logger.info(f"Scoring weights: {weights.to_dict()}")

    yield

    logger.info("ScholarMatch shutting down...")


app = FastAPI(
    title="ScholarMatch",
    description="Scholarship matching and scoring engine",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug_enabled,
)

# CORS configuration from Settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Exception Handlers
# ============================================================================

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Handle validation errors."""
    logger.warning(f"Validation error on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=400,
        content=exc.to_dict(),
    )


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    """Handle configuration errors."""
    logger.error(f"Configuration error: {exc.message}")
    return JSONResponse(
        status_code=500,
        content=exc.to_dict(),
    )


@app.exception_handler(ScholarMatchError)
async def general_error_handler(request: Request, exc: ScholarMatchError):
    """Handle all other application errors."""
    logger.error(f"Unhandled application error: {exc.message}")
    return JSONResponse(
        status_code=500,
        content=exc.to_dict(),
    )


# ============================================================================
# Health Check
# ============================================================================

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "scholarmatch"}


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "ScholarMatch API",
        "version": "1.0.0",
        "docs": "/docs",
    }


# ============================================================================
# Import and register routers
# ============================================================================

from scholarmatch.api.routes import matching

app.include_router(matching.router)
