"""
Light-Aware Routing API - FastAPI Main Application

A RESTful API that ranks walking routes by how well they are lit, using
public streetlight data and Google Directions.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from api.routes.content import router as content_router
from api.routes.routing import router as routing_router
from api.services.feedback_store import FeedbackStore
from api.services.routing_service import API_VERSION, LightRoutingService
from api.settings import ApiSettings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(service: Optional[LightRoutingService] = None,
               settings: Optional[ApiSettings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        service: Pre-built routing service; built from settings at startup if None
        settings: API settings; read from the environment if None
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Manage application lifecycle - startup and shutdown events.
        """
        logger.info("Starting Light-Aware Routing API...")

        if getattr(app.state, 'routing_service', None) is None:
            app.state.routing_service = LightRoutingService.from_settings(
                settings or ApiSettings.from_env()
            )

        health = app.state.routing_service.get_health_status()
        if health.streetlights_loaded:
            logger.info(f"✓ Routing service ready with {health.streetlight_count} streetlights")
        else:
            logger.warning("⚠ Routing service running in degraded mode - streetlight data not loaded")

        yield

        logger.info("Shutting down Light-Aware Routing API...")

    app = FastAPI(
        title="Light-Aware Routing API",
        description="""
        **Find well-lit walking routes using public streetlight data**

        For every walking alternative returned by Google Directions, the API
        estimates a light score from 0 to 10 and labels the fastest, a
        balanced and the most well-lit route.

        ## Quick Start

        1. Check service health: `GET /api/routes/health`
        2. Get route variants: `GET /api/routes?start=...&end=...`
        3. Score your own candidates: `POST /api/routes/variants`
        """,
        version=API_VERSION,
        lifespan=lifespan
    )

    app.state.routing_service = service
    app.state.feedback_store = FeedbackStore()

    # Add CORS middleware for web applications
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """
        Handle request validation errors with detailed information.
        """
        logger.warning(f"Validation error for {request.url}: {exc}")
        return JSONResponse(
            status_code=422,
            content={
                "error": "Request validation failed",
                "details": jsonable_errors(exc)
            }
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """
        Handle unexpected errors gracefully.
        """
        logger.error(f"Unexpected error for {request.url}: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "An unexpected error occurred",
                "details": None
            }
        )

    app.include_router(routing_router)
    app.include_router(content_router)

    @app.get("/", tags=["general"])
    async def root():
        """
        API root endpoint with basic information.
        """
        return {
            "api": "Light-Aware Routing API",
            "version": API_VERSION,
            "status": "operational",
            "documentation": "/docs",
            "health_check": "/api/routes/health"
        }

    @app.get("/health", tags=["general"])
    async def api_health(request: Request):
        """
        Simple health check endpoint.
        """
        service_health = request.app.state.routing_service.get_health_status()
        return {
            "api_status": "healthy",
            "service_status": service_health.status,
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    return app


def jsonable_errors(exc: RequestValidationError):
    """Validation errors reduced to JSON-safe location/message pairs."""
    return [
        {"loc": [str(part) for part in error.get("loc", ())], "msg": str(error.get("msg", ""))}
        for error in exc.errors()
    ]


app = create_app()


# Development server configuration
if __name__ == "__main__":
    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
