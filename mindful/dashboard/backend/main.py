"""
MindfulTask Dashboard Backend - FastAPI Application

This is the main entry point for the dashboard REST API. The application
state (task store, theme, notification permission) is created in the
lifespan handler and kept on app.state; routes reach it through the
get_state dependency.

Usage:
    uvicorn mindful.dashboard.backend.main:app --host 127.0.0.1 --port 8080 --reload

    Or run directly:
    python -m mindful.dashboard.backend.main
"""

import logging
import sqlite3
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

# Load .env file before anything else
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mindful import __version__
from mindful.config import MindfulConfig, load_config
from mindful.dashboard.backend.models import ErrorResponse, HealthCheck
from mindful.dashboard.backend.routes import api_router
from mindful.dashboard.backend.websocket import ConnectionManager, ws_router
from mindful.logging_config import setup_logging
from mindful.notify.websocket_host import WebSocketNotificationHost
from mindful.state import AppState

logger = logging.getLogger(__name__)


def create_app(config: Optional[MindfulConfig] = None) -> FastAPI:
    """Build the dashboard application for the given configuration."""
    config = config or load_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting MindfulTask Dashboard Backend...")
        app.state.startup_time = datetime.now()

        manager = ConnectionManager()
        host = WebSocketNotificationHost(
            manager,
            enabled=config.notifications.enabled,
            timeout_seconds=config.notifications.permission_timeout_seconds,
        )
        app.state.ws_manager = manager
        app.state.mindful = AppState.create(config, host=host, events=manager)

        if not config.ai.api_key():
            logger.warning(f"{config.ai.api_key_env} not set, AI breakdown and encouragement are degraded")

        yield

        logger.info("Shutting down MindfulTask Dashboard Backend...")
        await app.state.mindful.shutdown()

    app = FastAPI(
        title="MindfulTask Dashboard API",
        description="REST API for the MindfulTask task list",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.dashboard.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Health Check Endpoint
    # =========================================================================

    @app.get("/api/health", response_model=HealthCheck, tags=["health"])
    async def health_check(request: Request):
        """Check storage and report AI / notification availability."""
        state: AppState = request.app.state.mindful
        services = {}

        try:
            conn = state.persistence.store.get_connection()
            conn.execute("SELECT 1")
            conn.close()
            services["storage"] = "healthy"
        except (sqlite3.Error, OSError) as e:
            logger.error(f"Storage health check failed: {e}")
            services["storage"] = "unhealthy"

        services["ai"] = "configured" if state.breakdown_client.llm.configured else "unconfigured"
        services["notifications"] = state.notifier.permission.value

        overall = "healthy" if services["storage"] == "healthy" else "degraded"
        return HealthCheck(status=overall, version=__version__, timestamp=datetime.now(), services=services)

    # =========================================================================
    # Error Handlers
    # =========================================================================

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with consistent format."""
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=str(exc.detail), code=f"HTTP_{exc.status_code}").model_dump(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error="Invalid request",
                code="VALIDATION_ERROR",
                details={"errors": jsonable_errors(exc)},
            ).model_dump(),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Internal server error", code="INTERNAL_ERROR").model_dump(),
        )

    # REST API routes
    app.include_router(api_router)

    # WebSocket routes
    app.include_router(ws_router)

    return app


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]


setup_logging()
app = create_app()


if __name__ == "__main__":
    import uvicorn

    dashboard_config = app.state.config.dashboard
    uvicorn.run(
        "mindful.dashboard.backend.main:app",
        host=dashboard_config.host,
        port=dashboard_config.api_port,
        reload=True,
        log_level="info",
    )
