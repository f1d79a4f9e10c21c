"""Stub profile service: FastAPI application entry point.

Serves ``GET``/``PATCH /api/users/{id}`` from an in-memory store so the
profile controller can be exercised against a real HTTP endpoint.
"""

import structlog
from fastapi import FastAPI

from api.exception_handlers import setup_exception_handlers
from api.middleware.request_context import RequestContextMiddleware
from api.routes.health import VERSION
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from core.config import settings
from core.logging import setup_logging

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description=(
            "## Profile Service\n\n"
            "Reference implementation of the remote profile contract:\n"
            "- `GET /api/users/{id}` returns the full profile\n"
            "- `PATCH /api/users/{id}` applies a partial update of "
            "`firstName`, `lastName`, `bio` and `avatar` and returns the "
            "full authoritative profile"
        ),
        version=VERSION,
        debug=settings.debug,
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check endpoints",
            },
            {
                "name": "users",
                "description": "User profile operations",
            },
        ],
    )

    app.add_middleware(RequestContextMiddleware)

    setup_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
