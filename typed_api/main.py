"""Typed API — FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Every (method, path) pair is bound once; create_app fails otherwise
    - Each app instance owns its stores (app.state.stores)
    - Global error handlers map errors to empty 404s or structured JSON
    - CORS accepts the origins from settings (any origin by default)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Factory plus module-level `app`: uvicorn serves `app`, tests call create_app()
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from typed_api.api.error_handlers import register_error_handlers
from typed_api.api.openapi_docs import install_openapi
from typed_api.api.route_table import ensure_unique_routes
from typed_api.api.routes import companies, health, permissions, user_types, users
from typed_api.config import Settings, get_settings
from typed_api.infrastructure.observability import setup_logging
from typed_api.services.stores import Stores, build_stores

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, stores: Stores | None = None) -> FastAPI:
    """Build the FastAPI app with fresh (or given) stores."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(f"Server is running on port {settings.port}")
        yield
        logger.info("Typed API shutting down")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=settings.app_description,
        docs_url=settings.docs_url,
        lifespan=lifespan,
    )
    app.state.stores = stores or build_stores()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(user_types.router)
    app.include_router(companies.router)
    app.include_router(permissions.router)

    install_openapi(app, settings)
    ensure_unique_routes(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point — serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
