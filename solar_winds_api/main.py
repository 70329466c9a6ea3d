"""
Entry point for the Solar Winds HTTP API.

This module creates the FastAPI application, wires up middleware and error
handlers, and mounts the resource routers under the configured prefix.

Intended usage:
    uvicorn solar_winds_api.main:app --host 0.0.0.0 --port 3000
or the ``solar-winds-api`` console script.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncGenerator, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from solar_winds_api.config import AppEnv, Settings, get_settings
from solar_winds_api.db.session import init_db
from solar_winds_api.exceptions import DomainError
from solar_winds_api.logging.config import configure_logging
from solar_winds_api.routers import addresses, events, sensors, users


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application instance.
    """
    settings = settings or get_settings()
    logger = configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        if settings.AUTO_CREATE_SCHEMA:
            init_db()

        logger.info(
            "app_startup",
            app=settings.APP_NAME,
            env=settings.APP_ENV.value,
            version=settings.APP_VERSION,
            api_root=settings.api_root or "/",
            cors_origins=settings.cors_origins,
        )
        yield
        logger.info("app_shutdown")

    docs_enabled = settings.DOCS_ENABLED and settings.APP_ENV != AppEnv.PRODUCTION

    app = FastAPI(
        title="Solar Winds API",
        version=settings.APP_VERSION,
        description="Solar panel sensor monitoring: users, addresses, sensors and power events.",
        openapi_url="/openapi.json" if docs_enabled else None,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Error handlers ---

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message, "code": exc.code},
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        # Constraint races that slipped past the service-level checks.
        logger.warning("integrity_error", path=request.url.path, error=str(exc.orig))
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": "Request conflicts with existing data", "code": "conflict"},
        )

    # --- System endpoints ---

    @app.get("/", tags=["system"])
    async def root() -> str:
        return "Solar Winds API is running!"

    @app.get("/health", tags=["system"])
    async def health() -> Dict[str, Any]:
        return {
            "status": "ok",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
        }

    for module in (users, addresses, sensors, events):
        app.include_router(module.router, prefix=settings.api_root)

    return app


# Default application instance
app = create_app()


def run() -> None:
    """
    Console-script entry point: serve ``app`` with uvicorn.
    """
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "solar_winds_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.APP_ENV == AppEnv.DEVELOPMENT and settings.DEBUG,
    )


if __name__ == "__main__":
    run()
