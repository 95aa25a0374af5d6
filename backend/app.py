"""FastAPI application entry point for the Premier League API backend."""

import logging
import sys

import httpx
import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, settings as default_settings
from dependencies import build_services
from errors import register_error_handlers

# Structured logging: JSON for production, human-readable for local
if default_settings.is_production:
    logging.basicConfig(
        level=default_settings.log_level.upper(),
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(
        level=default_settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    football_transport: httpx.AsyncBaseTransport | None = None,
    guardian_transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    settings = settings or default_settings
    app = FastAPI(title="Premier League API", version="1.0.0")
    app.state.settings = settings
    app.state.services = build_services(settings, football_transport, guardian_transport)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.health import router as health_router
    from routes.football import router as football_router
    from routes.guardian import router as guardian_router

    app.include_router(health_router)
    app.include_router(football_router)
    app.include_router(guardian_router)

    @app.on_event("startup")
    async def _validate_config() -> None:
        missing = settings.validate()
        if missing:
            logger.warning("Missing env vars (upstream calls may fail): %s", ", ".join(missing))

    @app.on_event("shutdown")
    async def _close_clients() -> None:
        await app.state.services.close()

    return app


app = create_app()


def run() -> None:
    """Run the server on the configured host/port."""
    logger.info("Premier League API backend on port %d", default_settings.port)
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)


if __name__ == "__main__":
    run()
