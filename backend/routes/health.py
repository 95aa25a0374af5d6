"""Health, readiness and cache administration routes."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request

from dependencies import Services, get_services

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/ready")
async def ready(request: Request) -> dict:
    """Lightweight readiness check: no cache or upstream access."""
    return {
        "status": "ok",
        "service": "premier-league-api",
        "commit": request.app.state.settings.git_sha,
    }


@router.get("/health")
async def health(request: Request, services: Services = Depends(get_services)) -> dict:
    """Server status plus which cached resources are currently fresh."""
    return {
        "status": "OK",
        "message": "Premier League API Backend (Football-Data.org + Guardian)",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "commit": request.app.state.settings.git_sha,
        "cache": services.cache.snapshot(),
    }


@router.post("/cache/clear")
async def clear_cache(services: Services = Depends(get_services)) -> dict:
    services.cache.clear()
    logger.info("Cache cleared")
    return {"message": "Cache cleared successfully"}
