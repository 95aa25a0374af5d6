"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

REGISTER_URL = "https://www.football-data.org/client/register"


class FootballProxyError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class MissingParameterError(FootballProxyError):
    def __init__(self, *names: str):
        joined = " and ".join(names)
        noun = "parameters" if len(names) > 1 else "parameter"
        super().__init__(f"{joined} {noun} required", status_code=400)


# ---------------------------------------------------------------------------
# football-data.org failures
# ---------------------------------------------------------------------------

class FootballDataError(FootballProxyError):
    """Any failure talking to the match-data provider."""


class AuthOrRateLimitError(FootballDataError):
    def __init__(self):
        super().__init__(
            f"API key required or rate limit exceeded. Get free key at: {REGISTER_URL}",
            status_code=403,
        )


class RateLimitError(FootballDataError):
    def __init__(self):
        super().__init__("Rate limit exceeded. Wait a minute or add API key.", status_code=429)


class UpstreamError(FootballDataError):
    def __init__(self, upstream_status: int, reason: str):
        super().__init__(f"API returned {upstream_status}: {reason}", status_code=502)
        self.upstream_status = upstream_status
        self.reason = reason


class TransportError(FootballDataError):
    def __init__(self, detail: str):
        super().__init__(f"Could not reach football-data.org: {detail}", status_code=502)


class InvalidPayloadError(FootballDataError):
    """Upstream answered 2xx but the body could not be decoded as JSON."""

    def __init__(self, detail: str):
        super().__init__(f"Unreadable response from football-data.org: {detail}", status_code=502)


class InvalidParameterError(FootballProxyError):
    def __init__(self, name: str, expected: str):
        super().__init__(f"{name} must be {expected}", status_code=400)


class ResourceFetchError(FootballProxyError):
    """Route-level wrapper: which resource failed, and why."""

    def __init__(self, resource: str, cause: Exception):
        super().__init__(f"Failed to fetch {resource}", status_code=500)
        self.resource = resource
        self.details = str(cause)


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(ResourceFetchError)
    async def handle_resource_error(_request: Request, exc: ResourceFetchError):
        logger.error("%s: %s", exc, exc.details)
        return JSONResponse(
            {"error": str(exc), "details": exc.details},
            status_code=exc.status_code,
        )

    @app.exception_handler(FootballProxyError)
    async def handle_proxy_error(_request: Request, exc: FootballProxyError):
        return JSONResponse({"error": str(exc)}, status_code=exc.status_code)

    @app.exception_handler(ValueError)
    async def handle_value_error(_request: Request, exc: ValueError):
        return JSONResponse({"error": str(exc)}, status_code=400)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=500,
        )
