"""Access logging for the HTTP API.

One ``request_started`` and one ``request_completed`` (or ``request_failed``)
event per request, each carrying the request ID so a request's log lines
and its problem documents can be matched up.
"""

import time
from typing import Any

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint


logger = structlog.get_logger()

# Health checks and API docs are polled constantly and say nothing about traffic
QUIET_PATHS = ("/health/live", "/health/ready", "/docs", "/redoc", "/openapi.json")


def completion_level(status_code: int) -> str:
    """Log level for a finished request: error for 5xx, warning for 4xx."""
    if status_code >= 500:
        return "error"
    if status_code >= 400:
        return "warning"
    return "info"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its method, path, status and duration.

    Runs inside ``RequestIdMiddleware`` so ``request.state.request_id`` is
    already set. The user ID is picked up after the handler has run, once
    authentication has resolved it.
    """

    def __init__(self, app: Any, quiet_paths: tuple[str, ...] = QUIET_PATHS) -> None:
        super().__init__(app)
        self.quiet_paths = quiet_paths

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.url.path.startswith(self.quiet_paths):
            return await call_next(request)

        fields: dict[str, Any] = {
            "request_id": getattr(request.state, "request_id", None),
            "method": request.method,
            "path": request.url.path,
        }
        started = time.perf_counter()

        logger.info(
            "request_started",
            client_ip=get_client_ip(request),
            query=str(request.url.query) or None,
            **fields,
        )

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception(
                "request_failed",
                duration_ms=_elapsed_ms(started),
                error=str(exc),
                **fields,
            )
            raise

        user_id = getattr(request.state, "user_id", None)
        if user_id:
            fields["user_id"] = str(user_id)

        log = getattr(logger, completion_level(response.status_code))
        log(
            "request_completed",
            status_code=response.status_code,
            duration_ms=_elapsed_ms(started),
            **fields,
        )
        return response


def get_client_ip(request: Request) -> str | None:
    """Best guess at the caller's address behind a proxy.

    First hop of ``X-Forwarded-For``, then ``X-Real-IP``, then the socket
    peer.
    """
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return request.client.host if request.client else None
