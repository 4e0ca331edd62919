"""Logging middleware for request tracking."""
import re
import time
import uuid
from typing import Callable, Optional

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from schoolvote.core.exceptions import ElectionError
from schoolvote.core.security import get_session_payload

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def resolve_request_id(incoming: Optional[str]) -> str:
    """Reuse a well-formed request id from a proxy, otherwise mint one."""
    if incoming and _REQUEST_ID_PATTERN.match(incoming):
        return incoming
    return str(uuid.uuid4())


def session_user_id(request: Request) -> Optional[str]:
    """Best-effort user id for log context; bad cookies are reported by the endpoint, not here."""
    try:
        payload = get_session_payload(request)
    except ElectionError:
        return None
    return payload.get("sub") if payload else None


class LoggingMiddleware(BaseHTTPMiddleware):
    """Bind request context for structlog and log each request's outcome."""

    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            client_host=request.client.host if request.client else None,
            user_id=session_user_id(request),
        )

        start_time = time.perf_counter()
        logger.debug("request_started")

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "request_failed",
                exception=str(exc),
                exception_type=type(exc).__name__,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            raise

        response.headers[REQUEST_ID_HEADER] = request_id

        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

        return response
