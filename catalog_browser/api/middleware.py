"""API middleware for the catalog browser.

A single request-context middleware correlates requests: it reads or
assigns ``X-Request-ID``, binds it into the structlog context for every log
line emitted while the request is handled, logs one access line per request
and turns anything that escapes the routers into the uniform error body.
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


def internal_error_response(request_id: str | None) -> JSONResponse:
    """Uniform 500 body."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error_code": "INTERNAL_ERROR",
            "message": "An internal error occurred",
            "details": [],
            "request_id": request_id,
        },
    )


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Request ID correlation, access logging and last-resort error handling."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id

        started = time.perf_counter()
        with structlog.contextvars.bound_contextvars(request_id=request_id):
            try:
                response = await call_next(request)
            except Exception as e:
                logger.exception(
                    "Unhandled exception",
                    path=request.url.path,
                    method=request.method,
                    error=str(e),
                )
                response = internal_error_response(request_id)

            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def setup_middleware(app: FastAPI) -> None:
    """Install the request-context middleware.

    Args:
        app: FastAPI application instance.
    """
    app.add_middleware(RequestContextMiddleware)
