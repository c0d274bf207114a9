"""ASGI middleware: request ids, access log and last-resort error handler.

``RequestLoggingMiddleware`` must be added after ``ExceptionHandlerMiddleware``
so it runs outermost and the request id is set before any error is logged.
"""

from __future__ import annotations

import time
import traceback
import uuid

from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

REQUEST_ID_HEADER = "X-Request-ID"


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "-")


def _source_type(request: Request) -> str:
    cfg = getattr(request.app.state, "cfg", None)
    if cfg is None:
        return "-"
    source = request.app.state.source
    # A supabase config without credentials serves demo data.
    return cfg.source.type if source is not None else f"{cfg.source.type} (unconfigured)"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and log method, path, status and latency."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
        request.state.request_id = request_id

        started = time.perf_counter()
        with logger.contextualize(request_id=request_id):
            response = await call_next(request)
            logger.info(
                "[{rid}] {method} {path} → {status} ({ms:.0f}ms, source={source})",
                rid=request_id,
                method=request.method,
                path=request.url.path,
                status=response.status_code,
                ms=(time.perf_counter() - started) * 1000,
                source=_source_type(request),
            )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class ExceptionHandlerMiddleware(BaseHTTPMiddleware):
    """Turn unhandled exceptions into a JSON 500 carrying the request id."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            request_id = _request_id(request)
            logger.error(
                "[{rid}] Unhandled exception on {method} {path} (source={source}): {err}\n{tb}",
                rid=request_id,
                method=request.method,
                path=request.url.path,
                source=_source_type(request),
                err=exc,
                tb=traceback.format_exc(),
            )
            return JSONResponse(
                status_code=500,
                content={
                    "detail": "Internal server error",
                    "error": str(exc),
                    "request_id": request_id,
                },
            )
