"""
Request logging and error envelopes for the MealPrep API.

Every error response has the same shape:
    {"success": false, "error": {"code", "message", "details"?}, "timestamp"}
"""

import time
import logging
from datetime import datetime, timezone
from uuid import uuid4
from decimal import Decimal

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from app.exceptions import MealPrepError

logger = logging.getLogger("mealprep.middleware")

REQUEST_ID_HEADER = "X-Request-ID"


def make_serializable(obj):
    """Convert validation details to JSON-safe values"""
    if isinstance(obj, Decimal):
        return float(obj)
    if isinstance(obj, dict):
        return {k: make_serializable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [make_serializable(item) for item in obj]
    if isinstance(obj, Exception):
        return str(obj)
    return obj


def error_response(request: Request, status_code: int, code: str, message: str, details=None) -> JSONResponse:
    """JSON error envelope; stamps the request id since 500s bypass RequestLoggingMiddleware"""
    error = {"code": code, "message": message}
    if details:
        error["details"] = make_serializable(details)
    headers = {}
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        headers[REQUEST_ID_HEADER] = request_id
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
        headers=headers,
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request and tags the response with a request id"""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "[%s] %s %s failed after %.1f ms",
                request_id,
                request.method,
                request.url.path,
                (time.perf_counter() - started) * 1000,
            )
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            "[%s] %s %s -> %d (%.1f ms)",
            request_id,
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{elapsed_ms / 1000:.4f}"
        return response


# ---------- exception handlers ----------


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Body, path or query failed validation"""
    logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
    return error_response(request, 422, "VALIDATION_ERROR", "Request validation failed", exc.errors())


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning("HTTP %d on %s: %s", exc.status_code, request.url.path, exc.detail)
    return error_response(request, exc.status_code, f"HTTP_{exc.status_code}", str(exc.detail))


async def mealprep_exception_handler(request: Request, exc: MealPrepError):
    """ServiceValidationError, NotFoundError and friends"""
    logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc)
    return error_response(request, exc.http_status, exc.code, exc.message, exc.details)


async def general_exception_handler(request: Request, exc: Exception):
    """Anything else, including plan store failures"""
    logger.exception("Unexpected error on %s", request.url.path)
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred",
    )
