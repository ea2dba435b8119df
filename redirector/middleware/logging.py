"""
Request Logging Middleware

Logs one line per HTTP request:
- Request method and path
- Response status code (and the Location for redirects)
- Request processing time
- Client IP address

Uses Starlette's BaseHTTPMiddleware and standard Python logging.
"""

import time
import logging
from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("redirector")


def get_client_ip(request: Request) -> str:
    """
    Extract client IP address from request.

    Handles proxies and load balancers by checking X-Forwarded-For header.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        # X-Forwarded-For can contain multiple IPs, take the first one
        return forwarded_for.split(",")[0].strip()

    return request.client.host if request.client else "unknown"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware timing and logging every request/response cycle."""

    async def dispatch(self, request: Request, call_next):
        client_ip = get_client_ip(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        process_time = time.perf_counter() - start_time

        # Format: METHOD PATH STATUS_CODE [-> LOCATION] PROCESS_TIME_MS CLIENT_IP
        line = f"{request.method} {request.url.path} {response.status_code}"
        location = response.headers.get("location")
        if location:
            line += f" -> {location}"
        logger.info(f"{line} {process_time*1000:.2f}ms IP:{client_ip}")

        response.headers["X-Process-Time"] = str(process_time)
        return response


def add_logging_middleware(app: FastAPI) -> None:
    """Add logging middleware to FastAPI app."""
    app.add_middleware(LoggingMiddleware)
