"""Middleware de rastreio de requisições e headers de segurança"""
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from time import perf_counter
import logging
import uuid

logger = logging.getLogger(__name__)

SLOW_REQUEST_SECONDS = 1.0


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Mede o tempo de cada requisição e propaga o X-Request-ID"""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        start_time = perf_counter()

        response = await call_next(request)

        process_time = perf_counter() - start_time

        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        response.headers["X-Request-ID"] = request_id

        # Headers de segurança
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"

        logger.debug(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"[{request_id}] {process_time:.4f}s"
        )
        if process_time > SLOW_REQUEST_SECONDS:
            logger.warning(
                f"Slow request: {request.method} {request.url.path} "
                f"took {process_time:.4f}s"
            )

        return response
