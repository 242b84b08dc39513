"""
API Middleware

Request logging for the members API. Every request gets a unique id that is
echoed back in ``X-Request-ID`` together with the processing time.
"""

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):  # pylint: disable=too-few-public-methods
    """
    Middleware for logging all requests and responses.
    """
    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        client_host = request.client.host if request.client else "unknown"
        start_time = time.time()

        logger.info(
            "Request %s: %s %s from %s - Query: %s",
            request_id, request.method, request.url.path,
            client_host, dict(request.query_params)
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Error %s: %s processing %s %s",
                request_id, str(e), request.method, request.url.path,
                exc_info=True
            )
            raise

        process_time = time.time() - start_time
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.4f}"

        logger.info(
            "Response %s: %s processed in %.4fs",
            request_id, response.status_code, process_time
        )
        return response
