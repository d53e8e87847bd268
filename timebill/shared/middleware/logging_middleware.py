# timebill/shared/middleware/logging_middleware.py (async version)

"""
Middleware for HTTP request logging.

One line per request, written after the response: method, path, status and
elapsed time. Client errors are logged as warnings and server errors as
errors, so the access log can be filtered by level.
"""

import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

# Configure logger
logger = logging.getLogger(__name__)


class AsyncRequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request logging.
    Reads the environment from the settings the app was created with.
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        if response.status_code >= 500:
            log = logger.error
        elif response.status_code >= 400:
            log = logger.warning
        else:
            log = logger.info

        line = f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"

        settings = getattr(request.app.state, "settings", None)
        if settings is not None and settings.ENVIRONMENT != "production" and request.query_params:
            # Query strings only carry filters (dates, ids) here
            line += f" | Query: {dict(request.query_params)}"

        log(line)
        return response
