# timebill/shared/middleware/__init__.py

from timebill.shared.middleware.exception_middleware import (
    AsyncExceptionMiddleware,
    http_exception_handler,
    validation_exception_handler,
)
from timebill.shared.middleware.logging_middleware import AsyncRequestLoggingMiddleware

__all__ = [
    "AsyncExceptionMiddleware",
    "AsyncRequestLoggingMiddleware",
    "http_exception_handler",
    "validation_exception_handler",
]
