# timebill/shared/middleware/exception_middleware.py (async version)

"""
Middleware for centralized exception handling.

This module defines middleware that intercepts exceptions and formats
appropriate error responses for the client, plus the FastAPI exception
handlers for request validation and HTTP errors. Every error body has the
shape ``{"message": str, "code": str, "errors"?: [...]}``.
"""

import re
import time
import logging
from typing import Any, Callable, Dict, List, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from jose.exceptions import ExpiredSignatureError, JWTError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from timebill.adapters.configuration.config import settings as default_settings
from timebill.domain.exceptions import DomainException

# Configure logger
logger = logging.getLogger(__name__)

# Mapping from pure exception to HTTP code based on 'internal_code'
STATUS_BY_CODE = {
    "INVALID_INPUT": status.HTTP_400_BAD_REQUEST,
    "RESOURCE_ALREADY_EXISTS": status.HTTP_400_BAD_REQUEST,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "RESOURCE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "RESOURCE_IN_USE": status.HTTP_409_CONFLICT,
    "DATABASE_OPERATION_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(
        status_code: int,
        message: str,
        code: str,
        errors: Optional[List[Dict[str, Any]]] = None,
        headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    content: Dict[str, Any] = {"message": message, "code": code}
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def client_host(request: Request) -> str:
    return request.client.host if request.client else "N/A"


def is_production(request: Request) -> bool:
    """Check the environment of the app serving the request."""
    settings = getattr(request.app.state, "settings", default_settings)
    return settings.ENVIRONMENT == "production"


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized exception handling.
    Captures specific exceptions and formats the response accordingly.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.time()
        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            response.headers["X-Process-Time"] = str(process_time)
            return response

        except DomainException as exc:
            status_code = STATUS_BY_CODE.get(exc.internal_code, status.HTTP_400_BAD_REQUEST)
            log = logger.error if status_code >= 500 else logger.warning
            log(
                f"Domain exception: {str(exc)} | Code: {exc.internal_code} | "
                f"Path: {request.url.path}"
            )

            message = str(exc)
            if status_code >= 500 and is_production(request):
                message = "Erro interno no banco de dados"

            headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
            return error_response(status_code, message, exc.internal_code, exc.errors, headers)

        except IntegrityError as exc:
            # Raised at commit time, after the repositories already returned
            constraint_name = self._extract_constraint_name(str(exc))
            logger.error(
                f"Integrity error: Type={type(exc).__name__} | "
                f"Constraint={constraint_name or 'N/A'} | "
                f"Path: {request.url.path} | "
                f"Client: {client_host(request)}"
            )
            message = "Violação de integridade no banco de dados"
            if not is_production(request):
                message = str(exc.orig) if exc.orig is not None else str(exc)

            return error_response(status.HTTP_409_CONFLICT, message, "INTEGRITY_ERROR")

        except SQLAlchemyError as exc:
            if is_production(request):
                error_message = "Erro interno no banco de dados"
                logger.error(
                    f"Database error: Type={type(exc).__name__} | "
                    f"Path: {request.url.path} | "
                    f"Client: {client_host(request)}"
                )
            else:
                error_message = str(exc)
                logger.error(
                    f"Database error: {str(exc)} | "
                    f"Path: {request.url.path} | "
                    f"Client: {client_host(request)}"
                )

            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, error_message, "DATABASE_ERROR")

        except (JWTError, ExpiredSignatureError) as exc:
            error_type = "Token expirado" if isinstance(exc, ExpiredSignatureError) else "Token inválido"
            logger.warning(
                f"Authentication error: {error_type} | "
                f"Type={type(exc).__name__} | "
                f"Path: {request.url.path} | "
                f"Client: {client_host(request)}"
            )
            return error_response(
                status.HTTP_401_UNAUTHORIZED,
                f"{error_type}. Faça login novamente.",
                "INVALID_TOKEN",
                headers={"WWW-Authenticate": "Bearer"},
            )

        except Exception as exc:
            # Unhandled exceptions
            logger.exception(
                f"Unhandled exception: Type={type(exc).__name__} | "
                f"Path: {request.url.path} | "
                f"Client: {client_host(request)}"
            )
            error_message = "Erro interno do servidor"
            if not is_production(request):
                error_message = str(exc) or error_message

            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, error_message, "INTERNAL_SERVER_ERROR")

    def _extract_constraint_name(self, error_message: str) -> Optional[str]:
        """
        Attempts to extract the constraint name from an integrity error message.

        Args:
            error_message: The complete error message

        Returns:
            The constraint name or None if not found
        """
        # Common patterns for different databases
        patterns = [
            r'constraint "(.*?)"',
            r'CONSTRAINT (.*?) FOREIGN KEY',
            r'UNIQUE constraint failed: (.*)',
            r'duplicate key value violates unique constraint "(.*?)"'
        ]

        for pattern in patterns:
            match = re.search(pattern, error_message)
            if match:
                return match.group(1)
        return None


########################################################################
# FastAPI exception handlers
########################################################################

def _field_path(loc) -> str:
    # Drop the "body"/"query"/"path" prefix
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request validation errors become 400 with one item per invalid field."""
    errors = [
        {
            "field": _field_path(error.get("loc", ())),
            "message": error.get("msg", ""),
            "type": error.get("type", "value_error"),
        }
        for error in exc.errors()
    ]
    logger.warning(f"Validation error: {len(errors)} invalid field(s) | Path: {request.url.path}")
    return error_response(status.HTTP_400_BAD_REQUEST, "Dados de entrada inválidos", "VALIDATION_ERROR", errors)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """HTTP errors raised by the framework (404 route, 405 method...)."""
    return error_response(
        exc.status_code,
        str(exc.detail),
        f"HTTP_{exc.status_code}",
        headers=getattr(exc, "headers", None),
    )
