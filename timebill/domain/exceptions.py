# timebill/domain/exceptions.py

"""
Exceções de domínio da aplicação.

Estas exceções são puras (não dependem do FastAPI). A camada HTTP traduz
cada uma para um status code a partir do atributo ``internal_code``.
"""

from typing import Any, Dict, List, Optional


class DomainException(Exception):
    """
    Exceção base para todas as exceções de domínio.
    """

    internal_code: str = "DOMAIN_ERROR"

    def __init__(
            self,
            detail: str = "Erro de domínio",
            internal_code: Optional[str] = None,
            errors: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(detail)
        self.detail = detail
        if internal_code is not None:
            self.internal_code = internal_code
        self.errors = errors or []

    def __str__(self) -> str:
        return self.detail


class ResourceNotFoundException(DomainException):
    """Recurso não encontrado."""

    internal_code = "RESOURCE_NOT_FOUND"

    def __init__(self, detail: str = "Recurso não encontrado", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(detail=f"{detail}{resource_info}")
        self.resource_id = resource_id


class ResourceAlreadyExistsException(DomainException):
    """Recurso já existe (violação de código único)."""

    internal_code = "RESOURCE_ALREADY_EXISTS"

    def __init__(self, detail: str = "Recurso já existe", field: Optional[str] = None):
        errors = [{"field": field, "message": detail, "type": "unique"}] if field else None
        super().__init__(detail=detail, errors=errors)


class ResourceInUseException(DomainException):
    """Recurso referenciado por outras entidades e que não pode ser removido."""

    internal_code = "RESOURCE_IN_USE"

    def __init__(self, detail: str = "Recurso em uso por outras entidades", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(detail=f"{detail}{resource_info}")


class InvalidCredentialsException(DomainException):
    """Credenciais inválidas."""

    internal_code = "INVALID_CREDENTIALS"

    def __init__(self, detail: str = "Credenciais inválidas"):
        super().__init__(detail=detail)


class InvalidInputException(DomainException):
    """Dados de entrada inválidos."""

    internal_code = "INVALID_INPUT"

    def __init__(self, detail: str = "Dados de entrada inválidos", fields: Optional[Dict[str, str]] = None):
        errors = None
        if fields:
            errors = [
                {"field": field, "message": message, "type": "value_error"}
                for field, message in fields.items()
            ]
        super().__init__(detail=detail, errors=errors)


class DatabaseOperationException(DomainException):
    """Erro na operação de banco de dados."""

    internal_code = "DATABASE_OPERATION_ERROR"

    def __init__(self, detail: str = "Erro ao executar operação no banco de dados",
                 original_error: Optional[Exception] = None):
        super().__init__(detail=detail)
        self.original_error = original_error
