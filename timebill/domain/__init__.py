# timebill/domain/__init__.py

"""
Módulo principal para componentes do domínio da aplicação.

Este módulo exporta as exceções do domínio.
"""

from timebill.domain.exceptions import (
    DomainException,
    ResourceNotFoundException,
    ResourceAlreadyExistsException,
    ResourceInUseException,
    InvalidCredentialsException,
    DatabaseOperationException,
    InvalidInputException,
)
