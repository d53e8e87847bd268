# timebill/application/use_cases/auth_use_cases.py (async version)

"""
Service for consultant authentication.

This module implements login by consultant code and password, and the
resolution of an access token back to its consultant.
"""

import logging
from typing import Optional, Tuple

from timebill.adapters.outbound.security.auth_consultant_manager import ConsultantAuthManager
from timebill.application.ports.outbound import ITimesheetStorage
from timebill.domain.exceptions import InvalidCredentialsException
from timebill.domain.models import Consultant

logger = logging.getLogger(__name__)


class AuthService:
    """
    Service for consultant authentication.
    """

    def __init__(self, storage: ITimesheetStorage, auth_manager: Optional[ConsultantAuthManager] = None):
        """
        Initialize the service with the storage of the current unit of work.

        Args:
            storage: Storage opened for the request
            auth_manager: Token manager built from the app settings
        """
        self.storage = storage
        self.auth_manager = auth_manager or ConsultantAuthManager()

    async def login(self, code: str, password: str) -> Tuple[Consultant, str]:
        """
        Authenticate a consultant and generate an access token.

        Args:
            code: Consultant code
            password: Plain text password

        Returns:
            The consultant and a signed access token

        Raises:
            InvalidCredentialsException: If the code is unknown or the password doesn't match
        """
        consultant = await self.storage.consultants.get_by_field("code", code)

        # Same error for unknown code and wrong password
        if consultant is None or not await ConsultantAuthManager.verify_password(password, consultant.password):
            logger.warning(f"Failed login attempt for consultant code: {code}")
            raise InvalidCredentialsException(detail="Código ou senha inválidos")

        token = await self.auth_manager.create_access_token(subject=str(consultant.id))
        logger.info(f"Consultant {consultant.id} logged in")
        return consultant, token

    async def get_current_consultant(self, token: str) -> Consultant:
        """
        Resolve an access token to its consultant.

        Raises:
            InvalidCredentialsException: If the token is invalid or the consultant no longer exists
        """
        payload = await self.auth_manager.verify_access_token(token)

        try:
            consultant_id = int(payload.get("sub"))
        except (ValueError, TypeError):
            logger.warning(f"Invalid token: 'sub' is not an integer ({payload.get('sub')})")
            raise InvalidCredentialsException(detail="Token inválido")

        consultant = await self.storage.consultants.get(consultant_id)
        if consultant is None:
            logger.warning(f"Consultant {consultant_id} from token not found")
            raise InvalidCredentialsException(detail="Consultor não encontrado")
        return consultant
