# timebill/adapters/outbound/security/auth_consultant_manager.py (async version)

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from passlib.context import CryptContext

from timebill.adapters.configuration.config import Settings, settings as default_settings
from timebill.domain.exceptions import InvalidCredentialsException

TOKEN_TYPE = "consultant"


class ConsultantAuthManager:
    """
    Password hashing and JWT authentication manager for consultants.

    Hashing needs no configuration and stays on the class. Tokens are signed
    with the key and algorithm of the settings the manager was built with.
    """

    crypt_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or default_settings
        self.secret_key = settings.SECRET_KEY
        self.algorithm = settings.ALGORITHM
        self.expires_minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES

    @classmethod
    async def hash_password(cls, password: str) -> str:
        """Return the hash of a plain text password."""
        return cls.crypt_context.hash(password)

    @classmethod
    async def verify_password(cls, plain_password: str, hashed_password: str) -> bool:
        """Verify if the plain text password matches the stored hash."""
        try:
            return cls.crypt_context.verify(plain_password, hashed_password)
        except ValueError:
            # Stored value is not a hash this context recognizes
            return False

    async def create_access_token(self, subject: str, expires_delta: Optional[timedelta] = None) -> str:
        """
        Create a JWT access token for the authenticated consultant.

        - subject: the consultant's ID.
        - expires_delta: custom expiration time.
        """
        if expires_delta is None:
            expires_delta = timedelta(minutes=self.expires_minutes)

        expire = datetime.now(timezone.utc) + expires_delta

        payload = {
            "sub": str(subject),
            "exp": int(expire.timestamp()),
            "type": TOKEN_TYPE,
            "jti": str(uuid.uuid4()),
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    async def verify_access_token(self, token: str) -> dict:
        """
        Verify and decode a JWT access token.

        Raises:
            InvalidCredentialsException: If the token is invalid, expired or of another type
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            raise InvalidCredentialsException(detail="Token inválido ou expirado")

        if payload.get("type") != TOKEN_TYPE:
            raise InvalidCredentialsException(detail="Token inválido: tipo incorreto")

        return payload
