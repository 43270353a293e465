"""
homefix/core/security.py

Password hashing and JWT access-token utilities:
- Password verification and hashing (passlib / bcrypt)
- Creating and decoding JWT access tokens (python-jose)
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, cast

from jose import JWTError, jwt
from passlib.context import CryptContext

from homefix.core.config import settings
from homefix.core.exceptions import NotAuthenticatedError

logger = logging.getLogger(__name__)

# Password hashing configuration
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def get_password_hash(password: str) -> str:
    """Hashes a plain text password."""
    return cast(str, pwd_context.hash(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verifies a plain text password against a hash.
    A stored hash that cannot be identified or parsed never verifies.
    """
    try:
        return cast(bool, pwd_context.verify(plain_password, hashed_password))
    except ValueError as e:
        # passlib.exc.UnknownHashError is a ValueError
        logger.error(f"[AUTH] Stored password hash could not be verified: {e}")
        return False


# ------------------------------------------------------
# --- Access Token ---
# ------------------------------------------------------
def create_access_token(data: dict[str, Any], expires_delta: timedelta | None = None) -> str:
    """
    Create a JWT access token with expiration and unique JTI.

    Args:
        data (dict[str, Any]): Payload data to include in the token (must contain 'sub' and 'role').
        expires_delta (timedelta | None): Optional custom expiration time. Defaults to settings.

    Returns:
        str: Encoded JWT access token.
    """
    if "sub" not in data or "role" not in data:
        logger.error("Access token creation attempt missing 'sub' or 'role' in data.")
        raise ValueError("Access token payload must include 'sub' and 'role'.")

    expire: datetime = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    payload: dict[str, Any] = {**data, "exp": expire, "jti": str(uuid.uuid4())}

    logger.info(f"Issuing access token for sub={data.get('sub')} exp={expire}")
    return str(jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM))


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decodes a JWT token and returns the payload.
    Raises NotAuthorizedError if the token is invalid or expired.
    """
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.warning(f"[AUTH] JWT decoding/validation failed: {e}")
        raise NotAuthenticatedError("Could not validate credentials")
