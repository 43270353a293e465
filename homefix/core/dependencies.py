"""
homefix/core/dependencies.py

Authentication and Authorization Dependencies

Provides authentication and role-based access control (RBAC) for FastAPI routes:
- Accepts the public anon key for unauthenticated catalogue and signup calls
- Validates JWT session tokens from the Bearer header
- Retrieves the authenticated account from the database
- Restricts access based on account roles
"""

import logging
from collections.abc import Callable, Coroutine
from typing import Annotated, Any
from uuid import UUID

from fastapi import Depends, Header
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from homefix.core.config import settings
from homefix.core.exceptions import NotAuthenticatedError, NotAuthorizedError
from homefix.core.security import decode_access_token
from homefix.database.enums import UserRole
from homefix.database.models import User
from homefix.database.session import get_db

# ---------------------------------------------------
# Logger Configuration
# ---------------------------------------------------
logger = logging.getLogger(__name__)

# auto_error disabled so a missing header renders as our own JSON error
bearer_scheme = HTTPBearer(auto_error=False)

BearerDep = Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)]


# ---------------------------------------------------
# Anon Key
# ---------------------------------------------------
async def require_anon_key(
    credentials: BearerDep,
    apikey: Annotated[str | None, Header()] = None,
) -> None:
    """
    Allows a call made with the public anon key, sent either as the Bearer
    token or in the `apikey` header.
    """
    token = credentials.credentials if credentials else None
    if settings.ANON_KEY in (token, apikey):
        return
    logger.debug("[AUTH] Anon key missing or wrong.")
    raise NotAuthenticatedError("A valid API key is required")


# ---------------------------------------------------
# Authentication Functions
# ---------------------------------------------------
async def get_current_user(
    credentials: BearerDep,
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Authenticate the current account based on the Bearer session token.

    Raises:
        NotAuthorizedError: if the token is missing, invalid, or names no account.
    """
    if credentials is None:
        logger.debug("[AUTH] No token found in Authorization header.")
        raise NotAuthenticatedError("Not authenticated")

    payload = decode_access_token(credentials.credentials)
    try:
        user_id = UUID(str(payload.get("sub")))
    except ValueError:
        logger.warning(f"[AUTH] Token subject is not a UUID: {payload.get('sub')}")
        raise NotAuthenticatedError("Could not validate credentials")

    user = await db.get(User, user_id)
    if not user:
        logger.warning(f"[AUTH] JWT valid but no matching account found: user_id={user_id}")
        raise NotAuthenticatedError("Could not validate credentials")

    logger.debug(f"[AUTH] Account {user.id} authenticated successfully.")
    return user


# ---------------------------------------------------
# Authorization Functions (Role-Based)
# ---------------------------------------------------
def get_current_user_with_role(required_role: UserRole) -> Callable[..., Coroutine[Any, Any, User]]:
    """
    Dependency to restrict access to accounts with a specific role.
    """

    async def role_dependency(user: User = Depends(get_current_user)) -> User:
        if user.role != required_role:
            logger.warning(
                f"[RBAC] Access denied: User {user.id} role={user.role}, required={required_role}"
            )
            raise NotAuthorizedError(f"Access denied for role: {user.role.value}")
        return user

    return role_dependency

