"""
homefix/auth/routes.py

Handles authentication routes:
- Account registration (anon key)
- Login returning a bearer session token (anon key)
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from homefix.auth.schemas import LoginRequest, LoginResponse, SignupRequest
from homefix.auth.services import login_user, signup_user
from homefix.core.dependencies import require_anon_key
from homefix.core.limiter import limiter
from homefix.database.session import get_db
from homefix.users.schemas import AccountRead

# ---------------------------------------------------
# Router Configuration
# ---------------------------------------------------
router = APIRouter(tags=["Authentication"], dependencies=[Depends(require_anon_key)])
logger = logging.getLogger(__name__)

DBDep = Annotated[AsyncSession, Depends(get_db)]


# ---------------------------------------------------
# Registration
# ---------------------------------------------------
@router.post(
    "/signup",
    response_model=AccountRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register New Account",
    description="Registers a customer or worker account.",
)
@limiter.limit("5/minute")
async def signup(
    request: Request,
    payload: SignupRequest,
    db: DBDep,
) -> AccountRead:
    return await signup_user(payload, db)


# ---------------------------------------------------
# Login
# ---------------------------------------------------
@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
    summary="Login",
    description="Authenticates with email and password and returns a bearer token.",
)
@limiter.limit("10/minute")
async def login(
    request: Request,
    payload: LoginRequest,
    db: DBDep,
) -> LoginResponse:
    return await login_user(payload, db)
