"""
homefix/auth/services.py

Handles authentication-related business logic:
- Signup (account plus worker profile for workers)
- Login (password check and JWT issuance)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from homefix.auth.schemas import LoginRequest, LoginResponse, SignupRequest
from homefix.core.exceptions import ConflictError, NotAuthenticatedError
from homefix.core.security import create_access_token, get_password_hash, verify_password
from homefix.database.enums import UserRole
from homefix.database.models import User
from homefix.users.schemas import AccountRead
from homefix.worker.models import WorkerProfile

logger = logging.getLogger(__name__)


# ------------------------------------------------
# Signup
# ------------------------------------------------
async def signup_user(payload: SignupRequest, db: AsyncSession) -> AccountRead:
    """Registers a new account; workers also get their worker profile."""
    email_exists = (
        (await db.execute(select(User).filter(User.email == payload.email)))
        .scalar_one_or_none()
    )
    if email_exists:
        logger.warning(f"Signup attempt with existing email: {payload.email}")
        raise ConflictError("Email already registered")

    new_user = User(
        email=payload.email,
        hashed_password=get_password_hash(payload.password),
        name=payload.name,
        phone=payload.phone,
        role=payload.role,
    )
    db.add(new_user)
    await db.flush()

    if payload.role == UserRole.WORKER and payload.additional_data is not None:
        extra = payload.additional_data
        db.add(
            WorkerProfile(
                user_id=new_user.id,
                name=payload.name,
                service_types=[s.value for s in extra.service_type],
                hourly_rate=extra.hourly_rate,
                advance_payment=extra.advance_payment,
                experience=extra.experience,
                bio=extra.bio,
                available_times=extra.available_times,
            )
        )

    try:
        await db.commit()
    except Exception as e:
        logger.error(f"Error committing signup for {payload.email}: {e}", exc_info=True)
        await db.rollback()
        raise
    await db.refresh(new_user)

    logger.info(f"New account registered: {new_user.email} (ID: {new_user.id}, role={new_user.role.value})")
    return AccountRead.model_validate(new_user)


# ------------------------------------------------
# Login
# ------------------------------------------------
async def login_user(payload: LoginRequest, db: AsyncSession) -> LoginResponse:
    """Checks credentials and issues a session token."""
    user = (
        (await db.execute(select(User).filter(User.email == payload.email)))
        .scalar_one_or_none()
    )
    if not user or not verify_password(payload.password, user.hashed_password):
        logger.warning(f"Failed login attempt for {payload.email}")
        raise NotAuthenticatedError("Invalid email or password")

    token = create_access_token({"sub": str(user.id), "role": user.role.value})
    logger.info(f"Login successful: {user.id}")
    return LoginResponse(access_token=token, user=AccountRead.model_validate(user))
