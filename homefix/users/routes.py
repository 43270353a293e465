"""
homefix/users/routes.py

Profile Routes
- Fetch the authenticated account's profile (any role)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from homefix.core.dependencies import get_current_user
from homefix.core.limiter import limiter
from homefix.database.models import User
from homefix.database.session import get_db
from homefix.users import schemas
from homefix.users.services import UserService

router = APIRouter(tags=["Profile"])

DBDep = Annotated[AsyncSession, Depends(get_db)]


@router.get(
    "/profile",
    response_model=schemas.ProfileResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Get My Profile",
    description="Account profile for the bearer; workers also get their worker profile.",
)
@limiter.limit("60/minute")
async def get_profile(
    request: Request,
    db: DBDep,
    current_user: Annotated[User, Depends(get_current_user)],
) -> schemas.ProfileResponse:
    return await UserService(db).get_profile(current_user)
