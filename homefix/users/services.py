"""
homefix/users/services.py

Profile look-up for the authenticated account.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from homefix.database.enums import UserRole
from homefix.database.models import User
from homefix.users import schemas
from homefix.worker.models import WorkerProfile
from homefix.worker.schemas import WorkerProfileRead

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_profile(self, user: User) -> schemas.ProfileResponse:
        """Account profile, plus the worker profile when the account is a worker."""
        worker_profile: WorkerProfileRead | None = None
        if user.role == UserRole.WORKER:
            result = await self.db.execute(
                select(WorkerProfile).filter(WorkerProfile.user_id == user.id)
            )
            profile = result.scalar_one_or_none()
            if profile:
                worker_profile = WorkerProfileRead.from_profile(profile)
            else:
                logger.warning(f"[PROFILE] Worker {user.id} has no worker profile")
        return schemas.ProfileResponse(
            profile=schemas.AccountRead.model_validate(user),
            worker_profile=worker_profile,
        )
