"""
homefix/users/schemas.py

Account and profile read schemas.
"""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict, Field

from homefix.core.schemas import CamelModel
from homefix.database.enums import UserRole
from homefix.worker.schemas import WorkerProfileRead


class AccountRead(CamelModel):
    """Public view of an account (never includes the password hash)."""

    id: UUID = Field(..., description="Account id")
    email: str
    name: str
    phone: str
    role: UserRole
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class ProfileResponse(CamelModel):
    """Body of GET /profile; `workerProfile` is present only for workers."""

    profile: AccountRead
    worker_profile: WorkerProfileRead | None = None
