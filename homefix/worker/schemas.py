"""
homefix/worker/schemas.py

Pydantic schemas for worker profiles:
- Worker signup details (additionalData on /signup)
- Public worker profile read model and list envelope
"""

from uuid import UUID

from pydantic import Field

from homefix.core.schemas import CamelModel
from homefix.database.enums import ServiceType
from homefix.worker.models import (
    DEFAULT_ADVANCE_PAYMENT,
    DEFAULT_AVAILABLE_TIMES,
    DEFAULT_HOURLY_RATE,
    WorkerProfile,
)


class WorkerSignupData(CamelModel):
    """Extra fields a worker supplies at signup."""

    service_type: list[ServiceType] = Field(
        default_factory=list, description="Service categories offered"
    )
    hourly_rate: int = Field(default=DEFAULT_HOURLY_RATE, ge=0)
    advance_payment: int = Field(default=DEFAULT_ADVANCE_PAYMENT, ge=0)
    experience: str | None = None
    bio: str | None = None
    available_times: str = DEFAULT_AVAILABLE_TIMES


class WorkerProfileRead(CamelModel):
    """Worker profile as shown to customers. `id` is the worker's account id."""

    id: UUID = Field(..., description="Worker account id (used as workerId on requests)")
    name: str
    service_type: list[ServiceType]
    hourly_rate: int
    advance_payment: int
    experience: str | None = None
    bio: str | None = None
    available_times: str
    rating: float
    total_ratings: int
    verified: bool

    @classmethod
    def from_profile(cls, profile: WorkerProfile) -> "WorkerProfileRead":
        return cls(
            id=profile.user_id,
            name=profile.name,
            service_type=[ServiceType(value) for value in profile.service_types],
            hourly_rate=profile.hourly_rate,
            advance_payment=profile.advance_payment,
            experience=profile.experience,
            bio=profile.bio,
            available_times=profile.available_times,
            rating=profile.rating,
            total_ratings=profile.total_ratings,
            verified=profile.verified,
        )


class WorkerList(CamelModel):
    workers: list[WorkerProfileRead]
