"""
homefix/worker/models.py

Defines SQLAlchemy models specific to the Worker module:
- WorkerProfile: Stores rates and availability for a worker
- WorkerServiceOffering: One service category a worker offers
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum, ForeignKey, String, Text, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from homefix.database.base import Base
from homefix.database.enums import ServiceType, enum_values

if TYPE_CHECKING:
    from homefix.database.models import User


DEFAULT_HOURLY_RATE = 500
DEFAULT_ADVANCE_PAYMENT = 200
DEFAULT_AVAILABLE_TIMES = "9 AM - 6 PM"


# ------------------------------------------------------
# WorkerProfile Model
# ------------------------------------------------------
class WorkerProfile(Base):
    """
    Represents additional profile information for accounts with the 'worker' role.
    Created at signup; never deleted by the request lifecycle.
    """
    __tablename__ = "worker_profiles"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier for the worker profile"
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", name="fk_worker_profiles_user_id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        comment="Reference to the associated account"
    )

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Worker display name"
    )

    hourly_rate: Mapped[int] = mapped_column(
        nullable=False,
        default=DEFAULT_HOURLY_RATE,
        comment="Hourly rate in whole currency units"
    )

    advance_payment: Mapped[int] = mapped_column(
        nullable=False,
        default=DEFAULT_ADVANCE_PAYMENT,
        comment="Deposit snapshotted onto each new request"
    )

    experience: Mapped[str | None] = mapped_column(
        String,
        nullable=True,
        comment="Summary of the worker's experience"
    )

    bio: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Short biography of the worker"
    )

    available_times: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        default=DEFAULT_AVAILABLE_TIMES,
        comment="Free-form availability window"
    )

    rating: Mapped[float] = mapped_column(
        nullable=False,
        default=0.0,
        comment="Average rating"
    )

    total_ratings: Mapped[int] = mapped_column(
        nullable=False,
        default=0,
        comment="Number of ratings received"
    )

    verified: Mapped[bool] = mapped_column(
        nullable=False,
        default=False,
        comment="Whether the platform has verified this worker"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        comment="Timestamp when the profile was created"
    )

    # -------------------------------------
    # Relationships
    # -------------------------------------
    user: Mapped["User"] = relationship(
        "User",
        back_populates="worker_profile",
        foreign_keys=[user_id],
    )
    offerings: Mapped[list["WorkerServiceOffering"]] = relationship(
        back_populates="worker_profile",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="WorkerServiceOffering.position",
    )

    @property
    def service_types(self) -> list[str]:
        return [offering.service_type.value for offering in self.offerings]

    @service_types.setter
    def service_types(self, values: list[str]) -> None:
        self.offerings = [
            WorkerServiceOffering(service_type=ServiceType(value), position=position)
            for position, value in enumerate(dict.fromkeys(values))
        ]

    def offers(self, service_type: ServiceType | str) -> bool:
        return ServiceType(service_type).value in self.service_types


# ------------------------------------------------------
# WorkerServiceOffering Model
# ------------------------------------------------------
class WorkerServiceOffering(Base):
    """Links a worker profile to one service category it offers."""
    __tablename__ = "worker_services"
    __table_args__ = (
        UniqueConstraint("worker_profile_id", "service_type", name="uq_worker_services_profile_type"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    worker_profile_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("worker_profiles.id", name="fk_worker_services_profile_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    service_type: Mapped[ServiceType] = mapped_column(
        Enum(ServiceType, name="service_type", values_callable=enum_values),
        nullable=False,
        index=True,
        comment="Service category offered"
    )

    position: Mapped[int] = mapped_column(
        nullable=False,
        default=0,
        comment="Order the worker listed the service in"
    )

    worker_profile: Mapped["WorkerProfile"] = relationship(back_populates="offerings")
