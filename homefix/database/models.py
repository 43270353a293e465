"""
homefix/database/models.py

Core SQLAlchemy ORM Models

Defines:
- User: Authenticated account with role-based access

Includes relationships with:
- WorkerProfile (one-to-one, for workers)
- ServiceRequest (created_requests and assigned_requests)
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Enum, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from homefix.database.base import Base
from homefix.database.enums import UserRole, enum_values
from homefix.worker.models import WorkerProfile
from homefix.service_request.models import ServiceRequest


# ---------------------------------------------------
# User Model: Authenticated Platform Account
# ---------------------------------------------------


class User(Base):
    __tablename__ = "users"

    # -------------------------------------
    # Fields
    # -------------------------------------
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier for the account",
    )
    email: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, comment="Account email address"
    )
    hashed_password: Mapped[str] = mapped_column(
        String, nullable=False, comment="Hashed password for authentication"
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False, comment="Display name")
    phone: Mapped[str] = mapped_column(String(30), nullable=False, comment="Contact phone number")
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, name="user_role", values_callable=enum_values),
        nullable=False,
        comment="Account role (user, worker, admin)",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        comment="Timestamp when the account was created",
    )

    # -------------------------------------
    # Relationships
    # -------------------------------------

    # One-to-One: An account has a worker profile if role is worker
    worker_profile: Mapped["WorkerProfile"] = relationship(
        "WorkerProfile", back_populates="user", uselist=False
    )

    # One-to-Many: A customer can create many requests
    created_requests: Mapped[list["ServiceRequest"]] = relationship(
        "ServiceRequest",
        back_populates="customer",
        foreign_keys=[ServiceRequest.user_id],
    )

    # One-to-Many: A worker can be assigned many requests
    assigned_requests: Mapped[list["ServiceRequest"]] = relationship(
        "ServiceRequest",
        back_populates="worker",
        foreign_keys=[ServiceRequest.worker_id],
    )
