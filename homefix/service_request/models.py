"""
homefix/service_request/models.py

Defines the ServiceRequest model.
- A customer's booking of a specific worker for a specific service
- Everything except `status` is fixed at creation
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum, ForeignKey, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from homefix.database.base import Base
from homefix.database.enums import PaymentMethod, RequestStatus, ServiceType, enum_values

# TYPE CHECKING IMPORTS
if TYPE_CHECKING:
    from homefix.database.models import User


# MODEL: ServiceRequest
class ServiceRequest(Base):
    __tablename__ = "service_requests"

    # Basic Identifiers & Foreign Keys
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier for the request",
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", name="fk_service_requests_user_id"),
        nullable=False,
        index=True,
        comment="Customer who created the request",
    )
    worker_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", name="fk_service_requests_worker_id"),
        nullable=False,
        index=True,
        comment="Worker the request is addressed to",
    )

    # Booking Details (immutable)
    service_type: Mapped[ServiceType] = mapped_column(
        Enum(ServiceType, name="service_type", values_callable=enum_values),
        nullable=False,
        comment="Service category booked",
    )
    description: Mapped[str] = mapped_column(
        Text, nullable=False, comment="What the customer needs done"
    )
    location: Mapped[str] = mapped_column(
        Text, nullable=False, comment="Free-form address of the job"
    )
    scheduled_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, comment="Customer-chosen time"
    )
    payment_method: Mapped[PaymentMethod] = mapped_column(
        Enum(PaymentMethod, name="payment_method", values_callable=enum_values),
        nullable=False,
        comment="How the customer will pay",
    )
    advance_amount: Mapped[int] = mapped_column(
        nullable=False,
        comment="Worker's advance payment at creation time, never recomputed",
    )

    # Lifecycle
    status: Mapped[RequestStatus] = mapped_column(
        Enum(RequestStatus, name="request_status", values_callable=enum_values),
        default=RequestStatus.PENDING,
        nullable=False,
        comment="Current status of the request",
    )

    # Audit Fields
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        comment="Timestamp when the request was created",
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
        comment="Timestamp when the request status last changed",
    )

    # Relationships
    customer: Mapped["User"] = relationship(
        "User", back_populates="created_requests", foreign_keys=[user_id]
    )
    worker: Mapped["User"] = relationship(
        "User", back_populates="assigned_requests", foreign_keys=[worker_id]
    )
