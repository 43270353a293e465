"""
homefix/service_request/schemas.py

Service Request Schemas
Pydantic schemas for request-related operations:
- Request creation (Authenticated Customer)
- Status update (Authenticated Worker)
- Reading request details and request lists
"""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from homefix.core.schemas import CamelModel
from homefix.database.enums import PaymentMethod, RequestStatus, ServiceType


# ---------------------------------------------------
# Request Creation Schema (Authenticated Customer)
# ---------------------------------------------------
class ServiceRequestCreate(CamelModel):
    """Schema used when a customer books a worker."""

    worker_id: UUID = Field(..., description="Worker being booked")
    service_type: ServiceType = Field(..., description="Service category requested")
    description: str = Field(..., description="What needs to be done")
    location: str = Field(..., description="Address where the work happens")
    scheduled_time: datetime = Field(..., description="When the customer wants the work done")
    payment_method: PaymentMethod = Field(
        default=PaymentMethod.CASH, description="cash, online or card"
    )

    @field_validator("description", "location")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value


# ---------------------------------------------------
# Status Update Schema (Authenticated Worker)
# ---------------------------------------------------
class StatusUpdate(CamelModel):
    """Schema used when a worker moves a request along its lifecycle."""

    status: RequestStatus = Field(..., description="Target status")


# ---------------------------------------------------
# Read Request Schema (Authenticated Output)
# ---------------------------------------------------
class ServiceRequestRead(CamelModel):
    """Schema returned when reading a request."""

    id: UUID = Field(..., description="Request unique identifier")
    user_id: UUID = Field(..., description="Customer who created the request")
    worker_id: UUID = Field(..., description="Worker the request is addressed to")
    service_type: ServiceType
    description: str
    location: str
    scheduled_time: datetime
    payment_method: PaymentMethod
    advance_amount: int = Field(..., ge=0, description="Advance snapshotted at creation")
    status: RequestStatus = Field(..., description="Current lifecycle status")
    created_at: datetime = Field(..., description="Timestamp when the request was created")
    updated_at: datetime | None = Field(
        default=None, description="Timestamp when the status last changed"
    )

    model_config = ConfigDict(from_attributes=True)


class ServiceRequestList(CamelModel):
    """Envelope for `/my-requests` and `/worker-requests`."""

    requests: list[ServiceRequestRead]
