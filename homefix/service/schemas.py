"""
homefix/service/schemas.py

Service Catalogue Schemas
"""

from pydantic import Field

from homefix.core.schemas import CamelModel
from homefix.database.enums import ServiceType


class ServiceRead(CamelModel):
    """One bookable service category."""

    id: ServiceType = Field(..., description="Service type key, e.g. 'ac-repair'")
    name: str = Field(..., description="Display name")
    icon: str = Field(..., description="Icon key for the category tile")


class ServiceList(CamelModel):
    services: list[ServiceRead]
