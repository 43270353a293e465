"""
homefix/service/services.py

Service Catalogue Service Layer
The catalogue is the closed ServiceType enum; nothing is stored.
"""

from homefix.database.enums import ServiceType
from homefix.service import schemas
from homefix.utils.display import service_icon, service_label


class ServiceCatalogService:
    """Lists the service categories customers can browse."""

    def list_services(self) -> list[schemas.ServiceRead]:
        return [
            schemas.ServiceRead(
                id=service_type,
                name=service_label(service_type),
                icon=service_icon(service_type),
            )
            for service_type in ServiceType
        ]
