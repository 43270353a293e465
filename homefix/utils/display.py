"""
homefix/utils/display.py

Display lookups over the closed enums: label and icon per service type,
badge colour per request status. Every enum member must be mapped; a
missing entry fails at import time instead of falling back silently.
"""

from enum import Enum
from typing import TypeVar

from homefix.database.enums import RequestStatus, ServiceType

E = TypeVar("E", bound=Enum)

SERVICE_LABELS: dict[ServiceType, str] = {
    ServiceType.PLUMBER: "Plumber",
    ServiceType.ELECTRICIAN: "Electrician",
    ServiceType.AC_REPAIR: "AC Repair",
    ServiceType.CARPENTER: "Carpenter",
    ServiceType.GARDENER: "Gardener",
    ServiceType.GAS_REPAIR: "Gas Repair",
    ServiceType.PAINTER: "Painter",
    ServiceType.CLEANER: "Cleaner",
    ServiceType.PEST_CONTROL: "Pest Control",
    ServiceType.APPLIANCE_REPAIR: "Appliance Repair",
}

SERVICE_ICONS: dict[ServiceType, str] = {
    ServiceType.PLUMBER: "wrench",
    ServiceType.ELECTRICIAN: "zap",
    ServiceType.AC_REPAIR: "wind",
    ServiceType.CARPENTER: "hammer",
    ServiceType.GARDENER: "leaf",
    ServiceType.GAS_REPAIR: "flame",
    ServiceType.PAINTER: "paintbrush",
    ServiceType.CLEANER: "sparkles",
    ServiceType.PEST_CONTROL: "bug",
    ServiceType.APPLIANCE_REPAIR: "settings",
}

STATUS_BADGES: dict[RequestStatus, str] = {
    RequestStatus.PENDING: "bg-yellow-100 text-yellow-800",
    RequestStatus.ACCEPTED: "bg-blue-100 text-blue-800",
    RequestStatus.COMPLETED: "bg-green-100 text-green-800",
    RequestStatus.REJECTED: "bg-red-100 text-red-800",
}


def _ensure_exhaustive(enum_cls: type[E], table: dict[E, str], name: str) -> None:
    missing = set(enum_cls) - table.keys()
    if missing:
        raise RuntimeError(f"{name} has no entry for: {sorted(m.value for m in missing)}")


_ensure_exhaustive(ServiceType, SERVICE_LABELS, "SERVICE_LABELS")
_ensure_exhaustive(ServiceType, SERVICE_ICONS, "SERVICE_ICONS")
_ensure_exhaustive(RequestStatus, STATUS_BADGES, "STATUS_BADGES")


def service_label(service_type: ServiceType | str) -> str:
    return SERVICE_LABELS[ServiceType(service_type)]


def service_icon(service_type: ServiceType | str) -> str:
    return SERVICE_ICONS[ServiceType(service_type)]


def request_title(service_type: ServiceType | str) -> str:
    """Card heading for a request, e.g. 'AC REPAIR'."""
    return service_label(service_type).upper()


def status_badge(status: RequestStatus | str) -> str:
    return STATUS_BADGES[RequestStatus(status)]
