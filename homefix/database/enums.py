"""
homefix/database/enums.py

Enumerations

Defines enumerations used across the platform:
- UserRole: Roles assigned to accounts (user, worker, admin)
- ServiceType: Closed catalogue of home-service categories
- PaymentMethod: How a customer settles a request
- RequestStatus: Lifecycle status of a service request
"""

from enum import Enum

# ---------------------------------------------------
# User Role Enumeration
# ---------------------------------------------------


class UserRole(str, Enum):
    """
    Enum representing account roles for access control.

    Values:
    - user (customer needing services)
    - worker (service provider)
    - admin
    """

    USER = "user"
    WORKER = "worker"
    ADMIN = "admin"


# ---------------------------------------------------
# Service Type Enumeration
# ---------------------------------------------------


class ServiceType(str, Enum):
    """Service categories a worker can offer and a customer can book."""

    PLUMBER = "plumber"
    ELECTRICIAN = "electrician"
    AC_REPAIR = "ac-repair"
    CARPENTER = "carpenter"
    GARDENER = "gardener"
    GAS_REPAIR = "gas-repair"
    PAINTER = "painter"
    CLEANER = "cleaner"
    PEST_CONTROL = "pest-control"
    APPLIANCE_REPAIR = "appliance-repair"


# ---------------------------------------------------
# Payment Method Enumeration
# ---------------------------------------------------


class PaymentMethod(str, Enum):
    CASH = "cash"
    ONLINE = "online"
    CARD = "card"


# ---------------------------------------------------
# Request Status Enumeration
# ---------------------------------------------------


class RequestStatus(str, Enum):
    """
    Enum representing the lifecycle status of a service request.

    Values:
    - pending (initial)
    - accepted
    - rejected (terminal)
    - completed (terminal)
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    COMPLETED = "completed"


def enum_values(enum_cls: type[Enum]) -> list[str]:
    """Persist enum values (e.g. 'ac-repair') rather than member names."""
    return [member.value for member in enum_cls]
