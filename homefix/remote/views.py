"""
homefix/remote/views.py

Role-based view selection: which dashboard a client shows once the
profile has been fetched after login, and the card shown per request.
"""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from homefix.database.enums import RequestStatus, UserRole
from homefix.remote.store import RemoteStore, SessionContext
from homefix.service_request.schemas import ServiceRequestRead
from homefix.users.schemas import ProfileResponse
from homefix.utils.display import request_title, service_icon, status_badge


class View(str, Enum):
    LANDING = "landing"
    USER = "user"
    WORKER = "worker"
    ADMIN = "admin"


VIEW_BY_ROLE: dict[UserRole, View] = {
    UserRole.USER: View.USER,
    UserRole.WORKER: View.WORKER,
    UserRole.ADMIN: View.ADMIN,
}

if set(UserRole) - VIEW_BY_ROLE.keys():
    raise RuntimeError("VIEW_BY_ROLE must map every UserRole")


def view_for_profile(profile: ProfileResponse | None) -> View:
    """Landing page until a profile is known, then the role's dashboard."""
    if profile is None:
        return View.LANDING
    return VIEW_BY_ROLE[profile.profile.role]


async def resolve_view(store: RemoteStore, session: SessionContext | None) -> View:
    """Fetches the profile for `session` and picks the view for it."""
    if session is None:
        return View.LANDING
    return view_for_profile(await store.fetch_profile(session))


@dataclass(frozen=True)
class RequestCard:
    """What a dashboard shows for one request."""

    request_id: UUID
    title: str
    icon: str
    badge: str
    status: RequestStatus


def request_card(record: ServiceRequestRead) -> RequestCard:
    return RequestCard(
        request_id=record.id,
        title=request_title(record.service_type),
        icon=service_icon(record.service_type),
        badge=status_badge(record.status),
        status=record.status,
    )
