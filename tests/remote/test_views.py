# tests/remote/test_views.py
from datetime import datetime, timezone
from uuid import uuid4

import pytest

from homefix.database.enums import RequestStatus, UserRole
from homefix.remote.controller import RequestLifecycleController
from homefix.remote.store import RemoteStore
from homefix.remote.views import (
    VIEW_BY_ROLE,
    RequestCard,
    View,
    request_card,
    resolve_view,
    view_for_profile,
)
from homefix.users.schemas import AccountRead, ProfileResponse


def profile_with_role(role: UserRole) -> ProfileResponse:
    return ProfileResponse(
        profile=AccountRead(
            id=uuid4(),
            email="someone@example.com",
            name="Someone",
            phone="+1 555 0100",
            role=role,
            created_at=datetime.now(timezone.utc),
        )
    )


def test_every_role_has_a_view() -> None:
    assert set(VIEW_BY_ROLE) == set(UserRole)


@pytest.mark.parametrize(
    "role,view",
    [(UserRole.USER, View.USER), (UserRole.WORKER, View.WORKER), (UserRole.ADMIN, View.ADMIN)],
)
def test_view_for_profile(role: UserRole, view: View) -> None:
    assert view_for_profile(profile_with_role(role)) is view


def test_no_profile_is_landing() -> None:
    assert view_for_profile(None) is View.LANDING


@pytest.mark.asyncio
async def test_resolve_view_without_session(remote_store: RemoteStore) -> None:
    assert await resolve_view(remote_store, None) is View.LANDING


@pytest.mark.asyncio
async def test_resolve_view_fetches_profile(
    remote_store: RemoteStore, customer, worker, session_for
) -> None:
    assert await resolve_view(remote_store, session_for(customer)) is View.USER
    assert await resolve_view(remote_store, session_for(worker)) is View.WORKER


@pytest.mark.asyncio
async def test_request_cards_for_dashboard(
    remote_store: RemoteStore, customer, worker, session_for, make_request
) -> None:
    record = await make_request(customer.id, worker.id, status=RequestStatus.ACCEPTED)
    buckets = await RequestLifecycleController(remote_store).customer_dashboard(
        session_for(customer)
    )

    cards = [request_card(r) for r in buckets.accepted]

    assert cards == [
        RequestCard(
            request_id=record.id,
            title="PLUMBER",
            icon="wrench",
            badge="bg-blue-100 text-blue-800",
            status=RequestStatus.ACCEPTED,
        )
    ]
