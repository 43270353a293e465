# tests/service_request/test_request_services.py
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from homefix.core.exceptions import IllegalTransitionError, NotAuthorizedError
from homefix.database.enums import PaymentMethod, RequestStatus, ServiceType
from homefix.service_request import schemas
from homefix.service_request.services import ServiceRequestService


def build_payload(worker_id, service_type=ServiceType.ELECTRICIAN) -> schemas.ServiceRequestCreate:
    return schemas.ServiceRequestCreate(
        worker_id=worker_id,
        service_type=service_type,
        description="Replace the fuse box",
        location="4 Elm Street",
        scheduled_time=datetime.now(timezone.utc) + timedelta(days=2),
        payment_method=PaymentMethod.CARD,
    )


@pytest.mark.asyncio
async def test_create_request_persists_pending(session_factory, customer, worker) -> None:
    async with session_factory() as db:
        created = await ServiceRequestService(db).create_request(
            customer=customer, payload=build_payload(worker.id)
        )

    assert created.status == RequestStatus.PENDING
    assert created.payment_method == PaymentMethod.CARD
    assert created.advance_amount == 200

    async with session_factory() as db:
        listed = await ServiceRequestService(db).list_for_worker(worker.id)
    assert [r.id for r in listed] == [created.id]


@pytest.mark.asyncio
async def test_create_request_rejects_worker_actor(session_factory, worker, other_worker) -> None:
    async with session_factory() as db:
        with pytest.raises(NotAuthorizedError):
            await ServiceRequestService(db).create_request(
                customer=worker, payload=build_payload(other_worker.id, ServiceType.PLUMBER)
            )


@pytest.mark.asyncio
async def test_stale_transition_is_not_applied(
    session_factory, customer, worker, make_request
) -> None:
    # Row already moved on; the service still holds the old pending copy.
    record = await make_request(customer.id, worker.id, status=RequestStatus.ACCEPTED)
    stale = SimpleNamespace(id=record.id, worker_id=worker.id, status=RequestStatus.PENDING)

    async with session_factory() as db:
        service = ServiceRequestService(db)
        with patch.object(
            ServiceRequestService, "_get_request_or_404", new_callable=AsyncMock
        ) as mock_get:
            mock_get.return_value = stale
            with pytest.raises(IllegalTransitionError, match="no longer pending"):
                await service.transition_status(
                    request_id=record.id, actor_id=worker.id, target=RequestStatus.REJECTED
                )

    async with session_factory() as db:
        listed = await ServiceRequestService(db).list_for_customer(customer.id)
    assert listed[0].status == RequestStatus.ACCEPTED


@pytest.mark.asyncio
async def test_transition_updates_timestamp(session_factory, customer, worker, make_request) -> None:
    created_at = datetime.now(timezone.utc) - timedelta(days=1)
    record = await make_request(customer.id, worker.id, created_at=created_at)

    async with session_factory() as db:
        updated = await ServiceRequestService(db).transition_status(
            request_id=record.id, actor_id=worker.id, target=RequestStatus.ACCEPTED
        )

    assert updated.status == RequestStatus.ACCEPTED
    assert updated.updated_at is not None
    assert updated.updated_at.replace(tzinfo=None) > created_at.replace(tzinfo=None)
    assert updated.advance_amount == record.advance_amount
