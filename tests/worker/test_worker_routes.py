# tests/worker/test_worker_routes.py
from unittest.mock import AsyncMock, patch

import pytest
from fastapi import status
from httpx import ASGITransport, AsyncClient

from homefix.core.config import settings
from homefix.database.enums import UserRole
from homefix.main import app
from homefix.worker.services import WorkerService


@pytest.mark.asyncio
async def test_list_workers_for_service(
    async_client: AsyncClient, anon_headers: dict[str, str], worker, other_worker
) -> None:
    response = await async_client.get("/workers/plumber", headers=anon_headers)

    assert response.status_code == status.HTTP_200_OK
    workers = response.json()["workers"]
    assert {w["id"] for w in workers} == {str(worker.id), str(other_worker.id)}
    assert all("plumber" in w["serviceType"] for w in workers)


@pytest.mark.asyncio
async def test_list_workers_filters_by_service(
    async_client: AsyncClient, anon_headers: dict[str, str], worker, other_worker
) -> None:
    response = await async_client.get("/workers/electrician", headers=anon_headers)

    workers = response.json()["workers"]
    assert [w["id"] for w in workers] == [str(worker.id)]
    assert workers[0]["advancePayment"] == 200


@pytest.mark.asyncio
async def test_list_workers_none_offering(
    async_client: AsyncClient, anon_headers: dict[str, str], worker
) -> None:
    response = await async_client.get("/workers/pest-control", headers=anon_headers)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"workers": []}


@pytest.mark.asyncio
async def test_list_workers_sorted_by_name_on_equal_rating(
    async_client: AsyncClient, anon_headers: dict[str, str], make_user
) -> None:
    await make_user("zed@example.com", role=UserRole.WORKER, name="Zed", service_types=["cleaner"])
    await make_user("amy@example.com", role=UserRole.WORKER, name="Amy", service_types=["cleaner"])

    response = await async_client.get("/workers/cleaner", headers=anon_headers)

    assert [w["name"] for w in response.json()["workers"]] == ["Amy", "Zed"]


@pytest.mark.asyncio
async def test_list_workers_unknown_service(
    async_client: AsyncClient, anon_headers: dict[str, str]
) -> None:
    response = await async_client.get("/workers/astronaut", headers=anon_headers)

    assert response.status_code == 422
    assert response.json()["code"] == "validation_error"


@pytest.mark.asyncio
async def test_list_workers_accepts_apikey_header(async_client: AsyncClient, worker) -> None:
    response = await async_client.get("/workers/plumber", headers={"apikey": settings.ANON_KEY})
    assert response.status_code == status.HTTP_200_OK


@pytest.mark.asyncio
async def test_list_workers_requires_anon_key(async_client: AsyncClient) -> None:
    response = await async_client.get("/workers/plumber")

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["code"] == "not_authorized"


@pytest.mark.asyncio
@patch.object(WorkerService, "list_workers_for_service", new_callable=AsyncMock)
async def test_unexpected_error_renders_json_500(
    mock_list: AsyncMock, override_get_db: None, anon_headers: dict[str, str]
) -> None:
    mock_list.side_effect = RuntimeError("db connection lost")
    # The server-error middleware re-raises after responding; keep the response instead.
    transport = ASGITransport(app=app, raise_app_exceptions=False)

    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/workers/plumber", headers=anon_headers)

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"error": "Internal server error", "code": "internal_error"}
