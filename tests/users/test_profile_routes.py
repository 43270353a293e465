# tests/users/test_profile_routes.py
import pytest
from fastapi import status
from httpx import AsyncClient

from homefix.core.security import create_access_token


@pytest.mark.asyncio
async def test_customer_profile(async_client: AsyncClient, customer, bearer) -> None:
    response = await async_client.get("/profile", headers=bearer(customer))

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["profile"]["id"] == str(customer.id)
    assert data["profile"]["role"] == "user"
    assert "workerProfile" not in data


@pytest.mark.asyncio
async def test_worker_profile_includes_worker_details(
    async_client: AsyncClient, worker, bearer
) -> None:
    response = await async_client.get("/profile", headers=bearer(worker))

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["profile"]["role"] == "worker"
    assert data["workerProfile"]["id"] == str(worker.id)
    assert data["workerProfile"]["serviceType"] == ["plumber", "electrician"]


@pytest.mark.asyncio
async def test_profile_requires_session(async_client: AsyncClient) -> None:
    response = await async_client.get("/profile")

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["code"] == "not_authorized"


@pytest.mark.asyncio
async def test_profile_rejects_garbage_token(async_client: AsyncClient) -> None:
    response = await async_client.get("/profile", headers={"Authorization": "Bearer not.a.jwt"})

    assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.asyncio
async def test_profile_rejects_token_for_deleted_account(async_client: AsyncClient) -> None:
    token = create_access_token(
        {"sub": "00000000-0000-0000-0000-000000000000", "role": "user"}
    )
    response = await async_client.get("/profile", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
