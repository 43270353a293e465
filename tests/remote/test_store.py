# tests/remote/test_store.py
import httpx
import pytest

from homefix.auth.schemas import SignupRequest
from homefix.core.exceptions import ConflictError, NotAuthorizedError, RemoteError, ValidationError
from homefix.database.enums import ServiceType, UserRole
from homefix.remote.store import RemoteStore
from homefix.worker.schemas import WorkerSignupData


@pytest.mark.asyncio
async def test_list_services(remote_store: RemoteStore) -> None:
    services = await remote_store.list_services()

    assert [s.id for s in services] == list(ServiceType)


@pytest.mark.asyncio
async def test_signup_login_and_profile(remote_store: RemoteStore) -> None:
    account = await remote_store.signup(
        SignupRequest(
            email="fresh.worker@example.com",
            password="Secret123",
            name="Fresh Worker",
            phone="+1 555 0142",
            role=UserRole.WORKER,
            additional_data=WorkerSignupData(service_type=[ServiceType.GARDENER]),
        )
    )
    assert account.role == UserRole.WORKER

    session = await remote_store.login("fresh.worker@example.com", "Secret123")
    assert session.user_id == account.id
    assert session.role == UserRole.WORKER

    profile = await remote_store.fetch_profile(session)
    assert profile.worker_profile is not None
    assert profile.worker_profile.service_type == [ServiceType.GARDENER]

    workers = await remote_store.list_workers("gardener")
    assert [w.id for w in workers] == [account.id]


@pytest.mark.asyncio
async def test_signup_duplicate_is_remote_error(remote_store: RemoteStore, customer) -> None:
    payload = SignupRequest(
        email=customer.email, password="Secret123", name="Again", phone="+1 555 0100"
    )

    with pytest.raises(RemoteError) as exc_info:
        await remote_store.signup(payload)
    assert exc_info.value.code == "conflict"
    assert exc_info.value.status_code == 409
    assert not isinstance(exc_info.value, ConflictError)


@pytest.mark.asyncio
async def test_login_bad_credentials(remote_store: RemoteStore, customer) -> None:
    with pytest.raises(NotAuthorizedError):
        await remote_store.login(customer.email, "Wrong1234")


@pytest.mark.asyncio
async def test_login_malformed_email_is_validation_error(remote_store: RemoteStore) -> None:
    with pytest.raises(ValidationError):
        await remote_store.login("not-an-email", "Secret123")


@pytest.mark.asyncio
async def test_list_workers_unknown_service_never_reaches_store() -> None:
    def fail_on_call(request: httpx.Request) -> httpx.Response:
        raise AssertionError(f"unexpected call to {request.url}")

    async with RemoteStore(
        base_url="http://store.invalid", transport=httpx.MockTransport(fail_on_call)
    ) as store:
        with pytest.raises(ValidationError, match="astronaut"):
            await store.list_workers("astronaut")
