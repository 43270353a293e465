"""
tests/conftest.py

Test fixtures for API integration and client tests.
Includes an in-memory database, async clients, seeded accounts and tokens,
and a RemoteStore wired straight into the ASGI app.
"""
import os

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

# --- Imports ---
from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from homefix.core.config import settings
from homefix.core.security import create_access_token, get_password_hash
from homefix.database.base import Base
from homefix.database.enums import PaymentMethod, RequestStatus, ServiceType, UserRole
from homefix.database.models import User
from homefix.database.session import get_db
from homefix.main import app
from homefix.remote.store import RemoteStore, SessionContext
from homefix.service_request.models import ServiceRequest
from homefix.worker.models import WorkerProfile

SessionFactory = async_sessionmaker[AsyncSession]

SEEDED_PASSWORD = "Secret123"
# Hashed once per test session.
SEEDED_PASSWORD_HASH = get_password_hash(SEEDED_PASSWORD)


# --- Database Fixtures ---


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> SessionFactory:
    return async_sessionmaker(bind=db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def override_get_db(session_factory: SessionFactory) -> AsyncGenerator[None, None]:
    """Points the app's database dependency at the test database."""

    async def _override() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as db:
            yield db

    app.dependency_overrides[get_db] = _override
    yield
    app.dependency_overrides.pop(get_db, None)


# --- Core Test Fixtures ---


@pytest.fixture(scope="session")
def transport() -> ASGITransport:
    """Fixture for ASGI transport."""
    return ASGITransport(app=app)


@pytest_asyncio.fixture
async def async_client(
    transport: ASGITransport, override_get_db: None
) -> AsyncGenerator[AsyncClient, None]:
    """Fixture for HTTP async client."""
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def remote_store(
    transport: ASGITransport, override_get_db: None
) -> AsyncGenerator[RemoteStore, None]:
    """RemoteStore talking to the app in-process."""
    async with RemoteStore(base_url="http://test", transport=transport) as store:
        yield store


@pytest.fixture
def anon_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {settings.ANON_KEY}"}


def _token_for(user: User) -> str:
    return create_access_token({"sub": str(user.id), "role": user.role.value})


@pytest.fixture
def bearer() -> Callable[[User], dict[str, str]]:
    """Builds the Authorization header for a seeded account."""

    def _bearer(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {_token_for(user)}"}

    return _bearer


@pytest.fixture
def session_for() -> Callable[[User], SessionContext]:
    """Builds the SessionContext login would return for a seeded account."""

    def _session_for(user: User) -> SessionContext:
        return SessionContext(access_token=_token_for(user), user_id=user.id, role=user.role)

    return _session_for


# --- Seeded Account Fixtures ---


@pytest.fixture
def make_user(session_factory: SessionFactory) -> Callable[..., Awaitable[User]]:
    """Factory inserting an account (and a worker profile for workers)."""

    async def _make(
        email: str,
        role: UserRole = UserRole.USER,
        name: str = "Test Account",
        service_types: list[str] | None = None,
        advance_payment: int = 200,
    ) -> User:
        async with session_factory() as db:
            user = User(
                email=email,
                hashed_password=SEEDED_PASSWORD_HASH,
                name=name,
                phone="+1 555 0100",
                role=role,
            )
            db.add(user)
            await db.flush()
            if role == UserRole.WORKER:
                db.add(
                    WorkerProfile(
                        user_id=user.id,
                        name=name,
                        service_types=service_types or [ServiceType.PLUMBER.value],
                        advance_payment=advance_payment,
                    )
                )
            await db.commit()
            return user

    return _make


@pytest_asyncio.fixture
async def customer(make_user: Callable[..., Awaitable[User]]) -> User:
    return await make_user("customer@example.com", name="Casey Customer")


@pytest_asyncio.fixture
async def worker(make_user: Callable[..., Awaitable[User]]) -> User:
    return await make_user(
        "worker@example.com",
        role=UserRole.WORKER,
        name="Pat Plumber",
        service_types=[ServiceType.PLUMBER.value, ServiceType.ELECTRICIAN.value],
        advance_payment=200,
    )


@pytest_asyncio.fixture
async def other_worker(make_user: Callable[..., Awaitable[User]]) -> User:
    return await make_user(
        "other.worker@example.com",
        role=UserRole.WORKER,
        name="Olive Other",
        service_types=[ServiceType.PLUMBER.value],
        advance_payment=350,
    )


# --- Payload Fixtures ---


@pytest.fixture
def request_payload(worker: User) -> dict[str, Any]:
    """Wire body for POST /requests against the seeded worker."""
    return {
        "workerId": str(worker.id),
        "serviceType": ServiceType.PLUMBER.value,
        "description": "Kitchen sink is leaking",
        "location": "12 Harbour Road",
        "scheduledTime": (datetime.now(timezone.utc) + timedelta(days=1)).isoformat(),
        "paymentMethod": PaymentMethod.CASH.value,
    }


@pytest.fixture
def make_request(
    session_factory: SessionFactory,
) -> Callable[..., Awaitable[ServiceRequest]]:
    """Factory inserting a request directly in a given status."""

    async def _make(
        customer_id: UUID,
        worker_id: UUID,
        status: RequestStatus = RequestStatus.PENDING,
        created_at: datetime | None = None,
    ) -> ServiceRequest:
        now = created_at or datetime.now(timezone.utc)
        async with session_factory() as db:
            record = ServiceRequest(
                user_id=customer_id,
                worker_id=worker_id,
                service_type=ServiceType.PLUMBER,
                description="Fix the tap",
                location="1 Test Lane",
                scheduled_time=now + timedelta(days=1),
                payment_method=PaymentMethod.CASH,
                advance_amount=200,
                status=status,
                created_at=now,
                updated_at=now,
            )
            db.add(record)
            await db.commit()
            return record

    return _make
