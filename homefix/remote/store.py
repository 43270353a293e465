"""
homefix/remote/store.py

Remote Store Client
Async HTTP client for the marketplace store API. Anonymous calls carry the
public anon key; session calls carry the bearer token of an explicitly
passed SessionContext (there is no ambient session).

Non-2xx responses are turned into the error taxonomy by the `code` field of
the JSON error body; transport failures and unknown codes become RemoteError.
"""

import logging
from dataclasses import dataclass
from types import TracebackType
from typing import Any, TypeVar
from uuid import UUID

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from homefix.auth.schemas import LoginRequest, LoginResponse, SignupRequest
from homefix.core.config import settings
from homefix.core.exceptions import ERRORS_BY_CODE, RemoteError, ValidationError
from homefix.database.enums import RequestStatus, ServiceType, UserRole
from homefix.service.schemas import ServiceList, ServiceRead
from homefix.service_request.schemas import (
    ServiceRequestCreate,
    ServiceRequestList,
    ServiceRequestRead,
    StatusUpdate,
)
from homefix.users.schemas import AccountRead, ProfileResponse
from homefix.worker.schemas import WorkerList, WorkerProfileRead

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class SessionContext:
    """An authenticated session, passed into every call that needs one."""

    access_token: str
    user_id: UUID
    role: UserRole


def error_from_response(response: httpx.Response) -> RemoteError:
    """Builds the matching error for a non-2xx store response."""
    message = f"Store returned HTTP {response.status_code}"
    code: str | None = None
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = str(body.get("error") or body.get("detail") or message)
        code = body.get("code")

    error_cls = ERRORS_BY_CODE.get(code or "", RemoteError)
    return error_cls(message, status_code=response.status_code, code=code)


class RemoteStore:
    """Typed access to every store API operation."""

    def __init__(
        self,
        base_url: str | None = None,
        anon_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.anon_key = anon_key or settings.ANON_KEY
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout if timeout is not None else settings.REQUEST_TIMEOUT,
            transport=transport,
        )

    async def __aenter__(self) -> "RemoteStore":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # ---------------------------------------------------
    # Transport
    # ---------------------------------------------------
    async def _request(
        self, method: str, path: str, *, token: str, json: dict[str, Any] | None = None
    ) -> Any:
        """One round trip; returns the decoded JSON body or raises."""
        try:
            response = await self._client.request(
                method, path, json=json, headers={"Authorization": f"Bearer {token}"}
            )
        except httpx.HTTPError as e:
            logger.error(f"[REMOTE] {method} {path} failed: {e}")
            raise RemoteError(f"Could not reach the store: {e}") from e

        if response.is_success:
            logger.debug(f"[REMOTE] {method} {path} -> {response.status_code}")
            try:
                return response.json()
            except ValueError as e:
                raise RemoteError(
                    "Store returned a non-JSON body", status_code=response.status_code
                ) from e

        error = error_from_response(response)
        logger.warning(f"[REMOTE] {method} {path} -> {response.status_code}: {error.message}")
        raise error

    @staticmethod
    def _parse(model: type[M], data: Any) -> M:
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            raise RemoteError(f"Store returned a malformed {model.__name__}: {e}") from e

    # ---------------------------------------------------
    # Anonymous Operations
    # ---------------------------------------------------
    async def list_services(self) -> list[ServiceRead]:
        data = await self._request("GET", "/services", token=self.anon_key)
        return self._parse(ServiceList, data).services

    async def list_workers(self, service_type: ServiceType | str) -> list[WorkerProfileRead]:
        try:
            service_type = ServiceType(service_type)
        except ValueError as e:
            raise ValidationError(f"Unknown service type: {service_type!r}") from e
        data = await self._request("GET", f"/workers/{service_type.value}", token=self.anon_key)
        return self._parse(WorkerList, data).workers

    async def signup(self, payload: SignupRequest) -> AccountRead:
        data = await self._request(
            "POST",
            "/signup",
            token=self.anon_key,
            json=payload.model_dump(mode="json", by_alias=True, exclude_none=True),
        )
        return self._parse(AccountRead, data)

    async def login(self, email: str, password: str) -> SessionContext:
        """Exchanges credentials for a session context."""
        try:
            payload = LoginRequest(email=email, password=password)
        except PydanticValidationError as e:
            raise ValidationError(str(e.errors()[0]["msg"])) from e
        data = await self._request(
            "POST", "/login", token=self.anon_key, json=payload.model_dump(mode="json", by_alias=True)
        )
        login = self._parse(LoginResponse, data)
        return SessionContext(
            access_token=login.access_token, user_id=login.user.id, role=login.user.role
        )

    # ---------------------------------------------------
    # Session Operations
    # ---------------------------------------------------
    async def fetch_profile(self, session: SessionContext) -> ProfileResponse:
        data = await self._request("GET", "/profile", token=session.access_token)
        return self._parse(ProfileResponse, data)

    async def create_request(
        self, session: SessionContext, payload: ServiceRequestCreate
    ) -> ServiceRequestRead:
        data = await self._request(
            "POST",
            "/requests",
            token=session.access_token,
            json=payload.model_dump(mode="json", by_alias=True),
        )
        return self._parse(ServiceRequestRead, data)

    async def list_my_requests(self, session: SessionContext) -> list[ServiceRequestRead]:
        data = await self._request("GET", "/my-requests", token=session.access_token)
        return self._parse(ServiceRequestList, data).requests

    async def list_worker_requests(self, session: SessionContext) -> list[ServiceRequestRead]:
        data = await self._request("GET", "/worker-requests", token=session.access_token)
        return self._parse(ServiceRequestList, data).requests

    async def update_status(
        self, session: SessionContext, request_id: UUID, status: RequestStatus
    ) -> ServiceRequestRead:
        data = await self._request(
            "PUT",
            f"/requests/{request_id}/status",
            token=session.access_token,
            json=StatusUpdate(status=status).model_dump(mode="json", by_alias=True),
        )
        return self._parse(ServiceRequestRead, data)
