"""
homefix/remote/controller.py

Request Lifecycle Controller
Client-side entry point for booking a worker and moving a request through
its lifecycle. Input is validated before any network call; the same state
table the store enforces is checked locally whenever the caller already
holds the current record. The session is always passed in explicitly.
"""

import logging
from collections.abc import Sequence
from datetime import datetime
from uuid import UUID

from pydantic import ValidationError as PydanticValidationError

from homefix.core.exceptions import NotAuthorizedError, ValidationError
from homefix.database.enums import PaymentMethod, RequestStatus, ServiceType, UserRole
from homefix.remote.store import RemoteStore, SessionContext
from homefix.service_request import lifecycle
from homefix.service_request.lifecycle import RequestBuckets
from homefix.service_request.schemas import ServiceRequestCreate, ServiceRequestRead
from homefix.worker.schemas import WorkerProfileRead

logger = logging.getLogger(__name__)


def _first_error(exc: PydanticValidationError) -> str:
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error.get("loc", ()))
    return f"{field}: {error['msg']}" if field else error["msg"]


class RequestLifecycleController:
    """Creates requests and applies status transitions through the remote store."""

    def __init__(self, store: RemoteStore) -> None:
        self.store = store

    # ---------------------------------------------------
    # Request Creation
    # ---------------------------------------------------
    async def create_request(
        self,
        session: SessionContext,
        customer_id: UUID,
        worker_id: UUID,
        service_type: ServiceType | str,
        description: str,
        location: str,
        scheduled_time: datetime | str,
        payment_method: PaymentMethod | str = PaymentMethod.CASH,
        *,
        worker: WorkerProfileRead | None = None,
    ) -> ServiceRequestRead:
        """
        Books `worker_id` for `service_type` on behalf of `customer_id`.

        If the caller already holds the worker's profile it is used to check
        the worker offers the service before anything is sent.

        Raises:
            NotAuthorizedError: the session is not the customer's, or not a customer session.
            ValidationError: a field is missing or malformed.
            RemoteError: the store rejected the write or could not be reached.
        """
        if session.user_id != customer_id:
            raise NotAuthorizedError("Session does not belong to this customer.")
        if session.role != UserRole.USER:
            raise NotAuthorizedError("Only customers can create service requests.")

        try:
            payload = ServiceRequestCreate(
                worker_id=worker_id,
                service_type=service_type,
                description=description,
                location=location,
                scheduled_time=scheduled_time,
                payment_method=payment_method,
            )
        except PydanticValidationError as e:
            message = _first_error(e)
            logger.warning(f"[CONTROLLER] Rejected request input: {message}")
            raise ValidationError(message) from e

        if worker is not None:
            if worker.id != payload.worker_id:
                raise ValidationError("Worker profile does not match workerId.")
            if payload.service_type not in worker.service_type:
                raise ValidationError(
                    f"Worker does not offer the '{payload.service_type.value}' service."
                )

        record = await self.store.create_request(session, payload)
        logger.info(f"[CONTROLLER] Created request {record.id} ({record.status.value})")
        return record

    # ---------------------------------------------------
    # Status Transitions
    # ---------------------------------------------------
    async def transition_status(
        self,
        session: SessionContext,
        request_id: UUID,
        actor_id: UUID,
        target_status: RequestStatus | str,
        *,
        current: ServiceRequestRead | None = None,
    ) -> ServiceRequestRead:
        """
        Moves a request to `target_status` as the worker `actor_id`.

        With `current` supplied, ownership and the state table are checked
        before the call; the store repeats both checks and applies the change
        only if the request still holds the status it was checked against.

        Raises:
            ValidationError: `target_status` is not a known status.
            NotAuthorizedError: the actor is not the owning worker.
            IllegalTransitionError: the move is not in the state table.
            RemoteError: the store could not be reached or failed.
        """
        if session.user_id != actor_id:
            raise NotAuthorizedError("Session does not belong to this actor.")
        try:
            target = RequestStatus(target_status)
        except ValueError as e:
            raise ValidationError(f"Unknown request status: {target_status!r}") from e

        if current is not None:
            if current.id != request_id:
                raise ValidationError("Current record does not match requestId.")
            lifecycle.check_transition(
                worker_id=current.worker_id,
                actor_id=actor_id,
                current=current.status,
                target=target,
            )

        record = await self.store.update_status(session, request_id, target)
        logger.info(f"[CONTROLLER] Request {request_id} is now {record.status.value}")
        return record

    # ---------------------------------------------------
    # Dashboards
    # ---------------------------------------------------
    @staticmethod
    def partition(requests: Sequence[ServiceRequestRead]) -> RequestBuckets:
        return lifecycle.partition(requests)

    async def customer_dashboard(self, session: SessionContext) -> RequestBuckets:
        """The customer's requests split into tabs (rejected ones are not shown)."""
        return self.partition(await self.store.list_my_requests(session))

    async def worker_dashboard(self, session: SessionContext) -> RequestBuckets:
        """The worker's requests split into tabs (rejected ones are not shown)."""
        return self.partition(await self.store.list_worker_requests(session))
