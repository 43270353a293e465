"""
homefix/service_request/services.py

Service Request Service Layer
Handles request creation, status transitions and retrieval for the store API.
Status changes are conditional writes: the row is only updated if it still
holds a status the target may be reached from.
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from homefix.core.exceptions import (
    IllegalTransitionError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from homefix.database.enums import RequestStatus, UserRole
from homefix.database.models import User
from homefix.service_request import lifecycle, schemas
from homefix.service_request.models import ServiceRequest
from homefix.worker.models import WorkerProfile

logger = logging.getLogger(__name__)


class ServiceRequestService:
    """Service class for request-related business logic."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _get_request_or_404(self, request_id: UUID) -> ServiceRequest:
        """Helper to retrieve a request or raise NotFoundError."""
        request = await self.db.get(ServiceRequest, request_id, populate_existing=True)
        if not request:
            logger.warning(f"Request not found: request_id={request_id}")
            raise NotFoundError("Request not found")
        return request

    async def _get_worker_profile(self, worker_id: UUID) -> WorkerProfile:
        result = await self.db.execute(
            select(WorkerProfile).filter(WorkerProfile.user_id == worker_id)
        )
        profile = result.scalar_one_or_none()
        if not profile:
            logger.warning(f"Worker profile not found: worker_id={worker_id}")
            raise NotFoundError("Worker not found")
        return profile

    # ---------------------------------------------------
    # Request Creation
    # ---------------------------------------------------
    async def create_request(
        self, customer: User, payload: schemas.ServiceRequestCreate
    ) -> schemas.ServiceRequestRead:
        """Customer books a worker; the worker's advance payment is snapshotted."""
        logger.info(
            f"Customer {customer.id} requesting {payload.service_type.value} from worker {payload.worker_id}"
        )
        if customer.role != UserRole.USER:
            raise NotAuthorizedError("Only customers can create service requests.")

        worker = await self._get_worker_profile(payload.worker_id)
        if not worker.offers(payload.service_type.value):
            raise ValidationError(
                f"Worker does not offer the '{payload.service_type.value}' service."
            )

        now = datetime.now(timezone.utc)
        request = ServiceRequest(
            user_id=customer.id,
            worker_id=payload.worker_id,
            service_type=payload.service_type,
            description=payload.description,
            location=payload.location,
            scheduled_time=payload.scheduled_time,
            payment_method=payload.payment_method,
            advance_amount=worker.advance_payment,
            status=lifecycle.INITIAL_STATUS,
            created_at=now,
            updated_at=now,
        )
        self.db.add(request)

        try:
            await self.db.commit()
        except Exception as e:
            logger.error(f"Error committing request creation: {e}", exc_info=True)
            await self.db.rollback()
            raise

        logger.info(
            f"Request created: request_id={request.id}, advance_amount={request.advance_amount}"
        )
        return schemas.ServiceRequestRead.model_validate(request)

    # ---------------------------------------------------
    # Request Lifecycle Actions
    # ---------------------------------------------------
    async def transition_status(
        self, request_id: UUID, actor_id: UUID, target: RequestStatus
    ) -> schemas.ServiceRequestRead:
        """Owning worker moves a request to `target` if the state table allows it."""
        logger.info(f"Actor {actor_id} moving request {request_id} to {target.value}")
        request = await self._get_request_or_404(request_id)
        current = request.status

        lifecycle.check_transition(
            worker_id=request.worker_id, actor_id=actor_id, current=current, target=target
        )

        result = await self.db.execute(
            update(ServiceRequest)
            .where(
                ServiceRequest.id == request_id,
                ServiceRequest.status.in_(list(lifecycle.predecessors_of(target))),
            )
            .values(status=target, updated_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            await self.db.rollback()
            logger.warning(
                f"Request {request_id} left {current.value} before the update was applied"
            )
            raise IllegalTransitionError(
                f"Request is no longer {current.value}; reload and try again."
            )
        await self.db.commit()

        request = await self._get_request_or_404(request_id)
        logger.info(f"Request {request_id} moved {current.value} -> {request.status.value}")
        return schemas.ServiceRequestRead.model_validate(request)

    # ---------------------------------------------------
    # Request Retrieval
    # ---------------------------------------------------
    async def list_for_customer(self, customer_id: UUID) -> list[schemas.ServiceRequestRead]:
        """Requests created by a customer, newest first."""
        result = await self.db.execute(
            select(ServiceRequest)
            .filter(ServiceRequest.user_id == customer_id)
            .order_by(ServiceRequest.created_at.desc())
        )
        return [schemas.ServiceRequestRead.model_validate(r) for r in result.scalars().all()]

    async def list_for_worker(self, worker_id: UUID) -> list[schemas.ServiceRequestRead]:
        """Requests addressed to a worker, newest first."""
        result = await self.db.execute(
            select(ServiceRequest)
            .filter(ServiceRequest.worker_id == worker_id)
            .order_by(ServiceRequest.created_at.desc())
        )
        return [schemas.ServiceRequestRead.model_validate(r) for r in result.scalars().all()]
