"""
homefix/service_request/routes.py

Service Request Routes
Defines request-related API endpoints for customers and workers:
- Create a request (Authenticated Customer)
- List my requests (Authenticated Customer)
- List requests addressed to me (Authenticated Worker)
- Update a request's status (Authenticated owning Worker)
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from homefix.core.dependencies import get_current_user, get_current_user_with_role
from homefix.core.limiter import limiter
from homefix.database.enums import UserRole
from homefix.database.models import User
from homefix.database.session import get_db
from homefix.service_request import schemas
from homefix.service_request.services import ServiceRequestService

router = APIRouter(tags=["Requests"])

DBDep = Annotated[AsyncSession, Depends(get_db)]

AuthenticatedUserDep = Annotated[User, Depends(get_current_user)]
AuthenticatedWorkerDep = Annotated[User, Depends(get_current_user_with_role(UserRole.WORKER))]


# ---------------------------------------------------
# Customer Endpoints
# ---------------------------------------------------
@router.post(
    "/requests",
    response_model=schemas.ServiceRequestRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Request",
    description="Customer books a worker for a service. The request starts as pending.",
)
@limiter.limit("10/minute")
async def create_request(
    request: Request,
    payload: schemas.ServiceRequestCreate,
    db: DBDep,
    current_user: AuthenticatedUserDep,
) -> schemas.ServiceRequestRead:
    """Authenticated customer creates a new service request."""
    return await ServiceRequestService(db).create_request(customer=current_user, payload=payload)


@router.get(
    "/my-requests",
    response_model=schemas.ServiceRequestList,
    status_code=status.HTTP_200_OK,
    summary="List My Requests",
    description="Requests created by the authenticated customer, newest first.",
)
@limiter.limit("60/minute")
async def list_my_requests(
    request: Request,
    db: DBDep,
    current_user: AuthenticatedUserDep,
) -> schemas.ServiceRequestList:
    requests = await ServiceRequestService(db).list_for_customer(current_user.id)
    return schemas.ServiceRequestList(requests=requests)


# ---------------------------------------------------
# Worker Endpoints
# ---------------------------------------------------
@router.get(
    "/worker-requests",
    response_model=schemas.ServiceRequestList,
    status_code=status.HTTP_200_OK,
    summary="List Worker Requests",
    description="Requests addressed to the authenticated worker, newest first.",
)
@limiter.limit("60/minute")
async def list_worker_requests(
    request: Request,
    db: DBDep,
    current_user: AuthenticatedWorkerDep,
) -> schemas.ServiceRequestList:
    requests = await ServiceRequestService(db).list_for_worker(current_user.id)
    return schemas.ServiceRequestList(requests=requests)


@router.put(
    "/requests/{request_id}/status",
    response_model=schemas.ServiceRequestRead,
    status_code=status.HTTP_200_OK,
    summary="Update Request Status",
    description="Owning worker accepts, rejects or completes a request.",
)
@limiter.limit("30/minute")
async def update_request_status(
    request: Request,
    request_id: UUID,
    payload: schemas.StatusUpdate,
    db: DBDep,
    current_user: AuthenticatedUserDep,
) -> schemas.ServiceRequestRead:
    """Only the worker the request is addressed to gets past the lifecycle guard."""
    return await ServiceRequestService(db).transition_status(
        request_id=request_id, actor_id=current_user.id, target=payload.status
    )
