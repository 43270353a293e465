"""
homefix/worker/routes.py

Worker Routes
Public (anon key) listing of the workers offering a service category.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from homefix.core.dependencies import require_anon_key
from homefix.core.limiter import limiter
from homefix.database.enums import ServiceType
from homefix.database.session import get_db
from homefix.worker import schemas
from homefix.worker.services import WorkerService

router = APIRouter(prefix="/workers", tags=["Workers"], dependencies=[Depends(require_anon_key)])

DBDep = Annotated[AsyncSession, Depends(get_db)]


@router.get(
    "/{service_type}",
    response_model=schemas.WorkerList,
    status_code=status.HTTP_200_OK,
    summary="List Workers For Service",
    description="Workers who offer the given service category.",
)
@limiter.limit("60/minute")
async def list_workers(
    request: Request,
    service_type: ServiceType,
    db: DBDep,
) -> schemas.WorkerList:
    workers = await WorkerService(db).list_workers_for_service(service_type)
    return schemas.WorkerList(workers=workers)
