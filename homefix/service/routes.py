"""
homefix/service/routes.py

Service Routes
Public (anon key) listing of the service catalogue.
"""

from fastapi import APIRouter, Depends, Request, status

from homefix.core.dependencies import require_anon_key
from homefix.core.limiter import limiter
from homefix.service import schemas
from homefix.service.services import ServiceCatalogService

router = APIRouter(prefix="/services", tags=["Services"], dependencies=[Depends(require_anon_key)])


@router.get(
    "",
    response_model=schemas.ServiceList,
    status_code=status.HTTP_200_OK,
    summary="List Services",
    description="All service categories customers can book.",
)
@limiter.limit("60/minute")
async def list_services(request: Request) -> schemas.ServiceList:
    return schemas.ServiceList(services=ServiceCatalogService().list_services())
