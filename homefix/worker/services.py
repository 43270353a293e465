"""
homefix/worker/services.py

Worker Service Layer
Read access to worker profiles for customers browsing a service category.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from homefix.database.enums import ServiceType
from homefix.worker import models, schemas

logger = logging.getLogger(__name__)


class WorkerService:
    """Handles worker profile look-ups."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_workers_for_service(
        self, service_type: ServiceType
    ) -> list[schemas.WorkerProfileRead]:
        """Workers offering `service_type`, best rated first."""
        result = await self.db.execute(
            select(models.WorkerProfile)
            .join(models.WorkerProfile.offerings)
            .filter(models.WorkerServiceOffering.service_type == service_type)
            .order_by(models.WorkerProfile.rating.desc(), models.WorkerProfile.name)
        )
        profiles = result.scalars().all()
        logger.info(f"[WORKER] {len(profiles)} workers offer {service_type.value}")
        return [schemas.WorkerProfileRead.from_profile(p) for p in profiles]
