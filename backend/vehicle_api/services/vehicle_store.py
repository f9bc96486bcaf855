"""
Vehicle API - SQLAlchemy DataStore
===================================

What:  DataStore implementation backed by an AsyncSession.
How:   Writes are flushed, not committed; VehicleService commits after
       each write so commit failures surface as StorageError. Each write refreshes
       the row so defaults and onupdate values are loaded without a later
       lazy load (which async sessions do not allow).
Who:   Built per request by VehicleService.
"""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import asc, select
from sqlalchemy.ext.asyncio import AsyncSession

from vehicle_api.models.vehicle import Vehicle
from vehicle_api.services.store_base import DataStore

logger = logging.getLogger(__name__)


class SQLAlchemyVehicleStore(DataStore):
    """Vehicle persistence on a single AsyncSession."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self) -> List[Vehicle]:
        result = await self.session.execute(
            select(Vehicle).order_by(asc(Vehicle.created_at))
        )
        return list(result.scalars().all())

    async def find_by_id(self, vehicle_id: UUID) -> Optional[Vehicle]:
        # Primary key lookup; returns the identity-map copy when present
        return await self.session.get(Vehicle, vehicle_id)

    async def create(self, fields: Dict[str, Any]) -> Vehicle:
        entity = Vehicle()
        entity.apply_updates(fields)
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        logger.debug("Inserted vehicle %s", entity.id)
        return entity

    async def remove(self, entity: Vehicle) -> None:
        await self.session.delete(entity)
        await self.session.flush()
        logger.debug("Deleted vehicle %s", entity.id)

    async def save(self, entity: Vehicle) -> Vehicle:
        await self.session.flush()
        await self.session.refresh(entity)
        return entity
