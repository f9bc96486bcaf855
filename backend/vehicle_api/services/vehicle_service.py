"""
Vehicle API - Vehicle Service (Resource Controller)
====================================================

What:  The five CRUD operations for the vehicle resource.
How:   Each operation is a linear pipeline over the DataStore:
           fetch → check presence → mutate → return
       with one error branch at the end.
Who:   Called by the route handlers in vehicle_api.routes.vehicles.

Error Handling Strategy:
    - A missing entity becomes NotFoundError (→ 404, empty body)
    - Any other failure becomes StorageError carrying the original error text
      (→ 500). Nothing is retried.
    Writes commit inside the operation, so a failed commit takes the same
    StorageError path as a failed flush. The session dependency rolls back
    the transaction when either exception escapes.
"""

import logging
from typing import Callable, List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from vehicle_api.exceptions import NotFoundError, StorageError
from vehicle_api.schemas.vehicle import VehicleCreate, VehicleResponse, VehicleUpdate
from vehicle_api.services.store_base import DataStore
from vehicle_api.services.vehicle_store import SQLAlchemyVehicleStore

logger = logging.getLogger(__name__)

StoreFactory = Callable[[AsyncSession], DataStore]


class VehicleService:
    """
    Business logic layer for vehicle operations.

    Stateless: a DataStore is built from the request's session on every call,
    so one instance serves all requests.
    """

    def __init__(self, store_factory: StoreFactory = SQLAlchemyVehicleStore):
        self.store_factory = store_factory

    async def index(self, db: AsyncSession) -> List[VehicleResponse]:
        """
        List every vehicle.

        An empty table is a normal result and yields an empty list.

        Raises:
            StorageError: The query failed (→ 500)
        """
        store = self.store_factory(db)
        try:
            vehicles = await store.find_all()
            return [VehicleResponse.model_validate(v) for v in vehicles]
        except Exception as e:
            raise self._storage_failure(e, "index") from e

    async def show(self, db: AsyncSession, vehicle_id: UUID) -> VehicleResponse:
        """
        Fetch a single vehicle.

        Raises:
            NotFoundError: No vehicle with this id (→ 404)
            StorageError: The lookup failed (→ 500)
        """
        store = self.store_factory(db)
        try:
            vehicle = await store.find_by_id(vehicle_id)
            if vehicle is None:
                raise NotFoundError(resource="vehicle", resource_id=str(vehicle_id))
            return VehicleResponse.model_validate(vehicle)
        except NotFoundError:
            raise
        except Exception as e:
            raise self._storage_failure(e, "show") from e

    async def create(self, db: AsyncSession, payload: VehicleCreate) -> VehicleResponse:
        """
        Insert a new vehicle from the request body.

        Raises:
            StorageError: The insert or commit failed (→ 500)
        """
        store = self.store_factory(db)
        try:
            vehicle = await store.create(payload.model_dump())
            await db.commit()
            logger.info("Vehicle %s created", vehicle.id)
            return VehicleResponse.model_validate(vehicle)
        except Exception as e:
            raise self._storage_failure(e, "create") from e

    async def update(
        self,
        db: AsyncSession,
        vehicle_id: UUID,
        payload: VehicleUpdate,
    ) -> VehicleResponse:
        """
        Shallow-merge the fields present in `payload` into a stored vehicle.

        Fields absent from the body keep their stored values. The body cannot
        change the id: VehicleUpdate has no `id` field, and the model ignores
        anything outside its writable fields.

        Raises:
            NotFoundError: No vehicle with this id (→ 404)
            StorageError: The lookup, save or commit failed (→ 500)
        """
        store = self.store_factory(db)
        try:
            vehicle = await store.find_by_id(vehicle_id)
            if vehicle is None:
                raise NotFoundError(resource="vehicle", resource_id=str(vehicle_id))

            changes = payload.changes()
            vehicle.apply_updates(changes)
            vehicle = await store.save(vehicle)
            await db.commit()
            logger.info("Vehicle %s updated (%s)", vehicle_id, ", ".join(sorted(changes)) or "no fields")
            return VehicleResponse.model_validate(vehicle)
        except NotFoundError:
            raise
        except Exception as e:
            raise self._storage_failure(e, "update") from e

    async def destroy(self, db: AsyncSession, vehicle_id: UUID) -> None:
        """
        Delete a vehicle.

        Raises:
            NotFoundError: No vehicle with this id (→ 404)
            StorageError: The lookup, delete or commit failed (→ 500)
        """
        store = self.store_factory(db)
        try:
            vehicle = await store.find_by_id(vehicle_id)
            if vehicle is None:
                raise NotFoundError(resource="vehicle", resource_id=str(vehicle_id))
            await store.remove(vehicle)
            await db.commit()
            logger.info("Vehicle %s deleted", vehicle_id)
        except NotFoundError:
            raise
        except Exception as e:
            raise self._storage_failure(e, "destroy") from e

    @staticmethod
    def _storage_failure(exc: Exception, operation: str) -> StorageError:
        logger.error("Storage error during %s: %s", operation, str(exc), exc_info=True)
        return StorageError.wrap(exc, operation)


# Singleton instance: the service holds no per-request state
vehicle_service = VehicleService()
