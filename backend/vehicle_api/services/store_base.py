"""
Vehicle API - Abstract DataStore Interface
===========================================

What:  Abstract base class defining the persistence contract the vehicle
       service relies on.
How:   Concrete stores inherit from DataStore and implement the five
       coroutines below.
Who:   Called by VehicleService; implemented by SQLAlchemyVehicleStore.

Design Decision:
    VehicleService only talks to this interface. Unit tests substitute an
    AsyncMock store; a different backend (a document database, an HTTP
    upstream) only needs a new subclass.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from uuid import UUID

from vehicle_api.models.vehicle import Vehicle


class DataStore(ABC):
    """
    Abstract CRUD persistence for vehicles.

    Contract:
        - Every method is a coroutine that either returns its value or raises
        - A missing row is a value (None), never an exception
        - Writes are visible to later calls on the same store; committing the
          surrounding transaction is the caller's concern
    """

    @abstractmethod
    async def find_all(self) -> List[Vehicle]:
        """
        Return every vehicle, oldest first.

        Returns an empty list when there are no rows; never None.
        """
        ...

    @abstractmethod
    async def find_by_id(self, vehicle_id: UUID) -> Optional[Vehicle]:
        """Return the vehicle with this id, or None if there is none."""
        ...

    @abstractmethod
    async def create(self, fields: Dict[str, Any]) -> Vehicle:
        """
        Insert a new vehicle built from `fields` and return it.

        The returned entity has its server-assigned id and timestamps loaded.
        """
        ...

    @abstractmethod
    async def remove(self, entity: Vehicle) -> None:
        """Delete `entity`."""
        ...

    @abstractmethod
    async def save(self, entity: Vehicle) -> Vehicle:
        """Persist pending changes on `entity` and return the fresh row."""
        ...
