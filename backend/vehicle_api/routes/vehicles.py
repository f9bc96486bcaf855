"""
Vehicle API - Vehicle Route Handlers
=====================================

What:  Rails-style REST endpoints for the vehicle resource.
How:   Extracts path/body data, delegates to VehicleService, sets status codes.

    GET     /api/vehicles          ->  index
    POST    /api/vehicles          ->  create
    GET     /api/vehicles/{id}     ->  show
    PUT     /api/vehicles/{id}     ->  update
    DELETE  /api/vehicles/{id}     ->  destroy

404 and 500 responses are produced by the global exception handlers in
main.py from NotFoundError and StorageError.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from vehicle_api.config import settings
from vehicle_api.database import get_db_session
from vehicle_api.schemas.vehicle import (
    ErrorResponse,
    VehicleCreate,
    VehicleResponse,
    VehicleUpdate,
)
from vehicle_api.services.vehicle_service import vehicle_service

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix=f"{settings.api_prefix}/vehicles", tags=["Vehicles"])

_NOT_FOUND = {404: {"description": "Vehicle not found (empty body)"}}
_SERVER_ERROR = {500: {"description": "Storage failure", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[VehicleResponse],
    responses={**_SERVER_ERROR},
    summary="List vehicles",
)
async def index(
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> List[VehicleResponse]:
    """
    Return every vehicle as a JSON array, oldest first.

    An empty table answers `200 []`. The count is repeated in X-Total-Count.
    """
    vehicles = await vehicle_service.index(db)
    response.headers["X-Total-Count"] = str(len(vehicles))
    return vehicles


@router.get(
    "/{vehicle_id}",
    response_model=VehicleResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Get a single vehicle by ID",
)
async def show(
    vehicle_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> VehicleResponse:
    return await vehicle_service.show(db, vehicle_id)


@router.post(
    "",
    status_code=201,
    response_model=VehicleResponse,
    responses={**_SERVER_ERROR},
    summary="Create a vehicle",
)
async def create(
    payload: VehicleCreate,
    db: AsyncSession = Depends(get_db_session),
) -> VehicleResponse:
    return await vehicle_service.create(db, payload)


@router.put(
    "/{vehicle_id}",
    response_model=VehicleResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Update a vehicle",
    description=(
        "Overwrites the fields present in the body and keeps the rest. "
        "An `id` in the body is ignored; the path id always wins."
    ),
)
async def update(
    vehicle_id: UUID,
    payload: VehicleUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> VehicleResponse:
    return await vehicle_service.update(db, vehicle_id, payload)


@router.delete(
    "/{vehicle_id}",
    status_code=204,
    response_class=Response,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Delete a vehicle",
)
async def destroy(
    vehicle_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await vehicle_service.destroy(db, vehicle_id)
    return Response(status_code=204)
