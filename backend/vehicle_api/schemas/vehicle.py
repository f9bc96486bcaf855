"""
Vehicle API - Pydantic Request/Response Schemas
================================================

What:  Pydantic models defining the API contract for the vehicle resource.
How:   FastAPI uses these models to coerce request bodies, serialize responses,
       and generate OpenAPI documentation.

Design Decision:
    Request schemas whitelist the writable fields. Unknown keys in a body,
    `id` included, are ignored rather than rejected, so `PUT /vehicles/{id}`
    with `{"id": "999", "name": "Van"}` updates the name and leaves the id
    alone.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class VehicleCreate(BaseModel):
    """Body of POST /api/vehicles. Every field is optional."""

    name: Optional[str] = Field(default=None, max_length=255, description="Display name")
    info: Optional[str] = Field(default=None, description="Free-form description")
    active: bool = Field(default=True, description="Whether the vehicle is in service")

    model_config = {"extra": "ignore"}


class VehicleUpdate(BaseModel):
    """
    Body of PUT /api/vehicles/{id}.

    Only fields present in the body are applied (see `changes()`); a field
    omitted from the body keeps its stored value.
    """

    name: Optional[str] = Field(default=None, max_length=255)
    info: Optional[str] = None
    active: Optional[bool] = None

    model_config = {"extra": "ignore"}

    def changes(self) -> dict:
        """The fields explicitly sent by the client, with their values."""
        return self.model_dump(exclude_unset=True)


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class VehicleResponse(BaseModel):
    """Full representation of a vehicle, returned by every non-empty success."""

    id: uuid.UUID = Field(description="Unique vehicle identifier (UUID)")
    name: Optional[str] = Field(default=None, description="Display name")
    info: Optional[str] = Field(default=None, description="Free-form description")
    active: bool = Field(description="Whether the vehicle is in service")
    created_at: datetime = Field(description="When the vehicle was created (UTC ISO 8601)")
    updated_at: datetime = Field(description="When the vehicle was last modified (UTC ISO 8601)")

    model_config = {"from_attributes": True}


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Body of a 500 response.

    Example:
        {
            "error": "storage_error",
            "message": "connection reset by peer",
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Text of the underlying failure")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
