"""
Vehicle API - Vehicle SQLAlchemy Model
=======================================

What:  ORM model representing the `vehicles` table.
Who:   Used by SQLAlchemyVehicleStore for CRUD and by Alembic for schema management.

Table Design:
    - UUID primary key, generated in Python so the id is known right after
      flush on every backend (PostgreSQL and SQLite alike)
    - name / info: free-form descriptive fields, both optional
    - active: soft flag, defaults to true
    - created_at / updated_at: UTC with timezone, maintained by the server
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from vehicle_api.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Vehicle(Base):
    """
    A vehicle record.

    Lifecycle:
        1. Created by POST /api/vehicles
        2. Fields overwritten by PUT /api/vehicles/{id}; `id` never changes
        3. Hard-deleted by DELETE /api/vehicles/{id}

    Query Patterns:
        - List all:   SELECT ... ORDER BY created_at
        - Get single: SELECT ... WHERE id = :uuid (primary key lookup)
    """

    __tablename__ = "vehicles"

    # Fields a client may write; everything else is server-owned
    WRITABLE_FIELDS = ("name", "info", "active")

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier, immutable after creation",
    )

    name: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        default=None,
        comment="Display name of the vehicle",
    )

    info: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
        comment="Free-form description",
    )

    active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=text("true"),
        comment="Whether the vehicle is in service",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        comment="When this vehicle was created (UTC)",
    )

    # Python-side onupdate: set on every UPDATE issued through the ORM
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        comment="When this vehicle was last modified (UTC)",
    )

    __table_args__ = (
        Index("idx_vehicles_created_at", created_at),
    )

    def apply_updates(self, updates: dict) -> None:
        """
        Shallow-merge `updates` into this row.

        Keys outside WRITABLE_FIELDS (including `id`) are ignored, so a
        request body can never touch identity or timestamps.
        """
        for field, value in updates.items():
            if field in self.WRITABLE_FIELDS:
                setattr(self, field, value)

    def __repr__(self) -> str:
        return f"<Vehicle(id={self.id}, name='{self.name}', active={self.active})>"
