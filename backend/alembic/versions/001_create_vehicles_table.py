"""Create vehicles table

Revision ID: 001
Revises: None
Create Date: 2026-10-17 00:00:00.000000+00:00

What:  Creates the `vehicles` table backing /api/vehicles.
How:   Columns mirror vehicle_api/models/vehicle.py.

Rollback: downgrade() drops the table (all vehicle rows are lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the vehicles table and its created_at index."""
    op.create_table(
        "vehicles",
        # Generated by the application (uuid4) on insert
        sa.Column(
            "id",
            sa.Uuid(as_uuid=True),
            nullable=False,
            comment="Unique identifier, immutable after creation",
        ),
        sa.Column(
            "name",
            sa.String(255),
            nullable=True,
            comment="Display name of the vehicle",
        ),
        sa.Column(
            "info",
            sa.Text(),
            nullable=True,
            comment="Free-form description",
        ),
        sa.Column(
            "active",
            sa.Boolean(),
            nullable=False,
            server_default=sa.text("true"),
            comment="Whether the vehicle is in service",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="When this vehicle was created (UTC)",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="When this vehicle was last modified (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # Backs the ORDER BY created_at of GET /api/vehicles
    op.create_index("idx_vehicles_created_at", "vehicles", ["created_at"])


def downgrade() -> None:
    """Drop the vehicles table."""
    op.drop_index("idx_vehicles_created_at", table_name="vehicles")
    op.drop_table("vehicles")
