"""
Vehicle API - Application Package
==================================

What: Marks the `vehicle_api` directory as a Python package.
Who:  Imported by uvicorn (vehicle_api.main:app), Alembic and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← status codes, headers
    ├─────────────────────────────────────┤
    │     Services (VehicleService)       │  ← index/show/create/update/destroy
    ├─────────────────────────────────────┤
    │     Store (DataStore interface)     │  ← find_all/find_by_id/create/remove/save
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
