# Services package init
"""
Vehicle API - Services Layer
=============================

Service Inventory:
    - DataStore (abstract): Persistence contract (find_all, find_by_id,
      create, remove, save)
    - SQLAlchemyVehicleStore: DataStore on an AsyncSession
    - VehicleService: index/show/create/update/destroy over a DataStore
"""
