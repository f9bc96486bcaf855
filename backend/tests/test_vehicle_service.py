"""
Vehicle API - Vehicle Service Unit Tests
=========================================

What:  Tests for VehicleService (index, show, create, update, destroy).
How:   Uses an AsyncMock DataStore; no database is involved.

What we test:
    ✅ Successful path of each operation
    ✅ Missing entity raises NotFoundError for show/update/destroy
    ✅ Store failures are wrapped in StorageError with the original text
    ✅ Update only touches fields sent in the body and never the id
"""

import pytest
from unittest.mock import AsyncMock
from uuid import uuid4

from vehicle_api.exceptions import NotFoundError, StorageError
from vehicle_api.schemas.vehicle import VehicleCreate, VehicleUpdate
from vehicle_api.services.vehicle_service import VehicleService


@pytest.fixture
def service(mock_store):
    return VehicleService(store_factory=lambda db: mock_store)


@pytest.fixture
def db():
    """Stands in for the AsyncSession; only commit() is awaited by the service."""
    return AsyncMock()


class TestVehicleServiceIndex:
    """Tests for index."""

    @pytest.mark.asyncio
    async def test_index_empty_returns_empty_list(self, service, mock_store, db):
        """An empty store is a success, not a missing result."""
        mock_store.find_all.return_value = []

        result = await service.index(db)

        assert result == []
        mock_store.find_all.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_index_returns_all(self, service, mock_store, db, sample_vehicle):
        mock_store.find_all.return_value = [sample_vehicle]

        result = await service.index(db)

        assert len(result) == 1
        assert result[0].id == sample_vehicle.id
        assert result[0].name == "Truck"

    @pytest.mark.asyncio
    async def test_index_store_failure(self, service, mock_store, db):
        mock_store.find_all.side_effect = RuntimeError("connection reset")

        with pytest.raises(StorageError) as exc_info:
            await service.index(db)

        assert exc_info.value.message == "connection reset"
        assert exc_info.value.operation == "index"


class TestVehicleServiceShow:
    """Tests for show."""

    @pytest.mark.asyncio
    async def test_show_found(self, service, mock_store, db, sample_vehicle):
        mock_store.find_by_id.return_value = sample_vehicle

        result = await service.show(db, sample_vehicle.id)

        assert result.id == sample_vehicle.id
        assert result.info == sample_vehicle.info
        mock_store.find_by_id.assert_awaited_once_with(sample_vehicle.id)

    @pytest.mark.asyncio
    async def test_show_not_found(self, service, mock_store, db):
        mock_store.find_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await service.show(db, uuid4())

    @pytest.mark.asyncio
    async def test_show_store_failure(self, service, mock_store, db):
        mock_store.find_by_id.side_effect = RuntimeError("timeout")

        with pytest.raises(StorageError, match="timeout"):
            await service.show(db, uuid4())


class TestVehicleServiceCreate:
    """Tests for create."""

    @pytest.mark.asyncio
    async def test_create_passes_body_fields(self, service, mock_store, db, sample_vehicle):
        mock_store.create.return_value = sample_vehicle

        result = await service.create(db, VehicleCreate(name="Truck", info="Flatbed, 2 axles"))

        mock_store.create.assert_awaited_once_with(
            {"name": "Truck", "info": "Flatbed, 2 axles", "active": True}
        )
        db.commit.assert_awaited_once()
        assert result.id == sample_vehicle.id

    @pytest.mark.asyncio
    async def test_create_store_failure(self, service, mock_store, db):
        mock_store.create.side_effect = RuntimeError("unique violation")

        with pytest.raises(StorageError) as exc_info:
            await service.create(db, VehicleCreate(name="Truck"))

        assert exc_info.value.message == "unique violation"


class TestVehicleServiceUpdate:
    """Tests for update."""

    @pytest.mark.asyncio
    async def test_update_merges_only_sent_fields(self, service, mock_store, db, sample_vehicle):
        original_id = sample_vehicle.id
        mock_store.find_by_id.return_value = sample_vehicle
        mock_store.save.side_effect = lambda entity: entity

        payload = VehicleUpdate.model_validate({"name": "Van", "id": str(uuid4())})
        result = await service.update(db, original_id, payload)

        assert result.id == original_id
        assert result.name == "Van"
        assert result.info == "Flatbed, 2 axles"
        assert result.active is True
        mock_store.save.assert_awaited_once_with(sample_vehicle)
        db.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_not_found_skips_save(self, service, mock_store, db):
        mock_store.find_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await service.update(db, uuid4(), VehicleUpdate(name="Van"))

        mock_store.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_save_failure(self, service, mock_store, db, sample_vehicle):
        mock_store.find_by_id.return_value = sample_vehicle
        mock_store.save.side_effect = RuntimeError("deadlock detected")

        with pytest.raises(StorageError) as exc_info:
            await service.update(db, sample_vehicle.id, VehicleUpdate(name="Van"))

        assert exc_info.value.message == "deadlock detected"
        assert exc_info.value.operation == "update"


class TestVehicleServiceDestroy:
    """Tests for destroy."""

    @pytest.mark.asyncio
    async def test_destroy_removes_entity(self, service, mock_store, db, sample_vehicle):
        mock_store.find_by_id.return_value = sample_vehicle

        result = await service.destroy(db, sample_vehicle.id)

        assert result is None
        mock_store.remove.assert_awaited_once_with(sample_vehicle)
        db.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_destroy_not_found_skips_remove(self, service, mock_store, db):
        mock_store.find_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await service.destroy(db, uuid4())

        mock_store.remove.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_destroy_remove_failure(self, service, mock_store, db, sample_vehicle):
        mock_store.find_by_id.return_value = sample_vehicle
        mock_store.remove.side_effect = RuntimeError("foreign key violation")

        with pytest.raises(StorageError, match="foreign key violation"):
            await service.destroy(db, sample_vehicle.id)


class TestVehicleServiceCommit:
    """A failing commit is a storage failure like any other."""

    @pytest.mark.asyncio
    async def test_create_commit_failure(self, service, mock_store, db, sample_vehicle):
        mock_store.create.return_value = sample_vehicle
        db.commit.side_effect = RuntimeError("could not serialize access")

        with pytest.raises(StorageError) as exc_info:
            await service.create(db, VehicleCreate(name="Truck"))

        assert exc_info.value.message == "could not serialize access"
        assert exc_info.value.operation == "create"

    @pytest.mark.asyncio
    async def test_update_commit_failure(self, service, mock_store, db, sample_vehicle):
        mock_store.find_by_id.return_value = sample_vehicle
        mock_store.save.side_effect = lambda entity: entity
        db.commit.side_effect = RuntimeError("connection closed")

        with pytest.raises(StorageError, match="connection closed"):
            await service.update(db, sample_vehicle.id, VehicleUpdate(name="Van"))

    @pytest.mark.asyncio
    async def test_destroy_commit_failure(self, service, mock_store, db, sample_vehicle):
        mock_store.find_by_id.return_value = sample_vehicle
        db.commit.side_effect = RuntimeError("connection closed")

        with pytest.raises(StorageError, match="connection closed"):
            await service.destroy(db, sample_vehicle.id)

    @pytest.mark.asyncio
    async def test_reads_do_not_commit(self, service, mock_store, db, sample_vehicle):
        mock_store.find_all.return_value = [sample_vehicle]
        mock_store.find_by_id.return_value = sample_vehicle

        await service.index(db)
        await service.show(db, sample_vehicle.id)

        db.commit.assert_not_awaited()
