"""Unit tests for FirmService write ordering, with the repositories mocked out."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from suby.core.exceptions import ForbiddenError
from suby.schemas.firm import FirmCreate
from suby.services.firm import FirmService
from suby.services.storage import ImageStorage

pytestmark = pytest.mark.asyncio


@pytest.fixture
def mock_db_session():
    session = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def vendor():
    return SimpleNamespace(id="vendor-1")


def make_service(session, storage):
    service = FirmService(session, "default", storage=storage)
    service._repo = AsyncMock()
    service._vendors = AsyncMock()
    return service


class TestAddFirmCleanup:
    async def test_failed_insert_removes_stored_image(self, tmp_path, mock_db_session, vendor, png_bytes):
        storage = ImageStorage(root=str(tmp_path))
        service = make_service(mock_db_session, storage)
        service._repo.get_by_name.return_value = None
        service._repo.create.side_effect = IntegrityError("INSERT", {}, Exception("unique"))

        with pytest.raises(IntegrityError):
            await service.add_firm(
                vendor,
                FirmCreate(firm_name="Dosa Corner", area="Indiranagar"),
                ("logo.png", png_bytes),
            )

        assert list(tmp_path.iterdir()) == []
        service._vendors.refresh.assert_not_awaited()

    async def test_successful_insert_keeps_image(self, tmp_path, mock_db_session, vendor, png_bytes):
        storage = ImageStorage(root=str(tmp_path))
        service = make_service(mock_db_session, storage)
        service._repo.get_by_name.return_value = None
        service._repo.create.side_effect = lambda **kw: SimpleNamespace(id="firm-1", **kw)

        firm = await service.add_firm(
            vendor,
            FirmCreate(firm_name="Dosa Corner", area="Indiranagar"),
            ("logo.png", png_bytes),
        )

        assert (tmp_path / firm.image).exists()
        service._vendors.refresh.assert_awaited_once_with(vendor, "firms")


class TestDeleteFirmOrdering:
    async def test_image_removed_only_after_commit(self, mock_db_session, vendor):
        calls = []
        storage = MagicMock(spec=ImageStorage)
        storage.delete = AsyncMock(side_effect=lambda name: calls.append(("delete_image", name)))
        service = make_service(mock_db_session, storage)
        service._repo.get_by_id.return_value = SimpleNamespace(
            id="firm-1", vendor_id="vendor-1", image="1_logo.png"
        )
        service._repo.soft_delete.side_effect = lambda firm_id: calls.append(("soft_delete", firm_id))
        service._repo.commit.side_effect = lambda: calls.append(("commit", None))

        await service.delete_firm(vendor, "firm-1")

        assert calls == [
            ("soft_delete", "firm-1"),
            ("commit", None),
            ("delete_image", "1_logo.png"),
        ]

    async def test_failed_commit_keeps_image(self, mock_db_session, vendor):
        storage = MagicMock(spec=ImageStorage)
        storage.delete = AsyncMock()
        service = make_service(mock_db_session, storage)
        service._repo.get_by_id.return_value = SimpleNamespace(
            id="firm-1", vendor_id="vendor-1", image="1_logo.png"
        )
        service._repo.commit.side_effect = IntegrityError("COMMIT", {}, Exception("boom"))

        with pytest.raises(IntegrityError):
            await service.delete_firm(vendor, "firm-1")

        storage.delete.assert_not_awaited()

    async def test_non_owner_touches_nothing(self, mock_db_session):
        storage = MagicMock(spec=ImageStorage)
        storage.delete = AsyncMock()
        service = make_service(mock_db_session, storage)
        service._repo.get_by_id.return_value = SimpleNamespace(
            id="firm-1", vendor_id="vendor-1", image=None
        )

        with pytest.raises(ForbiddenError):
            await service.delete_firm(SimpleNamespace(id="intruder"), "firm-1")

        service._repo.soft_delete.assert_not_awaited()
        storage.delete.assert_not_awaited()
