"""Firm service — creating, reading and retiring firm listings."""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from suby.core.exceptions import ConflictError, ForbiddenError, NotFoundError
from suby.core.pagination import PaginationParams
from suby.domain.firm import Firm
from suby.domain.vendor import Vendor
from suby.repositories.firm import FirmRepository
from suby.repositories.vendor import VendorRepository
from suby.schemas.firm import FirmCreate
from suby.services.storage import ImageStorage

logger = logging.getLogger(__name__)


class FirmService:
    def __init__(self, session: AsyncSession, client_id: str, storage: ImageStorage | None = None):
        self._repo = FirmRepository(session, client_id)
        self._vendors = VendorRepository(session, client_id)
        self._storage = storage or ImageStorage()

    async def add_firm(
        self,
        vendor: Vendor,
        data: FirmCreate,
        image: tuple[str, bytes] | None = None,
    ) -> Firm:
        """Persist a firm for *vendor*, storing the optional ``(filename, content)`` image."""
        if await self._repo.get_by_name(data.firm_name):
            raise ConflictError(f"Firm '{data.firm_name}' already exists")

        stored_image = await self._storage.save(*image) if image else None
        try:
            firm = await self._repo.create(
                firm_name=data.firm_name,
                area=data.area,
                category=[c.value for c in data.category],
                region=[r.value for r in data.region],
                offer=data.offer,
                image=stored_image,
                vendor_id=vendor.id,
            )
        except Exception:
            await self._storage.delete(stored_image)
            raise

        # Second write: bring the vendor's firm list up to date
        await self._vendors.refresh(vendor, "firms")
        logger.info("Firm %s added by vendor %s", firm.id, vendor.id)
        return firm

    async def list_firms(
        self, pagination: PaginationParams, vendor_id: str | None = None
    ) -> tuple[list[Firm], int]:
        return await self._repo.list(
            offset=pagination.offset,
            limit=pagination.limit,
            order_by=pagination.sort,
            order=pagination.order,
            filters={"vendor_id": vendor_id},
        )

    async def get_firm(self, firm_id: str) -> Firm:
        firm = await self._repo.get_by_id(firm_id)
        if not firm:
            raise NotFoundError("Firm", firm_id)
        return firm

    async def delete_firm(self, vendor: Vendor, firm_id: str) -> None:
        firm = await self.get_firm(firm_id)
        if firm.vendor_id != vendor.id:
            raise ForbiddenError("Only the owning vendor can delete this firm")

        await self._repo.soft_delete(firm_id)
        # The row must be durable before its image goes away
        await self._repo.commit()
        await self._storage.delete(firm.image)
        logger.info("Firm %s deleted by vendor %s", firm_id, vendor.id)
