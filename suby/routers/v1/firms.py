"""Firm router — multipart firm creation plus public reads."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from suby.core.config import settings
from suby.core.pagination import PaginationParams
from suby.core.response import DataResponse, ListResponse, paginated
from suby.db.base import get_db
from suby.domain.firm import FirmCategory, FirmRegion
from suby.domain.vendor import Vendor
from suby.routers.deps import get_current_vendor
from suby.schemas.firm import FirmCreate, FirmOut
from suby.services.firm import FirmService

router = APIRouter(prefix="/firms", tags=["Firms"])


def _svc(session: AsyncSession) -> FirmService:
    return FirmService(session, settings.default_client_id)


@router.post("", response_model=DataResponse[FirmOut])
async def add_firm(
    firm_name: str = Form(..., alias="firmName"),
    area: str = Form(...),
    category: list[FirmCategory] = Form(default=[]),
    region: list[FirmRegion] = Form(default=[]),
    offer: Optional[str] = Form(default=None),
    image: Optional[UploadFile] = File(default=None),
    vendor: Vendor = Depends(get_current_vendor),
    session: AsyncSession = Depends(get_db),
):
    """Create a firm owned by the authenticated vendor.

    Send ``category`` / ``region`` once per tag. ``image`` is optional.
    """
    data = FirmCreate(firm_name=firm_name, area=area, category=category, region=region, offer=offer)

    upload = None
    if image is not None and image.filename:
        upload = (image.filename, await image.read())

    firm = await _svc(session).add_firm(vendor, data, upload)
    return {"message": "Firm added successfully", "data": FirmOut.model_validate(firm)}


@router.get("", response_model=ListResponse[FirmOut])
async def list_firms(
    vendor_id: Optional[str] = Query(default=None, alias="vendorId", description="Only this vendor's firms"),
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    items, total = await _svc(session).list_firms(pagination, vendor_id=vendor_id)
    return paginated([FirmOut.model_validate(f) for f in items], total, pagination)


@router.get("/{firm_id}", response_model=DataResponse[FirmOut])
async def get_firm(
    firm_id: str,
    session: AsyncSession = Depends(get_db),
):
    firm = await _svc(session).get_firm(firm_id)
    return {"data": FirmOut.model_validate(firm)}


@router.delete("/{firm_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_firm(
    firm_id: str,
    vendor: Vendor = Depends(get_current_vendor),
    session: AsyncSession = Depends(get_db),
):
    await _svc(session).delete_firm(vendor, firm_id)
