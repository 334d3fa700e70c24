"""Vendor router — registration, login and vendor reads."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from suby.core.config import settings
from suby.core.pagination import PaginationParams
from suby.core.response import DataResponse, ListResponse, paginated
from suby.db.base import get_db
from suby.domain.vendor import Vendor
from suby.routers.deps import get_current_vendor
from suby.schemas.vendor import LoginOut, VendorLogin, VendorOut, VendorRegister
from suby.services.vendor import VendorService

router = APIRouter(prefix="/vendors", tags=["Vendors"])


def _svc(session: AsyncSession) -> VendorService:
    return VendorService(session, settings.default_client_id)


@router.post("/register", response_model=DataResponse[VendorOut], status_code=status.HTTP_201_CREATED)
async def register_vendor(
    body: VendorRegister,
    session: AsyncSession = Depends(get_db),
):
    vendor = await _svc(session).register(body)
    return {"message": "Vendor registered successfully", "data": VendorOut.model_validate(vendor)}


@router.post("/login", response_model=DataResponse[LoginOut])
async def login_vendor(
    body: VendorLogin,
    session: AsyncSession = Depends(get_db),
):
    """Exchange email + password for an access token."""
    vendor, token = await _svc(session).login(body)
    return {
        "message": "Vendor logged in successfully",
        "data": LoginOut(token=token, vendor_id=vendor.id, vendor=VendorOut.model_validate(vendor)),
    }


@router.get("", response_model=ListResponse[VendorOut])
async def list_vendors(
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """List all vendors with their firms (paginated)."""
    items, total = await _svc(session).list_vendors(pagination)
    return paginated([VendorOut.model_validate(v) for v in items], total, pagination)


@router.get("/me", response_model=DataResponse[VendorOut])
async def current_vendor(vendor: Vendor = Depends(get_current_vendor)):
    return {"data": VendorOut.model_validate(vendor)}


@router.get("/{vendor_id}", response_model=DataResponse[VendorOut])
async def get_vendor(
    vendor_id: str,
    session: AsyncSession = Depends(get_db),
):
    vendor = await _svc(session).get_vendor(vendor_id)
    return {"data": VendorOut.model_validate(vendor)}
