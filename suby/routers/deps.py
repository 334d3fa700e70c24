"""Shared router dependencies: authenticated vendor resolution."""


from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from suby.core.config import settings
from suby.db.base import get_db
from suby.domain.vendor import Vendor
from suby.services.vendor import VendorService


def _bearer(authorization: str | None) -> str | None:
    if authorization and authorization.lower().startswith("bearer "):
        return authorization[7:].strip() or None
    return None


async def get_current_vendor(
    request: Request,
    token: str | None = Header(default=None, description="Vendor access token"),
    authorization: str | None = Header(default=None),
    session: AsyncSession = Depends(get_db),
) -> Vendor:
    """Resolve the vendor from the `token` header (or `Authorization: Bearer`)."""
    vendor = await VendorService(session, settings.default_client_id).authenticate(
        token or _bearer(authorization)
    )
    request.state.vendor_id = vendor.id
    return vendor
