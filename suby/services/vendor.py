"""Vendor service — registration, login and vendor lookups.

Rule: No FastAPI here. Routers pass validated schemas in, services raise
AppException subclasses for business rule violations.
"""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from suby.core.exceptions import BadRequestError, NotFoundError, UnauthorizedError
from suby.core.pagination import PaginationParams
from suby.core.security import create_access_token, decode_access_token, hash_password, verify_password
from suby.domain.vendor import Vendor
from suby.repositories.vendor import VendorRepository
from suby.schemas.vendor import VendorLogin, VendorRegister

logger = logging.getLogger(__name__)


def normalize(value: str) -> str:
    return value.strip().lower()


class VendorService:
    def __init__(self, session: AsyncSession, client_id: str):
        self._repo = VendorRepository(session, client_id)

    async def register(self, data: VendorRegister) -> Vendor:
        email = normalize(data.email)
        username = normalize(data.username)
        if not username:
            raise BadRequestError("Username must not be blank")

        if await self._repo.find_by_email_or_username(email, username):
            raise BadRequestError("Email or Username already exists")

        vendor = await self._repo.create(
            username=username,
            email=email,
            password_hash=hash_password(data.password),
        )
        await self._repo.refresh(vendor, "firms")
        logger.info("Vendor registered: %s (%s)", vendor.username, vendor.id)
        return vendor

    async def login(self, data: VendorLogin) -> tuple[Vendor, str]:
        """Return the vendor and a fresh access token."""
        vendor = await self._repo.get_by_email(normalize(data.email))
        if vendor is None or not verify_password(data.password, vendor.password_hash):
            raise BadRequestError("Invalid email or password")

        token = create_access_token(vendor.id)
        logger.info("Vendor logged in: %s", vendor.id)
        return vendor, token

    async def authenticate(self, token: str | None) -> Vendor:
        """Resolve an access token to its vendor."""
        if not token:
            raise UnauthorizedError("Token is required")
        vendor_id = decode_access_token(token)
        vendor = await self._repo.get_by_id(vendor_id)
        if vendor is None:
            raise NotFoundError("Vendor", message="Vendor not found")
        return vendor

    async def list_vendors(self, pagination: PaginationParams) -> tuple[list[Vendor], int]:
        items, total = await self._repo.list(
            offset=pagination.offset,
            limit=pagination.limit,
            order_by=pagination.sort,
            order=pagination.order,
        )
        if total == 0:
            raise NotFoundError("Vendor", message="No vendors found")
        return items, total

    async def get_vendor(self, vendor_id: str) -> Vendor:
        vendor = await self._repo.get_by_id(vendor_id)
        if not vendor:
            raise NotFoundError("Vendor", vendor_id)
        return vendor
