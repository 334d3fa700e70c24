"""Vendor repository — lookups by the normalized login identifiers."""


from sqlalchemy import or_

from suby.domain.vendor import Vendor
from suby.repositories.base import BaseRepository


class VendorRepository(BaseRepository[Vendor]):
    model = Vendor
    unsortable = frozenset({"password_hash"})

    async def get_by_email(self, email: str) -> Vendor | None:
        return await self._first(self._base_query().where(Vendor.email == email))

    async def find_by_email_or_username(self, email: str, username: str) -> Vendor | None:
        return await self._first(
            self._base_query().where(or_(Vendor.email == email, Vendor.username == username))
        )
