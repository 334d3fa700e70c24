"""Firm repository."""


from suby.domain.firm import Firm
from suby.repositories.base import BaseRepository


class FirmRepository(BaseRepository[Firm]):
    model = Firm

    async def get_by_name(self, firm_name: str) -> Firm | None:
        return await self._first(self._base_query().where(Firm.firm_name == firm_name))
