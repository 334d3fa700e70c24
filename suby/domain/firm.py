"""SQLAlchemy ORM model for Firms (restaurant listings owned by a vendor)."""

from __future__ import annotations

import enum
from typing import List, Optional

from sqlalchemy import ForeignKey, Index, JSON, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from suby.db.base import Base
from suby.domain.mixins import TenantMixin, TimestampMixin, new_id


class FirmCategory(str, enum.Enum):
    VEG = "veg"
    NON_VEG = "non-veg"


class FirmRegion(str, enum.Enum):
    SOUTH_INDIAN = "south-indian"
    NORTH_INDIAN = "north-indian"
    CHINESE = "chinese"
    BAKERY = "bakery"


class Firm(Base, TenantMixin, TimestampMixin):
    __tablename__ = "firms"
    __table_args__ = (
        # Names are unique among live firms; soft-deleted names free up
        Index(
            "uq_firms_client_live_name",
            "client_id",
            "firm_name",
            unique=True,
            sqlite_where=text("deleted_at IS NULL"),
            postgresql_where=text("deleted_at IS NULL"),
        ),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    firm_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    area: Mapped[str] = mapped_column(String(255), nullable=False)

    # Tag sets stored as JSON arrays of enum values
    category: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    region: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    offer: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    vendor_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("vendors.id", ondelete="CASCADE"), nullable=False, index=True
    )

    def __repr__(self) -> str:
        return f"<Firm {self.firm_name!r}>"
