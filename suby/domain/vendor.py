"""SQLAlchemy ORM model for Vendors (the accounts that own firms)."""

from __future__ import annotations

from typing import List

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from suby.db.base import Base
from suby.domain.mixins import TenantMixin, TimestampMixin, new_id


class Vendor(Base, TenantMixin, TimestampMixin):
    __tablename__ = "vendors"
    __table_args__ = (
        UniqueConstraint("client_id", "username", name="uq_vendors_client_username"),
        UniqueConstraint("client_id", "email", name="uq_vendors_client_email"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    # Both stored trimmed and lower-cased
    username: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    # Live firms only, oldest first. Writes go through Firm.vendor_id.
    firms: Mapped[List["Firm"]] = relationship(
        primaryjoin="and_(Vendor.id == Firm.vendor_id, Firm.deleted_at.is_(None))",
        order_by="Firm.created_at",
        lazy="selectin",
        viewonly=True,
    )

    def __repr__(self) -> str:
        return f"<Vendor {self.username!r}>"
