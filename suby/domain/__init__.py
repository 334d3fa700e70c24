"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  vendor.py  — vendor accounts (username, email, password hash, firms)
  firm.py    — firm listings and their category / region enumerations
  audit.py   — Immutable audit trail (never updated or deleted)
  mixins.py  — Shared TimestampMixin, TenantMixin
"""

from suby.domain.audit import AuditTrail
from suby.domain.firm import Firm, FirmCategory, FirmRegion
from suby.domain.vendor import Vendor

__all__ = [
    "AuditTrail",
    "Firm",
    "FirmCategory",
    "FirmRegion",
    "Vendor",
]
