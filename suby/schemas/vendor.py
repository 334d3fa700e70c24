"""Vendor Pydantic schemas (request DTOs and response models)."""


from datetime import datetime

from pydantic import Field

from suby.schemas.common import CamelModel
from suby.schemas.firm import FirmOut

_EMAIL_PATTERN = r"^\s*[^@\s]+@[^@\s]+\.[^@\s]+\s*$"

class VendorRegister(CamelModel):
    username: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=255, pattern=_EMAIL_PATTERN)
    password: str = Field(min_length=1, max_length=72)  # bcrypt ignores bytes past 72

class VendorLogin(CamelModel):
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)  # over-long input is truncated when checked

class VendorOut(CamelModel):
    id: str
    username: str
    email: str
    firms: list[FirmOut] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

class LoginOut(CamelModel):
    token: str
    vendor_id: str
    vendor: VendorOut
