"""Firm Pydantic schemas (request DTOs and response models)."""


from datetime import datetime

from pydantic import Field, field_validator

from suby.domain.firm import FirmCategory, FirmRegion
from suby.schemas.common import CamelModel


def _unique(values: list) -> list:
    """Collapse duplicates, keeping first-seen order."""
    return list(dict.fromkeys(values))


class FirmCreate(CamelModel):
    firm_name: str = Field(min_length=1, max_length=255)
    area: str = Field(min_length=1, max_length=255)
    category: list[FirmCategory] = Field(default_factory=list)
    region: list[FirmRegion] = Field(default_factory=list)
    offer: str | None = None

    @field_validator("firm_name", "area")
    @classmethod
    def _strip(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("offer")
    @classmethod
    def _blank_offer(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()

    @field_validator("category", "region")
    @classmethod
    def _dedupe(cls, values: list) -> list:
        return _unique(values)


class FirmOut(CamelModel):
    id: str
    firm_name: str
    area: str
    category: list[str]
    region: list[str]
    offer: str | None = None
    image: str | None = None
    vendor_id: str
    created_at: datetime
    updated_at: datetime
