"""
Unitip Backend — Offer Schemas
================================

What:  POST /api/v1/offers request/response and GET /api/v1/offers listing.

Offer types:
    "jasa-titip"    single offer, stored in single_offers
    "antar-jemput"  multi offer, stored in multi_offers

Listing types (query parameter):
    "single" → single_offers only, "multi" → multi_offers only,
    "all" → both, merged by creation time
"""

from datetime import datetime, timezone
from typing import ClassVar, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

LISTING_TYPES = ("all", "single", "multi")


def parse_timestamp(value: str) -> datetime:
    """ISO-8601 string → aware datetime (naive input is taken as UTC)."""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


# ══════════════════════════════════════════════════════════════════════════
# Creation
# ══════════════════════════════════════════════════════════════════════════


class OfferCreateRequest(BaseModel):
    """
    POST /api/v1/offers body.

    `delivery_area` becomes `location` for "antar-jemput" offers;
    `pickup_area` is only stored for "jasa-titip" offers.
    """
    model_config = ConfigDict(strict=True)

    title: str = Field(min_length=1, description="Title of the offer")
    description: str = Field(min_length=1, description="Detailed description of the offer")
    type: Literal["antar-jemput", "jasa-titip"] = Field(description="Type of the offer")
    available_until: str = Field(
        min_length=1,
        description="Until when the offer is available (ISO 8601)",
    )
    price: float = Field(ge=0, allow_inf_nan=False, description="Price for the offer")
    pickup_area: Optional[str] = Field(default=None, description="Pickup area of the offer")
    delivery_area: Optional[str] = Field(default=None, description="Delivery area of the offer")

    error_messages: ClassVar[Dict[str, str]] = {
        "title.missing": "Judul tidak boleh kosong!",
        "title.string_too_short": "Judul tidak boleh kosong!",
        "description.missing": "Deskripsi tidak boleh kosong!",
        "description.string_too_short": "Deskripsi tidak boleh kosong!",
        "available_until.missing": "Waktu untuk penawaran tidak boleh kosong!",
        "available_until.string_too_short": "Waktu untuk penawaran tidak boleh kosong!",
        "available_until.value_error": "Format waktu penawaran tidak valid!",
        "price.missing": "Biaya tidak boleh kosong!",
        "price.greater_than_equal": "Biaya tidak boleh negatif!",
    }

    @field_validator("available_until")
    @classmethod
    def validate_available_until(cls, v: str) -> str:
        try:
            parse_timestamp(v)
        except ValueError:
            raise ValueError(f"'{v}' is not an ISO 8601 date-time")
        return v

    @property
    def available_until_at(self) -> datetime:
        return parse_timestamp(self.available_until)


class OfferCreateResponse(BaseModel):
    success: bool
    id: str


# ══════════════════════════════════════════════════════════════════════════
# Listing
# ══════════════════════════════════════════════════════════════════════════


class OfferFreelancer(BaseModel):
    name: str


class OfferListItem(BaseModel):
    """One row of the merged listing; multi offers report `pickup_area` as ""."""
    id: str
    title: str
    description: str
    type: str
    pickup_area: str
    delivery_area: str
    available_until: datetime
    price: float
    created_at: str
    updated_at: str
    freelancer: OfferFreelancer


class PageInfo(BaseModel):
    count: int = Field(description="Number of offers on this page")
    page: int = Field(description="Current page, 1-based")
    total_pages: int = Field(description="ceil(total offers / limit)")


class OfferListResponse(BaseModel):
    offers: List[OfferListItem]
    page_info: PageInfo
