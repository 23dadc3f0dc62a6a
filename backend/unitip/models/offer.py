"""
Unitip Backend — Offer Models
===============================

What:  The two offer tables. An offer's type is fixed by the table it lives in.

    single_offers  ("jasa-titip", one-off errand)
        pickup_area + delivery_area, offer_status, expired_at
    multi_offers   ("antar-jemput", pickup/delivery service)
        a single `location` (returned as delivery_area), status

Both are created by POST /api/v1/offers and listed, merged, by
GET /api/v1/offers.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Float, ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from unitip.database import Base
from unitip.models.mixins import IdentifiedMixin, TimestampMixin


class OfferType:
    SINGLE = "jasa-titip"
    MULTI = "antar-jemput"


OFFER_STATUS_AVAILABLE = "available"


class SingleOffer(IdentifiedMixin, TimestampMixin, Base):
    __tablename__ = "single_offers"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String(32), nullable=False, default=OfferType.SINGLE)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    pickup_area: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    delivery_area: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    available_until: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    offer_status: Mapped[str] = mapped_column(
        String(32), nullable=False, default=OFFER_STATUS_AVAILABLE
    )
    expired_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True, default=None
    )
    freelancer: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    __table_args__ = (
        Index("idx_single_offers_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<SingleOffer(id={self.id}, status='{self.offer_status}')>"


class MultiOffer(IdentifiedMixin, TimestampMixin, Base):
    __tablename__ = "multi_offers"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    available_until: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default=OFFER_STATUS_AVAILABLE
    )
    freelancer: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    __table_args__ = (
        Index("idx_multi_offers_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<MultiOffer(id={self.id}, status='{self.status}')>"
