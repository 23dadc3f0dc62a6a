"""
Unitip Backend — Offer Service
================================

What:  Creates offers and lists them across both offer tables.
Who:   Called by POST and GET /api/v1/offers.

Creation:
    customer role         → ForbiddenError (403), nothing inserted
    type "jasa-titip"     → single_offers, offer_status="available", expired_at=NULL
    type "antar-jemput"   → multi_offers, status="available", location=delivery_area

Listing (type = all | single | multi):
    ┌────────────────────┐
    │ single_offers ⋈ users │──┐
    └────────────────────┘  │  UNION ALL   ┌────────────────────────────┐
    ┌────────────────────┐  ├─────────────▶│ ORDER BY created_at DESC    │
    │ multi_offers ⋈ users  │──┘              │ OFFSET (page-1)*limit LIMIT │
    └────────────────────┘                 └────────────────────────────┘

    Both tables are projected onto the same columns (multi offers report
    type="antar-jemput", location AS delivery_area, pickup_area=''), so one
    ordered, paginated query serves every listing type. The database does
    the merge; neither table is ever loaded in full.

    total_pages = ceil((count(single_offers) + count(multi_offers)) / limit),
    counting only the tables selected by `type`.
"""

import logging
import math
from datetime import datetime
from typing import List, Optional

from sqlalchemy import Select, String, func, literal, select, union_all
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from unitip.exceptions import DatabaseError, ForbiddenError
from unitip.models.mixins import utcnow
from unitip.models.offer import (
    OFFER_STATUS_AVAILABLE,
    MultiOffer,
    OfferType,
    SingleOffer,
)
from unitip.models.user import User
from unitip.schemas.offer import (
    OfferCreateRequest,
    OfferCreateResponse,
    OfferFreelancer,
    OfferListItem,
    OfferListResponse,
    PageInfo,
)
from unitip.security import AuthorizationContext

logger = logging.getLogger(__name__)

CUSTOMER_FORBIDDEN_MESSAGE = "Anda tidak memiliki akses untuk membuat offer!"


def _isoformat(value: Optional[datetime]) -> str:
    return value.isoformat() if value else ""


class OfferService:
    """Business logic for offer creation and the merged offer listing."""

    # ══════════════════════════════════════════════════════════════════════
    # Creation
    # ══════════════════════════════════════════════════════════════════════

    async def create_offer(
        self,
        db: AsyncSession,
        payload: OfferCreateRequest,
        authorization: AuthorizationContext,
    ) -> OfferCreateResponse:
        """
        Insert a validated offer owned by the authenticated freelancer.

        Raises:
            ForbiddenError: the session role is "customer"
            DatabaseError: the insert failed or produced no id
        """
        if authorization.is_customer:
            logger.info("Customer %s tried to create an offer", authorization.user_id)
            raise ForbiddenError(message=CUSTOMER_FORBIDDEN_MESSAGE)

        if payload.type == OfferType.SINGLE:
            offer = SingleOffer(
                title=payload.title,
                description=payload.description,
                type=payload.type,
                price=payload.price,
                pickup_area=payload.pickup_area,
                delivery_area=payload.delivery_area,
                available_until=payload.available_until_at,
                freelancer=authorization.user_id,
                offer_status=OFFER_STATUS_AVAILABLE,
                expired_at=None,
            )
        else:
            offer = MultiOffer(
                title=payload.title,
                description=payload.description,
                price=payload.price,
                location=payload.delivery_area,
                available_until=payload.available_until_at,
                freelancer=authorization.user_id,
                status=OFFER_STATUS_AVAILABLE,
            )

        try:
            db.add(offer)
            await db.flush()  # Assigns the id without committing
        except SQLAlchemyError as e:
            logger.error("Database error creating %s offer: %s", payload.type, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the offer.",
                context={"type": payload.type, "error_type": type(e).__name__},
            )

        if offer.id is None:
            raise DatabaseError(
                message="Could not create the offer.",
                context={"type": payload.type, "reason": "insert returned no id"},
            )

        logger.info(
            "Offer %s created (type=%s, freelancer=%s)",
            offer.id,
            payload.type,
            authorization.user_id,
        )
        return OfferCreateResponse(success=True, id=str(offer.id))

    # ══════════════════════════════════════════════════════════════════════
    # Listing
    # ══════════════════════════════════════════════════════════════════════

    @staticmethod
    def _single_offer_rows() -> Select:
        return (
            select(
                SingleOffer.id.label("id"),
                SingleOffer.title.label("title"),
                SingleOffer.description.label("description"),
                SingleOffer.type.label("type"),
                SingleOffer.available_until.label("available_until"),
                SingleOffer.price.label("price"),
                SingleOffer.delivery_area.label("delivery_area"),
                SingleOffer.pickup_area.label("pickup_area"),
                User.name.label("freelancer_name"),
                SingleOffer.created_at.label("created_at"),
                SingleOffer.updated_at.label("updated_at"),
            )
            .join(User, User.id == SingleOffer.freelancer)
        )

    @staticmethod
    def _multi_offer_rows() -> Select:
        # Column order must match _single_offer_rows for the UNION
        return (
            select(
                MultiOffer.id.label("id"),
                MultiOffer.title.label("title"),
                MultiOffer.description.label("description"),
                literal(OfferType.MULTI, type_=String).label("type"),
                MultiOffer.available_until.label("available_until"),
                MultiOffer.price.label("price"),
                MultiOffer.location.label("delivery_area"),
                literal("", type_=String).label("pickup_area"),
                User.name.label("freelancer_name"),
                MultiOffer.created_at.label("created_at"),
                MultiOffer.updated_at.label("updated_at"),
            )
            .join(User, User.id == MultiOffer.freelancer)
        )

    @staticmethod
    def _to_item(row) -> OfferListItem:
        """Map a result row, filling the defaults for missing values."""
        return OfferListItem(
            id=str(row.id),
            title=row.title or "",
            description=row.description or "",
            type=row.type or OfferType.SINGLE,
            pickup_area=row.pickup_area or "",
            delivery_area=row.delivery_area or "",
            available_until=row.available_until or utcnow(),
            price=float(row.price or 0),
            created_at=_isoformat(row.created_at),
            updated_at=_isoformat(row.updated_at),
            freelancer=OfferFreelancer(name=row.freelancer_name or ""),
        )

    async def list_offers(
        self,
        db: AsyncSession,
        offer_type: str = "all",
        page: int = 1,
        limit: int = 10,
    ) -> OfferListResponse:
        """
        One page of offers, newest first.

        Args:
            db: Async database session
            offer_type: "all", "single" or "multi" (validated by the route)
            page: 1-based page number
            limit: Page size (≥ 1)

        Returns:
            OfferListResponse with the page's offers and page_info

        Raises:
            DatabaseError: a query failed
        """
        sources: List[Select] = []
        tables = []
        if offer_type in ("single", "all"):
            sources.append(self._single_offer_rows())
            tables.append(SingleOffer)
        if offer_type in ("multi", "all"):
            sources.append(self._multi_offer_rows())
            tables.append(MultiOffer)

        rows_select = sources[0] if len(sources) == 1 else union_all(*sources)
        merged = rows_select.subquery("offers")
        query = (
            select(merged)
            .order_by(merged.c.created_at.desc(), merged.c.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )

        try:
            rows = (await db.execute(query)).all()

            total_count = 0
            for table in tables:
                count_result = await db.execute(select(func.count()).select_from(table))
                total_count += count_result.scalar() or 0
        except SQLAlchemyError as e:
            logger.error("Database error listing offers: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve offers. Please try again.",
                context={"type": offer_type, "error_type": type(e).__name__},
            )

        offers = [self._to_item(row) for row in rows]
        return OfferListResponse(
            offers=offers,
            page_info=PageInfo(
                count=len(offers),
                page=page,
                total_pages=math.ceil(total_count / limit),
            ),
        )


# ── Singleton Instance ────────────────────────────────────────────────────
offer_service = OfferService()
