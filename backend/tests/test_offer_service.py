"""
Unitip Backend — Offer Service Unit Tests
===========================================

What:  Tests for OfferService.create_offer against a mock session.
How:   Inspects the ORM object handed to db.add; no real database.

What we test:
    ✅ Customers are refused before anything is added
    ✅ jasa-titip → SingleOffer with pickup/delivery areas
    ✅ antar-jemput → MultiOffer with delivery_area stored as location
    ✅ Flush failures and missing ids raise DatabaseError
"""

import uuid
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from unitip.exceptions import DatabaseError, ForbiddenError
from unitip.models.offer import MultiOffer, SingleOffer
from unitip.schemas.offer import OfferCreateRequest
from unitip.security import AuthorizationContext
from unitip.services.offer_service import OfferService


def _request(**overrides) -> OfferCreateRequest:
    fields = {
        "title": "Antar jemput kampus",
        "description": "Setiap pagi jam 7",
        "type": "antar-jemput",
        "available_until": "2026-12-31T17:00:00Z",
        "price": 12000.0,
        "pickup_area": "Halte Barat",
        "delivery_area": "Fakultas Hukum",
    }
    fields.update(overrides)
    return OfferCreateRequest.model_validate(fields)


def _authorization(role: str = "freelancer") -> AuthorizationContext:
    return AuthorizationContext(user_id=uuid.uuid4(), token="token-abc", role=role)


def _assign_id(obj):
    obj.id = uuid4()


class TestOfferServiceCreate:

    def setup_method(self):
        self.service = OfferService()

    @pytest.mark.asyncio
    async def test_customer_is_forbidden(self, mock_db_session):
        with pytest.raises(ForbiddenError) as exc_info:
            await self.service.create_offer(
                db=mock_db_session,
                payload=_request(type="jasa-titip"),
                authorization=_authorization(role="customer"),
            )

        assert exc_info.value.message == "Anda tidak memiliki akses untuk membuat offer!"
        mock_db_session.add.assert_not_called()
        mock_db_session.flush.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_single_offer_fields(self, mock_db_session):
        mock_db_session.add.side_effect = _assign_id
        authorization = _authorization()

        result = await self.service.create_offer(
            db=mock_db_session,
            payload=_request(type="jasa-titip"),
            authorization=authorization,
        )

        offer = mock_db_session.add.call_args.args[0]
        assert isinstance(offer, SingleOffer)
        assert offer.type == "jasa-titip"
        assert offer.pickup_area == "Halte Barat"
        assert offer.delivery_area == "Fakultas Hukum"
        assert offer.offer_status == "available"
        assert offer.expired_at is None
        assert offer.freelancer == authorization.user_id
        assert result.success is True
        assert result.id == str(offer.id)

    @pytest.mark.asyncio
    async def test_multi_offer_uses_delivery_area_as_location(self, mock_db_session):
        mock_db_session.add.side_effect = _assign_id

        await self.service.create_offer(
            db=mock_db_session,
            payload=_request(type="antar-jemput"),
            authorization=_authorization(),
        )

        offer = mock_db_session.add.call_args.args[0]
        assert isinstance(offer, MultiOffer)
        assert offer.location == "Fakultas Hukum"
        assert offer.status == "available"
        assert offer.price == 12000.0
        assert offer.available_until.year == 2026

    @pytest.mark.asyncio
    async def test_missing_id_raises_database_error(self, mock_db_session):
        with pytest.raises(DatabaseError):
            await self.service.create_offer(
                db=mock_db_session,
                payload=_request(),
                authorization=_authorization(),
            )

    @pytest.mark.asyncio
    async def test_flush_failure_raises_database_error(self, mock_db_session):
        mock_db_session.flush = AsyncMock(
            side_effect=OperationalError("INSERT", {}, Exception("connection lost"))
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create_offer(
                db=mock_db_session,
                payload=_request(),
                authorization=_authorization(),
            )

        assert exc_info.value.context["error_type"] == "OperationalError"
