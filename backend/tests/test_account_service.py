"""
Unitip Backend — Account Service Unit Tests
=============================================

What:  Error mapping of AccountService against a mock session.
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import NoResultFound, OperationalError

from unitip.exceptions import DatabaseError
from unitip.schemas.account import ProfileUpdateRequest
from unitip.security import AuthorizationContext
from unitip.services.account_service import AccountService


def _authorization() -> AuthorizationContext:
    return AuthorizationContext(user_id=uuid.uuid4(), token="token-abc", role="customer")


class TestAccountService:

    def setup_method(self):
        self.service = AccountService()

    @pytest.mark.asyncio
    async def test_get_profile_maps_row(self, mock_db_session):
        authorization = _authorization()
        row = MagicMock(
            id=authorization.user_id,
            email="sari@unitip.test",
            token="token-abc",
            role="customer",
            gender="female",
        )
        row.name = "Sari"
        result = MagicMock()
        result.one.return_value = row
        mock_db_session.execute.return_value = result

        profile = await self.service.get_profile(db=mock_db_session, authorization=authorization)

        assert profile.id == str(authorization.user_id)
        assert profile.name == "Sari"
        assert profile.role == "customer"

    @pytest.mark.asyncio
    async def test_get_profile_without_row_is_database_error(self, mock_db_session):
        result = MagicMock()
        result.one.side_effect = NoResultFound()
        mock_db_session.execute.return_value = result

        with pytest.raises(DatabaseError):
            await self.service.get_profile(db=mock_db_session, authorization=_authorization())

    @pytest.mark.asyncio
    async def test_update_without_row_is_database_error(self, mock_db_session):
        result = MagicMock()
        result.one.side_effect = NoResultFound()
        mock_db_session.execute.return_value = result

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.update_profile(
                db=mock_db_session,
                authorization=_authorization(),
                payload=ProfileUpdateRequest(name="Sari", gender=""),
            )

        assert "user_id" in exc_info.value.context

    @pytest.mark.asyncio
    async def test_update_query_failure_is_database_error(self, mock_db_session):
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("UPDATE", {}, Exception("timeout"))
        )

        with pytest.raises(DatabaseError):
            await self.service.update_profile(
                db=mock_db_session,
                authorization=_authorization(),
                payload=ProfileUpdateRequest(name="Sari", gender="female"),
            )
