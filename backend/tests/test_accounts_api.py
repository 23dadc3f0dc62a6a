"""
Unitip Backend — Account Endpoint Tests
=========================================

What:  GET and PATCH /api/v1/accounts/profile through the full app.
"""

import logging

import pytest
from sqlalchemy import select

from unitip.models.user import User

PROFILE_URL = "/api/v1/accounts/profile"


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


class TestGetProfile:

    @pytest.mark.asyncio
    async def test_returns_session_user(self, test_client, make_user):
        user, token = await make_user(
            name="Sari", role="customer", gender="female", email="sari@unitip.test"
        )

        response = await test_client.get(PROFILE_URL, headers=bearer(token))

        assert response.status_code == 200
        assert response.json() == {
            "id": str(user.id),
            "name": "Sari",
            "email": "sari@unitip.test",
            "token": token,
            "role": "customer",
            "gender": "female",
        }

    @pytest.mark.asyncio
    async def test_missing_token(self, test_client):
        response = await test_client.get(PROFILE_URL)

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_non_bearer_scheme(self, test_client, make_user):
        _, token = await make_user()

        response = await test_client.get(PROFILE_URL, headers={"Authorization": f"Basic {token}"})

        assert response.status_code == 401


class TestUpdateProfile:

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "Dewi Lestari", "gender": "female"},
            {"name": "D", "gender": ""},
            {"name": "Agus", "gender": "male"},
        ],
    )
    async def test_returns_submitted_values(self, test_client, make_user, db_session, payload):
        user, token = await make_user(name="Old Name", gender="male")

        response = await test_client.patch(PROFILE_URL, json=payload, headers=bearer(token))

        assert response.status_code == 200
        assert response.json() == {"id": str(user.id), **payload}

        stored = (
            await db_session.execute(select(User.name, User.gender).where(User.id == user.id))
        ).one()
        assert (stored.name, stored.gender) == (payload["name"], payload["gender"])

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["Sari", "", 7])
    async def test_invalid_gender(self, test_client, make_user, name):
        _, token = await make_user()

        response = await test_client.patch(
            PROFILE_URL, json={"name": name, "gender": "unknown"}, headers=bearer(token)
        )

        assert response.status_code == 400
        assert "gender" in [error["path"] for error in response.json()["errors"]]

    @pytest.mark.asyncio
    async def test_empty_name(self, test_client, make_user):
        _, token = await make_user()

        response = await test_client.patch(
            PROFILE_URL, json={"name": "", "gender": "male"}, headers=bearer(token)
        )

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"path": "name", "message": "Nama pengguna tidak boleh kosong!"}
        ]

    @pytest.mark.asyncio
    async def test_validation_runs_before_authentication(self, test_client):
        response = await test_client.patch(PROFILE_URL, json={"name": "Sari", "gender": "x"})

        assert response.status_code == 400

    @pytest.mark.asyncio
    @pytest.mark.parametrize("headers", [{}, {"Authorization": "Bearer expired-token"}])
    async def test_valid_payload_without_session(self, test_client, headers):
        response = await test_client.patch(
            PROFILE_URL, json={"name": "Sari", "gender": "female"}, headers=headers
        )

        assert response.status_code == 401
        assert response.json()["errors"] == [{"message": "Unauthorized"}]

    @pytest.mark.asyncio
    async def test_rejected_session_is_logged(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="unitip.routes.accounts")

        await test_client.patch(PROFILE_URL, json={"name": "Sari", "gender": "female"})

        assert "Profile update rejected" in caplog.text
