"""
Unitip Backend — Job Application Endpoint Tests
=================================================

What:  POST /api/v1/jobs/{job_id}/apply through the full app.
"""

import uuid

import pytest
from sqlalchemy import select

from unitip.models.job import JobApplication


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def apply_url(job_id) -> str:
    return f"/api/v1/jobs/{job_id}/apply"


class TestApplyToJob:

    @pytest.mark.asyncio
    async def test_freelancer_applies(self, test_client, make_user, make_job, db_session):
        customer, _ = await make_user(name="Sari", role="customer")
        freelancer, token = await make_user(name="Raka")
        job = await make_job(customer)

        response = await test_client.post(
            apply_url(job.id), json={"price": 25000.0}, headers=bearer(token)
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True

        application = (await db_session.execute(select(JobApplication))).scalar_one()
        assert str(application.id) == body["id"]
        assert application.job == job.id
        assert application.freelancer == freelancer.id
        assert application.price == 25000.0
        assert application.status == "pending"

    @pytest.mark.asyncio
    async def test_customer_is_forbidden(self, test_client, make_user, make_job):
        customer, token = await make_user(role="customer")
        job = await make_job(customer)

        response = await test_client.post(
            apply_url(job.id), json={"price": 25000.0}, headers=bearer(token)
        )

        assert response.status_code == 403
        assert response.json()["errors"] == [
            {"message": "Anda tidak memiliki akses untuk melamar pekerjaan!"}
        ]

    @pytest.mark.asyncio
    async def test_unknown_job_is_server_error(self, test_client, make_user):
        _, token = await make_user()

        response = await test_client.post(
            apply_url(uuid.uuid4()), json={"price": 25000.0}, headers=bearer(token)
        )

        assert response.status_code == 500
        assert response.json()["errors"] == [{"message": "Internal Server Error"}]

    @pytest.mark.asyncio
    async def test_negative_price(self, test_client, make_user, make_job):
        customer, _ = await make_user(role="customer")
        job = await make_job(customer)

        response = await test_client.post(apply_url(job.id), json={"price": -100.0})

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"path": "price", "message": "Biaya tidak boleh negatif!"}
        ]

    @pytest.mark.asyncio
    async def test_malformed_job_id(self, test_client, make_user):
        _, token = await make_user()

        response = await test_client.post(
            apply_url("not-a-uuid"), json={"price": 25000.0}, headers=bearer(token)
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["path"] == "job_id"
