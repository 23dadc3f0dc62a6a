"""
Unitip Backend — Job Service
==============================

What:  Records a freelancer's application (with asking price) to a job.
Who:   Called by POST /api/v1/jobs/{job_id}/apply.

Rules, in order:
    1. customer role → ForbiddenError (403)
    2. job must exist → otherwise DatabaseError (500, exactly-one semantics)
    3. insert job_applications row with status "pending"
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from unitip.exceptions import DatabaseError, ForbiddenError
from unitip.models.job import JOB_APPLICATION_STATUS_PENDING, Job, JobApplication
from unitip.schemas.job import JobApplyRequest, JobApplyResponse
from unitip.security import AuthorizationContext

logger = logging.getLogger(__name__)

CUSTOMER_FORBIDDEN_MESSAGE = "Anda tidak memiliki akses untuk melamar pekerjaan!"


class JobService:

    async def apply(
        self,
        db: AsyncSession,
        job_id: uuid.UUID,
        payload: JobApplyRequest,
        authorization: AuthorizationContext,
    ) -> JobApplyResponse:
        if authorization.is_customer:
            raise ForbiddenError(message=CUSTOMER_FORBIDDEN_MESSAGE)

        try:
            result = await db.execute(select(Job.id).where(Job.id == job_id))
            job = result.scalar_one()

            application = JobApplication(
                job=job,
                freelancer=authorization.user_id,
                price=payload.price,
                status=JOB_APPLICATION_STATUS_PENDING,
            )
            db.add(application)
            await db.flush()
        except NoResultFound:
            logger.error("Application to unknown job %s", job_id)
            raise DatabaseError(
                message="Could not apply to the job.",
                context={"job_id": str(job_id)},
            )
        except SQLAlchemyError as e:
            logger.error("Database error applying to job %s: %s", job_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not apply to the job.",
                context={"job_id": str(job_id), "error_type": type(e).__name__},
            )

        logger.info("User %s applied to job %s", authorization.user_id, job_id)
        return JobApplyResponse(success=True, id=str(application.id))


# ── Singleton Instance ────────────────────────────────────────────────────
job_service = JobService()
