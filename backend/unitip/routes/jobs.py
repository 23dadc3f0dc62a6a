"""
Unitip Backend — Job Route Handlers
=====================================

What:  POST /api/v1/jobs/{job_id}/apply: a freelancer applies with a price.
"""

import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Request, Security
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from unitip.database import get_db_session
from unitip.exceptions import UnauthorizedError
from unitip.routes import API_V1_PREFIX
from unitip.schemas.common import BAD_REQUEST, FORBIDDEN, SERVER_ERROR, UNAUTHORIZED
from unitip.schemas.job import JobApplyRequest, JobApplyResponse
from unitip.security import bearer_scheme, verify_bearer_token
from unitip.services.job_service import job_service
from unitip.validation import read_json_body, validate_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{API_V1_PREFIX}/jobs", tags=["Jobs"])


@router.post(
    "/{job_id}/apply",
    response_model=JobApplyResponse,
    responses={**BAD_REQUEST, **UNAUTHORIZED, **FORBIDDEN, **SERVER_ERROR},
    summary="Apply to a job",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": JobApplyRequest.model_json_schema()}
            },
        }
    },
)
async def apply_to_job(
    job_id: uuid.UUID,
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
    db: AsyncSession = Depends(get_db_session),
) -> JobApplyResponse:
    payload = validate_payload(JobApplyRequest, await read_json_body(request)).unwrap()

    authorization = await verify_bearer_token(db, credentials)
    if authorization is None:
        logger.info("Application to job %s rejected: no active session", job_id)
        raise UnauthorizedError()

    return await job_service.apply(
        db=db,
        job_id=job_id,
        payload=payload,
        authorization=authorization,
    )
