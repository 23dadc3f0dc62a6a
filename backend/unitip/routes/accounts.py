"""
Unitip Backend — Account Route Handlers
=========================================

What:  GET and PATCH /api/v1/accounts/profile.
How:   GET authenticates through the `require_authorization` dependency;
       PATCH validates the body before checking the bearer token.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, Security
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from unitip.database import get_db_session
from unitip.exceptions import UnauthorizedError
from unitip.routes import API_V1_PREFIX
from unitip.schemas.account import (
    ProfileResponse,
    ProfileUpdateRequest,
    ProfileUpdateResponse,
)
from unitip.schemas.common import BAD_REQUEST, SERVER_ERROR, UNAUTHORIZED
from unitip.security import (
    AuthorizationContext,
    bearer_scheme,
    require_authorization,
    verify_bearer_token,
)
from unitip.services.account_service import account_service
from unitip.validation import read_json_body, validate_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{API_V1_PREFIX}/accounts", tags=["Accounts"])


@router.get(
    "/profile",
    response_model=ProfileResponse,
    responses={**UNAUTHORIZED, **SERVER_ERROR},
    summary="Get the current user's profile",
)
async def get_profile(
    authorization: AuthorizationContext = Depends(require_authorization),
    db: AsyncSession = Depends(get_db_session),
) -> ProfileResponse:
    return await account_service.get_profile(db=db, authorization=authorization)


@router.patch(
    "/profile",
    response_model=ProfileUpdateResponse,
    responses={**BAD_REQUEST, **UNAUTHORIZED, **SERVER_ERROR},
    summary="Update the current user's name and gender",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": ProfileUpdateRequest.model_json_schema()}
            },
        }
    },
)
async def update_profile(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
    db: AsyncSession = Depends(get_db_session),
) -> ProfileUpdateResponse:
    """
    Validate `{name, gender}`, then authenticate, then update.

    Error responses (handled by global exception handlers):
        HTTP 400: invalid payload (ValidationError)
        HTTP 401: no valid session (UnauthorizedError)
        HTTP 500: user row missing or update failed (DatabaseError)
    """
    payload = validate_payload(ProfileUpdateRequest, await read_json_body(request)).unwrap()

    authorization = await verify_bearer_token(db, credentials)
    if authorization is None:
        logger.info("Profile update rejected: no active session for bearer token")
        raise UnauthorizedError()

    return await account_service.update_profile(
        db=db,
        authorization=authorization,
        payload=payload,
    )
