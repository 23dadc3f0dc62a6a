"""
Unitip Backend — Offer Route Handlers
=======================================

What:  POST /api/v1/offers (create) and GET /api/v1/offers (list).
How:   POST validates the body, then authenticates, then delegates to
       OfferService (which applies the role rule). GET authenticates first,
       then checks the `type` parameter.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Security
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from unitip.config import settings
from unitip.database import get_db_session
from unitip.exceptions import UnauthorizedError, ValidationError
from unitip.routes import API_V1_PREFIX
from unitip.schemas.common import BAD_REQUEST, FORBIDDEN, SERVER_ERROR, UNAUTHORIZED
from unitip.schemas.offer import (
    LISTING_TYPES,
    OfferCreateRequest,
    OfferCreateResponse,
    OfferListResponse,
)
from unitip.security import (
    AuthorizationContext,
    bearer_scheme,
    require_authorization,
    verify_bearer_token,
)
from unitip.services.offer_service import offer_service
from unitip.validation import read_json_body, validate_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix=API_V1_PREFIX, tags=["Offers"])

# page and limit feed OFFSET/LIMIT binds; (page - 1) * limit stays within BIGINT
MAX_QUERY_INT = 2**31 - 1


@router.post(
    "/offers",
    response_model=OfferCreateResponse,
    responses={**BAD_REQUEST, **UNAUTHORIZED, **FORBIDDEN, **SERVER_ERROR},
    summary="Create a single (jasa-titip) or multi (antar-jemput) offer",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": OfferCreateRequest.model_json_schema()}
            },
        }
    },
)
async def create_offer(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
    db: AsyncSession = Depends(get_db_session),
) -> OfferCreateResponse:
    """
    Create an offer owned by the authenticated freelancer.

    Error responses (handled by global exception handlers):
        HTTP 400: invalid payload, checked before authentication
        HTTP 401: no valid session
        HTTP 403: the session role is "customer"
        HTTP 500: the insert failed
    """
    payload = validate_payload(OfferCreateRequest, await read_json_body(request)).unwrap()

    authorization = await verify_bearer_token(db, credentials)
    if authorization is None:
        logger.info("Offer creation rejected: no active session for bearer token")
        raise UnauthorizedError()

    return await offer_service.create_offer(
        db=db,
        payload=payload,
        authorization=authorization,
    )


@router.get(
    "/offers",
    response_model=OfferListResponse,
    responses={**BAD_REQUEST, **UNAUTHORIZED, **SERVER_ERROR},
    summary="List offers, newest first",
)
async def list_offers(
    offer_type: str = Query(
        default="all",
        alias="type",
        description="Which offers to list: all, single (jasa-titip) or multi (antar-jemput)",
    ),
    page: int = Query(
        default=1,
        le=MAX_QUERY_INT,
        description="1-based page number; values below 1 mean 1",
    ),
    limit: int = Query(
        default=settings.default_page_limit,
        ge=1,
        le=MAX_QUERY_INT,
        description="Offers per page",
    ),
    authorization: AuthorizationContext = Depends(require_authorization),
    db: AsyncSession = Depends(get_db_session),
) -> OfferListResponse:
    logger.info(
        "Received offer listing request: type=%s, page=%d, limit=%d",
        offer_type,
        page,
        limit,
    )

    if offer_type not in LISTING_TYPES:
        raise ValidationError.for_field("type", "Invalid type parameter")

    return await offer_service.list_offers(
        db=db,
        offer_type=offer_type,
        page=max(1, page),
        limit=limit,
    )
