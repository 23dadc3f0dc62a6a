"""
Unitip Backend — Bearer Token Verification
============================================

What:  Resolves `Authorization: Bearer <token>` to the session's user and role.
How:   FastAPI's `HTTPBearer(auto_error=False)` extracts the token (and
       publishes the bearer security scheme in the OpenAPI document); the
       token is looked up in `user_sessions` joined to `users`.
Who:   GET handlers depend on `require_authorization`; PATCH/POST handlers
       call `verify_bearer_token` themselves after validating the body.

Outcome:
    match    → AuthorizationContext(user_id, token, role)
    no match → None (callers respond 401)
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from unitip.database import get_db_session
from unitip.exceptions import UnauthorizedError
from unitip.models.user import Role, User, UserSession

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(
    auto_error=False,
    description="Session token issued at login",
)


@dataclass(frozen=True)
class AuthorizationContext:
    user_id: uuid.UUID
    token: str
    role: str

    @property
    def is_customer(self) -> bool:
        return self.role == Role.CUSTOMER


async def verify_bearer_token(
    db: AsyncSession,
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[AuthorizationContext]:
    """
    Look up the session for a bearer token.

    Args:
        db: Async database session
        credentials: Parsed Authorization header, or None when absent or
                     not a Bearer scheme

    Returns:
        AuthorizationContext, or None when there is no matching session.
    """
    if credentials is None or not credentials.credentials:
        return None

    result = await db.execute(
        select(
            UserSession.user,
            UserSession.token,
            UserSession.role,
            User.name,
            User.email,
            User.gender,
        )
        .join(User, User.id == UserSession.user)
        .where(UserSession.token == credentials.credentials)
    )
    row = result.first()
    if row is None:
        logger.info("Bearer token matched no active session")
        return None

    return AuthorizationContext(user_id=row.user, token=row.token, role=row.role)


async def require_authorization(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
    db: AsyncSession = Depends(get_db_session),
) -> AuthorizationContext:
    """
    Dependency for endpoints that authenticate before anything else.

    Raises:
        UnauthorizedError: no valid session (→ 401)
    """
    authorization = await verify_bearer_token(db, credentials)
    if authorization is None:
        raise UnauthorizedError()
    return authorization
