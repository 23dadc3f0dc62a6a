"""
Unitip Backend — Account Service
==================================

What:  Reads and updates the profile of the authenticated user.
Who:   Called by GET/PATCH /api/v1/accounts/profile.

Both operations expect exactly one row: a session that vanished between
verification and the read, or a user row that no longer exists, is
reported as DatabaseError (500).
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from unitip.exceptions import DatabaseError
from unitip.models.user import User, UserSession
from unitip.schemas.account import (
    ProfileResponse,
    ProfileUpdateRequest,
    ProfileUpdateResponse,
)
from unitip.security import AuthorizationContext

logger = logging.getLogger(__name__)


class AccountService:
    """Profile operations for the session's own user."""

    async def get_profile(
        self,
        db: AsyncSession,
        authorization: AuthorizationContext,
    ) -> ProfileResponse:
        """
        Return the user behind the session together with its token and role.

        Raises:
            DatabaseError: no row for the token, or the query failed
        """
        try:
            result = await db.execute(
                select(
                    User.id,
                    User.name,
                    User.email,
                    UserSession.token,
                    UserSession.role,
                    User.gender,
                )
                .join(User, User.id == UserSession.user)
                .where(UserSession.token == authorization.token)
            )
            row = result.one()
        except NoResultFound:
            logger.error("Profile lookup found no session row for user %s", authorization.user_id)
            raise DatabaseError(
                message="Could not load the profile.",
                context={"user_id": str(authorization.user_id)},
            )
        except SQLAlchemyError as e:
            logger.error("Database error loading profile: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not load the profile.",
                context={"error_type": type(e).__name__},
            )

        return ProfileResponse(
            id=str(row.id),
            name=row.name,
            email=row.email,
            token=row.token,
            role=row.role,
            gender=row.gender,
        )

    async def update_profile(
        self,
        db: AsyncSession,
        authorization: AuthorizationContext,
        payload: ProfileUpdateRequest,
    ) -> ProfileUpdateResponse:
        """
        Set `name` and `gender` on the session's user.

        Returns the stored values, which equal the submitted ones.

        Raises:
            DatabaseError: the user row is missing, or the update failed
        """
        try:
            result = await db.execute(
                update(User)
                .where(User.id == authorization.user_id)
                .values(name=payload.name, gender=payload.gender)
                .returning(User.id, User.name, User.gender)
            )
            row = result.one()
        except NoResultFound:
            logger.error("Profile update matched no user %s", authorization.user_id)
            raise DatabaseError(
                message="Could not update the profile.",
                context={"user_id": str(authorization.user_id)},
            )
        except SQLAlchemyError as e:
            logger.error("Database error updating profile: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the profile.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Profile updated for user %s", row.id)
        return ProfileUpdateResponse(id=str(row.id), name=row.name, gender=row.gender)


# ── Singleton Instance ────────────────────────────────────────────────────
account_service = AccountService()
