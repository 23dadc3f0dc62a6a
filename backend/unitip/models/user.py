"""
Unitip Backend — User & Session Models
========================================

What:  `users` (account profile) and `user_sessions` (issued bearer tokens).
Who:   Read by the session verifier on every authenticated request; `users`
       is updated by PATCH /api/v1/accounts/profile.

Both tables are populated by the authentication flow, which lives outside
this service: here sessions are looked up by token and never written.
"""

import uuid

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from unitip.database import Base
from unitip.models.mixins import IdentifiedMixin, TimestampMixin


class Role:
    """Session role values. Anything other than CUSTOMER may publish offers."""

    CUSTOMER = "customer"
    FREELANCER = "freelancer"


class User(IdentifiedMixin, TimestampMixin, Base):
    """A marketplace account. Only `name` and `gender` are mutable here."""

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    # "male", "female" or "" (not specified)
    gender: Mapped[str] = mapped_column(String(16), nullable=False, default="")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"


class UserSession(IdentifiedMixin, TimestampMixin, Base):
    """
    An active login: opaque token → user + role.

    The role is stored per session, so the same account can act as a
    customer in one session and as a freelancer in another.
    """

    __tablename__ = "user_sessions"

    token: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    user: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    role: Mapped[str] = mapped_column(String(32), nullable=False, default=Role.CUSTOMER)

    def __repr__(self) -> str:
        return f"<UserSession(user={self.user}, role='{self.role}')>"
