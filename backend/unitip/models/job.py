"""
Unitip Backend — Job Models
=============================

What:  `jobs` posted by customers and the `job_applications` freelancers
       submit against them (POST /api/v1/jobs/{job_id}/apply).

Jobs themselves are created elsewhere; this service only reads them.
"""

import uuid
from typing import Optional

from sqlalchemy import Float, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from unitip.database import Base
from unitip.models.mixins import IdentifiedMixin, TimestampMixin


JOB_APPLICATION_STATUS_PENDING = "pending"


class Job(IdentifiedMixin, TimestampMixin, Base):
    __tablename__ = "jobs"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="open")
    customer: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )


class JobApplication(IdentifiedMixin, TimestampMixin, Base):
    __tablename__ = "job_applications"

    job: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("jobs.id", ondelete="CASCADE"),
        nullable=False,
    )
    freelancer: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    price: Mapped[float] = mapped_column(Float, nullable=False)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default=JOB_APPLICATION_STATUS_PENDING
    )
