"""
Unitip Backend — ORM Models
=============================

Importing this package registers every table with `Base.metadata`, which
Alembic and the test suite use to build the schema.
"""

from unitip.models.user import User, UserSession
from unitip.models.offer import SingleOffer, MultiOffer
from unitip.models.job import Job, JobApplication

__all__ = [
    "User",
    "UserSession",
    "SingleOffer",
    "MultiOffer",
    "Job",
    "JobApplication",
]
