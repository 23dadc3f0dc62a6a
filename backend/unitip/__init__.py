"""
Unitip Backend — Application Package
======================================

What: REST API for the Unitip service marketplace (accounts, offers, jobs).
Who:  Imported by uvicorn (`unitip.main:app`), Alembic and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, auth, validation order
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← role rules, queries, pagination
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
