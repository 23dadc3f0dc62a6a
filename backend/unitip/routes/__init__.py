# Routes package init
"""
Unitip Backend — API Routes Package
=====================================

Route Inventory:
    - accounts.py:  GET   /api/v1/accounts/profile
                    PATCH /api/v1/accounts/profile
    - offers.py:    POST  /api/v1/offers
                    GET   /api/v1/offers
    - jobs.py:      POST  /api/v1/jobs/{job_id}/apply
    - health.py:    GET   /health

Ordering rule:
    GET handlers authenticate first (`require_authorization` dependency).
    PATCH/POST handlers read and validate the JSON body first, then verify
    the bearer token, so a bad payload is a 400 even without a session.
"""

API_V1_PREFIX = "/api/v1"
