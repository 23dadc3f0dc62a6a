"""
Unitip Backend — Pydantic Request/Response Schemas
====================================================

What:  The API contract. Request models validate incoming JSON; response
       models serialize results and feed the generated OpenAPI document.

    common.py   error envelope, health
    account.py  profile read/update
    offer.py    offer creation and listing
    job.py      job application
"""
