# Middleware package init
"""
Unitip Backend — Middleware Package
=====================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: correlation ID for logs and error envelopes
    2. Logging: one access line per request, tagged with the request ID
    3. GZip / CORS: provided by Starlette / FastAPI
"""
