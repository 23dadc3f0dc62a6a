"""
Unitip Backend — Response Envelope
====================================

What:  Builds the uniform JSON error envelope for every non-2xx response.
How:   Static constructors returning Starlette `JSONResponse` objects; the
       global exception handlers in main.py are the only callers.

Shapes:
    400 → {"errors": [{"path": "title", "message": "..."}], "request_id": "..."}
    401 → {"errors": [{"message": "Unauthorized"}], "request_id": "..."}
    403 → {"errors": [{"message": "<reason>"}], "request_id": "..."}
    500 → {"errors": [{"message": "Internal Server Error"}], "request_id": "..."}

Successful responses are the route's response model serialized by FastAPI
with HTTP 200.
"""

from typing import Dict, List

from starlette.responses import JSONResponse

from unitip.middleware.request_id import request_id_var


class APIResponse:
    """Factory for error envelopes; each method maps to one status code."""

    @staticmethod
    def _respond(status_code: int, errors: List[Dict[str, str]]) -> JSONResponse:
        rid = request_id_var.get("")
        # The catch-all 500 is rendered outside RequestIDMiddleware
        return JSONResponse(
            status_code=status_code,
            content={"errors": errors, "request_id": rid},
            headers={"X-Request-ID": rid} if rid else None,
        )

    @staticmethod
    def respond_with_bad_request(errors: List[Dict[str, str]]) -> JSONResponse:
        return APIResponse._respond(400, errors)

    @staticmethod
    def respond_with_unauthorized(message: str = "Unauthorized") -> JSONResponse:
        return APIResponse._respond(401, [{"message": message}])

    @staticmethod
    def respond_with_forbidden(message: str = "Forbidden") -> JSONResponse:
        return APIResponse._respond(403, [{"message": message}])

    @staticmethod
    def respond_with_server_error(message: str = "Internal Server Error") -> JSONResponse:
        return APIResponse._respond(500, [{"message": message}])
