"""
Unitip Backend — Request Payload Validation
=============================================

What:  Validates a raw JSON payload against a pydantic request model and
       returns a tagged result: the typed value, or the ordered list of
       `{"path", "message"}` errors returned in a 400 body.
Why:   Handlers that must validate *before* authenticating cannot let
       FastAPI parse the body (dependencies resolve first), so they read the
       JSON themselves and call `validate_payload`.

Messages:
    Request models may declare `error_messages`, keyed by `"<field>.<type>"`
    (pydantic error type, e.g. "price.greater_than_equal") or by `"<field>"`
    for every error on that field. Unmapped errors keep pydantic's message.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from starlette.requests import Request

from unitip.exceptions import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

BODY_PATH = "body"


@dataclass
class ValidationResult(Generic[ModelT]):
    """Either `value` is set, or `errors` is non-empty."""

    value: Optional[ModelT] = None
    errors: List[Dict[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def unwrap(self) -> ModelT:
        """Return the value, or raise ValidationError carrying the errors."""
        if not self.ok:
            raise ValidationError(errors=self.errors)
        return self.value


def _message_for(model: Type[BaseModel], path: str, error: Dict[str, Any]) -> str:
    messages: Dict[str, str] = getattr(model, "error_messages", {})
    return (
        messages.get(f"{path}.{error['type']}")
        or messages.get(path)
        or error["msg"]
    )


def collect_errors(model: Type[BaseModel], exc: PydanticValidationError) -> List[Dict[str, str]]:
    """
    Flatten a pydantic error into `{"path", "message"}` pairs.

    One entry per field: the first error reported for a field wins. Order
    follows the model's field order.
    """
    errors: List[Dict[str, str]] = []
    seen = set()
    for error in exc.errors():
        path = str(error["loc"][0]) if error["loc"] else BODY_PATH
        if path in seen:
            continue
        seen.add(path)
        errors.append({"path": path, "message": _message_for(model, path, error)})
    return errors


def validate_payload(model: Type[ModelT], payload: Any) -> ValidationResult[ModelT]:
    """
    Validate `payload` (decoded JSON) against `model`.

    Example:
        result = validate_payload(ProfileUpdateRequest, await request.json())
        if not result.ok:
            raise ValidationError(errors=result.errors)
    """
    if not isinstance(payload, dict):
        return ValidationResult(
            errors=[{"path": BODY_PATH, "message": "Request body must be a JSON object"}]
        )
    try:
        value = model.model_validate(payload)
    except PydanticValidationError as exc:
        return ValidationResult(errors=collect_errors(model, exc))
    return ValidationResult(value=value)


async def read_json_body(request: Request) -> Any:
    """
    Decode the request body as JSON.

    An empty or malformed body decodes to None, which `validate_payload`
    reports as a `body` error rather than a server error.
    """
    try:
        return await request.json()
    except ValueError:
        return None
