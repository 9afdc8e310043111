"""Translate domain failures into ``{"success": false, "error": ...}`` responses.

Domain rejection messages are passed through verbatim: their wording is
part of the API contract.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from wholesale.api.schemas import ErrorResponse
from wholesale.shared.errors import IntegrityFailure, WholesaleError

logger = structlog.get_logger(__name__)

MESSAGE_SEPARATOR = ". "

# Field names whose readable label is not their capitalized snake_case form
FIELD_LABELS = {
    "sku": "SKU",
    "msrp": "MSRP",
    "brand_id": "Brand",
    "risk_free_return_premium": "Risk-free return premium percentage",
}


def field_label(field_name: str) -> str:
    return FIELD_LABELS.get(field_name) or field_name.replace("_", " ").strip().capitalize()


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def validation_message(messages) -> str:
    """Flatten Protean's ``{field: [messages]}`` into one sentence per violation.

    Messages that already name their field (``Weight must be greater than
    0``) are kept as they are. A bare ``is required`` becomes
    ``<Label> is required``; other terse messages are prefixed with the
    field name.
    """
    if not isinstance(messages, dict):
        return str(messages)

    parts = []
    for field_name, field_messages in messages.items():
        if isinstance(field_messages, str):
            field_messages = [field_messages]
        names = (field_name.replace("_", " ").strip().lower(), field_label(field_name).lower())
        for message in field_messages:
            message = str(message)
            if field_name.startswith("_") or any(name in message.lower() for name in names):
                parts.append(message)
            elif message == "is required":
                parts.append(f"{field_label(field_name)} is required")
            else:
                parts.append(f"{field_name}: {message}")
    return MESSAGE_SEPARATOR.join(parts)


def request_validation_message(errors) -> str:
    parts = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        field_name = ".".join(location)
        if error.get("type") == "missing" and location:
            parts.append(f"{field_label(location[-1])} is required")
        elif field_name:
            parts.append(f"{field_name}: {error.get('msg')}")
        else:
            parts.append(str(error.get("msg")))
    return MESSAGE_SEPARATOR.join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(WholesaleError)
    async def handle_wholesale_error(request: Request, exc: WholesaleError):
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(IntegrityFailure)
    async def handle_integrity_failure(request: Request, exc: IntegrityFailure):
        logger.error("Data integrity failure", path=request.url.path, error=exc.message)
        return error_response(exc.status_code, "Internal server error")

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        return error_response(400, validation_message(exc.messages))

    @app.exception_handler(ObjectNotFoundError)
    async def handle_object_not_found(request: Request, exc: ObjectNotFoundError):
        return error_response(404, "Not found")

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        return error_response(400, request_validation_message(exc.errors()))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error", path=request.url.path)
        return error_response(500, "Internal server error")
