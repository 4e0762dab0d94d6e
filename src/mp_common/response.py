"""Unified API response shapes.

Successful endpoints return their payload directly, e.g. ``{"contracts": [...]}``
or ``{"message": "Payment successful"}``. Every error uses the envelope:
{
    "status": 400,
    "error": {
        "code": "BadRequest",
        "message": "Invalid request",
        "detail": "Insufficient balance"   // omitted when absent
    }
}
"""

from typing import Any

from pydantic import BaseModel

from src.mp_common.errors import AppError


class ErrorBody(BaseModel):
    code: str
    message: str
    detail: str | None = None


class ErrorResponse(BaseModel):
    status: int
    error: ErrorBody


class MessageResponse(BaseModel):
    message: str


def message_response(message: str) -> MessageResponse:
    return MessageResponse(message=message)


def error_response(exc: AppError) -> ErrorResponse:
    return ErrorResponse(
        status=exc.http_status,
        error=ErrorBody(code=exc.code, message=exc.message, detail=exc.detail),
    )


def error_content(exc: AppError) -> dict[str, Any]:
    """Serialized envelope, with ``detail`` dropped when it is not set."""
    return error_response(exc).model_dump(exclude_none=True)
