"""Request parameter validation.

Turns malformed input into the 400 envelopes (``ParamMissing`` /
``BadRequest: Invalid parameter``) before any service is invoked.
"""

from dataclasses import dataclass
from datetime import datetime

from fastapi import Query
from fastapi.exceptions import RequestValidationError

from src.mp_common.datetime_utils import as_utc
from src.mp_common.errors import AppError, InvalidParamError, ParamMissingError


@dataclass(frozen=True)
class DateWindow:
    """Exclusive time window: start < t < end."""
    start: datetime
    end: datetime


def _parse_iso(value: str) -> datetime | None:
    try:
        return as_utc(datetime.fromisoformat(value))
    except (ValueError, OverflowError):
        return None


async def date_window(
    start: str | None = Query(None, description="ISO-8601 start (exclusive)"),
    end: str | None = Query(None, description="ISO-8601 end (exclusive)"),
) -> DateWindow:
    """FastAPI dependency: parse and validate the ``start``/``end`` query pair."""
    if not start or not end:
        raise ParamMissingError("Start and end dates are required")

    start_dt = _parse_iso(start)
    end_dt = _parse_iso(end)
    if start_dt is None or end_dt is None:
        raise InvalidParamError("Start and end dates should be valid ISO string dates")

    if start_dt > end_dt:
        raise InvalidParamError("Start date should be before end date")
    return DateWindow(start=start_dt, end=end_dt)


def _field_name(loc: tuple) -> str:
    # loc looks like ("path", "job_id") or ("body", "amount_to_deposit")
    return str(loc[-1]) if loc else "request"


def validation_error_to_app_error(exc: RequestValidationError) -> AppError:
    """Map FastAPI's first validation error onto the envelope taxonomy."""
    errors = exc.errors()
    if not errors:
        return InvalidParamError("Malformed request")
    first = errors[0]
    field = _field_name(tuple(first.get("loc", ())))
    if first.get("type") == "missing":
        return ParamMissingError(f"{field} is missing")
    return InvalidParamError(f"{field}: {first.get('msg', 'invalid value')}")
