"""Tests for request parameter validation (date window, validation error mapping)."""

from datetime import UTC, datetime

import pytest
from fastapi.exceptions import RequestValidationError

from src.mp_common.errors import InvalidParamError, ParamMissingError
from src.mp_gateway.validation.params import date_window, validation_error_to_app_error


class TestDateWindow:
    async def test_parses_iso_dates(self) -> None:
        window = await date_window(start="2020-08-01", end="2020-08-31T23:59:59Z")

        assert window.start == datetime(2020, 8, 1, tzinfo=UTC)
        assert window.end == datetime(2020, 8, 31, 23, 59, 59, tzinfo=UTC)

    async def test_offsets_are_normalized_to_utc(self) -> None:
        window = await date_window(start="2020-08-01T02:00:00+02:00", end="2020-08-02")

        assert window.start == datetime(2020, 8, 1, tzinfo=UTC)

    async def test_equal_bounds_are_accepted(self) -> None:
        window = await date_window(start="2020-08-01", end="2020-08-01")

        assert window.start == window.end

    @pytest.mark.parametrize("start,end", [(None, "2020-08-01"), ("2020-08-01", None), ("", "")])
    async def test_missing_bound(self, start: str | None, end: str | None) -> None:
        with pytest.raises(ParamMissingError) as exc_info:
            await date_window(start=start, end=end)
        assert exc_info.value.message == "Start and end dates are required"

    async def test_unparsable_date(self) -> None:
        with pytest.raises(InvalidParamError) as exc_info:
            await date_window(start="yesterday", end="2020-08-01")
        assert exc_info.value.detail == "Start and end dates should be valid ISO string dates"

    @pytest.mark.parametrize(
        "start", ["0001-01-01T00:00:00+01:00", "9999-12-31T23:59:59-01:00"]
    )
    async def test_dates_outside_utc_range_are_invalid(self, start: str) -> None:
        with pytest.raises(InvalidParamError) as exc_info:
            await date_window(start=start, end="2020-08-01")
        assert exc_info.value.detail == "Start and end dates should be valid ISO string dates"

    async def test_start_after_end(self) -> None:
        with pytest.raises(InvalidParamError) as exc_info:
            await date_window(start="2020-09-01", end="2020-08-01")
        assert exc_info.value.detail == "Start date should be before end date"


class TestValidationErrorMapping:
    def test_missing_field_maps_to_param_missing(self) -> None:
        exc = RequestValidationError(
            [{"type": "missing", "loc": ("body", "amount_to_deposit"), "msg": "Field required"}]
        )

        err = validation_error_to_app_error(exc)

        assert isinstance(err, ParamMissingError)
        assert err.message == "amount_to_deposit is missing"

    def test_bad_value_maps_to_invalid_param(self) -> None:
        exc = RequestValidationError(
            [
                {
                    "type": "int_parsing",
                    "loc": ("path", "job_id"),
                    "msg": "Input should be a valid integer",
                }
            ]
        )

        err = validation_error_to_app_error(exc)

        assert isinstance(err, InvalidParamError)
        assert err.detail == "job_id: Input should be a valid integer"

    def test_empty_error_list(self) -> None:
        err = validation_error_to_app_error(RequestValidationError([]))

        assert isinstance(err, InvalidParamError)
