"""Tests for mp_common.errors and mp_common.response."""

from src.mp_common.errors import (
    AppError,
    ContractNotActiveError,
    DepositCapExceededError,
    InsufficientBalanceError,
    InvalidParamError,
    JobAlreadyPaidError,
    JobNotFoundError,
    MissingReferenceError,
    NotEligibleToPayError,
    ParamMissingError,
    ServerError,
    UnauthorizedError,
)
from src.mp_common.response import error_content, error_response, message_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code="ServerError", message="boom")
        assert err.code == "ServerError"
        assert err.message == "boom"
        assert err.http_status == 500
        assert err.detail is None

    def test_is_exception(self) -> None:
        assert isinstance(AppError(code="X", message="test"), Exception)


class TestSpecificErrors:
    def test_unauthorized(self) -> None:
        err = UnauthorizedError()
        assert (err.code, err.message, err.http_status) == ("Unauthorized", "Unauthorized", 401)

    def test_not_eligible_is_unauthorized(self) -> None:
        err = NotEligibleToPayError()
        assert isinstance(err, UnauthorizedError)
        assert err.message == "You are not eligible to pay for this job"

    def test_not_found(self) -> None:
        err = JobNotFoundError()
        assert err.code == "NotFound"
        assert err.http_status == 404

    def test_business_rule_violations_share_bad_request(self) -> None:
        for err in (InsufficientBalanceError(), ContractNotActiveError(), JobAlreadyPaidError()):
            assert err.code == "BadRequest"
            assert err.message == "Invalid request"
            assert err.http_status == 400
            assert err.detail

    def test_deposit_cap_names_percentage(self) -> None:
        err = DepositCapExceededError(25)
        assert err.detail == "Amount is more than 25% of the total of jobs that are unpaid"

    def test_invalid_param(self) -> None:
        err = InvalidParamError("limit: must be positive")
        assert err.code == "BadRequest"
        assert err.message == "Invalid parameter"
        assert err.detail == "limit: must be positive"

    def test_param_missing(self) -> None:
        err = ParamMissingError("Start and end dates are required")
        assert err.code == "ParamMissing"
        assert err.http_status == 400

    def test_missing_reference(self) -> None:
        err = MissingReferenceError("contractor profile", 7)
        assert err.code == "MissingReference"
        assert err.http_status == 500
        assert "7" in err.message


class TestResponses:
    def test_message_response(self) -> None:
        assert message_response("Payment successful").model_dump() == {
            "message": "Payment successful"
        }

    def test_error_response_carries_detail(self) -> None:
        resp = error_response(InsufficientBalanceError())
        assert resp.status == 400
        assert resp.error.code == "BadRequest"
        assert resp.error.detail == "Insufficient balance"

    def test_error_content_omits_missing_detail(self) -> None:
        assert error_content(ServerError()) == {
            "status": 500,
            "error": {"code": "ServerError", "message": "Internal Server Error"},
        }
