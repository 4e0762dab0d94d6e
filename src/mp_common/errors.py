"""Unified error codes and custom exceptions.

Every error carries a symbolic ``code`` that is rendered verbatim into the
``error.code`` field of the response envelope:
  Unauthorized      401  identity/ownership mismatch
  NotFound          404  entity absent
  BadRequest        400  business-rule violation
  ParamMissing      400  required parameter absent
  MissingReference  500  stored row references a profile that does not exist
  ServerError       500  storage/unexpected failure
"""

# Default messages per error code
INVALID_REQUEST = "Invalid request"
INVALID_PARAM = "Invalid parameter"
SERVER_ERROR = "Internal Server Error"
UNAUTHORIZED = "Unauthorized"


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: str,
        message: str,
        http_status: int = 500,
        detail: str | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        self.detail = detail
        super().__init__(message)


# --- 401 ---

class UnauthorizedError(AppError):
    def __init__(self, message: str = UNAUTHORIZED) -> None:
        super().__init__("Unauthorized", message, 401)


class NotContractPartyError(UnauthorizedError):
    def __init__(self) -> None:
        super().__init__("Contract does not belong to the requesting profile")


class NotEligibleToPayError(UnauthorizedError):
    def __init__(self) -> None:
        super().__init__("You are not eligible to pay for this job")


# --- 404 ---

class NotFoundError(AppError):
    def __init__(self, message: str) -> None:
        super().__init__("NotFound", message, 404)


class ContractNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__("No contract found with the given id")


class JobNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__("No job found with the given id")


class JobContractNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__("No contract found for the given job")


class NoPaymentsInRangeError(NotFoundError):
    def __init__(self) -> None:
        super().__init__("No jobs found for the given time range")


# --- 400 ---

class BadRequestError(AppError):
    def __init__(self, detail: str | None = None, message: str = INVALID_REQUEST) -> None:
        super().__init__("BadRequest", message, 400, detail)


class InvalidParamError(BadRequestError):
    def __init__(self, detail: str) -> None:
        super().__init__(detail, message=INVALID_PARAM)


class ParamMissingError(AppError):
    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__("ParamMissing", message, 400, detail)


class InsufficientBalanceError(BadRequestError):
    def __init__(self) -> None:
        super().__init__("Insufficient balance")


class ContractNotActiveError(BadRequestError):
    def __init__(self) -> None:
        super().__init__(
            "Contract has been terminated. Payment can not be made for a terminated contract."
        )


class JobAlreadyPaidError(BadRequestError):
    def __init__(self) -> None:
        super().__init__("This job has already been paid for!")


class DepositCapExceededError(BadRequestError):
    def __init__(self, cap_percent: int) -> None:
        super().__init__(
            f"Amount is more than {cap_percent}% of the total of jobs that are unpaid"
        )


# --- 500 ---

class MissingReferenceError(AppError):
    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(
            "MissingReference", f"Referenced {entity} {entity_id} does not exist", 500
        )


class ServerError(AppError):
    def __init__(self, message: str = SERVER_ERROR) -> None:
        super().__init__("ServerError", message, 500)
