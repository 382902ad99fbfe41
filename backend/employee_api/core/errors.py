"""Error Taxonomy — typed employee failures and their single HTTP mapping.

Invariants:
    - Every domain error carries an explicit ErrorKind
    - to_error_response() is the only place a failure becomes (status, body)
    - HTTP_STATUS_BY_KIND covers every ErrorKind
    - UNCLASSIFIED responses never carry the original exception message

Design Decisions:
    - Kind tag over isinstance chains: the handler never depends on
      subclass ordering to pick a status
"""

from datetime import datetime, timezone
from enum import Enum


class ErrorKind(str, Enum):
    """Failure kinds the API can report."""
    NOT_FOUND = "not_found"
    INVALID_EMAIL = "invalid_email"
    BUSINESS_RULE = "business_rule"
    INVALID_REQUEST = "invalid_request"
    UNCLASSIFIED = "unclassified"


HTTP_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_EMAIL: 400,
    ErrorKind.BUSINESS_RULE: 400,
    ErrorKind.INVALID_REQUEST: 400,
    ErrorKind.UNCLASSIFIED: 500,
}

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


class EmployeeApiError(Exception):
    """Base exception for all employee API errors."""

    def __init__(self, message: str, code: str, kind: ErrorKind):
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind

    @property
    def http_status(self) -> int:
        return HTTP_STATUS_BY_KIND[self.kind]


# ─── Domain Errors (400-level) ──────────────────────────────────

class EmployeeNotFoundError(EmployeeApiError):
    """Lookup by id or email found nothing."""
    def __init__(self, message: str):
        super().__init__(message, "EMPLOYEE_NOT_FOUND", ErrorKind.NOT_FOUND)

    @classmethod
    def for_id(cls, employee_id: int) -> "EmployeeNotFoundError":
        return cls(f"Employee not found with ID: {employee_id}")

    @classmethod
    def for_email(cls, email: str) -> "EmployeeNotFoundError":
        return cls(f"Employee not found with email: {email}")


class InvalidEmailError(EmployeeApiError):
    """Email is absent or does not match the accepted pattern."""
    def __init__(self, email: str | None):
        super().__init__(
            f"Email address {email} is not valid.",
            "INVALID_EMAIL", ErrorKind.INVALID_EMAIL,
        )
        self.email = email


class BusinessRuleError(EmployeeApiError):
    """A write would break a business rule."""
    def __init__(self, message: str, code: str = "BUSINESS_RULE_VIOLATION"):
        super().__init__(message, code, ErrorKind.BUSINESS_RULE)


class DuplicateEmailError(BusinessRuleError):
    """Another employee already uses this email."""
    def __init__(self, email: str):
        super().__init__(
            f"Employee with email {email} already exists.", "DUPLICATE_EMAIL",
        )
        self.email = email


class InvalidRequestError(EmployeeApiError):
    """Request body, path, or query could not be parsed."""
    def __init__(self, message: str, details: list[dict] | None = None):
        super().__init__(message, "INVALID_REQUEST", ErrorKind.INVALID_REQUEST)
        self.details = details or []


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(EmployeeApiError):
    """Storage operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorKind.UNCLASSIFIED,
        )
        self.operation = operation


# ─── Mapping ────────────────────────────────────────────────────

def classify(error: BaseException) -> ErrorKind:
    """Return the kind of any exception; non-domain errors are UNCLASSIFIED."""
    if isinstance(error, EmployeeApiError):
        return error.kind
    return ErrorKind.UNCLASSIFIED


def to_error_response(
    error: BaseException, now: datetime | None = None,
) -> tuple[int, dict]:
    """Map an exception to (HTTP status, JSON body)."""
    kind = classify(error)
    status = HTTP_STATUS_BY_KIND[kind]
    if kind is ErrorKind.UNCLASSIFIED:
        message = GENERIC_ERROR_MESSAGE
    else:
        message = error.message
    timestamp = now or datetime.now(timezone.utc)
    return status, {
        "timestamp": timestamp.isoformat(),
        "message": message,
        "status": status,
    }
