"""Employee Enforcement — pure write-rule checks for employee records.

Invariants:
    - check_email_format runs before check_email_unique for any created record
    - Each check either returns None or raises a typed EmployeeApiError
    - No function here touches storage; callers pass in what storage said
"""

from employee_api.core.domain_types import EMAIL_PATTERN
from employee_api.core.errors import (
    DuplicateEmailError, EmployeeNotFoundError, InvalidEmailError,
)


def is_valid_email(email: str | None) -> bool:
    if not email:
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def check_email_format(email: str | None) -> None:
    """Raise InvalidEmailError when email is absent or malformed."""
    if not is_valid_email(email):
        raise InvalidEmailError(email)


def check_email_unique(email: str, already_exists: bool) -> None:
    if already_exists:
        raise DuplicateEmailError(email)


def check_employee_exists(employee_id: int, exists: bool) -> None:
    if not exists:
        raise EmployeeNotFoundError.for_id(employee_id)
