"""Employee Schemas — camelCase wire names, optional create email, ignored id."""

import pytest
from pydantic import ValidationError

from employee_api.models.employee import Employee
from employee_api.schemas.employee import (
    EmployeeCreate, EmployeeResponse, EmployeeUpdate,
)


def test_create_reads_camel_case():
    data = EmployeeCreate.model_validate(
        {"firstName": "Ana", "lastName": "Li", "email": "ana@example.com"},
    )
    assert data.first_name == "Ana"
    assert data.last_name == "Li"
    assert "id" not in data.model_dump()


def test_create_email_is_optional():
    data = EmployeeCreate.model_validate({"firstName": "Ana", "lastName": "Li"})
    assert data.email is None


def test_create_requires_names():
    with pytest.raises(ValidationError):
        EmployeeCreate.model_validate({"email": "ana@example.com"})


def test_update_requires_email():
    with pytest.raises(ValidationError):
        EmployeeUpdate.model_validate({"firstName": "Ana", "lastName": "Li"})


def test_response_from_orm_dumps_camel_case():
    employee = Employee(id=3, first_name="Ana", last_name="Li", email="a@b.co")
    dumped = EmployeeResponse.model_validate(employee).model_dump(by_alias=True)
    assert dumped == {
        "id": 3, "firstName": "Ana", "lastName": "Li", "email": "a@b.co",
    }


def test_request_bodies_ignore_id_of_any_type():
    payload = {"id": "abc", "firstName": "Ana", "lastName": "Li", "email": "a@b.co"}
    assert EmployeeCreate.model_validate(payload).email == "a@b.co"
    assert EmployeeUpdate.model_validate(payload).first_name == "Ana"


def test_create_email_has_no_length_cap():
    email = "a" * 400 + "@example.com"
    data = EmployeeCreate.model_validate(
        {"firstName": "Ana", "lastName": "Li", "email": email},
    )
    assert data.email == email
