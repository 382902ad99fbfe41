"""Employee Schemas — Pydantic models for the employee endpoints.

Invariants:
    - EmployeeCreate.email may be absent; format is checked by the service
      so an absent or malformed email reports as an invalid email, never as
      a parse error
    - Request bodies ignore unknown fields, an "id" of any type included
    - ErrorResponse mirrors core.errors.to_error_response()
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
        extra="ignore",
    )


class EmployeeCreate(_CamelModel):
    """Body for POST and each element of POST /bulk."""
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    email: str | None = None


class EmployeeUpdate(_CamelModel):
    """Body for PUT /{id} — full replace of the mutable fields."""
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    email: str


class EmployeeResponse(_CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""
    timestamp: datetime
    message: str
    status: int
