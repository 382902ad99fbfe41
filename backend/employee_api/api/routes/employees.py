"""Employee Routes — CRUD, search, and stats endpoints for employee records.

Invariants:
    - List and search endpoints answer 204 with no body when nothing matches
    - Failures are raised as EmployeeApiError and rendered by error_handlers
    - Static paths (/bulk, /search/*, /stats/*) never collide with /{employee_id}
"""

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.infrastructure.database import get_db
from employee_api.infrastructure.employee_repository import (
    SqlAlchemyEmployeeRepository,
)
from employee_api.models.employee import Employee
from employee_api.schemas.employee import (
    EmployeeCreate, EmployeeResponse, EmployeeUpdate, ErrorResponse,
)
from employee_api.services.employee_service import EmployeeService

router = APIRouter(
    tags=["employees"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


def get_employee_service(db: AsyncSession = Depends(get_db)) -> EmployeeService:
    return EmployeeService(SqlAlchemyEmployeeRepository(db))


def _to_response(employee: Employee) -> EmployeeResponse:
    return EmployeeResponse.model_validate(employee)


def _list_or_no_content(employees: list[Employee]):
    if not employees:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return [_to_response(e) for e in employees]


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    """View a list of all employees."""
    return _list_or_no_content(await service.list_all())


@router.post(
    "", response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_employee(
    body: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
):
    """Add a new employee. Email must be well-formed and unused."""
    return _to_response(await service.create(body))


@router.post(
    "/bulk", response_model=list[EmployeeResponse],
    status_code=status.HTTP_201_CREATED,
)
async def add_employees(
    body: list[EmployeeCreate],
    service: EmployeeService = Depends(get_employee_service),
):
    """Add several employees; nothing is stored if any item is rejected."""
    return [_to_response(e) for e in await service.bulk_create(body)]


@router.get("/search/email/{email}", response_model=EmployeeResponse)
async def get_employee_by_email(
    email: str, service: EmployeeService = Depends(get_employee_service),
):
    return _to_response(await service.get_by_email(email))


@router.get(
    "/search/firstNameContaining/{query}",
    response_model=list[EmployeeResponse],
)
async def search_employees_by_first_name(
    query: str, service: EmployeeService = Depends(get_employee_service),
):
    """Case-sensitive substring match on first name."""
    return _list_or_no_content(await service.search_by_first_name(query))


@router.get(
    "/search/lastNameContaining/{query}",
    response_model=list[EmployeeResponse],
)
async def search_employees_by_last_name(
    query: str, service: EmployeeService = Depends(get_employee_service),
):
    return _list_or_no_content(await service.search_by_last_name(query))


@router.get(
    "/search/firstName/{first_name}", response_model=list[EmployeeResponse],
)
async def get_employees_by_first_name(
    first_name: str, service: EmployeeService = Depends(get_employee_service),
):
    return _list_or_no_content(await service.get_by_first_name(first_name))


@router.get("/search/fullName", response_model=list[EmployeeResponse])
async def search_employees_by_full_name(
    first_name: str = Query(alias="firstName", min_length=1),
    last_name: str = Query(alias="lastName", min_length=1),
    service: EmployeeService = Depends(get_employee_service),
):
    return _list_or_no_content(
        await service.search_by_full_name(first_name, last_name),
    )


@router.get("/stats/count", response_model=int)
async def count_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.count()


@router.get("/stats/uniqueFirstNames", response_model=list[str])
async def unique_first_names(
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.unique_first_names()


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
):
    return _to_response(await service.get_by_id(employee_id))


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: int,
    body: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
):
    """Replace an employee's fields. The path id wins over any body id."""
    return _to_response(await service.update(employee_id, body))


@router.delete("/{employee_id}", response_class=PlainTextResponse)
async def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.delete(employee_id)
