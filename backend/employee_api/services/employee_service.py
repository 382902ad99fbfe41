"""Employee Service — orchestrates storage calls behind the employee write rules.

Invariants:
    - create: email format is checked before uniqueness; storage is written
      only when both pass
    - bulk_create: every item is checked before the single save_all call, so a
      failing item leaves storage untouched
    - update: id is always the path id, any id in the body is ignored
    - update does not re-validate the email (kept from the original contract)
    - bulk_create checks uniqueness against stored rows only, not within the
      batch itself

Design Decisions:
    - Pure deciders live in core/enforce_employee.py; this class only asks
      storage the questions they need answered
"""

import logging
from typing import Sequence

from employee_api.core.domain_types import EmployeeId
from employee_api.core.enforce_employee import (
    check_email_format, check_email_unique, check_employee_exists,
)
from employee_api.core.errors import EmployeeApiError, EmployeeNotFoundError
from employee_api.core.repository_protocols import EmployeeRepository
from employee_api.models.employee import Employee
from employee_api.schemas.employee import EmployeeCreate, EmployeeUpdate

logger = logging.getLogger(__name__)


class EmployeeService:
    """Employee CRUD and search with validation."""

    def __init__(self, repository: EmployeeRepository):
        self.repository = repository

    # ─── Rules that need storage ────────────────────────────────

    async def ensure_exists(self, employee_id: EmployeeId) -> None:
        exists = await self.repository.exists_by_id(employee_id)
        check_employee_exists(employee_id, exists)

    async def ensure_email_unique(self, email: str) -> None:
        exists = await self.repository.exists_by_email(email)
        check_email_unique(email, exists)

    async def _validate_new(self, email: str | None) -> None:
        check_email_format(email)
        await self.ensure_email_unique(email)

    # ─── Reads ──────────────────────────────────────────────────

    async def list_all(self) -> list[Employee]:
        return await self.repository.find_all()

    async def get_by_id(self, employee_id: EmployeeId) -> Employee:
        employee = await self.repository.find_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError.for_id(employee_id)
        return employee

    async def get_by_email(self, email: str) -> Employee:
        employee = await self.repository.find_by_email(email)
        if employee is None:
            raise EmployeeNotFoundError.for_email(email)
        return employee

    async def get_by_first_name(self, first_name: str) -> list[Employee]:
        return await self.repository.find_by_first_name(first_name)

    async def search_by_first_name(self, query: str) -> list[Employee]:
        return await self.repository.find_by_first_name_containing(query)

    async def search_by_last_name(self, query: str) -> list[Employee]:
        return await self.repository.find_by_last_name_containing(query)

    async def search_by_full_name(
        self, first_name: str, last_name: str,
    ) -> list[Employee]:
        return await self.repository.find_by_first_name_and_last_name(
            first_name, last_name,
        )

    async def unique_first_names(self) -> list[str]:
        return await self.repository.find_distinct_first_names()

    async def count(self) -> int:
        return await self.repository.count()

    # ─── Writes ─────────────────────────────────────────────────

    async def create(self, data: EmployeeCreate) -> Employee:
        try:
            await self._validate_new(data.email)
        except EmployeeApiError as e:
            logger.info(
                f"Rejected employee create: {e.message}",
                extra={"error_code": e.code},
            )
            raise
        employee = await self.repository.save(_new_employee(data))
        logger.info(
            f"Created employee {employee.id}",
            extra={"employee_id": employee.id},
        )
        return employee

    async def bulk_create(
        self, items: Sequence[EmployeeCreate],
    ) -> list[Employee]:
        for index, data in enumerate(items):
            try:
                await self._validate_new(data.email)
            except EmployeeApiError as e:
                logger.info(
                    f"Rejected bulk create at item {index}: {e.message}",
                    extra={"error_code": e.code, "batch_size": len(items)},
                )
                raise
        if not items:
            return []
        saved = await self.repository.save_all(
            [_new_employee(data) for data in items],
        )
        logger.info(
            f"Bulk created {len(saved)} employees",
            extra={"batch_size": len(saved)},
        )
        return saved

    async def update(
        self, employee_id: EmployeeId, data: EmployeeUpdate,
    ) -> Employee:
        await self.ensure_exists(employee_id)
        employee = Employee(
            id=employee_id,
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
        )
        updated = await self.repository.save(employee)
        logger.info(
            f"Updated employee {employee_id}",
            extra={"employee_id": employee_id},
        )
        return updated

    async def delete(self, employee_id: EmployeeId) -> str:
        await self.ensure_exists(employee_id)
        await self.repository.delete_by_id(employee_id)
        logger.info(
            f"Deleted employee {employee_id}",
            extra={"employee_id": employee_id},
        )
        return f"Employee with ID {employee_id} has been deleted."


def _new_employee(data: EmployeeCreate) -> Employee:
    # storage assigns the id
    return Employee(
        first_name=data.first_name,
        last_name=data.last_name,
        email=data.email,
    )
