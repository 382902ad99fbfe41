"""Boundary Protocols — contracts between the service and storage.

Invariants:
    - Services depend on EmployeeRepository, never on a concrete session
    - Every call is a single storage round trip and commits on its own
    - Storage failures surface as DatabaseError (core/errors.py)

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any fake
"""

from typing import Protocol, Sequence

from employee_api.core.domain_types import EmployeeId


class EmployeeLike(Protocol):
    """Structural contract for employee records handed to the repository."""
    id: int | None
    first_name: str
    last_name: str
    email: str


class EmployeeRepository(Protocol):
    """Contract for employee persistence — implemented by infrastructure."""
    async def find_all(self) -> list[EmployeeLike]: ...
    async def find_by_id(self, employee_id: EmployeeId) -> EmployeeLike | None: ...
    async def find_by_email(self, email: str) -> EmployeeLike | None: ...
    async def find_by_first_name(self, first_name: str) -> list[EmployeeLike]: ...
    async def find_by_first_name_containing(
        self, query: str,
    ) -> list[EmployeeLike]: ...
    async def find_by_last_name_containing(
        self, query: str,
    ) -> list[EmployeeLike]: ...
    async def find_by_first_name_and_last_name(
        self, first_name: str, last_name: str,
    ) -> list[EmployeeLike]: ...
    async def find_distinct_first_names(self) -> list[str]: ...
    async def exists_by_id(self, employee_id: EmployeeId) -> bool: ...
    async def exists_by_email(self, email: str) -> bool: ...
    async def save(self, employee: EmployeeLike) -> EmployeeLike: ...
    async def save_all(
        self, employees: Sequence[EmployeeLike],
    ) -> list[EmployeeLike]: ...
    async def delete_by_id(self, employee_id: EmployeeId) -> None: ...
    async def count(self) -> int: ...
