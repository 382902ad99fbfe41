"""Employee Repository — SQLAlchemy implementation of the EmployeeRepository protocol.

Invariants:
    - Every write commits before returning (one transaction per call)
    - The only place SQLAlchemyError becomes DatabaseError: every call rolls
      the session back and re-raises as DatabaseError
    - Substring searches are case-sensitive on every backend

Design Decisions:
    - save() uses session.merge(): inserts when id is None, replaces the row
      with that id otherwise
    - LIKE narrows the candidate rows; the Python containment check enforces
      case-sensitivity where the backend's LIKE ignores case (SQLite)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Sequence

from sqlalchemy import delete, exists, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.core.domain_types import EmployeeId
from employee_api.core.errors import DatabaseError
from employee_api.models.employee import Employee

logger = logging.getLogger(__name__)


class SqlAlchemyEmployeeRepository:
    """Employee persistence backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def _storage_call(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Employee storage {operation} failed: {e}")
            raise DatabaseError("Employee storage error", operation) from e

    async def _scalars(self, query) -> list[Employee]:
        result = await self.db.execute(query)
        return list(result.scalars().all())

    # ─── Reads ──────────────────────────────────────────────────

    async def find_all(self) -> list[Employee]:
        async with self._storage_call("find_all"):
            return await self._scalars(select(Employee).order_by(Employee.id))

    async def find_by_id(self, employee_id: EmployeeId) -> Employee | None:
        async with self._storage_call("find_by_id"):
            return await self.db.get(Employee, employee_id)

    async def find_by_email(self, email: str) -> Employee | None:
        async with self._storage_call("find_by_email"):
            result = await self.db.execute(
                select(Employee).where(Employee.email == email).limit(1),
            )
            return result.scalar_one_or_none()

    async def find_by_first_name(self, first_name: str) -> list[Employee]:
        async with self._storage_call("find_by_first_name"):
            return await self._scalars(
                select(Employee)
                .where(Employee.first_name == first_name)
                .order_by(Employee.id)
            )

    async def find_by_first_name_containing(self, query: str) -> list[Employee]:
        async with self._storage_call("find_by_first_name_containing"):
            rows = await self._scalars(
                select(Employee)
                .where(Employee.first_name.contains(query, autoescape=True))
                .order_by(Employee.id)
            )
        return [e for e in rows if query in e.first_name]

    async def find_by_last_name_containing(self, query: str) -> list[Employee]:
        async with self._storage_call("find_by_last_name_containing"):
            rows = await self._scalars(
                select(Employee)
                .where(Employee.last_name.contains(query, autoescape=True))
                .order_by(Employee.id)
            )
        return [e for e in rows if query in e.last_name]

    async def find_by_first_name_and_last_name(
        self, first_name: str, last_name: str,
    ) -> list[Employee]:
        async with self._storage_call("find_by_first_name_and_last_name"):
            return await self._scalars(
                select(Employee)
                .where(Employee.first_name == first_name)
                .where(Employee.last_name == last_name)
                .order_by(Employee.id)
            )

    async def find_distinct_first_names(self) -> list[str]:
        async with self._storage_call("find_distinct_first_names"):
            result = await self.db.execute(
                select(Employee.first_name).distinct().order_by(Employee.first_name),
            )
            return list(result.scalars().all())

    async def exists_by_id(self, employee_id: EmployeeId) -> bool:
        async with self._storage_call("exists_by_id"):
            result = await self.db.execute(
                select(exists().where(Employee.id == employee_id)),
            )
            return bool(result.scalar())

    async def exists_by_email(self, email: str) -> bool:
        async with self._storage_call("exists_by_email"):
            result = await self.db.execute(
                select(exists().where(Employee.email == email)),
            )
            return bool(result.scalar())

    async def count(self) -> int:
        async with self._storage_call("count"):
            result = await self.db.execute(
                select(func.count()).select_from(Employee),
            )
            return int(result.scalar_one())

    # ─── Writes ─────────────────────────────────────────────────

    async def save(self, employee: Employee) -> Employee:
        async with self._storage_call("save"):
            merged = await self.db.merge(employee)
            await self.db.commit()
            await self.db.refresh(merged)
            return merged

    async def save_all(self, employees: Sequence[Employee]) -> list[Employee]:
        async with self._storage_call("save_all"):
            saved = [await self.db.merge(e) for e in employees]
            await self.db.commit()
            for e in saved:
                await self.db.refresh(e)
            return saved

    async def delete_by_id(self, employee_id: EmployeeId) -> None:
        async with self._storage_call("delete_by_id"):
            await self.db.execute(
                delete(Employee).where(Employee.id == employee_id),
            )
            await self.db.commit()
