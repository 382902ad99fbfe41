"""Employee ORM — the single persisted entity.

Invariants:
    - id is an integer primary key assigned by the database
    - email is indexed but carries no unique constraint; uniqueness is
      checked by EmployeeService before create
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from employee_api.db.base import Base


class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    first_name: Mapped[str] = mapped_column(
        String(100), nullable=False, index=True,
    )
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(
        String, nullable=False, index=True,
    )

    def __repr__(self) -> str:
        return f"Employee(id={self.id!r}, email={self.email!r})"
