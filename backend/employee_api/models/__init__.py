"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models imported here so Base.metadata is complete for
      create_all() and alembic autogenerate
"""

from employee_api.models.employee import Employee  # noqa: F401
