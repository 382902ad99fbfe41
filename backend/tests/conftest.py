"""Root conftest — async DB + FastAPI test client shared by all test packages.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - Environment set before the app (and its cached settings) is imported

Design Decisions:
    - StaticPool: all sessions share the one in-memory connection, so rows
      written through the client are visible to test_db
"""

import os

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import employee_api.models  # noqa: E402,F401
from employee_api.config import get_settings  # noqa: E402
from employee_api.db.base import Base  # noqa: E402
from employee_api.infrastructure.database import get_db  # noqa: E402
from employee_api.infrastructure.employee_repository import (  # noqa: E402
    SqlAlchemyEmployeeRepository,
)
from employee_api.main import app  # noqa: E402
from employee_api.models.employee import Employee  # noqa: E402
from employee_api.services.employee_service import EmployeeService  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def repository(test_db):
    return SqlAlchemyEmployeeRepository(test_db)


@pytest.fixture
def service(repository):
    return EmployeeService(repository)


@pytest.fixture
def employees_url():
    return get_settings().employees_prefix


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def seed_employees(test_db):
    """Insert three employees directly into the test DB."""
    rows = [
        Employee(first_name="Ana", last_name="Li", email="ana.li@example.com"),
        Employee(first_name="Anabel", last_name="Lima", email="anabel@example.com"),
        Employee(first_name="Bruno", last_name="Costa", email="bruno@example.org"),
    ]
    test_db.add_all(rows)
    await test_db.commit()
    for row in rows:
        await test_db.refresh(row)
    return rows
