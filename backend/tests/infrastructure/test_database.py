"""Database Session Manager — rollback, pass-through errors, readiness.

Tests:
    - An exception inside session() rolls back pending writes
    - The exception leaves session() unchanged (no translation here)
    - health_check is True on a live engine, False when the DB cannot open
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from employee_api.infrastructure.database import DatabaseSessionManager
from employee_api.models.employee import Employee


def _manager_for(engine) -> DatabaseSessionManager:
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = engine
    manager._session_factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
    return manager


async def test_session_rolls_back_and_reraises_unchanged(test_engine):
    manager = _manager_for(test_engine)

    with pytest.raises(ValueError, match="stop"):
        async with manager.session() as db:
            db.add(Employee(first_name="Ana", last_name="Li", email="a@b.co"))
            await db.flush()
            raise ValueError("stop")

    async with manager.session() as db:
        result = await db.execute(select(func.count()).select_from(Employee))
        assert result.scalar_one() == 0


async def test_health_check_true_on_live_engine(test_engine):
    assert await _manager_for(test_engine).health_check() is True


async def test_health_check_false_when_database_unreachable(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path}/missing-dir/employees.db",
    )
    try:
        assert await _manager_for(engine).health_check() is False
    finally:
        await engine.dispose()
