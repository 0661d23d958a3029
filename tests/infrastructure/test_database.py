"""Database Session Manager — SQLAlchemy failures surface as DatabaseError.

Tests cover:
    - OperationalError inside session() -> DatabaseError("execute"), session rolled back
    - IntegrityError -> DatabaseError("commit")
    - A real driver failure (missing table) is mapped the same way
    - Non-database exceptions pass through untouched
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, OperationalError

from price_resolver.core.errors import DatabaseError, ErrorCategory
from price_resolver.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield m
    await m.dispose()


async def test_operational_error_mapped_and_rolled_back(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as session:
            session.rollback = AsyncMock(wraps=session.rollback)
            raise OperationalError("SELECT 1", {}, Exception("database is locked"))
    error = exc_info.value
    assert error.code == "DATABASE_ERROR"
    assert error.category == ErrorCategory.DATABASE
    assert error.http_status == 503
    assert error.operation == "execute"
    session.rollback.assert_awaited_once()


async def test_integrity_error_mapped_to_commit_failure(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session():
            raise IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))
    assert exc_info.value.operation == "commit"


async def test_driver_failure_on_missing_table_mapped(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as session:
            await session.execute(text("SELECT id FROM prices"))
    assert exc_info.value.http_status == 503


async def test_non_database_errors_pass_through(manager):
    with pytest.raises(KeyError):
        async with manager.session():
            raise KeyError("not a database error")


async def test_health_check_on_reachable_database(manager):
    assert await manager.health_check() is True
