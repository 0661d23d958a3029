"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the database is unreachable
      or the prices table cannot be queried (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
    - db_manager looked up at call time: it is (re)bound by init_db on startup
    - Prices table probed separately: a reachable but unmigrated database cannot answer queries
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import select

from price_resolver import __version__
from price_resolver.core.errors import DatabaseError
from price_resolver.infrastructure.database import DatabaseSessionManager
from price_resolver.models.price import PriceRow
import price_resolver.infrastructure.database as database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "price-resolver-api",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe: database connectivity, then the prices table."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return _not_ready("database_unavailable")
    if not await _prices_table_queryable(manager):
        return _not_ready("prices_table_unavailable")
    return {
        "status": "ready",
        "checks": {"database": "healthy", "prices_table": "healthy"},
    }


async def _prices_table_queryable(manager: DatabaseSessionManager) -> bool:
    try:
        async with manager.session() as db:
            await db.execute(select(PriceRow.id).limit(1))
        return True
    except DatabaseError as e:
        logger.error(f"Prices table check failed: {e.message}")
        return False


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )
