"""Health Check - process and database status for container orchestration.

Invariants:
    - GET /q/health always returns 200 while the process is up
    - database.status is "DOWN" when the manager is missing or SELECT 1 fails
"""

import logging

from fastapi import APIRouter, status

import autoconnect.infrastructure.database as db_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/q/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    manager = db_module.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        logger.warning("Health check: database unreachable")
    return {
        "server": {"status": "UP"},
        "database": {"status": "UP" if db_ok else "DOWN"},
    }
