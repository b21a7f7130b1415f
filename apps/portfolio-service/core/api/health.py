"""
Health check endpoint.

Probes the database with `SELECT 1` and reports uptime. Results are cached
for a few seconds so probes from load balancers stay cheap.
"""
import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import JSONResponse

from core.db.database import engine
from core.services.content_cache import ContentCache

logger = logging.getLogger(__name__)

HEALTH_CACHE_SECONDS = 10.0

router = APIRouter(prefix="/api", tags=["health"])

_started_at = time.monotonic()
_health_cache = ContentCache(ttl_seconds=HEALTH_CACHE_SECONDS)


def check_database() -> Dict[str, Any]:
    start = time.perf_counter()
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        connected = True
    except SQLAlchemyError:
        logger.exception("health_database_unreachable")
        connected = False
    return {"connected": connected, "responseTime": int((time.perf_counter() - start) * 1000)}


def build_health_report() -> Dict[str, Any]:
    database = check_database()
    return {
        "status": "healthy" if database["connected"] else "unhealthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": int(time.monotonic() - _started_at),
        "database": database,
    }


def reset_health_cache_for_tests() -> None:
    _health_cache.clear()


@router.get("/health")
def health_check():
    report = _health_cache.get_or_load("health", build_health_report)
    return JSONResponse(report, status_code=200 if report["status"] == "healthy" else 503)
