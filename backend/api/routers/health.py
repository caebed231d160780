"""api/routers/health.py — Health check endpoints.

Routes (mounted at root, no /api/v1 prefix):
    GET /health        Liveness check — env, version, timestamp, catalog state
    GET /health/db     Readiness check — verifies DB is reachable
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.dependencies import check_db_connectivity
from core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

_VERSION = "1.0.0"


@router.get("/health", summary="Liveness check")
def health(request: Request):
    """Returns environment, version, current UTC timestamp and catalog status."""
    catalog = getattr(request.app.state, "catalog", None)
    return {
        "status": "ok",
        "environment": settings.environment,
        "version": _VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "catalog": {
            "state": catalog.state.value if catalog else "uninitialized",
            "events": len(catalog.events) if catalog else 0,
            "fallback": catalog.used_fallback if catalog else False,
        },
    }


@router.get("/health/db", summary="Readiness check")
def health_db():
    """Returns HTTP 200 when the database answers SELECT 1, HTTP 503 when not."""
    try:
        check_db_connectivity()
    except RuntimeError as exc:
        logger.warning("health/db: database unreachable: %s", exc)
        return JSONResponse(
            status_code=503,
            content={"status": "error", "db": str(exc)},
        )
    logger.debug("health/db: database reachable")
    return {"status": "ok", "db": "connected"}
