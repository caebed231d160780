"""
main.py — Museum Events API entry point

The FastAPI application instance lives here. All middleware, routers,
static files, and startup/shutdown events are registered in this file.

Usage
-----
Development (auto-reloads on file save):
    cd backend
    uvicorn api.main:app --reload --port 8000

Production (multiple worker processes):
    cd backend
    gunicorn api.main:app -c gunicorn.conf.py

Pages (once running):
    http://localhost:8000/events   — event listing
    http://localhost:8000/docs     — Swagger UI (interactive)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException

from api.routers.health import router as health_router
from api.routers.pages import router as pages_router
from api.v1.router import v1_router
from catalog.catalog import EventCatalog
from catalog.exceptions import CatalogNotReadyError
from catalog.sources import build_event_source
from core.config import settings
from core.logging import configure_logging
from core.middleware import RequestIDMiddleware, TimingMiddleware
from db.database import init_db
from schemas.shared import ErrorResponse

logger = logging.getLogger(__name__)

_VERSION = "1.0.0"
STATIC_DIR = Path(__file__).resolve().parent.parent / "static"
BUNDLED_EVENTS = STATIC_DIR / "data" / "events.json"


# ---------------------------------------------------------------------------
# Lifespan — startup and shutdown hooks
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    # ── Startup ────────────────────────────────────────────────────────────────
    configure_logging(settings.log_level, settings.log_dir)
    logger.info(
        "Museum Events API starting",
        extra={
            "environment": settings.environment,
            "version": _VERSION,
            "log_level": settings.log_level,
            "events_source_url": settings.events_source_url or str(BUNDLED_EVENTS),
            "filter_mode": settings.catalog_filter_mode.value,
        },
    )
    init_db()

    source = build_event_source(
        settings.events_source_url, BUNDLED_EVENTS, settings.events_fetch_timeout
    )
    catalog = EventCatalog(
        source,
        timeout=settings.events_fetch_timeout,
        filter_mode=settings.catalog_filter_mode,
    )
    await catalog.load()
    app.state.catalog = catalog
    yield
    # ── Shutdown ───────────────────────────────────────────────────────────────
    app.state.catalog = None
    logger.info("Museum Events API shutting down")


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Museum Events API",
    description=(
        "Museum event listing: browse, filter and search exhibitions, "
        "workshops and festivals, and register a visitor account."
    ),
    version=_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


# ---------------------------------------------------------------------------
# Middleware  (add_middleware order matters: last added = outermost)
#
#   Request:   CORS → RequestID → Timing → route handler
#   Response:  route handler → Timing → RequestID → CORS
# ---------------------------------------------------------------------------

app.add_middleware(TimingMiddleware)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------

def _error_response(request: Request, status_code: int, error) -> JSONResponse:
    body = ErrorResponse(
        error=str(error),
        status_code=status_code,
        request_id=getattr(request.state, "request_id", None),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Return structured JSON for all HTTP errors (404, 405, etc.)."""
    return _error_response(request, exc.status_code, exc.detail)


@app.exception_handler(CatalogNotReadyError)
async def catalog_not_ready_handler(request: Request, exc: CatalogNotReadyError) -> JSONResponse:
    logger.warning("request before catalog ready", extra={"path": request.url.path})
    return _error_response(request, 503, str(exc))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions: log the traceback, return clean JSON."""
    logger.error(
        "unhandled exception",
        extra={
            "request_id": getattr(request.state, "request_id", None),
            "method": request.method,
            "path": request.url.path,
            "error": str(exc),
        },
        exc_info=True,
    )
    return _error_response(request, 500, "Internal server error")


# ---------------------------------------------------------------------------
# Routers and static files
# ---------------------------------------------------------------------------

app.include_router(health_router)            # /health, /health/db  (unversioned)
app.include_router(pages_router)             # /events, /signup      (HTML)
app.include_router(v1_router, prefix="/api/v1")
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------

@app.get("/", tags=["root"], summary="API root")
def root():
    """Confirms the API is running. Returns service name, version, and useful URLs."""
    return {
        "service": "Museum Events API",
        "version": _VERSION,
        "events": "/events",
        "docs": "/docs",
    }
