"""
dependencies.py — FastAPI dependency injection

Provides:
    get_db()       request-scoped SQLAlchemy session (closed even on error)
    get_catalog()  the application's loaded EventCatalog (set in the lifespan)

Usage in a route handler:
    from fastapi import Depends
    from api.dependencies import get_catalog, get_db

    @router.get("/example")
    def example(catalog: EventCatalog = Depends(get_catalog)):
        page = catalog.fork()
        ...
"""

from typing import Generator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.orm import Session

from catalog.catalog import CatalogState, EventCatalog
from catalog.exceptions import CatalogNotReadyError
from db.database import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """Yield a database session, guaranteed to close after the request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_catalog(request: Request) -> EventCatalog:
    """Return the app-wide catalog; callers fork it rather than filter it.

    Raises:
        CatalogNotReadyError: the lifespan has not finished loading events.
    """
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise CatalogNotReadyError(CatalogState.UNINITIALIZED)
    return catalog


def check_db_connectivity() -> bool:
    """Execute SELECT 1 to verify the database is reachable.

    Returns:
        True if the database responds.

    Raises:
        RuntimeError: with a descriptive message if the connection fails.
    """
    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception as exc:
        raise RuntimeError(f"Database connectivity check failed: {exc}") from exc
    finally:
        db.close()
