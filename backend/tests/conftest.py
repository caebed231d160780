"""
conftest.py for backend/tests/

Points the app at an in-memory SQLite database, a throwaway log directory
and the bundled events file *before* any application module is imported,
so the suite runs without a .env, a network, or a real database.

Run from the project root:
    cd backend
    pytest tests -v
"""

import asyncio
import os
import sys
import tempfile

import pytest

# Add backend/ to sys.path so `import catalog`, `import api.main` work.
_backend_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _backend_dir not in sys.path:
    sys.path.insert(0, _backend_dir)

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="museum-events-logs-")
os.environ["EVENTS_SOURCE_URL"] = ""
os.environ["CATALOG_FILTER_MODE"] = "replace"

from catalog.actions import RecordingNotifier  # noqa: E402
from catalog.catalog import EventCatalog  # noqa: E402
from catalog.sources import StaticEventSource  # noqa: E402
from catalog.view import MemoryRenderTarget  # noqa: E402
from db.database import SessionLocal, init_db  # noqa: E402
from db.models import User, UserSession  # noqa: E402
from schemas.event import Event  # noqa: E402


# ---------------------------------------------------------------------------
# Event data
# ---------------------------------------------------------------------------

RENAISSANCE = {
    "id": 1,
    "title": "Renaissance Revisited",
    "description": "A contemporary reinterpretation of Renaissance masterpieces by emerging artists.",
    "date": "June 15-30, 2025",
    "time": "10:00 AM - 6:00 PM Daily",
    "location": "Grand Art Gallery, Florence",
    "price": "€15 (Students €10)",
    "type": "exhibition",
    "buttons": [
        {"text": "Book Tickets", "class": "btn-primary", "icon": "fas fa-ticket-alt"},
        {"text": "More Details", "class": "btn-secondary", "icon": "fas fa-info-circle"},
    ],
}

POTTERY = {
    "id": 2,
    "title": "Pottery Basics",
    "description": "Learn to throw a bowl on the wheel.",
    "date": "July 5, 2025",
    "time": "2:00 PM - 5:00 PM",
    "location": "Studio B",
    "price": "€40",
    "type": "workshop",
    "buttons": [
        {"text": "Register Now", "class": "btn-primary", "icon": "fas fa-pen"},
        {"text": "Workshop Details", "class": "btn-secondary", "icon": "fas fa-info-circle"},
    ],
}

LANTERNS = {
    "id": 3,
    "title": "Lantern Festival",
    "description": "Paper lanterns over the river.",
    "date": "August 22, 2025",
    "time": "7:00 PM - Midnight",
    "location": "Museum Courtyard",
    "price": "Free",
    "type": "festival",
    "buttons": [
        {"text": "View Schedule", "class": "btn-primary", "icon": "fas fa-calendar"},
        {"text": "Share", "class": "btn-secondary", "icon": "fas fa-share"},
    ],
}


@pytest.fixture()
def event_dicts():
    return [dict(RENAISSANCE), dict(POTTERY), dict(LANTERNS)]


@pytest.fixture()
def events(event_dicts):
    return [Event.model_validate(d) for d in event_dicts]


@pytest.fixture()
def target():
    return MemoryRenderTarget()


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def catalog(events, target, notifier):
    """A READY catalog over the three events above."""
    c = EventCatalog(StaticEventSource(events), target=target, notifier=notifier)
    asyncio.run(c.load())
    return c


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------

@pytest.fixture()
def db_session():
    init_db()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.query(UserSession).delete()
        db.query(User).delete()
        db.commit()
        db.close()


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

@pytest.fixture()
def client():
    from fastapi.testclient import TestClient

    from api.main import app

    with TestClient(app) as c:
        yield c
    # Clear any accounts created through the signup route
    db = SessionLocal()
    try:
        db.query(UserSession).delete()
        db.query(User).delete()
        db.commit()
    finally:
        db.close()
