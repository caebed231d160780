"""catalog/sample_events.py — Built-in events used when no source can be loaded.

Kept in the same wire format as data/events.json so the fallback goes
through the same validation as a fetched document.
"""

from __future__ import annotations

from schemas.event import Event, EventCollection

SAMPLE_EVENTS_DOCUMENT = {
    "events": [
        {
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
        },
    ]
}


def sample_events() -> list[Event]:
    return EventCollection.model_validate(SAMPLE_EVENTS_DOCUMENT).events
