"""catalog/filtering.py — Pure category / search filters over an event list.

Every function returns a new list in the input order; nothing here mutates
its arguments. EventCatalog re-derives its visible set through
derive_visible() on every state change.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional

from schemas.event import Event

ALL_CATEGORIES = "all"

# Fields a search query is matched against (logical OR)
SEARCH_FIELDS = ("title", "description", "location")


class FilterMode(str, Enum):
    """How category and search criteria interact.

    REPLACE: each filter or search call discards the other criterion and
             recomputes from the full set (the original page's behavior).
    COMPOSE: both criteria are kept and a card must satisfy both.
    """

    REPLACE = "replace"
    COMPOSE = "compose"


def filter_by_category(events: Iterable[Event], category: str) -> list[Event]:
    """Exact, case-sensitive category match; "all" keeps everything."""
    if category == ALL_CATEGORIES:
        return list(events)
    return [e for e in events if e.category == category]


def matches_query(event: Event, query: str) -> bool:
    needle = query.lower()
    return any(needle in getattr(event, field).lower() for field in SEARCH_FIELDS)


def search_events(events: Iterable[Event], query: Optional[str]) -> list[Event]:
    """Case-insensitive substring search; an empty query keeps everything."""
    if not query:
        return list(events)
    return [e for e in events if matches_query(e, query)]


def derive_visible(
    events: Iterable[Event],
    category: str = ALL_CATEGORIES,
    query: Optional[str] = None,
) -> list[Event]:
    return search_events(filter_by_category(events, category), query)


def distinct_categories(events: Iterable[Event]) -> list[str]:
    """Categories in first-seen order."""
    return list(dict.fromkeys(e.category for e in events))
