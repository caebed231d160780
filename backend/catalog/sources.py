"""catalog/sources.py — Where the catalog's events come from.

A source is any object with a blocking `fetch() -> list[Event]` that raises
EventSourceError on failure. EventCatalog.load() runs it off the event loop
and falls back to the built-in sample set when it raises or times out.

    HttpEventSource    GET a JSON document ({"events": [...]}) over HTTP
    FileEventSource    read the same document from disk (bundled events.json)
    StaticEventSource  fixed in-memory list (tests, forks, fallback)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Protocol, Union

import requests
from pydantic import ValidationError

from catalog.exceptions import EventSourceError
from schemas.event import Event, EventCollection

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0


class EventSource(Protocol):
    def fetch(self) -> list[Event]:
        ...


def parse_event_collection(payload: Any) -> list[Event]:
    """Validate a decoded {"events": [...]} document into Event objects.

    Raises:
        EventSourceError: missing `events`, malformed records or duplicate ids.
    """
    if not isinstance(payload, dict) or "events" not in payload:
        raise EventSourceError("event document has no top-level 'events' field")
    try:
        return EventCollection.model_validate(payload).events
    except ValidationError as exc:
        raise EventSourceError(
            f"event document failed validation ({exc.error_count()} errors)"
        ) from exc


class HttpEventSource:
    """Fetch the event document with a single GET; no auth, paging or ETags."""

    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.setdefault("Accept", "application/json")

    def fetch(self) -> list[Event]:
        logger.debug("fetching events", extra={"url": self.url})
        try:
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise EventSourceError(f"GET {self.url} failed: {exc}") from exc
        except ValueError as exc:
            # requests' JSONDecodeError subclasses ValueError
            raise EventSourceError(f"GET {self.url} returned invalid JSON: {exc}") from exc
        return parse_event_collection(payload)

    def __repr__(self) -> str:
        return f"<HttpEventSource url={self.url!r}>"


class FileEventSource:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def fetch(self) -> list[Event]:
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise EventSourceError(f"cannot read {self.path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise EventSourceError(f"{self.path} is not valid JSON: {exc}") from exc
        return parse_event_collection(payload)

    def __repr__(self) -> str:
        return f"<FileEventSource path={str(self.path)!r}>"


class StaticEventSource:
    def __init__(self, events: Iterable[Union[Event, dict]]):
        self._events = [e if isinstance(e, Event) else Event.model_validate(e) for e in events]

    def fetch(self) -> list[Event]:
        return list(self._events)

    def __repr__(self) -> str:
        return f"<StaticEventSource events={len(self._events)}>"


def build_event_source(url: str, fallback_path: Union[str, Path], timeout: float) -> EventSource:
    """HTTP source when a URL is configured, otherwise the bundled JSON file."""
    if url:
        return HttpEventSource(url, timeout=timeout)
    return FileEventSource(fallback_path)
