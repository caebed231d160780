"""catalog/catalog.py — EventCatalog: the authoritative event list and its visible subset.

Lifecycle:
    UNINITIALIZED ──load()──> LOADING ──(fetched or fallback)──> READY

load() is the only suspension point. It runs the source's blocking fetch in
a worker thread under a timeout; any failure substitutes the fallback sample
set, so the catalog always reaches READY with at least one event.

Everything else is synchronous. The visible set is never edited in place:
each filter or search call stores its criterion and re-derives the visible
set from the full set, then renders.

Usage:
    catalog = EventCatalog(HttpEventSource(url), target=HtmlRenderTarget())
    await catalog.load()
    catalog.set_category_filter("workshop")
    catalog.target.markup
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Callable, Optional, Union

from catalog.actions import LoggingNotifier, Notifier, build_result, classify_action
from catalog.exceptions import CatalogNotReadyError, EventSourceError
from catalog.filtering import ALL_CATEGORIES, FilterMode, derive_visible, distinct_categories
from catalog.sample_events import sample_events
from catalog.sources import DEFAULT_TIMEOUT, EventSource
from catalog.view import RenderTarget, build_cards
from schemas.catalog import ActionResult, EventCard
from schemas.event import Event

logger = logging.getLogger(__name__)

EventId = Union[int, str]


class CatalogState(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"


class EventCatalog:
    def __init__(
        self,
        source: EventSource,
        target: Optional[RenderTarget] = None,
        notifier: Optional[Notifier] = None,
        fallback: Callable[[], list[Event]] = sample_events,
        timeout: float = DEFAULT_TIMEOUT,
        filter_mode: FilterMode = FilterMode.REPLACE,
    ):
        self.source = source
        self.target = target
        self.notifier = notifier or LoggingNotifier()
        self.fallback = fallback
        self.timeout = timeout
        self.filter_mode = FilterMode(filter_mode)

        self.state = CatalogState.UNINITIALIZED
        self.used_fallback = False
        self.category = ALL_CATEGORIES
        self.query = ""
        self._events: tuple[Event, ...] = ()
        self._visible: tuple[Event, ...] = ()

    # ── Read-only views ────────────────────────────────────────────────────────

    @property
    def events(self) -> tuple[Event, ...]:
        return self._events

    @property
    def filtered_events(self) -> tuple[Event, ...]:
        return self._visible

    @property
    def categories(self) -> list[str]:
        return distinct_categories(self._events)

    def get_event(self, event_id: EventId) -> Optional[Event]:
        wanted = str(event_id)
        return next((e for e in self._events if str(e.id) == wanted), None)

    # ── Loading ────────────────────────────────────────────────────────────────

    async def load(self) -> tuple[Event, ...]:
        """Populate the full set once, from the source or the fallback."""
        if self.state is not CatalogState.UNINITIALIZED:
            logger.debug("load() ignored", extra={"state": self.state.value})
            return self._events

        self.state = CatalogState.LOADING
        try:
            events = await asyncio.wait_for(
                asyncio.to_thread(self.source.fetch), timeout=self.timeout
            )
            if not events:
                raise EventSourceError("event source returned no events")
        except (EventSourceError, asyncio.TimeoutError) as exc:
            reason = str(exc) or f"timed out after {self.timeout}s"
            logger.warning(
                "event source failed, using sample events",
                extra={"source": repr(self.source), "reason": reason},
            )
            events = self._use_fallback()
        except Exception as exc:
            logger.error(
                "event source raised unexpectedly, using sample events",
                extra={"source": repr(self.source), "reason": repr(exc)},
                exc_info=True,
            )
            events = self._use_fallback()

        self._events = tuple(events)
        self._visible = self._events
        self.state = CatalogState.READY
        logger.info(
            "event catalog ready",
            extra={"events": len(self._events), "fallback": self.used_fallback},
        )
        return self._events

    def _use_fallback(self) -> list[Event]:
        self.used_fallback = True
        return self.fallback()

    def fork(
        self,
        target: Optional[RenderTarget] = None,
        notifier: Optional[Notifier] = None,
    ) -> "EventCatalog":
        """New READY catalog over the same full set, with its own filter state."""
        self._require_ready()
        clone = EventCatalog(
            source=self.source,
            target=target,
            notifier=notifier or self.notifier,
            fallback=self.fallback,
            timeout=self.timeout,
            filter_mode=self.filter_mode,
        )
        clone._events = self._events
        clone._visible = self._events
        clone.used_fallback = self.used_fallback
        clone.state = CatalogState.READY
        return clone

    # ── Filtering ──────────────────────────────────────────────────────────────

    def set_category_filter(self, category: str) -> list[EventCard]:
        self._require_ready()
        self.category = category or ALL_CATEGORIES
        if self.filter_mode is FilterMode.REPLACE:
            self.query = ""
        return self._refresh()

    def set_search_query(self, query: Optional[str]) -> list[EventCard]:
        self._require_ready()
        self.query = query or ""
        if self.filter_mode is FilterMode.REPLACE:
            self.category = ALL_CATEGORIES
        return self._refresh()

    def restore(self, category: str = ALL_CATEGORIES, query: Optional[str] = None) -> list[EventCard]:
        """Apply a page's saved category and query in one step.

        In REPLACE mode only one criterion can be in effect; a non-empty
        query wins, matching a page where the search box was used last.
        """
        self._require_ready()
        self.category = category or ALL_CATEGORIES
        self.query = query or ""
        if self.filter_mode is FilterMode.REPLACE and self.query:
            self.category = ALL_CATEGORIES
        return self._refresh()

    def _refresh(self) -> list[EventCard]:
        self._visible = tuple(derive_visible(self._events, self.category, self.query))
        logger.debug(
            "visible events recomputed",
            extra={"category": self.category, "query": self.query, "visible": len(self._visible)},
        )
        return self.render()

    # ── Rendering ──────────────────────────────────────────────────────────────

    def render(self) -> list[EventCard]:
        """Project the visible set into cards and hand them to the target."""
        self._require_ready()
        cards = build_cards(self._visible)
        if self.target is None:
            logger.error("events container not found, nothing rendered")
        else:
            self.target.show(cards)
        return cards

    # ── Actions ────────────────────────────────────────────────────────────────

    def dispatch_action(self, action_key: str, event_id: EventId) -> Optional[ActionResult]:
        self._require_ready()
        event = self.get_event(event_id)
        if event is None:
            logger.warning(
                "action for unknown event ignored",
                extra={"action": action_key, "event_id": str(event_id)},
            )
            return None

        kind = classify_action(action_key)
        if kind is None:
            logger.info(
                "unhandled event action",
                extra={"action": action_key, "event_id": str(event_id), "title": event.title},
            )
            return None

        result = build_result(kind, action_key, event)
        self.notifier.notify(result)
        return result

    def _require_ready(self) -> None:
        if self.state is not CatalogState.READY:
            raise CatalogNotReadyError(self.state)

    def __repr__(self) -> str:
        return (
            f"<EventCatalog state={self.state.value} events={len(self._events)} "
            f"visible={len(self._visible)} mode={self.filter_mode.value}>"
        )


async def load_catalog(source: EventSource, **kwargs) -> EventCatalog:
    catalog = EventCatalog(source, **kwargs)
    await catalog.load()
    return catalog

