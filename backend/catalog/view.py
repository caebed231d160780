"""catalog/view.py — Display-model for event cards and the HTML adapter.

build_cards() is the pure projection EventCatalog.render() uses. Render
targets receive the resulting cards; HtmlRenderTarget turns them into markup
through Jinja2 templates in catalog/templates/.
"""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from catalog.filtering import ALL_CATEGORIES
from schemas.catalog import ActionButton, EventCard, FilterControls
from schemas.event import Event

CONTAINER_SELECTOR = ".events-timeline"

EVENTS_PAGE_URL = "/events"
INTERACTIONS_URL = "/api/v1/events/interactions"
EVENTS_SCRIPT_URL = "/static/js/events.js"

_env = Environment(
    loader=PackageLoader("catalog", "templates"),
    autoescape=select_autoescape(["html"]),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
)


def build_card(event: Event) -> EventCard:
    return EventCard(
        id=event.id,
        category=event.category,
        title=event.title,
        description=event.description,
        date=event.date,
        time=event.time,
        location=event.location,
        price=event.price,
        actions=tuple(
            ActionButton(label=a.label, key=a.key, style=a.style, icon=a.icon)
            for a in event.actions
        ),
    )


def build_cards(events: Iterable[Event]) -> list[EventCard]:
    return [build_card(e) for e in events]


# ---------------------------------------------------------------------------
# Render targets
# ---------------------------------------------------------------------------

class RenderTarget(Protocol):
    def show(self, cards: Sequence[EventCard]) -> None:
        ...


class MemoryRenderTarget:
    """Keeps the last rendered card list; useful for JSON responses and tests."""

    def __init__(self):
        self.cards: list[EventCard] = []
        self.render_count = 0

    def show(self, cards: Sequence[EventCard]) -> None:
        self.cards = list(cards)
        self.render_count += 1


class HtmlRenderTarget:
    """The events container: its markup is replaced wholesale on every render."""

    selector = CONTAINER_SELECTOR

    def __init__(self):
        self.markup = ""

    def show(self, cards: Sequence[EventCard]) -> None:
        self.markup = render_cards_html(cards)


def render_cards_html(cards: Sequence[EventCard]) -> str:
    return _env.get_template("event_cards.html").render(cards=cards)


def render_filter_controls(
    controls: FilterControls,
    query: str = "",
    category: str = ALL_CATEGORIES,
    compose: bool = False,
) -> str:
    """Search form plus one `?category=` link per filter button.

    In compose mode the links keep the current query and the search form keeps
    the current category; otherwise each control replaces the other's state.
    """
    return _env.get_template("filter_controls.html").render(
        controls=controls,
        query=query,
        category=category,
        compose=compose,
        page_url=EVENTS_PAGE_URL,
        all_categories=ALL_CATEGORIES,
    )


def render_events_page(
    cards_markup: str,
    controls: Optional[FilterControls] = None,
    query: str = "",
    title: str = "Museum Events",
    category: str = ALL_CATEGORIES,
    compose: bool = False,
) -> str:
    controls_markup = (
        render_filter_controls(controls, query, category, compose) if controls is not None else ""
    )
    return _env.get_template("events_page.html").render(
        title=title,
        query=query,
        category=category,
        controls_markup=controls_markup,
        cards_markup=cards_markup,
        interactions_url=INTERACTIONS_URL,
        script_url=EVENTS_SCRIPT_URL,
    )
