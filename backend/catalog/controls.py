"""catalog/controls.py — Filter controls and delegated UI event handling.

The controller binds once at the container level and routes every
interaction by looking at its target:

    filter-btn    click  → set_category_filter(data-filter), move the active marker
    event-search  input  → set_search_query(value)
    btn-event     click  → dispatch_action(data-action, data-event-id)

Re-rendering never re-binds anything; cards can be replaced freely.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from catalog.catalog import EventCatalog
from catalog.filtering import ALL_CATEGORIES
from schemas.catalog import ActionResult, FilterButton, FilterControls, UIEvent

logger = logging.getLogger(__name__)

FILTER_BUTTON = "filter-btn"
SEARCH_BOX = "event-search"
ACTION_BUTTON = "btn-event"

DEFAULT_CATEGORIES = ("exhibition", "workshop", "festival")

# Plural button labels for the known categories; others are title-cased.
_CATEGORY_LABELS = {
    ALL_CATEGORIES: "All Events",
    "exhibition": "Exhibitions",
    "workshop": "Workshops",
    "festival": "Festivals",
}


def category_label(category: str) -> str:
    return _CATEGORY_LABELS.get(category, category.replace("-", " ").title())


class CatalogController:
    def __init__(self, catalog: EventCatalog, categories: Sequence[str] = DEFAULT_CATEGORIES):
        self.catalog = catalog
        self.categories = [c for c in categories if c != ALL_CATEGORIES]
        self.controls: Optional[FilterControls] = None
        self._bound = False

    @property
    def bound(self) -> bool:
        return self._bound

    def ensure_filter_controls(self) -> FilterControls:
        """Build the search box and filter buttons unless they already exist."""
        if self.controls is not None:
            return self.controls
        self.controls = FilterControls(
            buttons=[
                FilterButton(label=category_label(c), category=c, active=(c == ALL_CATEGORIES))
                for c in [ALL_CATEGORIES, *self.categories]
            ]
        )
        return self.controls

    def bind(self) -> bool:
        """Attach the single delegated handler. Returns False if already bound."""
        if self._bound:
            logger.debug("catalog controller already bound")
            return False
        self.ensure_filter_controls()
        self._bound = True
        return True

    def handle(self, event: UIEvent) -> Optional[ActionResult]:
        if not self._bound:
            logger.debug("UI event before bind() dropped", extra={"element": event.target.element})
            return None

        target = event.target
        if event.type == "click" and target.element == FILTER_BUTTON:
            self._activate(target.data.get("filter", ALL_CATEGORIES))
            return None
        if event.type == "input" and target.element == SEARCH_BOX:
            self.catalog.set_search_query(target.value)
            return None
        if event.type == "click" and target.element == ACTION_BUTTON:
            action = target.data.get("action")
            event_id = target.data.get("event-id")
            if not action or event_id is None:
                logger.warning("action click without action or event id", extra={"data": target.data})
                return None
            return self.catalog.dispatch_action(action, event_id)

        logger.debug(
            "UI event ignored",
            extra={"type": event.type, "element": target.element},
        )
        return None

    def sync_active(self, category: str) -> None:
        """Mark the button for `category` active (the page state may come from a request)."""
        controls = self.ensure_filter_controls()
        for button in controls.buttons:
            button.active = button.category == category

    def _activate(self, category: str) -> None:
        self.sync_active(category)
        self.catalog.set_category_filter(category)
