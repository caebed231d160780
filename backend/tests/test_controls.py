"""
Unit tests for catalog.controls (delegated UI events), catalog.view and
catalog.actions.
"""

import pytest

from catalog.actions import ActionKind, LoggingNotifier, classify_action, details_view
from catalog.controls import CatalogController, category_label
from catalog.view import build_cards, render_cards_html, render_events_page, render_filter_controls
from schemas.catalog import UIEvent, UITarget


def click(element, **data):
    return UIEvent(type="click", target=UITarget(element=element, data=data))


def typed(value):
    return UIEvent(type="input", target=UITarget(element="event-search", value=value))


@pytest.fixture()
def controller(catalog):
    c = CatalogController(catalog)
    c.bind()
    return c


# ---------------------------------------------------------------------------
# Filter controls and binding
# ---------------------------------------------------------------------------

class TestFilterControls:

    def test_default_buttons(self, catalog):
        controls = CatalogController(catalog).ensure_filter_controls()
        assert [(b.label, b.category, b.active) for b in controls.buttons] == [
            ("All Events", "all", True),
            ("Exhibitions", "exhibition", False),
            ("Workshops", "workshop", False),
            ("Festivals", "festival", False),
        ]

    def test_controls_injected_once(self, catalog):
        c = CatalogController(catalog)
        assert c.ensure_filter_controls() is c.ensure_filter_controls()

    def test_bind_is_idempotent(self, catalog):
        c = CatalogController(catalog)
        assert c.bind() is True
        assert c.bind() is False
        assert c.bound

    def test_all_not_duplicated_in_custom_categories(self, catalog):
        c = CatalogController(catalog, ["all", "lecture"])
        assert [b.category for b in c.ensure_filter_controls().buttons] == ["all", "lecture"]

    def test_category_label_fallback(self):
        assert category_label("guided-tour") == "Guided Tour"


# ---------------------------------------------------------------------------
# Delegated handling
# ---------------------------------------------------------------------------

class TestHandle:

    def test_filter_click(self, controller, catalog):
        controller.handle(click("filter-btn", filter="workshop"))
        assert [e.id for e in catalog.filtered_events] == [2]
        assert controller.controls.active_category == "workshop"

    def test_search_input(self, controller, catalog):
        controller.handle(typed("renaissance"))
        assert [e.id for e in catalog.filtered_events] == [1]

    def test_action_click(self, controller, notifier):
        result = controller.handle(click("btn-event", action="more details", **{"event-id": "1"}))
        assert result.kind == "details"
        assert notifier.results == [result]

    def test_action_click_missing_event_id(self, controller, notifier):
        assert controller.handle(click("btn-event", action="book tickets")) is None
        assert notifier.results == []

    def test_unknown_target_ignored(self, controller, catalog, target):
        assert controller.handle(click("event-card")) is None
        assert target.render_count == 0

    def test_unbound_controller_drops_events(self, catalog):
        c = CatalogController(catalog)
        c.handle(click("filter-btn", filter="workshop"))
        assert catalog.filtered_events == catalog.events

    def test_rerender_does_not_duplicate_handling(self, controller, notifier, catalog):
        for _ in range(3):
            catalog.render()
        controller.handle(click("btn-event", action="book tickets", **{"event-id": "1"}))
        assert len(notifier.results) == 1


# ---------------------------------------------------------------------------
# Display-model and HTML adapter
# ---------------------------------------------------------------------------

class TestView:

    def test_build_cards(self, events):
        cards = build_cards(events)
        assert [c.id for c in cards] == [1, 2, 3]
        assert cards[0].actions[0].key == "book tickets"
        assert cards[0].actions[0].icon == "fas fa-ticket-alt"

    def test_card_markup(self, events):
        html = render_cards_html(build_cards(events[:1]))
        assert 'data-event-id="1"' in html
        assert 'data-event-type="exhibition"' in html
        assert 'data-action="more details"' in html
        assert 'class="btn-event btn-primary"' in html

    def test_markup_is_escaped(self, event_dicts):
        from schemas.event import Event

        event_dicts[0]["title"] = "<script>alert(1)</script>"
        html = render_cards_html(build_cards([Event.model_validate(event_dicts[0])]))
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_empty_state(self):
        assert "No events match" in render_cards_html([])

    def test_page_contains_controls_and_cards(self, catalog):
        controls = CatalogController(catalog).ensure_filter_controls()
        page = render_events_page(render_cards_html(catalog.render()), controls, query="art")
        assert 'class="events-timeline"' in page
        assert 'data-filter="festival"' in page
        assert 'value="art"' in page
        assert page.count('class="event-card"') == 3

    def test_active_button_marked(self, catalog):
        c = CatalogController(catalog)
        c.sync_active("festival")
        html = render_filter_controls(c.controls)
        assert 'class="filter-btn active" data-filter="festival"' in html
        assert 'class="filter-btn active" data-filter="all"' not in html

    def test_controls_work_without_script(self, catalog):
        controls = CatalogController(catalog).ensure_filter_controls()
        html = render_filter_controls(controls, query="art")
        assert '<form class="events-filter" method="get" action="/events">' in html
        assert 'name="q"' in html
        assert 'href="/events?category=workshop"' in html
        assert 'name="category"' not in html

    def test_compose_links_keep_both_criteria(self, catalog):
        controls = CatalogController(catalog).ensure_filter_controls()
        html = render_filter_controls(controls, query="art", category="workshop", compose=True)
        assert 'href="/events?category=festival&amp;q=art"' in html
        assert '<input type="hidden" name="category" value="workshop">' in html

    def test_page_carries_state_for_script(self, catalog):
        controls = CatalogController(catalog).ensure_filter_controls()
        page = render_events_page("", controls, query="art", category="workshop")
        assert 'data-category="workshop"' in page
        assert 'data-query="art"' in page
        assert 'data-interactions-url="/api/v1/events/interactions"' in page
        assert '<script src="/static/js/events.js" defer></script>' in page


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

class TestActions:

    @pytest.mark.parametrize("key,kind", [
        ("book tickets", ActionKind.BOOKING),
        ("register now", ActionKind.BOOKING),
        ("view schedule", ActionKind.BOOKING),
        ("more details", ActionKind.DETAILS),
        ("Workshop Details", ActionKind.DETAILS),
        ("event guide", ActionKind.DETAILS),
        ("share", None),
    ])
    def test_classify(self, key, kind):
        assert classify_action(key) is kind

    def test_details_view_fields(self, events):
        view = details_view(events[1])
        assert set(view.model_dump()) == {"title", "date", "time", "location", "price", "description"}

    def test_logging_notifier(self, catalog, caplog):
        caplog.set_level("INFO")
        catalog.notifier = LoggingNotifier()
        catalog.dispatch_action("view schedule", 3)
        assert "event action" in caplog.text
