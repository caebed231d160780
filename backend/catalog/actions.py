"""catalog/actions.py — Card action dispatch table and result notification.

Action keys are the lowercased button labels. Several labels share one
behavior (a workshop's "Register Now" books exactly like an exhibition's
"Book Tickets"), so keys are grouped into ActionKinds.

Results are handed to a Notifier, the capability the host provides for
showing feedback (a toast in the browser, a JSON field in an API response,
a log line in a worker).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Protocol

from schemas.catalog import ActionResult, DetailsView
from schemas.event import Event

logger = logging.getLogger(__name__)


class ActionKind(str, Enum):
    BOOKING = "booking"
    DETAILS = "details"


BOOKING_ACTIONS = frozenset({"book tickets", "register now", "view schedule"})
DETAILS_ACTIONS = frozenset({"more details", "workshop details", "event guide"})


def classify_action(action_key: str) -> Optional[ActionKind]:
    key = action_key.strip().lower()
    if key in BOOKING_ACTIONS:
        return ActionKind.BOOKING
    if key in DETAILS_ACTIONS:
        return ActionKind.DETAILS
    return None


def details_view(event: Event) -> DetailsView:
    return DetailsView(
        title=event.title,
        date=event.date,
        time=event.time,
        location=event.location,
        price=event.price,
        description=event.description,
    )


def booking_result(action_key: str, event: Event) -> ActionResult:
    return ActionResult(
        kind=ActionKind.BOOKING.value,
        action=action_key,
        event_id=event.id,
        title=event.title,
        message=(
            f"Booking functionality for: {event.title}\n\n"
            "This would connect to your booking system!"
        ),
    )


def details_result(action_key: str, event: Event) -> ActionResult:
    view = details_view(event)
    return ActionResult(
        kind=ActionKind.DETAILS.value,
        action=action_key,
        event_id=event.id,
        title=event.title,
        message=(
            f"Event Details:\n\n{view.title}\n\n"
            f"Date: {view.date}\nTime: {view.time}\n"
            f"Location: {view.location}\nPrice: {view.price}\n\n"
            f"{view.description}"
        ),
        details=view,
    )


_BUILDERS = {
    ActionKind.BOOKING: booking_result,
    ActionKind.DETAILS: details_result,
}


def build_result(kind: ActionKind, action_key: str, event: Event) -> ActionResult:
    return _BUILDERS[kind](action_key, event)


# ---------------------------------------------------------------------------
# Notifiers
# ---------------------------------------------------------------------------

class Notifier(Protocol):
    def notify(self, result: ActionResult) -> None:
        ...


class LoggingNotifier:
    """Default notifier: one INFO line per result."""

    def notify(self, result: ActionResult) -> None:
        logger.info(
            "event action",
            extra={"kind": result.kind, "action": result.action, "event_id": result.event_id},
        )


class RecordingNotifier:
    """Collects results so a request handler can return them."""

    def __init__(self):
        self.results: list[ActionResult] = []

    def notify(self, result: ActionResult) -> None:
        self.results.append(result)

    @property
    def last(self) -> Optional[ActionResult]:
        return self.results[-1] if self.results else None
