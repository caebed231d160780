"""schemas/event.py — Event catalog schemas.

Wire format (data/events.json and the remote source):

    {"events": [{"id": 1, "title": ..., "type": "exhibition",
                 "buttons": [{"text": "Book Tickets", "class": "btn-primary",
                              "icon": "fas fa-ticket-alt"}]}]}

`type` and `buttons` / `text` / `class` are accepted as aliases so the JSON
documents used by the original site load unchanged; Python code uses the
field names (`category`, `actions`, `label`, `style`).
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EventAction(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    label: str = Field(..., alias="text")
    style: str = Field("", alias="class")   # rendering only
    icon: str = ""                          # rendering only

    @property
    def key(self) -> str:
        """Action key used for dispatch: the lowercased label."""
        return self.label.lower()


class Event(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: Union[int, str]
    title: str
    description: str = ""
    date: str = ""
    time: str = ""
    location: str = ""
    price: str = ""
    category: str = Field(..., alias="type")
    actions: tuple[EventAction, ...] = Field((), alias="buttons")


class EventCollection(BaseModel):
    """Top-level document returned by the event source."""

    events: list[Event]

    @field_validator("events")
    @classmethod
    def _unique_ids(cls, events: list[Event]) -> list[Event]:
        seen: set[str] = set()
        for event in events:
            key = str(event.id)
            if key in seen:
                raise ValueError(f"duplicate event id {event.id!r}")
            seen.add(key)
        return events


class EventResponse(BaseModel):
    """Single event as returned by GET /api/v1/events/{id}."""

    id: Union[int, str]
    title: str
    description: str
    date: str
    time: str
    location: str
    price: str
    category: str
    actions: list[str] = []   # action keys, in display order

    @classmethod
    def from_event(cls, event: Event) -> "EventResponse":
        return cls(
            id=event.id,
            title=event.title,
            description=event.description,
            date=event.date,
            time=event.time,
            location=event.location,
            price=event.price,
            category=event.category,
            actions=[a.key for a in event.actions],
        )


class CategoryListResponse(BaseModel):
    categories: list[str]
    default: Optional[str] = "all"
