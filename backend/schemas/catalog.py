"""schemas/catalog.py — Display-model and interaction schemas for the catalog.

EventCard / ActionButton are what EventCatalog.render() produces; the HTML
adapter and the JSON endpoints both consume them. UIEvent is the delegated
interaction shape handled by catalog.controls.CatalogController.
"""

from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ActionButton(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    key: str
    style: str = ""
    icon: str = ""


class EventCard(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Union[int, str]
    category: str
    title: str
    description: str
    date: str
    time: str
    location: str
    price: str
    actions: tuple[ActionButton, ...] = ()


class DetailsView(BaseModel):
    """Every descriptive field of one event, for the "more details" action."""

    title: str
    date: str
    time: str
    location: str
    price: str
    description: str


class ActionResult(BaseModel):
    kind: Literal["booking", "details"]
    action: str
    event_id: Union[int, str]
    title: str
    message: str
    details: Optional[DetailsView] = None


class FilterButton(BaseModel):
    label: str
    category: str
    active: bool = False


class FilterControls(BaseModel):
    search_placeholder: str = "Search events..."
    buttons: list[FilterButton]

    @property
    def active_category(self) -> Optional[str]:
        return next((b.category for b in self.buttons if b.active), None)


# ---------------------------------------------------------------------------
# Delegated UI events
# ---------------------------------------------------------------------------

class UITarget(BaseModel):
    """The element an interaction originated from, as the page reports it."""

    element: str                                  # class of the closest handled element
    data: dict[str, str] = {}                     # data-* attributes, without the prefix
    value: Optional[str] = None                   # current value for inputs


class UIEvent(BaseModel):
    type: Literal["click", "input"]
    target: UITarget


# ---------------------------------------------------------------------------
# API request / response bodies
# ---------------------------------------------------------------------------

class CatalogMeta(BaseModel):
    category: str
    query: str
    filter_mode: str
    total: int
    visible: int


class CatalogViewResponse(BaseModel):
    meta: CatalogMeta
    cards: list[EventCard]
    markup: str = ""   # the same cards as events-container HTML
    result: Optional[ActionResult] = None


class ActionRequest(BaseModel):
    action: str = Field(..., min_length=1)


class ActionResponse(BaseModel):
    event_id: str
    action: str
    result: Optional[ActionResult] = None


class InteractionRequest(BaseModel):
    category: str = "all"
    query: str = ""
    event: UIEvent
