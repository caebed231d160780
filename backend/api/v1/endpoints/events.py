"""api/v1/endpoints/events.py — Event catalog endpoints.

Routes:
    GET  /events                     Visible cards; filters: category, q
    GET  /events/categories          Categories present in the loaded set
    POST /events/interactions        Apply one delegated UI event to a page state
    GET  /events/{id}                Single event
    POST /events/{id}/actions        Dispatch a card action (book / details)

Every request works on a fork of the app-wide catalog, so concurrent
requests never see each other's filter state.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_catalog
from catalog.actions import RecordingNotifier
from catalog.catalog import EventCatalog
from catalog.controls import CatalogController
from catalog.filtering import ALL_CATEGORIES
from catalog.view import MemoryRenderTarget, render_cards_html
from core.config import settings
from schemas.catalog import (
    ActionRequest,
    ActionResponse,
    ActionResult,
    CatalogMeta,
    CatalogViewResponse,
    InteractionRequest,
)
from schemas.event import CategoryListResponse, EventResponse
from schemas.shared import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _view_response(page: EventCatalog, result: Optional[ActionResult] = None) -> CatalogViewResponse:
    cards = page.target.cards
    return CatalogViewResponse(
        meta=CatalogMeta(
            category=page.category,
            query=page.query,
            filter_mode=page.filter_mode.value,
            total=len(page.events),
            visible=len(page.filtered_events),
        ),
        cards=cards,
        markup=render_cards_html(cards),
        result=result,
    )


@router.get("", response_model=CatalogViewResponse, summary="List events")
def list_events(
    category: str = Query(ALL_CATEGORIES, description="Exact category tag, or 'all'"),
    q: str = Query("", description="Case-insensitive match on title, description, location"),
    catalog: EventCatalog = Depends(get_catalog),
):
    page = catalog.fork(target=MemoryRenderTarget())
    page.restore(category, q)
    return _view_response(page)


@router.get("/categories", response_model=CategoryListResponse, summary="List categories")
def list_categories(catalog: EventCatalog = Depends(get_catalog)):
    return CategoryListResponse(categories=catalog.categories, default=ALL_CATEGORIES)


@router.post("/interactions", response_model=CatalogViewResponse, summary="Handle a UI event")
def handle_interaction(
    request: InteractionRequest,
    catalog: EventCatalog = Depends(get_catalog),
):
    page = catalog.fork(target=MemoryRenderTarget(), notifier=RecordingNotifier())
    controller = CatalogController(page, settings.event_categories)
    controller.bind()
    page.restore(request.category, request.query)
    controller.sync_active(page.category)

    result = controller.handle(request.event)
    logger.debug(
        "ui interaction handled",
        extra={
            "type": request.event.type,
            "element": request.event.target.element,
            "category": page.category,
            "visible": len(page.filtered_events),
        },
    )
    return _view_response(page, result)


@router.get(
    "/{event_id}",
    response_model=EventResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get event",
)
def get_event(event_id: str, catalog: EventCatalog = Depends(get_catalog)):
    event = catalog.get_event(event_id)
    if event is None:
        raise HTTPException(status_code=404, detail=f"Event '{event_id}' not found")
    return EventResponse.from_event(event)


@router.post("/{event_id}/actions", response_model=ActionResponse, summary="Dispatch card action")
def dispatch_action(
    event_id: str,
    request: ActionRequest,
    catalog: EventCatalog = Depends(get_catalog),
):
    page = catalog.fork(notifier=RecordingNotifier())
    result = page.dispatch_action(request.action.lower(), event_id)
    return ActionResponse(event_id=event_id, action=request.action.lower(), result=result)
