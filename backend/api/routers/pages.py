"""api/routers/pages.py — Browser-facing HTML routes.

Routes (mounted at root, no /api/v1 prefix):
    GET  /events       Events page: filter controls + rendered cards (?category=, ?q=)
    GET  /signup       Redirect to the registration page
    POST /signup       Registration form post → redirect + session cookie, or error page
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, Query
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from api.dependencies import get_catalog, get_db
from catalog.catalog import EventCatalog
from catalog.controls import CatalogController
from catalog.filtering import ALL_CATEGORIES, FilterMode
from catalog.view import HtmlRenderTarget, render_events_page
from core.config import settings
from schemas.signup import SignupForm
from signup.service import SignupError, register_user
from signup.views import render_error_page

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])


@router.get("/events", response_class=HTMLResponse, summary="Events page")
def events_page(
    category: str = Query(ALL_CATEGORIES),
    q: str = Query(""),
    catalog: EventCatalog = Depends(get_catalog),
):
    page = catalog.fork(target=HtmlRenderTarget())
    controller = CatalogController(page, settings.event_categories)
    controller.bind()
    page.restore(category, q)
    controller.sync_active(page.category)
    return render_events_page(
        page.target.markup,
        controller.controls,
        query=page.query,
        category=page.category,
        compose=page.filter_mode is FilterMode.COMPOSE,
    )


@router.get("/signup", include_in_schema=False)
def signup_form():
    return RedirectResponse(settings.registration_url, status_code=302)


@router.post("/signup", response_class=HTMLResponse, summary="Register a user")
def signup_submit(
    fullname: str = Form(""),
    username: str = Form(""),
    email: str = Form(""),
    password: str = Form(""),
    db: Session = Depends(get_db),
):
    form = SignupForm(fullname=fullname, username=username, email=email, password=password)
    try:
        _, user_session = register_user(db, form)
    except SignupError as exc:
        logger.info("signup rejected", extra={"errors": exc.errors})
        return HTMLResponse(
            render_error_page(exc.errors, back_url=settings.registration_url),
            status_code=400,
        )

    response = RedirectResponse(settings.signup_success_url, status_code=303)
    response.set_cookie(
        settings.session_cookie_name,
        user_session.id,
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )
    return response
