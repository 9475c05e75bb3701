from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from starlette.datastructures import FormData

from app.api.rendering import render_order_form, render_order_page
from app.application.exceptions import UnknownFieldError, UnknownToppingError
from app.application.ports.form_session_store import FormSessionStorePort
from app.application.use_cases.order_form import OrderFormController
from app.core.config import settings
from app.domain.entities.order_form import FULL_NAME, SIZE, TOPPINGS
from app.domain.entities.topping import TOPPINGS as TOPPING_CATALOG
from app.wiring.dependencies import get_form_session_store


router = APIRouter()
logger = logging.getLogger(__name__)


def _session(request: Request, store: FormSessionStorePort) -> tuple[str, OrderFormController]:
    return store.get_or_create(request.cookies.get(settings.SESSION_COOKIE_NAME))


async def _apply_form(controller: OrderFormController, form: FormData) -> None:
    # Form posts carry the live values, field events may not have landed yet.
    if FULL_NAME not in form and SIZE not in form:
        return
    for field_name in (FULL_NAME, SIZE):
        if field_name in form:
            await controller.on_field_change(field_name, form.get(field_name))
    checked = set(form.getlist(TOPPINGS))
    for topping in TOPPING_CATALOG:
        await controller.on_topping_toggle(topping.topping_id, topping.topping_id in checked)


def _respond(request: Request, session_id: str, html: str) -> HTMLResponse:
    response = HTMLResponse(html)
    if request.cookies.get(settings.SESSION_COOKIE_NAME) != session_id:
        response.set_cookie(settings.SESSION_COOKIE_NAME, session_id, httponly=True, samesite="lax")
    return response


@router.get("/order", response_class=HTMLResponse)
def order_page(
    request: Request,
    store: FormSessionStorePort = Depends(get_form_session_store),
) -> HTMLResponse:
    session_id, controller = _session(request, store)
    return _respond(request, session_id, render_order_page(controller))


@router.post("/order/field/{field_name}", response_class=HTMLResponse)
async def change_field(
    field_name: str,
    request: Request,
    store: FormSessionStorePort = Depends(get_form_session_store),
) -> HTMLResponse:
    session_id, controller = _session(request, store)
    form = await request.form()
    try:
        await controller.on_field_change(field_name, form.get(field_name, ""))
    except UnknownFieldError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.debug("Field changed", extra={"session_id": session_id, "field": field_name})
    return _respond(request, session_id, render_order_form(controller))


@router.post("/order/toppings/{topping_id}", response_class=HTMLResponse)
async def toggle_topping(
    topping_id: str,
    request: Request,
    store: FormSessionStorePort = Depends(get_form_session_store),
) -> HTMLResponse:
    session_id, controller = _session(request, store)
    form = await request.form()
    checked = topping_id in form.getlist(TOPPINGS)
    try:
        await controller.on_topping_toggle(topping_id, checked)
    except UnknownToppingError as e:
        raise HTTPException(status_code=404, detail=str(e))

    logger.debug("Topping toggled", extra={"session_id": session_id, "topping_id": topping_id})
    return _respond(request, session_id, render_order_form(controller))


@router.post("/order/submit", response_class=HTMLResponse)
async def submit_order(
    request: Request,
    store: FormSessionStorePort = Depends(get_form_session_store),
) -> HTMLResponse:
    session_id, controller = _session(request, store)
    form = await request.form()
    await _apply_form(controller, form)
    result = await controller.on_submit()
    logger.info(
        "Order form submitted",
        extra={"session_id": session_id, "reason": result.success_message or result.failure_message},
    )
    # Plain form posts get the whole page back, htmx requests only the fragment.
    if request.headers.get("HX-Request"):
        return _respond(request, session_id, render_order_form(controller))
    return _respond(request, session_id, render_order_page(controller))
