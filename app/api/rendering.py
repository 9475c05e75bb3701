"""HTML for the landing page and the order form.

All user supplied text goes through ``escape``. The order form is rendered as
a single ``<form id="order-form">`` fragment so every event endpoint can swap
it in place.
"""

from __future__ import annotations

from html import escape

from app.application.use_cases.order_form import OrderFormController
from app.core.config import settings
from app.domain.entities.order_form import FULL_NAME, SIZE, TOPPINGS
from app.domain.entities.topping import TOPPINGS as TOPPING_CATALOG

HTMX_SRC = "https://unpkg.com/htmx.org@1.9.12"

SIZE_OPTIONS: tuple[tuple[str, str], ...] = (
    ("", "----Choose Size----"),
    ("S", "Small"),
    ("M", "Medium"),
    ("L", "Large"),
)


def render_page(title: str, body: str) -> str:
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8">'
        f"<title>{escape(title)}</title>"
        f'<script src="{HTMX_SRC}"></script>'
        "</head>"
        f"<body>{body}</body></html>"
    )


def render_home() -> str:
    body = (
        "<div>"
        f"<h2>Welcome to {escape(settings.SHOP_NAME)}!</h2>"
        '<a href="/order">'
        '<img alt="order-pizza" style="cursor: pointer" src="/static/pizza.svg" />'
        "</a>"
        "</div>"
    )
    return render_page(settings.SHOP_NAME, body)


def render_order_page(controller: OrderFormController) -> str:
    return render_page(f"Order | {settings.SHOP_NAME}", render_order_form(controller))


def render_order_form(controller: OrderFormController) -> str:
    values = controller.values
    errors = controller.errors
    parts: list[str] = [
        '<form id="order-form" method="post" action="/order/submit" '
        'hx-post="/order/submit" hx-target="this" hx-swap="outerHTML">',
        "<h2>Order Your Pizza</h2>",
    ]

    if controller.success_message:
        parts.append(f"<div class='success'>{escape(controller.success_message)}</div>")
    if controller.failure_message:
        parts.append(f"<div class='failure'>{escape(controller.failure_message)}</div>")

    # Full name
    parts.append('<div class="input-group"><div>')
    parts.append(f'<label for="{FULL_NAME}">Full Name</label><br />')
    parts.append(
        f'<input placeholder="Type full name" id="{FULL_NAME}" type="text" name="{FULL_NAME}" '
        f'value="{escape(values.full_name)}" '
        f'hx-post="/order/field/{FULL_NAME}" hx-trigger="input changed delay:300ms" '
        'hx-target="#order-form" hx-swap="outerHTML" hx-sync="closest form:abort" />'
    )
    parts.append("</div>")
    if errors.full_name:
        parts.append(f"<div class='error'>{escape(errors.full_name)}</div>")
    parts.append("</div>")

    # Size
    parts.append('<div class="input-group"><div>')
    parts.append(f'<label for="{SIZE}">Size</label><br />')
    parts.append(
        f'<select id="{SIZE}" name="{SIZE}" hx-post="/order/field/{SIZE}" hx-trigger="change" '
        'hx-target="#order-form" hx-swap="outerHTML" hx-sync="closest form:abort">'
    )
    for value, label in SIZE_OPTIONS:
        selected = " selected" if (values.size or "") == value else ""
        parts.append(f'<option value="{value}"{selected}>{label}</option>')
    parts.append("</select></div>")
    if errors.size:
        parts.append(f"<div class='error'>{escape(errors.size)}</div>")
    parts.append("</div>")

    # Toppings
    parts.append('<div class="input-group"><label>Toppings:</label><br />')
    for topping in TOPPING_CATALOG:
        checked = " checked" if topping.topping_id in values.toppings else ""
        parts.append(
            '<label style="margin-right: 10px">'
            f'<input type="checkbox" name="{TOPPINGS}" value="{escape(topping.topping_id)}"{checked} '
            f'hx-post="/order/toppings/{escape(topping.topping_id)}" hx-trigger="change" '
            'hx-target="#order-form" hx-swap="outerHTML" hx-sync="closest form:abort" />'
            f"{escape(topping.text)}<br /></label>"
        )
    parts.append("</div>")

    disabled = "" if controller.submit_enabled else " disabled"
    parts.append(f'<input type="submit"{disabled} />')
    parts.append("</form>")
    return "".join(parts)
