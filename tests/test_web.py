"""
Tests for the landing page and the order form endpoints.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.application.use_cases.order_form import OrderFormController
from app.core.config import settings
from app.infrastructure.orders.mock_order_gateway import MockOrderGateway
from app.infrastructure.store.form_session_store import MemoryFormSessionStore
from app.main import app
from app.wiring.dependencies import get_form_session_store

ENABLED_SUBMIT = '<input type="submit" />'
DISABLED_SUBMIT = '<input type="submit" disabled />'


@pytest.fixture
def gateway():
    return MockOrderGateway()


@pytest.fixture
def client(gateway):
    store = MemoryFormSessionStore(controller_factory=lambda: OrderFormController(gateway=gateway))
    app.dependency_overrides[get_form_session_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_health(client):
    """Test that the health endpoint responds."""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_landing_page_links_image_to_order_form(client):
    """Test that the landing image links to the order form."""
    response = client.get("/")

    assert response.status_code == 200
    assert "Welcome to Bloom Pizza!" in response.text
    assert '<a href="/order"><img alt="order-pizza"' in response.text
    assert client.get("/static/pizza.svg").status_code == 200


def test_order_page_starts_empty_and_disabled(client):
    """Test that the order page starts clean with submit disabled and sets the session cookie."""
    response = client.get("/order")

    assert response.status_code == 200
    assert "Order Your Pizza" in response.text
    assert DISABLED_SUBMIT in response.text
    assert "class='error'" not in response.text
    assert settings.SESSION_COOKIE_NAME in response.cookies


def test_order_page_lists_catalog_toppings(client):
    """Test that every catalog topping is rendered as a checkbox."""
    response = client.get("/order")

    for text in ("Pepperoni", "Green Peppers", "Pineapple", "Mushrooms", "Ham"):
        assert text in response.text
    assert 'hx-post="/order/toppings/3"' in response.text


def test_short_name_shows_error(client):
    """Test that a short name renders its field error."""
    client.get("/order")

    response = client.post("/order/field/fullName", data={"fullName": "Al"})

    assert response.status_code == 200
    assert "<div class='error'>full name must be at least 3 characters</div>" in response.text
    assert DISABLED_SUBMIT in response.text


def test_empty_size_shows_error(client):
    """Test that the placeholder size renders the size error."""
    client.get("/order")

    response = client.post("/order/field/size", data={"size": ""})

    assert "<div class='error'>size must be S or M or L</div>" in response.text


def test_user_text_is_escaped(client):
    """Test that user text is HTML escaped."""
    client.get("/order")

    response = client.post("/order/field/fullName", data={"fullName": "<b>Bob</b>"})

    assert "<b>Bob</b>" not in response.text
    assert "&lt;b&gt;Bob&lt;/b&gt;" in response.text


def test_full_order_flow(client, gateway):
    """Test that filling in the form and submitting places the order."""
    client.get("/order")
    client.post("/order/field/fullName", data={"fullName": "  Alice "})
    client.post("/order/field/size", data={"size": "S"})
    client.post("/order/toppings/1", data={"toppings": ["1"]})
    response = client.post("/order/toppings/3", data={"toppings": ["1", "3"]})

    assert ENABLED_SUBMIT in response.text
    assert '<option value="S" selected>Small</option>' in response.text
    assert 'value="1" checked' in response.text
    assert 'value="3" checked' in response.text

    response = client.post("/order/submit", headers={"HX-Request": "true"})

    assert response.status_code == 200
    assert "<div class='success'>Thank you for your order, Alice!" in response.text
    assert DISABLED_SUBMIT in response.text
    assert "<!DOCTYPE html>" not in response.text
    assert gateway.orders == [{"fullName": "Alice", "size": "S", "toppings": ["1", "3"]}]


def test_unchecking_topping(client):
    """Test that unchecking a topping removes it."""
    client.get("/order")
    client.post("/order/toppings/2", data={"toppings": ["2"]})

    response = client.post("/order/toppings/2", data={"toppings": []})

    assert 'value="2" checked' not in response.text


def test_rejected_order_shows_failure_and_keeps_values(client, gateway):
    """Test that a rejected order shows the failure banner and keeps the values."""
    client.get("/order")
    client.post("/order/field/fullName", data={"fullName": "Alice"})

    response = client.post("/order/submit")

    assert "<!DOCTYPE html>" in response.text
    assert "<div class='failure'>Size is required</div>" in response.text
    assert 'value="Alice"' in response.text
    assert gateway.orders == []


def test_sessions_are_isolated(client):
    """Test that two browsers get separate forms."""
    client.get("/order")
    client.post("/order/field/fullName", data={"fullName": "Alice"})

    with TestClient(app) as other:
        response = other.get("/order")

    assert 'value="Alice"' not in response.text


def test_unknown_field_is_bad_request(client):
    """Test that an unknown field returns 400."""
    response = client.post("/order/field/crust", data={"crust": "thin"})

    assert response.status_code == 400


def test_unknown_topping_is_not_found(client):
    """Test that an unknown topping returns 404."""
    response = client.post("/order/toppings/99", data={"toppings": ["99"]})

    assert response.status_code == 404


def test_submit_uses_posted_values(client, gateway):
    """Test that a full form post submits the values in its body, not the last field events."""
    client.get("/order")
    client.post("/order/field/fullName", data={"fullName": "Alice"})
    client.post("/order/field/size", data={"size": "S"})
    client.post("/order/toppings/1", data={"toppings": ["1"]})

    response = client.post(
        "/order/submit",
        data={"fullName": "Bobby", "size": "L", "toppings": ["4"]},
        headers={"HX-Request": "true"},
    )

    assert gateway.orders == [{"fullName": "Bobby", "size": "L", "toppings": ["4"]}]
    assert "<div class='success'>Thank you for your order, Bobby!" in response.text


def test_submit_with_posted_invalid_values_keeps_them(client, gateway):
    """Test that posted values failing the rules are kept and shown with their errors."""
    client.get("/order")
    client.post("/order/field/fullName", data={"fullName": "Alice"})
    client.post("/order/field/size", data={"size": "S"})

    response = client.post("/order/submit", data={"fullName": "Al", "size": "S"})

    assert gateway.orders == []
    assert "<div class='failure'>full name must be at least 3 characters</div>" in response.text
    assert "<div class='error'>full name must be at least 3 characters</div>" in response.text
    assert 'value="Al"' in response.text
