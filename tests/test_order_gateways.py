"""
Tests for the HTTP order gateway and the in-process mock gateway.
"""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from app.application.exceptions import OrderSubmissionError
from app.application.validation.order_schema import FULL_NAME_TOO_SHORT
from app.infrastructure.orders.http_order_gateway import HttpOrderGateway
from app.infrastructure.orders.mock_order_gateway import MockOrderGateway

ENDPOINT = "http://orders.test/api/order"
PAYLOAD = {"fullName": "Alice", "size": "S", "toppings": ["1", "3"]}


def _gateway(handler) -> HttpOrderGateway:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpOrderGateway(endpoint=ENDPOINT, client=client)


def _submit(gateway, payload=PAYLOAD) -> str:
    return asyncio.run(gateway.submit_order(payload))


def test_http_gateway_posts_json_and_returns_message():
    """Test that the order is posted as JSON and the confirmation is returned."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"message": "Order placed"})

    assert _submit(_gateway(handler)) == "Order placed"
    assert seen[0].method == "POST"
    assert str(seen[0].url) == ENDPOINT
    assert json.loads(seen[0].content) == PAYLOAD


def test_http_gateway_success_without_message_returns_empty():
    """Test that a success body without a message returns an empty confirmation."""
    gateway = _gateway(lambda request: httpx.Response(200, json={}))

    assert _submit(gateway) == ""


def test_http_gateway_reads_top_level_error_message():
    """Test that a top level error message is carried on the exception."""
    gateway = _gateway(lambda request: httpx.Response(422, json={"message": "size must be S or M or L"}))

    with pytest.raises(OrderSubmissionError) as exc_info:
        _submit(gateway)

    assert exc_info.value.message == "size must be S or M or L"
    assert exc_info.value.status_code == 422


def test_http_gateway_reads_nested_error_message():
    """Test that an error.message payload is carried on the exception."""
    gateway = _gateway(lambda request: httpx.Response(500, json={"error": {"message": "Kitchen closed"}}))

    with pytest.raises(OrderSubmissionError) as exc_info:
        _submit(gateway)

    assert exc_info.value.message == "Kitchen closed"


def test_http_gateway_error_without_message():
    """Test that an error without a JSON message leaves the message unset."""
    gateway = _gateway(lambda request: httpx.Response(500, text="Internal Server Error"))

    with pytest.raises(OrderSubmissionError) as exc_info:
        _submit(gateway)

    assert exc_info.value.message is None
    assert exc_info.value.status_code == 500


def test_http_gateway_network_failure():
    """Test that a connection failure becomes an order submission error."""
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(OrderSubmissionError) as exc_info:
        _submit(_gateway(handler))

    assert exc_info.value.message is None
    assert exc_info.value.status_code is None


def test_mock_gateway_accepts_valid_order():
    """Test that the mock endpoint records a valid order and confirms it."""
    gateway = MockOrderGateway()

    message = _submit(gateway, {"fullName": "Alice", "size": "L", "toppings": ["1", "3"]})

    assert message == "Thank you for your order, Alice! Your large pizza with 2 toppings is on the way."
    assert gateway.orders == [{"fullName": "Alice", "size": "L", "toppings": ["1", "3"]}]


def test_mock_gateway_confirmation_without_toppings():
    """Test that the mock confirmation mentions a pizza with no toppings."""
    message = _submit(MockOrderGateway(), {"fullName": "Bob", "size": "S", "toppings": []})

    assert message == "Thank you for your order, Bob! Your small pizza with no toppings is on the way."


def test_mock_gateway_rejects_invalid_order():
    """Test that the mock endpoint rejects an invalid order with its first error."""
    gateway = MockOrderGateway()

    with pytest.raises(OrderSubmissionError) as exc_info:
        _submit(gateway, {"fullName": "Al", "size": "M", "toppings": []})

    assert exc_info.value.message == FULL_NAME_TOO_SHORT
    assert exc_info.value.status_code == 422
    assert gateway.orders == []
