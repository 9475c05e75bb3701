from __future__ import annotations

import logging
from typing import Any

from app.application.exceptions import OrderSubmissionError
from app.application.ports.order_gateway import OrderGatewayPort
from app.application.validation import order_schema
from app.domain.entities.topping import get_topping


class MockOrderGateway(OrderGatewayPort):
    """Accepts orders in process, applying the same rules as the form."""

    def __init__(self) -> None:
        self._orders: list[dict[str, Any]] = []
        self._logger = logging.getLogger(__name__)

    @property
    def orders(self) -> list[dict[str, Any]]:
        return list(self._orders)

    async def submit_order(self, payload: dict[str, Any]) -> str:
        message = order_schema.first_error(payload)
        if message:
            self._logger.info("Mock order rejected", extra={"status": 422, "reason": message})
            raise OrderSubmissionError(message, status_code=422)

        order = order_schema.validate(payload)
        self._orders.append(order.model_dump(by_alias=True))
        self._logger.info("Mock order accepted", extra={"status": 201})
        return _confirmation(order)


def _confirmation(order: order_schema.OrderPayload) -> str:
    size = {"S": "small", "M": "medium", "L": "large"}[order.size]
    count = sum(1 for t in order.toppings if get_topping(t) is not None)
    if count == 0:
        toppings = "no toppings"
    elif count == 1:
        toppings = "1 topping"
    else:
        toppings = f"{count} toppings"
    return f"Thank you for your order, {order.full_name}! Your {size} pizza with {toppings} is on the way."
