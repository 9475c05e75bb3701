from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from typing import Any

from app.application.exceptions import OrderSubmissionError, UnknownFieldError, UnknownToppingError
from app.application.ports.order_gateway import OrderGatewayPort
from app.application.validation import order_schema
from app.domain.entities.order_form import (
    FULL_NAME,
    SIZE,
    FormErrors,
    FormValues,
    SubmissionResult,
)
from app.domain.entities.topping import get_topping

SUBMISSION_FALLBACK_MESSAGE = "Something went wrong with your order."
DEFAULT_CONFIRMATION = "Your order has been placed."


class OrderFormController:
    """State holder for one order form.

    Every event runs under a lock, so the field update, its error message and
    the submit flag for one event are committed before the next event starts.
    """

    def __init__(self, gateway: OrderGatewayPort) -> None:
        self._gateway = gateway
        self._values = FormValues()
        self._errors = FormErrors()
        self._success_message = ""
        self._failure_message = ""
        self._submit_enabled = False
        self._lock = asyncio.Lock()
        self._logger = logging.getLogger(__name__)

    @property
    def values(self) -> FormValues:
        return self._values

    @property
    def errors(self) -> FormErrors:
        return self._errors

    @property
    def success_message(self) -> str:
        return self._success_message

    @property
    def failure_message(self) -> str:
        return self._failure_message

    @property
    def submit_enabled(self) -> bool:
        return self._submit_enabled

    async def on_field_change(self, field_name: str, raw_value: Any) -> None:
        if field_name not in (FULL_NAME, SIZE):
            raise UnknownFieldError(f"Field cannot be changed directly: {field_name}")

        async with self._lock:
            if field_name == FULL_NAME:
                value = raw_value.strip() if isinstance(raw_value, str) else ""
                self._values = replace(self._values, full_name=value)
                message = order_schema.validate_field(FULL_NAME, value)
                self._errors = replace(self._errors, full_name=message)
            else:
                value = raw_value if isinstance(raw_value, str) or raw_value is None else str(raw_value)
                self._values = replace(self._values, size=value)
                message = order_schema.validate_field(SIZE, value)
                self._errors = replace(self._errors, size=message)

            if message:
                self._logger.debug("Field invalid", extra={"field": field_name, "reason": message})
            self._recompute_submit_enabled()

    async def on_topping_toggle(self, topping_id: str, checked: bool) -> None:
        if get_topping(topping_id) is None:
            raise UnknownToppingError(f"Unknown topping: {topping_id}")

        async with self._lock:
            toppings = self._values.toppings
            if checked and topping_id not in toppings:
                toppings = toppings + (topping_id,)
            elif not checked:
                toppings = tuple(t for t in toppings if t != topping_id)

            if toppings != self._values.toppings:
                self._values = replace(self._values, toppings=toppings)
            self._recompute_submit_enabled()

    async def recompute_submit_enabled(self) -> bool:
        async with self._lock:
            return self._recompute_submit_enabled()

    async def on_submit(self) -> SubmissionResult:
        async with self._lock:
            payload = replace(self._values, full_name=self._values.full_name.strip()).to_payload()
            try:
                message = await self._gateway.submit_order(payload)
            except OrderSubmissionError as e:
                self._failure_message = e.message or SUBMISSION_FALLBACK_MESSAGE
                self._success_message = ""
                self._logger.warning(
                    "Order submission failed",
                    extra={"status": e.status_code, "reason": self._failure_message},
                )
            else:
                self._success_message = message or DEFAULT_CONFIRMATION
                self._failure_message = ""
                self._reset()
                self._logger.info("Order submitted", extra={"reason": message})

            return SubmissionResult(
                success_message=self._success_message,
                failure_message=self._failure_message,
            )

    async def reset(self) -> None:
        async with self._lock:
            self._reset()

    def _reset(self) -> None:
        self._values = FormValues()
        self._errors = FormErrors()
        self._recompute_submit_enabled()

    def _recompute_submit_enabled(self) -> bool:
        self._submit_enabled = order_schema.is_valid(self._values)
        return self._submit_enabled
