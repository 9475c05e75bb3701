from __future__ import annotations

import logging
from typing import Any

import httpx

from app.application.exceptions import OrderSubmissionError
from app.application.ports.order_gateway import OrderGatewayPort
from app.core.config import settings


class HttpOrderGateway(OrderGatewayPort):
    def __init__(
        self,
        endpoint: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._endpoint = endpoint or settings.ORDER_ENDPOINT_URL
        self._client = client or httpx.AsyncClient(timeout=timeout or settings.ORDER_TIMEOUT_SECONDS)
        self._logger = logging.getLogger(__name__)

    async def submit_order(self, payload: dict[str, Any]) -> str:
        try:
            resp = await self._client.post(self._endpoint, json=payload)
        except httpx.HTTPError as e:
            self._logger.error("Order endpoint unreachable", extra={"reason": str(e)})
            raise OrderSubmissionError() from e

        data = _json_body(resp)
        if resp.status_code >= 400:
            message = _error_message(data)
            self._logger.error(
                "Order rejected",
                extra={"status": resp.status_code, "reason": message or resp.text},
            )
            raise OrderSubmissionError(message, status_code=resp.status_code)

        message = data.get("message") if isinstance(data, dict) else None
        if not isinstance(message, str):
            message = ""
        self._logger.info("Order accepted", extra={"status": resp.status_code})
        return message


def _json_body(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return None


def _error_message(data: Any) -> str | None:
    if not isinstance(data, dict):
        return None
    message = data.get("message")
    if isinstance(message, str) and message:
        return message
    error = data.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message
    return None
