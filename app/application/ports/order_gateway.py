from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class OrderGatewayPort(ABC):
    @abstractmethod
    async def submit_order(self, payload: dict[str, Any]) -> str:
        """Post an order. Returns the confirmation message, "" if none was sent.

        Raises OrderSubmissionError when the order is rejected or the endpoint
        cannot be reached.
        """
        raise NotImplementedError
