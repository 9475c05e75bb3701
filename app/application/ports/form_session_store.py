from __future__ import annotations

from abc import ABC, abstractmethod

from app.application.use_cases.order_form import OrderFormController


class FormSessionStorePort(ABC):
    @abstractmethod
    def get_or_create(self, session_id: str | None) -> tuple[str, OrderFormController]:
        raise NotImplementedError

    @abstractmethod
    def get(self, session_id: str) -> OrderFormController | None:
        raise NotImplementedError

    @abstractmethod
    def discard(self, session_id: str) -> None:
        raise NotImplementedError
