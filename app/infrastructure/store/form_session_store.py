from __future__ import annotations

import logging
import uuid
from collections import OrderedDict
from typing import Callable

from app.application.ports.form_session_store import FormSessionStorePort
from app.application.use_cases.order_form import OrderFormController


class MemoryFormSessionStore(FormSessionStorePort):
    def __init__(self, controller_factory: Callable[[], OrderFormController], max_sessions: int = 1000) -> None:
        self._controller_factory = controller_factory
        self._sessions: OrderedDict[str, OrderFormController] = OrderedDict()
        self._max_sessions = max_sessions
        self._logger = logging.getLogger(__name__)

    def get_or_create(self, session_id: str | None) -> tuple[str, OrderFormController]:
        if session_id:
            controller = self.get(session_id)
            if controller is not None:
                return session_id, controller

        session_id = uuid.uuid4().hex
        controller = self._controller_factory()
        self._sessions[session_id] = controller
        # Oldest sessions go first once the cap is hit.
        while len(self._sessions) > self._max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            self._logger.debug("Form session evicted", extra={"session_id": evicted})
        self._logger.debug("Form session created", extra={"session_id": session_id})
        return session_id, controller

    def get(self, session_id: str) -> OrderFormController | None:
        controller = self._sessions.get(session_id)
        if controller is not None:
            self._sessions.move_to_end(session_id)
        return controller

    def discard(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._sessions)
