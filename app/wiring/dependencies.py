from functools import lru_cache
import logging

from app.core.config import settings
from app.application.ports.form_session_store import FormSessionStorePort
from app.application.ports.order_gateway import OrderGatewayPort
from app.application.use_cases.order_form import OrderFormController
from app.infrastructure.orders.http_order_gateway import HttpOrderGateway
from app.infrastructure.orders.mock_order_gateway import MockOrderGateway
from app.infrastructure.store.form_session_store import MemoryFormSessionStore


@lru_cache
def get_order_gateway() -> OrderGatewayPort:
    logger = logging.getLogger(__name__)
    if settings.ORDER_GATEWAY.lower() == "mock":
        if settings.ENV.lower() not in {"dev", "local"}:
            raise ValueError("ORDER_GATEWAY=mock is only allowed with ENV=dev/local.")
        logger.info("Using MockOrderGateway (ORDER_GATEWAY=mock, ENV=%s)", settings.ENV)
        return MockOrderGateway()

    logger.info("Using HttpOrderGateway endpoint=%s", settings.ORDER_ENDPOINT_URL)
    return HttpOrderGateway(
        endpoint=settings.ORDER_ENDPOINT_URL,
        timeout=settings.ORDER_TIMEOUT_SECONDS,
    )


def build_order_form_controller() -> OrderFormController:
    return OrderFormController(gateway=get_order_gateway())


@lru_cache
def get_form_session_store() -> FormSessionStorePort:
    return MemoryFormSessionStore(
        controller_factory=build_order_form_controller,
        max_sessions=settings.MAX_FORM_SESSIONS,
    )
