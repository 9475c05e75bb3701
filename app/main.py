import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.api.order_form import router as order_form_router
from app.api.pages import router as pages_router
from app.core.config import settings

STATIC_DIR = Path(__file__).resolve().parent / "static"


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("session_id", "field", "topping_id", "status", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title=f"{settings.SHOP_NAME} Order Form", version="1.0.0")

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
app.include_router(pages_router, tags=["pages"])
app.include_router(order_form_router, tags=["order-form"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
