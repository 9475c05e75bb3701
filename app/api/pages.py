from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from app.api.rendering import render_home

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def home() -> HTMLResponse:
    return HTMLResponse(render_home())
